import pytest

from rustlings.solutions.conversions import (
    Color,
    IntoColorError,
    IntoColorErrorKind,
    ParsePersonError,
    ParsePersonErrorKind,
    Person,
    average,
    byte_counter,
    char_counter,
    num_sq,
)


# from_into


def test_default():
    dp = Person.default()
    assert dp.name == "John"
    assert dp.age == 30


def test_good_convert():
    p = Person.from_text("Mark,20")
    assert p.name == "Mark"
    assert p.age == 20


@pytest.mark.parametrize(
    "text",
    ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one", "Mike,32,", "Mike,32,man"],
)
def test_bad_inputs_fall_back_to_default(text):
    p = Person.from_text(text)
    assert p.name == "John"
    assert p.age == 30


def test_negative_age_falls_back_to_default():
    assert Person.from_text("Mark,-3") == Person.default()


# from_str


def test_empty_input():
    with pytest.raises(ParsePersonError) as info:
        Person.parse("")
    assert info.value.kind is ParsePersonErrorKind.EMPTY


def test_good_input():
    p = Person.parse("John,32")
    assert p.name == "John"
    assert p.age == 32


@pytest.mark.parametrize("text", ["John,", "John,twenty"])
def test_bad_age(text):
    with pytest.raises(ParsePersonError) as info:
        Person.parse(text)
    assert info.value.kind is ParsePersonErrorKind.PARSE_INT


@pytest.mark.parametrize("text", ["John", "John,32,", "John,32,man"])
def test_bad_len(text):
    with pytest.raises(ParsePersonError) as info:
        Person.parse(text)
    assert info.value.kind is ParsePersonErrorKind.BAD_LEN


def test_missing_name():
    with pytest.raises(ParsePersonError) as info:
        Person.parse(",1")
    assert info.value.kind is ParsePersonErrorKind.NO_NAME


@pytest.mark.parametrize("text", [",", ",one"])
def test_missing_name_and_bad_age(text):
    with pytest.raises(ParsePersonError) as info:
        Person.parse(text)
    assert info.value.kind in (ParsePersonErrorKind.NO_NAME, ParsePersonErrorKind.PARSE_INT)


# try_from_into


@pytest.mark.parametrize(
    "value",
    [
        (256, 1000, 10000),
        (-1, -10, -256),
        (-1, 255, 255),
        [1000, 10000, 256],
        [-10, -256, -1],
        [-1, 255, 255],
        [10000, 256, 1000],
        [-256, -1, -10],
    ],
)
def test_out_of_range(value):
    with pytest.raises(IntoColorError) as info:
        Color.try_from(value)
    assert info.value.kind is IntoColorErrorKind.INT_CONVERSION


@pytest.mark.parametrize("value", [(183, 65, 14), [183, 65, 14]])
def test_correct(value):
    assert Color.try_from(value) == Color(red=183, green=65, blue=14)


@pytest.mark.parametrize("value", [[0, 0, 0, 0], [0, 0]])
def test_bad_length(value):
    with pytest.raises(IntoColorError) as info:
        Color.try_from(value)
    assert info.value.kind is IntoColorErrorKind.BAD_LEN


# using_as


def test_average():
    assert average([3.5, 0.3, 13.0, 11.7]) == 7.125


# as_ref_mut


def test_different_counts():
    s = "Café au lait"
    assert char_counter(s) != byte_counter(s)
    assert byte_counter(s) == 13
    assert char_counter(s) == 12


def test_same_counts():
    s = "Cafe au lait"
    assert char_counter(s) == byte_counter(s) == 12


def test_mult_box():
    num = [3]
    num_sq(num)
    assert num == [9]


def test_num_sq_rejects_wrong_size():
    with pytest.raises(ValueError):
        num_sq([1, 2])