# rustlings

Helpers for working with small Rust exercises:

- `rustlings.ui`: coloured warning and success messages for the terminal.
- `rustlings.project`: builds a `rust-project.json` file so that
  rust-analyzer treats every exercise file as a crate of its own.
- `rustlings.solutions`: worked Python versions of the behaviour many of the
  exercises ask for.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Terminal messages

```python
from rustlings import ui

ui.warn("Compiling of exercises/intro/intro2.rs failed!")
ui.success("Successfully ran exercises/intro/intro1.rs")
print(ui.bold("`I AM NOT DONE`"))
```

`warn` prints in red with a warning sign and `success` prints in green with a
check mark. Colour and bold are used only when standard output is a terminal.
When the `NO_EMOJI` environment variable is set (`ui.no_emoji()` returns
True), the signs become `!` and `✓`.

## rust-project.json

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk()
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` if it is set. Otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found, and points at
  `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks everything below `root` (default
  `exercises`) in sorted order and passes each path to `add_path`.
- `add_path(path)` adds a `Crate` (edition 2021, no deps, `cfg = ["test"]`)
  when the text after the first dot in the path is exactly `rs`. Paths that
  contain other dots, such as `./exercises/x.rs`, are skipped.
- `to_json()` returns compact JSON. `write_to_disk(path)` writes it, by
  default to `./rust-project.json`.

## Worked solutions

The modules in `rustlings.solutions` each cover one group of exercises:

- `quizzes`: `calculate_price_of_apples`, `transformer` with `Command` and
  `Append`, and `ReportCard` with numeric or letter grades.
- `basics`: `bigger`, `foo_if_fizz`, `sale_price`, `is_even`, `square`,
  `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `array_and_vec`,
  `vec_loop`, `vec_map`.
- `conversions`: `Person` (`default`, `from_text`, `parse` raising
  `ParsePersonError`), `Color.try_from` raising `IntoColorError`, `average`,
  `byte_counter`, `char_counter`, `num_sq`.
- `hashmaps`: `fruit_basket`, `fill_fruit_basket` with `Fruit`, and
  `build_scores_table` returning `Team` tallies.
- `errors`: `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger` raising `CreationError`, and `parse_pos_nonzero`
  raising `ParsePosNonzeroError`.
- `enums`: the `ChangeColor`, `Move`, `Echo` and `Quit` messages and the
  `State` that processes them.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `DivisionError`,
  `result_with_list`, `list_of_results`, `factorial`, and the `count_*`
  functions over `Progress` maps.
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, and `Package`.
- `traits`: `append_bar`, `Licensed` with `compare_license_types`, and
  `some_func`.
- `wrappers`: `maybe_icecream`, `Wrapper`, the `Cons` list, and `Cow` with
  `abs_all`.

## What this package does not do

There is no `rustlings` command. The package does not read an `info.toml`
exercise list, compile, run or test exercise files, check them for the
`I AM NOT DONE` marker, track progress, show hints, reset exercises or watch
files for changes. It offers the message helpers, the rust-project.json
builder and the worked solutions described above.