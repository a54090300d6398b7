from unittest import mock

from rustlings import ui


def test_no_emoji_reflects_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_bold_is_plain_when_not_a_terminal(capsys):
    assert ui.bold("I AM NOT DONE") == "I AM NOT DONE"


def test_bold_wraps_text_on_a_terminal():
    fake_stdout = mock.Mock()
    fake_stdout.isatty.return_value = True
    with mock.patch("sys.stdout", fake_stdout):
        result = ui.bold("hint")
    assert result.startswith("\x1b[1m")
    assert "hint" in result
    assert result.endswith("\x1b[0m")


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran exercise with errors")
    out = capsys.readouterr().out
    assert out.startswith("! ")
    assert out.rstrip("\n").endswith("Ran exercise with errors")


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("Compilation failed")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert "Compilation failed" in out


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran x")
    out = capsys.readouterr().out
    assert out.startswith("✓ ")
    assert "Successfully ran x" in out


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("Successfully tested y")
    out = capsys.readouterr().out
    assert out.startswith("✅ ")
    assert "Successfully tested y" in out