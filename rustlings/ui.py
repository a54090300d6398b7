"""Terminal output helpers: coloured warnings and success messages."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colour_enabled() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def _style(text: object, *codes: str) -> str:
    text = str(text)
    if not codes or not _colour_enabled():
        return text
    return f"{''.join(codes)}{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` rendered in bold when stdout is a terminal."""
    return _style(text, _BOLD)


def warn(message: str) -> None:
    """Print a warning in red, prefixed with a warning sign."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{_style(symbol, _RED)} {_style(message, _RED)}")


def success(message: str) -> None:
    """Print a success message in green, prefixed with a check mark."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{_style(symbol, _GREEN)} {_style(message, _GREEN)}")