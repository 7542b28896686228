"""Minimal ANSI styling for terminal output."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"


def _colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _paint(code: str, text: object) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def blue(text: object) -> str:
    """Colour text blue."""
    return _paint("34", text)


def yellow(text: object) -> str:
    """Colour text yellow."""
    return _paint("33", text)


def green(text: object) -> str:
    """Colour text green."""
    return _paint("32", text)


def red(text: object) -> str:
    """Colour text red."""
    return _paint("31", text)


def cyan(text: object) -> str:
    """Colour text cyan."""
    return _paint("36", text)


def dim(text: object) -> str:
    """Render text dimmed."""
    return _paint("2", text)


def underlined(text: object) -> str:
    """Render text underlined."""
    return _paint("4", text)