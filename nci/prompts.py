"""Simple interactive prompts on the terminal."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, TextIO, TypeVar

T = TypeVar("T")

InputFunc = Callable[[str], str]


class PromptCancelled(Exception):
    """Raised when the user aborts a prompt."""


def _ask(input_func: InputFunc, prompt: str) -> str:
    try:
        return input_func(prompt)
    except (EOFError, KeyboardInterrupt) as exc:
        raise PromptCancelled from exc


def select(
    message: str,
    items: Iterable[T],
    input_func: InputFunc = input,
    output: TextIO | None = None,
) -> T:
    """Let the user pick one of ``items`` by number or by its text."""
    options = list(items)
    if not options:
        raise ValueError("no options to choose from")
    out = output if output is not None else sys.stdout
    print(message, file=out)
    for number, item in enumerate(options, start=1):
        print(f"  {number}) {item}", file=out)
    while True:
        answer = _ask(input_func, "> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        for item in options:
            if str(item) == answer:
                return item
        print(f"Please enter a number from 1 to {len(options)}.", file=out)


def confirm(
    message: str,
    default: bool = False,
    input_func: InputFunc = input,
    output: TextIO | None = None,
) -> bool:
    """Ask a yes/no question; an empty answer gives ``default``."""
    out = output if output is not None else sys.stdout
    hint = "(Y/n)" if default else "(y/N)"
    print(f"{message} {hint}", file=out)
    while True:
        answer = _ask(input_func, "> ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer y or n.", file=out)


def text(
    message: str,
    input_func: InputFunc = input,
    output: TextIO | None = None,
) -> str:
    """Ask for a line of text."""
    out = output if output is not None else sys.stdout
    print(message, file=out)
    return _ask(input_func, "> ")