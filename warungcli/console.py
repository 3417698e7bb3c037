"""Terminal input and output helpers."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["CLEAR_SCREEN", "Console", "InputError"]

CLEAR_SCREEN = "\033[2J\033[H"


class InputError(ValueError):
    """The line read was not exactly one word.

    ``value`` holds the first word found, or an empty string.
    """

    def __init__(self, message: str, value: str = "") -> None:
        super().__init__(message)
        self.value = value


class Console:
    """Reads single-word answers and writes text to a terminal."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write(CLEAR_SCREEN)

    def write(self, text: str) -> None:
        """Write ``text`` as is and flush."""
        self.stdout.write(text)
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and read one word from a line.

        Raises EOFError at end of input and InputError when the line
        is empty or holds more than one word.
        """
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        words = line.split()
        if not words:
            raise InputError("unexpected newline")
        if len(words) > 1:
            raise InputError("expected newline", words[0].strip())
        return words[0].strip()