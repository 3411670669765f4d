"""Reading semicolon-terminated input and writing output."""

from __future__ import annotations

import sys
from typing import TextIO

MARK = ";"


class Console:
    """Input and output streams of the application."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_input(self) -> str:
        """Skip leading blanks and return the text up to the next ``;``."""
        char = self.stdin.read(1)
        while char and char.isspace():
            char = self.stdin.read(1)
        if not char:
            raise EOFError("no more input")
        chars = []
        while char and char != MARK:
            chars.append(char)
            char = self.stdin.read(1)
        return "".join(chars)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()