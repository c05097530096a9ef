"""Line-oriented text I/O for the games.

The games never touch stdin/stdout directly. They talk to a LineIO, which the
CLI backs with ConsoleIO and the tests back with a scripted fake.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol

from rich.console import Console

from guessgame.errors import InputReadError


class LineIO(Protocol):
    """One line in, one line out."""

    def read_line(self) -> str: ...

    def write_line(self, text: str) -> None: ...


class ConsoleIO:
    """LineIO over the process's stdin and a Rich console on stdout.

    Output is printed with markup and highlighting off so the game dialogue
    stays plain text (guesses like "[3]" are not styled or swallowed).
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def read_line(self) -> str:
        """Read one line from stdin, line ending included.

        Raises InputReadError at end of input or if the stream fails.
        """
        try:
            line = sys.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read line: {e}") from e
        if line == "":
            raise InputReadError("Failed to read line: end of input")
        return line

    def write_line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
