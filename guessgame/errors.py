"""Error types for guessgame.

Two categories only: a bad number typed by the player (recoverable, the
caller decides whether to re-prompt) and a failed read from the console
(fatal, surfaces at the CLI as exit code 1).
"""

from __future__ import annotations


class ParseError(ValueError):
    """Input text is not a valid unsigned 32-bit integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"not an unsigned integer: {text!r}")


class InputReadError(OSError):
    """Reading a line from the text collaborator failed."""
