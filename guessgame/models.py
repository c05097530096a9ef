"""Data models for the guessgame console games.

Mode, Ordering, Result, Outcome, Rectangle — the typed structures that flow
through session → summary → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

SECRET_LOW = 1
SECRET_HIGH = 100
CHALLENGE_ATTEMPTS = 5

# Largest value accepted for a guess or a rectangle side (unsigned 32-bit).
UINT32_MAX = 2**32 - 1

# Characters trimmed from typed input: the Unicode White_Space set. Unlike
# str.strip() with no argument, this leaves \x1c-\x1f in place.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class Mode(str, Enum):
    """Guessing game modes."""

    BOUNDED = "challenge"
    UNBOUNDED = "normal"

    @classmethod
    def from_answer(cls, answer: str) -> Mode:
        """Pick the mode from the player's reply to the challenge question.

        Only 'c' (any case, surrounding whitespace ignored) selects the
        bounded mode; everything else, including an empty line, is unbounded.
        """
        if answer.strip(WHITESPACE).lower() == "c":
            return cls.BOUNDED
        return cls.UNBOUNDED


class Ordering(Enum):
    """Three-way comparison result."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def compare(cls, left: int, right: int) -> Ordering:
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


class Result(str, Enum):
    """Terminal result of a guessing session."""

    WIN = "win"
    LOSE = "lose"


@dataclass
class Outcome:
    """Everything known about a finished guessing session."""

    result: Result
    secret: int
    mode: Mode
    guesses: list[int] = field(default_factory=list)
    # None in unbounded mode
    attempts_remaining: Optional[int] = None

    @property
    def won(self) -> bool:
        return self.result == Result.WIN


@dataclass
class Rectangle:
    """Axis-aligned rectangle measured in whole pixels."""

    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height

    def is_bigger_than(self, other: Rectangle) -> bool:
        """True when this rectangle's area is strictly larger than other's."""
        return self.area() > other.area()
