"""Pytest fixtures for guessgame tests."""

from __future__ import annotations

import pytest

from guessgame.errors import InputReadError


class ScriptedIO:
    """LineIO fake: replays scripted input lines and records output.

    Running out of lines behaves like a closed stdin.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.output: list[str] = []
        self.reads = 0

    def read_line(self) -> str:
        if not self._lines:
            raise InputReadError("Failed to read line: end of input")
        self.reads += 1
        return self._lines.pop(0) + "\n"

    def write_line(self, text: str) -> None:
        self.output.append(text)

    def count(self, text: str) -> int:
        return sum(1 for line in self.output if line == text)


class FixedRandom:
    """Stand-in random source that always draws the same number."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def scripted():
    """Factory: scripted("c", "3", ...) → ScriptedIO."""
    return lambda *lines: ScriptedIO(list(lines))


@pytest.fixture
def fixed_random():
    """Factory: fixed_random(42) → FixedRandom."""
    return FixedRandom
