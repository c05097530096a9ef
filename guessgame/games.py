"""Game discovery for guessgame.

Each game is a name the CLI can run plus a one-line description for
`guessgame list`.
"""

from __future__ import annotations

from dataclasses import dataclass

from guessgame.models import CHALLENGE_ATTEMPTS, SECRET_HIGH, SECRET_LOW


@dataclass
class GameInfo:
    """Metadata about an available game."""

    name: str
    description: str


_GAMES = [
    GameInfo(
        name="guess",
        description=(
            f"Guess a number between {SECRET_LOW} and {SECRET_HIGH} "
            f"(challenge mode: {CHALLENGE_ATTEMPTS} attempts)"
        ),
    ),
    GameInfo(
        name="rectangle",
        description="Compute the area of a rectangle in square pixels",
    ),
]


def list_games() -> list[GameInfo]:
    """All available games, in display order."""
    return list(_GAMES)
