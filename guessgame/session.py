"""Guessing session — the interactive retry / attempt-tracking loop.

Lifecycle:
1. start(): ask for the mode, confirm it, draw the secret
2. run(): prompt → parse → echo → count attempt → compare, until win or loss

Secret and mode are fixed once start() returns. The only state that changes
afterwards is the attempt counter (bounded mode) and the guess history.
"""

from __future__ import annotations

import random
from typing import Any, Optional

from guessgame.console import LineIO
from guessgame.errors import ParseError
from guessgame.models import (
    CHALLENGE_ATTEMPTS,
    SECRET_HIGH,
    SECRET_LOW,
    Mode,
    Ordering,
    Outcome,
    Result,
)
from guessgame.reader import read_validated_integer

MODE_QUESTION = "Do you want challenge mode? Enter 'c' if yes, or anything else if no."
GUESS_PROMPT = "Please input your guess."
INVALID_GUESS = "Invalid guess. Guess must be a number!"


class GuessingSession:
    """One round of guess-the-number against a LineIO.

    Args:
        io: Text collaborator used for every prompt and reply.
        rng: Anything with randint(low, high); defaults to the random module.
    """

    def __init__(self, io: LineIO, rng: Optional[Any] = None) -> None:
        self.io = io
        self.rng = rng if rng is not None else random
        self.mode: Optional[Mode] = None
        self.secret: Optional[int] = None
        self.attempts_remaining: Optional[int] = None
        self.guesses: list[int] = []
        self.outcome: Optional[Outcome] = None

    @property
    def started(self) -> bool:
        return self.mode is not None

    def start(self) -> Mode:
        """Ask for the mode, confirm it and draw the secret."""
        if self.started:
            raise RuntimeError("session already started")

        self.io.write_line("Guess the number game!")
        self.io.write_line(MODE_QUESTION)
        mode = Mode.from_answer(self.io.read_line())

        if mode == Mode.BOUNDED:
            self.attempts_remaining = CHALLENGE_ATTEMPTS
            self.io.write_line(
                f"Challenge mode activated! You have {CHALLENGE_ATTEMPTS} attempts to guess the number."
            )
        else:
            self.io.write_line("Normal mode activated! You can guess as many times as you want.")

        self.mode = mode
        self.secret = self.rng.randint(SECRET_LOW, SECRET_HIGH)
        return mode

    def run(self) -> Outcome:
        """Play until the player wins or runs out of attempts.

        Starts the session first if start() has not been called. An
        InputReadError from the collaborator ends the session immediately.
        """
        if self.outcome is not None:
            return self.outcome
        if not self.started:
            self.start()

        bounded = self.mode == Mode.BOUNDED
        while True:
            if bounded:
                if self.attempts_remaining == 0:
                    self.io.write_line(f"You lose! The secret number was {self.secret}")
                    return self._finish(Result.LOSE)
                self.io.write_line(f"You have {self.attempts_remaining} attempts remaining.")

            try:
                guess = read_validated_integer(self.io, GUESS_PROMPT)
            except ParseError:
                self.io.write_line(INVALID_GUESS)
                continue

            self.io.write_line(f"You guessed: {guess}")
            self.guesses.append(guess)
            if bounded:
                self.attempts_remaining -= 1

            ordering = Ordering.compare(guess, self.secret)
            if ordering == Ordering.LESS:
                self.io.write_line("Too small!")
            elif ordering == Ordering.GREATER:
                self.io.write_line("Too big!")
            else:
                self.io.write_line(f"You win! The secret number was {guess}")
                return self._finish(Result.WIN)

    def _finish(self, result: Result) -> Outcome:
        self.outcome = Outcome(
            result=result,
            secret=self.secret,
            mode=self.mode,
            guesses=list(self.guesses),
            attempts_remaining=self.attempts_remaining,
        )
        return self.outcome


def play(io: LineIO, rng: Optional[Any] = None) -> Outcome:
    """Run a complete guessing session and return its outcome."""
    return GuessingSession(io, rng=rng).run()
