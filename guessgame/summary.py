"""Session summary — renders a finished guessing session as a Rich table.

Printed to the status console (stderr) so the game dialogue on stdout is
left untouched.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from guessgame.models import Outcome


def _fmt_guesses(guesses: list[int]) -> str:
    """Comma-separated guesses, or '--' when none were valid."""
    if not guesses:
        return "--"
    return ", ".join(str(g) for g in guesses)


def _fmt_attempts(attempts_remaining: Optional[int]) -> str:
    if attempts_remaining is None:
        return "unlimited"
    return str(attempts_remaining)


def render_summary(outcome: Outcome, console: Console) -> None:
    """Render a Rich summary table for a finished session."""
    style = "green" if outcome.won else "red"

    table = Table(title="Guess the number", show_header=True, header_style="bold")
    table.add_column("Metric", style="dim", min_width=16)
    table.add_column("Value", min_width=12)

    table.add_row("Result", f"[{style}]{outcome.result.value}[/{style}]")
    table.add_row("Mode", outcome.mode.value)
    table.add_row("Secret", str(outcome.secret))
    table.add_row("Guesses", str(len(outcome.guesses)))
    table.add_row("History", _fmt_guesses(outcome.guesses))
    table.add_row("Attempts left", _fmt_attempts(outcome.attempts_remaining))

    console.print()
    console.print(table)
    console.print()
