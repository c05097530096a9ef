"""CLI for the guessgame console games.

Usage:
    python -m guessgame                      # Play guess-the-number
    python -m guessgame guess --seed 7       # Same, with a reproducible secret
    python -m guessgame guess --summary      # Print a summary table at the end
    python -m guessgame rectangle            # Rectangle-area calculator
    python -m guessgame list                 # Show available games
"""

from __future__ import annotations

import random
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from guessgame.console import ConsoleIO
from guessgame.errors import InputReadError
from guessgame.games import list_games
from guessgame.rectangle import run_rectangle
from guessgame.session import play
from guessgame.summary import render_summary

app = typer.Typer(
    name="guessgame",
    help="Beginner console games: guess the number, rectangle area",
    invoke_without_command=True,
)
console = Console(stderr=True)

_SEED_HELP = "Seed for a reproducible secret number"
_SUMMARY_HELP = "Print a summary table to stderr when the game ends"


def _play_guess(seed: Optional[int], summary: bool) -> None:
    """Run one guessing session on the real console."""
    rng = None
    if seed is not None:
        rng = random.Random(seed)
        console.print(f"[dim]Seed: {seed}[/dim]")

    try:
        outcome = play(ConsoleIO(), rng=rng)
    except InputReadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if summary:
        render_summary(outcome, console)


@app.callback()
def main(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    summary: bool = typer.Option(False, "--summary", help=_SUMMARY_HELP),
) -> None:
    """Play guess-the-number when no command is given."""
    # `guessgame --seed 5 guess` hands these on to the subcommand
    ctx.obj = {"seed": seed, "summary": summary}
    if ctx.invoked_subcommand is None:
        _play_guess(seed, summary)


@app.command("guess")
def cmd_guess(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    summary: bool = typer.Option(False, "--summary", help=_SUMMARY_HELP),
) -> None:
    """Guess the secret number, with or without challenge mode."""
    parent = ctx.obj or {}
    if seed is None:
        seed = parent.get("seed")
    _play_guess(seed, summary or parent.get("summary", False))


@app.command("rectangle")
def cmd_rectangle() -> None:
    """Compute the area of a rectangle from its width and height."""
    try:
        run_rectangle(ConsoleIO())
    except InputReadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("list")
def cmd_list() -> None:
    """Show available games."""
    table = Table(title="Available Games", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Description", min_width=30)

    for game in list_games():
        table.add_row(game.name, game.description)

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    app()
