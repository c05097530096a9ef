"""Rectangle-area calculator.

Two reads, one multiplication, one print. A bad number ends the program
without asking again.
"""

from __future__ import annotations

from typing import Optional

from guessgame.console import LineIO
from guessgame.errors import ParseError
from guessgame.models import Rectangle
from guessgame.reader import read_validated_integer


def run_rectangle(io: LineIO) -> Optional[Rectangle]:
    """Ask for width and height, print the area.

    Returns:
        The measured Rectangle, or None if either side was not a number.
    """
    try:
        width = read_validated_integer(io, "Enter the width in pixels: ")
    except ParseError:
        io.write_line("Invalid width. Width must be an integer!")
        return None

    try:
        height = read_validated_integer(io, "Enter the height in pixels: ")
    except ParseError:
        io.write_line("Invalid height. Height must be an integer!")
        return None

    rect = Rectangle(width=width, height=height)
    io.write_line(f"The area of the rectangle is {rect.area()} square pixels.")
    return rect
