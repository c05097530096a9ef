"""Read-a-line-then-parse helpers shared by both games.

The guessing game retries on a ParseError; the rectangle calculator gives up.
Neither decision lives here.
"""

from __future__ import annotations

import re

from guessgame.console import LineIO
from guessgame.errors import ParseError
from guessgame.models import UINT32_MAX, WHITESPACE

# ASCII digits only, optional leading plus sign.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str) -> int:
    """Parse trimmed text as an unsigned 32-bit integer.

    Args:
        text: Raw line as typed, line ending and padding allowed.

    Returns:
        The integer value, 0 to 2**32 - 1.

    Raises:
        ParseError: Empty, signed negative, non-digit, or out of range.
    """
    stripped = text.strip(WHITESPACE)
    if not _UNSIGNED_RE.fullmatch(stripped):
        raise ParseError(stripped)
    value = int(stripped)
    if value > UINT32_MAX:
        raise ParseError(stripped)
    return value


def read_validated_integer(io: LineIO, prompt: str) -> int:
    """Write prompt, read one line, and parse it with parse_unsigned().

    ParseError and InputReadError both propagate to the caller.
    """
    io.write_line(prompt)
    return parse_unsigned(io.read_line())
