"""CHAR rule scanner.

The catch-all: exactly one character that is not an ASCII digit. Together
with NUMBER this makes the pattern table total, which is what guarantees
the lexer always advances.
"""

from __future__ import annotations

from letras.charsets import DIGITS
from letras.unicode_ranges import UnicodeRangeTable


def match_char(source: str, pos: int, scripts: UnicodeRangeTable) -> int:
    """Match one non-digit character at pos.

    Returns:
        pos + 1, or pos if source[pos] is an ASCII digit.
    """
    if source[pos] in DIGITS:
        return pos
    return pos + 1
