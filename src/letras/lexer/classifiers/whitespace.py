"""WHITESPACE rule scanner."""

from __future__ import annotations

from letras.charsets import is_whitespace
from letras.unicode_ranges import UnicodeRangeTable


def match_whitespace(source: str, pos: int, scripts: UnicodeRangeTable) -> int:
    """Scan a maximal whitespace run anchored at pos.

    Returns:
        End of the run, or pos if source[pos] is not whitespace.
    """
    source_len = len(source)
    end = pos
    while end < source_len and is_whitespace(source[end]):
        end += 1
    return end
