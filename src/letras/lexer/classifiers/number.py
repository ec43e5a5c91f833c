"""NUMBER rule scanner."""

from __future__ import annotations

from letras.charsets import DIGITS
from letras.unicode_ranges import UnicodeRangeTable


def match_number(source: str, pos: int, scripts: UnicodeRangeTable) -> int:
    """Scan a maximal run of ASCII digits anchored at pos.

    Returns:
        End of the run, or pos if source[pos] is not a digit.
    """
    source_len = len(source)
    end = pos
    while end < source_len and source[end] in DIGITS:
        end += 1
    return end
