"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII is case-folded: [a-zA-Z] is the whole of "letter" outside the
configured script ranges.

Usage:
    from letras.charsets import ASCII_LETTERS

    if char in ASCII_LETTERS:  # O(1) lookup
        ...
"""

from letras.unicode_ranges import UnicodeRangeTable

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_ALNUM: frozenset[str] = ASCII_LETTERS | DIGITS

# Joiners may sit inside a WORD run (e-mail, isn't) but never end one
WORD_JOINERS: frozenset[str] = frozenset("-'")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace.

    Uses str.isspace, which covers ASCII space, tab, newline, carriage
    return, form feed, vertical tab and the Unicode separators.
    """
    return char.isspace()


def is_letter(char: str, scripts: UnicodeRangeTable) -> bool:
    """Check if character is an ASCII letter or a configured script letter."""
    return char in ASCII_LETTERS or scripts.contains(ord(char))

