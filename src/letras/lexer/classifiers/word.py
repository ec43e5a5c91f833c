"""WORD rule scanner.

A WORD is a run of ASCII letters, ASCII digits and script letters. A hyphen
or apostrophe joins the run only when a letter follows it, so "e-mail" and
"isn't" stay whole while "test-1" splits into WORD, CHAR, NUMBER.

Acceptance depends on what the run starts with:
- script letter: any length (a lone Greek or Cyrillic letter is a WORD)
- ASCII letter: at least two characters (a lone "a" falls through to CHAR)
- ASCII digit: at least two characters and at least one letter in the run
  ("2nd" is a WORD, "1000" is left for NUMBER)
"""

from __future__ import annotations

from letras.charsets import ASCII_ALNUM, ASCII_LETTERS, DIGITS, WORD_JOINERS, is_letter
from letras.unicode_ranges import UnicodeRangeTable

# Minimum run length for ASCII-led words
MIN_ASCII_WORD = 2


def match_word(source: str, pos: int, scripts: UnicodeRangeTable) -> int:
    """Scan a WORD anchored at pos.

    Args:
        source: Full source text
        pos: Cursor position (must be < len(source))
        scripts: Script-letter table

    Returns:
        End of the match, or pos if the rule does not match here.
    """
    first = source[pos]
    script_led = False
    if first in ASCII_LETTERS:
        has_letter = True
    elif first in DIGITS:
        has_letter = False
    elif scripts.contains(ord(first)):
        has_letter = True
        script_led = True
    else:
        return pos

    source_len = len(source)
    end = pos + 1
    while end < source_len:
        char = source[end]
        if char in ASCII_ALNUM:
            if char in ASCII_LETTERS:
                has_letter = True
            end += 1
        elif scripts.contains(ord(char)):
            has_letter = True
            end += 1
        elif char in WORD_JOINERS and end + 1 < source_len:
            if is_letter(source[end + 1], scripts):
                has_letter = True
                end += 2  # joiner and the letter after it
            else:
                break
        else:
            break

    if script_led:
        return end
    if end - pos < MIN_ASCII_WORD or not has_letter:
        return pos
    return end
