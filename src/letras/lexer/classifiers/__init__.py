"""Per-rule scanners for the letras lexer.

Each scanner is a pure function ``(source, pos, scripts) -> end`` that
matches anchored at pos and returns the end of its match, or pos itself
when the rule does not apply. Scanners never move a cursor; the Lexer
commits position after a rule wins.
"""

from letras.lexer.classifiers.char import match_char
from letras.lexer.classifiers.number import match_number
from letras.lexer.classifiers.whitespace import match_whitespace
from letras.lexer.classifiers.word import match_word

__all__ = [
    "match_char",
    "match_number",
    "match_whitespace",
    "match_word",
]
