"""Rule-driven lexer for letras.

This package provides a single-pass lexer whose behaviour is fully
described by an ordered pattern table.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer and the rule types
├── core.py              # Lexer class (classify + commit loop), input coercion
├── rules.py             # PatternRule, PatternTable, default precedence
└── classifiers/         # One anchored scanner per rule
    ├── word.py          # WORD (ASCII + script letters)
    ├── whitespace.py    # WHITESPACE
    ├── char.py          # CHAR (catch-all)
    └── number.py        # NUMBER

Usage:
    >>> from letras.lexer import Lexer
    >>> [t.as_pair() for t in Lexer("hi 42").tokenize()]
    [('WORD', 'hi'), ('WHITESPACE', ' '), ('NUMBER', '42')]

"""

from letras.lexer.core import Lexer, coerce_source
from letras.lexer.rules import DEFAULT_PATTERN_TABLE, PatternRule, PatternTable

__all__ = [
    "DEFAULT_PATTERN_TABLE",
    "Lexer",
    "PatternRule",
    "PatternTable",
    "coerce_source",
]
