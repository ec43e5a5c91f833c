"""Pattern rules and the default pattern table.

A PatternRule pairs an anchored scanner with the TokenKind it produces.
A PatternTable is the ordered, immutable list of rules; order is
precedence, and the first rule that matches a non-empty prefix wins.

Default precedence:
1. WORD
2. WHITESPACE
3. CHAR (catch-all for any non-digit)
4. NUMBER

WORD must come before CHAR, otherwise letters would never reach it.
CHAR comes before NUMBER but excludes digits, so digit runs still land in
NUMBER.

Thread Safety:
Rules and tables are frozen and shared by every Lexer.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from letras.lexer.classifiers import (
    match_char,
    match_number,
    match_whitespace,
    match_word,
)
from letras.tokens import TokenKind
from letras.unicode_ranges import UnicodeRangeTable

Matcher = Callable[[str, int, UnicodeRangeTable], int]


@dataclass(frozen=True, slots=True)
class PatternRule:
    """One classification rule.

    Attributes:
        kind: TokenKind emitted when this rule wins
        matcher: Anchored scanner returning the end of its match
        name: Label for debugging (defaults to the kind name)

    """

    kind: TokenKind
    matcher: Matcher
    name: str = ""

    @property
    def label(self) -> str:
        return self.name or self.kind.value

    def match(self, source: str, pos: int, scripts: UnicodeRangeTable) -> int:
        """Run the matcher; returns pos when the rule does not apply."""
        return self.matcher(source, pos, scripts)


class PatternTable:
    """Ordered, immutable sequence of PatternRule.

    Usage:
            >>> table = PatternTable([PatternRule(TokenKind.NUMBER, match_number)])
            >>> [rule.label for rule in table]
            ['NUMBER']

    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[PatternRule]) -> None:
        self._rules: tuple[PatternRule, ...] = tuple(rules)
        if not self._rules:
            raise ValueError("PatternTable needs at least one rule")

    @property
    def rules(self) -> tuple[PatternRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> PatternRule:
        return self._rules[index]

    def __repr__(self) -> str:
        order = ", ".join(rule.label for rule in self._rules)
        return f"PatternTable([{order}])"


WORD_RULE = PatternRule(TokenKind.WORD, match_word)
WHITESPACE_RULE = PatternRule(TokenKind.WHITESPACE, match_whitespace)
CHAR_RULE = PatternRule(TokenKind.CHAR, match_char)
NUMBER_RULE = PatternRule(TokenKind.NUMBER, match_number)

# Module-level default table (built once, never recreated)
DEFAULT_PATTERN_TABLE: PatternTable = PatternTable(
    (WORD_RULE, WHITESPACE_RULE, CHAR_RULE, NUMBER_RULE)
)


__all__ = [
    "CHAR_RULE",
    "DEFAULT_PATTERN_TABLE",
    "NUMBER_RULE",
    "WHITESPACE_RULE",
    "WORD_RULE",
    "Matcher",
    "PatternRule",
    "PatternTable",
]
