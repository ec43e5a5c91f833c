"""Single-pass lexer with O(n) expected performance.

Scans the source once, left to right. At each cursor position the pattern
table is tried in precedence order; the first rule with a non-empty,
anchored match wins, a token is emitted, and the cursor commits past the
match. Every iteration advances, so the loop always terminates.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the pattern and range tables are shared
read-only.

"""

from __future__ import annotations

from collections.abc import Iterator

from letras.errors import ClassificationError, InputTypeError
from letras.lexer.rules import DEFAULT_PATTERN_TABLE, PatternTable
from letras.tokens import Token, TokenKind
from letras.unicode_ranges import DEFAULT_RANGE_TABLE, UnicodeRangeTable

TEXT_TYPES = (str, bytes, bytearray, memoryview)


def coerce_source(
    data: object, encoding: str = "utf-8", errors: str = "surrogateescape"
) -> str:
    """Normalise str or byte-buffer input to one str.

    Args:
        data: str, bytes, bytearray or memoryview
        encoding: Codec for byte input
        errors: Codec error handler for byte input

    Returns:
        The source as str.

    Raises:
        InputTypeError: If data is any other type.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return data.decode(encoding, errors)
    if isinstance(data, memoryview):
        return data.tobytes().decode(encoding, errors)
    raise InputTypeError(data)


class Lexer:
    """Rule-driven lexer over a single source string.

    Uses a classify-then-commit loop:
    1. Classify at the cursor (pure, no position changes)
    2. Emit the token
    3. Commit position (always advances)

    Usage:
            >>> lexer = Lexer("test-1 x")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(WORD, 'test', @0)
        Token(CHAR, '-', @4)
        Token(NUMBER, '1', @5)
        Token(WHITESPACE, ' ', @6)
        Token(CHAR, 'x', @7)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_scripts",
        "_rules",
    )

    def __init__(
        self,
        source: str,
        *,
        scripts: UnicodeRangeTable = DEFAULT_RANGE_TABLE,
        rules: PatternTable = DEFAULT_PATTERN_TABLE,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to tokenize
            scripts: Script-letter table used by the WORD rule
            rules: Ordered pattern table
        """
        if not isinstance(source, str):
            raise InputTypeError(source, callee="Lexer", accepted="str")
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._scripts = scripts
        self._rules = rules

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, in document order

        Raises:
            ClassificationError: If no rule matches (broken rule table).

        Complexity: O(n * r) worst case for r rules, O(n) in practice.
        """
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            start = self._pos
            kind, end = self.classify(start)
            self._pos = end
            yield Token(kind, source[start:end], start)

    def classify(self, pos: int) -> tuple[TokenKind, int]:
        """Find the highest-precedence rule matching at pos.

        Args:
            pos: Cursor position (0 <= pos < len(source))

        Returns:
            (kind, end) for the winning rule; end > pos.

        Raises:
            ClassificationError: If no rule produces a non-empty match.
        """
        source = self._source
        scripts = self._scripts
        for rule in self._rules:
            end = rule.match(source, pos, scripts)
            if end > pos:
                return rule.kind, end
        raise ClassificationError(pos, source[pos])
