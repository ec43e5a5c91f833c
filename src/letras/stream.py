"""TokenStream: the ordered output of a parse.

A TokenStream holds tokens in document order. The caller owns it outright:
lexemes may be rewritten in place (assisted text editing), and join()
stitches the current lexemes back into text. Nothing is re-validated after
a rewrite, so a WORD token may end up holding digits or punctuation.

Example:
    >>> from letras import parse
    >>> stream = parse("test test test")
    >>> stream.replace(2, "test2")
    >>> stream.join()
    'test test2 test'

Thread Safety:
TokenStream is mutable and not locked. Keep each stream on one thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from letras.tokens import Token, TokenKind


class TokenStream:
    """Ordered, index-addressable sequence of Token.

    Usage:
            >>> stream = parse("ab 12")
            >>> stream.pairs()
            [('WORD', 'ab'), ('WHITESPACE', ' '), ('NUMBER', '12')]
            >>> stream[0].lexeme = "xy"
            >>> stream.join()
            'xy 12'

    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        """Initialize stream.

        Args:
            tokens: Tokens in document order
        """
        self._tokens: list[Token] = list(tokens)

    def join(self) -> str:
        """Concatenate every lexeme in order.

        Returns:
            The reconstructed text. Equal to the parsed input unless a
            lexeme has been rewritten.
        """
        return "".join(token.lexeme for token in self._tokens)

    def join_bytes(
        self, encoding: str = "utf-8", errors: str = "surrogateescape"
    ) -> bytes:
        """Reconstruct the text and encode it.

        With the default codec settings this reproduces the original byte
        buffer exactly, including bytes that were not valid UTF-8.
        """
        return self.join().encode(encoding, errors)

    def replace(self, index: int, lexeme: str) -> None:
        """Overwrite the lexeme of the token at index.

        Args:
            index: Token position (negative indices count from the end)
            lexeme: New text for that token

        Raises:
            IndexError: If index is out of range.
            TypeError: If lexeme is not a str.
        """
        if not isinstance(lexeme, str):
            raise TypeError(f"lexeme must be str, got {type(lexeme).__name__}")
        self._tokens[index].lexeme = lexeme

    def pairs(self) -> list[tuple[str, str]]:
        """Return the external [(kind name, lexeme), ...] shape."""
        return [token.as_pair() for token in self._tokens]

    def kinds(self) -> list[TokenKind]:
        return [token.kind for token in self._tokens]

    def count(self, kind: TokenKind) -> int:
        """Number of tokens of the given kind."""
        return sum(1 for token in self._tokens if token.kind is kind)

    @property
    def tokens(self) -> list[Token]:
        """The underlying token list (live, not a copy)."""
        return self._tokens

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> list[Token]: ...

    def __getitem__(self, index: int | slice) -> Token | list[Token]:
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenStream):
            return NotImplemented
        return self.pairs() == other.pairs()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens)"

    def __str__(self) -> str:
        return self.join()
