"""Token stream serialization: JSON round-trip for letras streams.

A stream serializes to its external shape, a list of [kind, lexeme] pairs.
Useful for:
- Golden files in tests
- Handing tokens to tools in other languages
- Debugging and inspection

Offsets are not stored; from_json rebuilds them as the running total of
lexeme lengths, which is exact for any stream whose lexemes were not
rewritten.

Example:
    from letras import parse
    from letras.serialization import to_json, from_json

    stream = parse("ελληνικά 42")
    restored = from_json(to_json(stream))
    assert stream == restored

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from letras.errors import LetrasError
from letras.stream import TokenStream
from letras.tokens import Token, TokenKind


def to_pairs(stream: TokenStream) -> list[list[str]]:
    """Convert a stream to JSON-compatible [kind, lexeme] lists."""
    return [[token.kind.value, token.lexeme] for token in stream]


def from_pairs(pairs: Iterable[Any]) -> TokenStream:
    """Rebuild a stream from (kind, lexeme) pairs.

    Args:
        pairs: Iterable of two-item sequences

    Returns:
        TokenStream with offsets recomputed from lexeme lengths.

    Raises:
        LetrasError: If a pair is malformed or names an unknown kind.
    """
    tokens: list[Token] = []
    offset = 0
    for index, pair in enumerate(pairs):
        try:
            name, lexeme = pair
        except (TypeError, ValueError) as exc:
            raise LetrasError(f"Token {index}: expected [kind, lexeme], got {pair!r}") from exc
        if not isinstance(lexeme, str):
            raise LetrasError(f"Token {index}: lexeme must be a string, got {lexeme!r}")
        try:
            kind = TokenKind.from_name(name)
        except ValueError as exc:
            raise LetrasError(f"Token {index}: unknown token kind {name!r}") from exc
        tokens.append(Token(kind, lexeme, offset))
        offset += len(lexeme)
    return TokenStream(tokens)


def to_json(stream: TokenStream, *, indent: int | None = None) -> str:
    """Serialize a stream to a JSON string.

    Args:
        stream: Stream to serialize
        indent: Optional JSON indentation

    Returns:
        JSON array of [kind, lexeme] arrays. Non-ASCII text is kept as-is.
    """
    return json.dumps(to_pairs(stream), ensure_ascii=False, indent=indent)


def from_json(data: str) -> TokenStream:
    """Deserialize a stream produced by to_json."""
    try:
        pairs = json.loads(data)
    except json.JSONDecodeError as exc:
        raise LetrasError(f"Invalid token JSON: {exc}") from exc
    if not isinstance(pairs, list):
        raise LetrasError("Token JSON must be an array of [kind, lexeme] pairs")
    return from_pairs(pairs)


__all__ = ["from_json", "from_pairs", "to_json", "to_pairs"]
