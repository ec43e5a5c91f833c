"""Token and TokenKind definitions for the letras lexer.

The lexer produces a stream of Token objects, one per classified run of
input text. Each Token has a kind, the lexeme it covers, and the offset
where that lexeme started in the original text.

Thread Safety:
TokenKind is an enum (inherently immutable).
Token is mutable by contract (callers may rewrite lexemes in place), so a
Token belongs to whichever thread owns the stream it came from.

"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    The values are the stable external names consumers rely on.
    Declaration order is NOT rule precedence; see letras.lexer.rules.

    """

    WORD = "WORD"  # letters, digits, script letters, inner - and '
    WHITESPACE = "WHITESPACE"  # run of whitespace
    CHAR = "CHAR"  # any single non-digit character
    NUMBER = "NUMBER"  # run of ASCII digits

    @classmethod
    def from_name(cls, name: str) -> "TokenKind":
        """Look up a kind by its external name.

        Args:
            name: One of "WORD", "WHITESPACE", "CHAR", "NUMBER"

        Returns:
            The matching TokenKind.

        Raises:
            ValueError: If name is not a known kind.
        """
        return cls(name)


@dataclass(slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        lexeme: The exact text slice this token covers. Callers may overwrite
            it; no consistency check against kind is made afterwards.
        offset: Start position in the original text (code points)

    """

    kind: TokenKind
    lexeme: str
    offset: int = 0

    def as_pair(self) -> tuple[str, str]:
        """Return the external (kind name, lexeme) shape."""
        return (self.kind.value, self.lexeme)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, @{self.offset})"
