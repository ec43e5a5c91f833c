"""Exception classes for letras.

Provides standardized exceptions for error handling throughout letras.
"""

from __future__ import annotations

from pathlib import Path


class LetrasError(Exception):
    """Base exception for all letras errors.

    Subclass this for specific error categories.
    """

    pass


class InputTypeError(LetrasError, TypeError):
    """Input to the tokenizer is not text-shaped.

    Raised before any token is produced, so callers never see a
    partial stream.
    """

    def __init__(
        self,
        value: object,
        *,
        callee: str = "letras.parse",
        accepted: str = "str, bytes, bytearray and memoryview",
    ) -> None:
        """Initialize input type error.

        Args:
            value: The rejected input
            callee: Name of the function that rejected it
            accepted: Human-readable list of the types callee takes
        """
        self.value_type = type(value)
        self.callee = callee
        super().__init__(f"{callee} only accepts {accepted}, got {self.value_type.__name__}")


class ReadError(LetrasError, OSError):
    """The I/O collaborator failed to retrieve file content.

    Wraps the underlying OSError, which is also available as __cause__.
    """

    def __init__(self, path: str | Path, reason: OSError) -> None:
        """Initialize read error.

        Args:
            path: Path that could not be read
            reason: The OSError raised by the filesystem
        """
        self.path = str(path)
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(reason.errno, f"Cannot read {self.path}: {detail}")

    def __str__(self) -> str:
        return self.args[1] if len(self.args) > 1 else super().__str__()


class ClassificationError(LetrasError):
    """No pattern rule matched at a cursor position.

    With the default pattern table this is unreachable: the CHAR rule
    matches every non-digit character and NUMBER matches the digits.
    Seeing it means the rule table is broken, not the input.
    """

    def __init__(self, offset: int, char: str) -> None:
        """Initialize classification error.

        Args:
            offset: Position in the source where no rule matched
            char: The character at that position
        """
        self.offset = offset
        self.char = char
        super().__init__(f"No pattern rule matched {char!r} at offset {offset}")
