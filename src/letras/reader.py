"""File reading for letras.

The lexer never touches the filesystem. This module is the I/O side:
read a file's raw bytes, turn any OSError into ReadError, then hand the
bytes to parse().

Example:
    >>> from pathlib import Path
    >>> from letras.reader import tokenize_file
    >>> stream = tokenize_file("docs/page.html")
    >>> stream.join_bytes() == Path("docs/page.html").read_bytes()
    True
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from letras.errors import ReadError
from letras.utils.logger import get_logger

if TYPE_CHECKING:
    from letras.config import LexConfig
    from letras.stream import TokenStream

logger = get_logger(__name__)


def read_bytes(path: str | Path) -> bytes:
    """Read the full contents of a file.

    Args:
        path: Filesystem path

    Returns:
        The file's bytes.

    Raises:
        ReadError: If the file is missing, unreadable, a directory, etc.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        logger.debug("Failed to read %s", path, exc_info=True)
        raise ReadError(path, exc) from exc


def tokenize_file(path: str | Path, *, config: LexConfig | None = None) -> TokenStream:
    """Read a file and tokenize its contents.

    Args:
        path: Filesystem path
        config: Lexer configuration (uses the active context config if None)

    Returns:
        TokenStream for the file's text.

    Raises:
        ReadError: If the file cannot be read. parse() is not called.
    """
    from letras import parse

    data = read_bytes(path)
    return parse(data, config=config)


__all__ = ["read_bytes", "tokenize_file"]
