"""
letras: lossless, script-aware text tokenizer for Python

Splits text into WORD, WHITESPACE, CHAR and NUMBER tokens with a fixed
precedence table. Runs of Greek, Cyrillic, Arabic, CJK and other configured
Unicode blocks come out as WORD tokens. Joining the tokens back always
reproduces the input exactly. Zero runtime dependencies.

Quick Start:
    >>> from letras import parse
    >>> stream = parse("test-1 ελληνικά")
    >>> stream.pairs()
    [('WORD', 'test'), ('CHAR', '-'), ('NUMBER', '1'), ('WHITESPACE', ' '), ('WORD', 'ελληνικά')]
    >>> stream.join()
    'test-1 ελληνικά'

Editing:
    >>> stream = parse("test test test")
    >>> stream.replace(2, "test2")
    >>> stream.join()
    'test test2 test'

Extra scripts:
    >>> from letras import LexConfig, CodepointRange, DEFAULT_RANGE_TABLE
    >>> table = DEFAULT_RANGE_TABLE.extend([CodepointRange(0x0800, 0x083F, "Samaritan")])
    >>> stream = parse(text, config=LexConfig(script_ranges=table))

Installation:
    pip install letras
"""

from letras.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from letras.errors import ClassificationError, InputTypeError, LetrasError, ReadError
from letras.lexer import Lexer, PatternRule, PatternTable
from letras.lexer.core import coerce_source
from letras.lexer.rules import DEFAULT_PATTERN_TABLE
from letras.reader import read_bytes, tokenize_file
from letras.serialization import from_json, to_json
from letras.stream import TokenStream
from letras.tokens import Token, TokenKind
from letras.unicode_ranges import (
    DEFAULT_RANGE_TABLE,
    DEFAULT_SCRIPT_RANGES,
    CodepointRange,
    UnicodeRangeTable,
)
from letras.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(data: str | bytes | bytearray | memoryview, *, config: LexConfig | None = None) -> TokenStream:
    """Tokenize text into a TokenStream.

    Args:
        data: Text, or a byte buffer decoded with config.encoding
        config: Lexer configuration (uses the active context config if None)

    Returns:
        TokenStream whose join() equals the (decoded) input

    Raises:
        InputTypeError: If data is not str or a byte buffer. Raised before
            any tokenization, so no partial stream exists.

    Example:
        >>> parse("").pairs()
        []
        >>> parse(b"42 ok").pairs()
        [('NUMBER', '42'), ('WHITESPACE', ' '), ('WORD', 'ok')]
    """
    if config is None:
        config = get_lex_config()

    source = coerce_source(data, config.encoding, config.decode_errors)
    lexer = Lexer(source, scripts=config.script_ranges, rules=config.rules)
    stream = TokenStream(lexer.tokenize())
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(stream))
    return stream


__all__ = [
    "DEFAULT_PATTERN_TABLE",
    "DEFAULT_RANGE_TABLE",
    "DEFAULT_SCRIPT_RANGES",
    "ClassificationError",
    "CodepointRange",
    "InputTypeError",
    "LetrasError",
    "LexConfig",
    "Lexer",
    "PatternRule",
    "PatternTable",
    "ReadError",
    "Token",
    "TokenKind",
    "TokenStream",
    "UnicodeRangeTable",
    "__version__",
    "coerce_source",
    "from_json",
    "get_lex_config",
    "lex_config_context",
    "parse",
    "read_bytes",
    "reset_lex_config",
    "set_lex_config",
    "to_json",
    "tokenize_file",
]
