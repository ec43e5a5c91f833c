"""ContextVar-based lexer configuration for letras.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration is read once at the start of each parse and never
mutated during it.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from letras import parse
    from letras.config import LexConfig, lex_config_context
    from letras.unicode_ranges import DEFAULT_RANGE_TABLE, CodepointRange

    samaritan = DEFAULT_RANGE_TABLE.extend([CodepointRange(0x0800, 0x083F)])

    # Per call
    stream = parse(text, config=LexConfig(script_ranges=samaritan))

    # Or for a whole block of calls
    with lex_config_context(LexConfig(script_ranges=samaritan)):
        stream = parse(text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from letras.lexer.rules import DEFAULT_PATTERN_TABLE, PatternTable
from letras.unicode_ranges import DEFAULT_RANGE_TABLE, UnicodeRangeTable


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        script_ranges: Unicode blocks whose code points count as letters
            for the WORD rule
        encoding: Codec used to decode byte input
        decode_errors: Codec error handler for byte input. The default
            "surrogateescape" keeps undecodable bytes so that
            TokenStream.join_bytes() reproduces the original buffer.
        rules: Ordered pattern table

    """

    script_ranges: UnicodeRangeTable = field(default=DEFAULT_RANGE_TABLE)
    encoding: str = "utf-8"
    decode_errors: str = "surrogateescape"
    rules: PatternTable = field(default=DEFAULT_PATTERN_TABLE)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored. A "script_ranges" value may be a
        UnicodeRangeTable or a list of (low, high) pairs.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "encoding": "latin-1",
            ...     "script_ranges": [(0x0370, 0x03FF)],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'latin-1'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        ranges = filtered.get("script_ranges")
        if ranges is not None and not isinstance(ranges, UnicodeRangeTable):
            filtered["script_ranges"] = UnicodeRangeTable.from_pairs(
                (int(low), int(high)) for low, high in ranges
            )
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

# Thread-local configuration via ContextVar
_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local).

    Returns:
        The active LexConfig for this thread/context.

    """
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
