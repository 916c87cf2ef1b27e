"""ContextVar-based lexer configuration for AtomScript.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from atomscript.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(int_bits=64)):
        tokens = tokenize("9223372036854775807")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Keeps the largest INT within int()'s default digit limit
MAX_INT_BITS = 4096


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        int_bits: Width of the signed integer type INT literals must fit in.
            Digit runs above 2**(int_bits - 1) - 1 become LITERAL_OVERFLOW.
        strict: Make atomscript.tokenize() raise a LexError on the first
            error token instead of returning it.
        source_file: Label used in error messages

    """

    int_bits: int = 32
    strict: bool = False
    source_file: str | None = None

    def __post_init__(self) -> None:
        if not 2 <= self.int_bits <= MAX_INT_BITS:
            raise ValueError(
                f"int_bits must be between 2 and {MAX_INT_BITS}, got {self.int_bits}"
            )

    @property
    def max_int(self) -> int:
        """Largest value an INT token may carry."""
        return 2 ** (self.int_bits - 1) - 1

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> LexConfig.from_dict({"int_bits": 64, "color": "red"}).int_bits
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(strict=True)):
        ...     get_lex_config().strict
        True

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
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
