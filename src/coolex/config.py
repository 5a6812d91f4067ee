"""ContextVar-based lex configuration for coolex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The Lexer reads the active config once at the start of every scan.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from coolex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(keep_trivia=False)):
        pairs = lexer.lex(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lex configuration.

    Attributes:
        keep_trivia: Emit whitespace and comment tokens. When False they are
            still scanned (and still advance the line counter) but are left
            out of the output.
        log_errors: Log every ERROR token at WARNING level.
        source_file: Label for log messages and invariant errors.

    """

    keep_trivia: bool = True
    log_errors: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"keep_trivia": False, "colour": "red"})
            LexConfig(keep_trivia=False, log_errors=False, source_file=None)

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
    """Get current lex configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lex configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the module-level default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(keep_trivia=False)):
        ...     pairs = lex("class Main {};")
        >>> # Previous config restored here

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
