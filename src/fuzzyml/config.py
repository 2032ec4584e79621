"""ContextVar-based lexer configuration for fuzzyml.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A TagLexer snapshots the active config when it is constructed, so changing
the config afterwards never affects a lexer that is already running.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from fuzzyml.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(trace_events=True)):
        lexer = TagLexer(listener)
        lexer.feed(html)
        lexer.finish()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    None of these options change which events are emitted; they only
    control diagnostics.

    Attributes:
        trace_events: Log every tag and end-tag event at DEBUG level
        report_unterminated: At finish(), log when the stream ended inside
            a tag, comment or attribute value

    """

    trace_events: bool = False
    report_unterminated: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Useful when crawler settings arrive from an external source such as
        a job definition. Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexerConfig attribute names.

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "trace_events": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.trace_events
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local).

    Returns:
        The active LexerConfig for this thread/context.

    """
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lexer_config_context(LexerConfig(trace_events=True)):
        ...     lexer = TagLexer()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
