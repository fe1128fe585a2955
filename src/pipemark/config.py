"""ContextVar-based lexer configuration for pipemark.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed, so changing
the config never affects a pass that is already running.

Usage:
    from pipemark.config import LexConfig, lex_config_context
    from pipemark.lexer import Lexer

    with lex_config_context(LexConfig(newline_literals=False)):
        tokens = list(Lexer(source).tokenize())

    # Or pass a config explicitly
    lexer = Lexer(source, config=LexConfig(command_fallthrough=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        command_fallthrough: Characters a command body does not recognize
            open a comment and are read up to the next */ (historical
            behavior). When False they are returned as Literal tokens.
        newline_literals: Emit a "\\n" Literal for each plain newline.
            When False the newline is consumed silently.

    """

    command_fallthrough: bool = True
    newline_literals: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> LexConfig.from_dict({"newline_literals": False, "x": 1})
            LexConfig(command_fallthrough=True, newline_literals=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get the active lexer configuration for this context."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set the lexer configuration for the current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(newline_literals=False)):
        ...     get_lex_config().newline_literals
        False

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
