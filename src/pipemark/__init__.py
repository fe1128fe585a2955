"""
pipemark: lexer for a text / math / command markup language

Source interleaves three kinds of region, each with its own escaping
rules, opened and closed with "|" markers:

    Plain text with |m x^2 + y_1 |t where x is real||, in math.
    |section->Introduction
    /* comments /* nest */ */

Quick Start:
    >>> from pipemark import tokenize
    >>> [t.payload for t in tokenize("a |m x|")]
    ['a ', Mode(kind=<ModeKind.MATH: 2>, name=''), 'x', Mode(kind=<ModeKind.MATH: 2>, name=''), '']

    >>> # Streaming, one token per call
    >>> from pipemark import Lexer
    >>> lexer = Lexer("/* a /* b */ c */")
    >>> lexer.next_token().value
    '/* a /* b */ c */'

Errors:
    Every failure raises a LexError subclass carrying the span, the open
    regions at the point of failure, and a message:

    >>> try:
    ...     tokenize("|m x")
    ... except LexError as err:
    ...     print(err.describe())
    1:5 unexpected end of input: Math region opened at 1:1 is never closed
      inside Math region opened at 1:1
"""

from pipemark.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pipemark.errors import (
    ErrorKind,
    InvalidEscapeError,
    LexError,
    MismatchedDelimiterError,
    PipemarkError,
    ScanContext,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from pipemark.lexer import MATH, TEXT, Lexer, Mode, ModeFrame, ModeKind, command
from pipemark.location import Span
from pipemark.serialization import error_to_dict, from_json, to_json
from pipemark.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize a whole source string.

    Args:
        source: Markup source text
        source_file: Optional source file path for spans and errors
        config: Lexer options (defaults to the active context config)

    Returns:
        All tokens in source order, ending with EOF

    Raises:
        LexError: On the first lexing failure.

    Example:
        >>> [t.type.name for t in tokenize("a\\n\\nb")]
        ['LITERAL', 'PARAGRAPH_BREAK', 'LITERAL', 'EOF']
    """
    return list(Lexer(source, source_file=source_file, config=config).tokenize())


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    # Modes
    "Mode",
    "ModeKind",
    "ModeFrame",
    "MATH",
    "TEXT",
    "command",
    # Location
    "Span",
    # Errors
    "PipemarkError",
    "LexError",
    "ErrorKind",
    "ScanContext",
    "MismatchedDelimiterError",
    "InvalidEscapeError",
    "UnexpectedEndOfInputError",
    "UnexpectedCharacterError",
    # Configuration (ContextVar-based)
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "to_json",
    "from_json",
    "error_to_dict",
]
