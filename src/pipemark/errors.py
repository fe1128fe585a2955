"""Exception classes for pipemark.

Every lexing failure is a LexError carrying the offending span, a
snapshot of the mode stack at the moment of failure, and a message.
Errors are fatal to the lexing pass: the error replaces the token that
would have been produced next.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from pipemark.lexer.modes import ModeFrame
    from pipemark.location import Span


class ErrorKind(Enum):
    """Lexing error taxonomy."""

    MISMATCHED_DELIMITER = auto()  # | with nothing open
    INVALID_ESCAPE = auto()  # \q and friends
    UNEXPECTED_END_OF_INPUT = auto()  # region or comment still open
    UNEXPECTED_CHARACTER = auto()  # reserved character with no rule


class ScanContext(Enum):
    """Where the lexer was scanning when an error occurred."""

    TEXT = auto()
    MATH = auto()
    COMMAND = auto()
    COMMENT = auto()

    def __str__(self) -> str:
        return self.name.capitalize()


class PipemarkError(Exception):
    """Base exception for all pipemark errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(PipemarkError):
    """Fatal error during lexing.

    Attributes:
        message: Error description
        span: Source span of the offending input
        stack_snapshot: Open regions, outermost first
        context: Region or comment being scanned (None if not applicable)

    Example:
        >>> from pipemark import tokenize
        >>> try:
        ...     tokenize("|m x /* oops")
        ... except LexError as err:
        ...     print(err.describe())
        1:6 unexpected end of input inside comment
          inside Math region opened at 1:1
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        message: str,
        span: Span,
        stack_snapshot: tuple[ModeFrame, ...] = (),
        context: ScanContext | None = None,
    ) -> None:
        self.message = message
        self.span = span
        self.stack_snapshot = tuple(stack_snapshot)
        self.context = context
        super().__init__(f"{span} {message}")

    def describe(self) -> str:
        """Render the error with one line per open region.

        Returns:
            Multi-line diagnostic, outermost region first
        """
        lines = [str(self)]
        lines.extend(f"  inside {frame}" for frame in self.stack_snapshot)
        return "\n".join(lines)


class MismatchedDelimiterError(LexError):
    """A region close marker with no open region."""

    kind = ErrorKind.MISMATCHED_DELIMITER


class InvalidEscapeError(LexError):
    """A backslash sequence that the current region does not support."""

    kind = ErrorKind.INVALID_ESCAPE


class UnexpectedEndOfInputError(LexError):
    """Input ended inside an open region or comment."""

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class UnexpectedCharacterError(LexError):
    """A reserved character that must be escaped in the current region."""

    kind = ErrorKind.UNEXPECTED_CHARACTER
