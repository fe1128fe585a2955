"""Mode stack for region nesting.

ModeStack holds the open regions of one lexing pass. ModeStackMixin turns
stack operations and "|" markers into REGION_BEGIN / REGION_END tokens.
An empty stack means the implicit top-level Text region.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from pipemark.errors import MismatchedDelimiterError, ScanContext
from pipemark.lexer.classifiers.marker import Marker, MarkerKind
from pipemark.lexer.modes import MATH, TEXT, Mode, ModeFrame, command
from pipemark.tokens import Token, TokenType
from pipemark.utils.logger import get_logger

if TYPE_CHECKING:
    from pipemark.location import Span

logger = get_logger(__name__)


class ModeStack:
    """LIFO stack of open regions.

    Usage:
            >>> from pipemark.location import Span
            >>> stack = ModeStack()
            >>> str(stack.current_mode())
            'Text'
            >>> frame = stack.push(MATH, Span(1, 1))
            >>> stack.pop(Span(1, 5)).mode is MATH
            True

    Thread Safety:
        Owned by a single Lexer. Never share between passes.

    """

    __slots__ = ("_frames",)

    def __init__(self) -> None:
        self._frames: list[ModeFrame] = []

    def push(self, mode: Mode, span: Span) -> ModeFrame:
        frame = ModeFrame(mode, span)
        self._frames.append(frame)
        return frame

    def pop(self, span: Span, context: ScanContext | None = None) -> ModeFrame:
        """Remove and return the innermost frame.

        Raises:
            MismatchedDelimiterError: If no region is open.
        """
        if not self._frames:
            raise MismatchedDelimiterError(
                "'|' closes a region but none is open", span, (), context
            )
        return self._frames.pop()

    def current_mode(self) -> Mode:
        """Innermost open mode, or Text at top level."""
        if self._frames:
            return self._frames[-1].mode
        return TEXT

    def close_if_command(self) -> ModeFrame | None:
        """Pop the innermost frame only if it is a Command frame."""
        if self._frames and self._frames[-1].mode.is_command:
            return self._frames.pop()
        return None

    @property
    def top(self) -> ModeFrame | None:
        return self._frames[-1] if self._frames else None

    def snapshot(self) -> tuple[ModeFrame, ...]:
        """Open frames, outermost first."""
        return tuple(self._frames)

    def reset(self) -> None:
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[ModeFrame]:
        return iter(self._frames)


class ModeStackMixin:
    """Mixin turning mode stack changes into region tokens."""

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _stack: ModeStack

    def _advance_to(self, end: int) -> None:
        """Advance position to end. Implemented by Lexer."""
        raise NotImplementedError

    def _span_from(self, start_pos: int) -> Span:
        """Span from the saved location to the current position. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        *,
        mode: Mode | None = None,
        blank_lines: int = 0,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _push_mode(self, mode: Mode, start_pos: int) -> Token:
        frame = self._stack.push(mode, self._span_from(start_pos))
        logger.debug("opened %s region at %s", mode, frame.opened_at)
        return self._make_token(
            TokenType.REGION_BEGIN, self._source[start_pos : self._pos], start_pos, mode=mode
        )

    def _pop_mode(self, start_pos: int, context: ScanContext) -> Token:
        frame = self._stack.pop(self._span_from(start_pos), context)
        logger.debug("closed %s", frame)
        return self._make_token(
            TokenType.REGION_END, self._source[start_pos : self._pos], start_pos, mode=frame.mode
        )

    def _close_if_command(self, start_pos: int) -> Token:
        """Close the innermost region if it is a command.

        Returns:
            REGION_END for the command, or an empty LITERAL when the
            innermost region is not a command.
        """
        frame = self._stack.close_if_command()
        if frame is None:
            return self._make_token(TokenType.LITERAL, "", start_pos)
        logger.debug("closed %s", frame)
        return self._make_token(
            TokenType.REGION_END, self._source[start_pos : self._pos], start_pos, mode=frame.mode
        )

    def _emit_marker(self, marker: Marker, start_pos: int, context: ScanContext) -> Token:
        """Commit a classified "|" marker and apply it to the stack."""
        self._advance_to(marker.end)
        kind = marker.kind
        if kind is MarkerKind.MATH:
            return self._push_mode(MATH, start_pos)
        if kind is MarkerKind.TEXT:
            return self._push_mode(TEXT, start_pos)
        if kind is MarkerKind.END:
            return self._close_if_command(start_pos)
        if kind is MarkerKind.CLOSE:
            return self._pop_mode(start_pos, context)
        # CALL and COMMAND open the same region; the token value keeps the form
        return self._push_mode(command(marker.name), start_pos)
