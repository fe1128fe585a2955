"""Math mode scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipemark.errors import LexError, ScanContext, UnexpectedCharacterError
from pipemark.lexer.classifiers.comment import CommentOpener
from pipemark.lexer.classifiers.marker import MATH_SWITCHES, Marker, MarkerKind
from pipemark.lexer.modes import (
    MATH_ESCAPES,
    MATH_PASSTHROUGH,
    MATH_RESERVED,
    MATH_UNEXPECTED,
)
from pipemark.tokens import Token, TokenType

if TYPE_CHECKING:
    from pipemark.lexer.modes import Mode


class MathScannerMixin:
    """Mixin providing math mode scanning logic.

    Mirrors text mode with these differences: |t switches to text instead
    of |m switching to math, there are no paragraph breaks, \\_ is an
    escape, only % is escaped bare, and _ and ^ are ordinary characters.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _advance_to(self, end: int) -> None:
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
        raise NotImplementedError

    def _error(
        self,
        error_type: type[LexError],
        message: str,
        start_pos: int,
        context: ScanContext | None,
    ) -> LexError:
        raise NotImplementedError

    def _find_run_end(self, start: int, reserved: frozenset[str]) -> int:
        raise NotImplementedError

    def _scan_newline(self, start_pos: int, context: ScanContext) -> Token | None:
        raise NotImplementedError

    def _scan_escape(
        self, start_pos: int, escapes: dict[str, str], context: ScanContext
    ) -> Token:
        raise NotImplementedError

    def _try_classify_comment_opener(self, pos: int) -> CommentOpener | None:
        raise NotImplementedError

    def _classify_marker(self, pos: int, switches: frozenset[MarkerKind]) -> Marker:
        raise NotImplementedError

    def _emit_marker(self, marker: Marker, start_pos: int, context: ScanContext) -> Token:
        raise NotImplementedError

    def _scan_comment(self, opener: CommentOpener) -> Token:
        raise NotImplementedError

    def _scan_math(self) -> Token | None:
        """Scan one token in math mode."""
        source = self._source
        start = self._pos
        char = source[start]

        if char == "|":
            marker = self._classify_marker(start, MATH_SWITCHES)
            return self._emit_marker(marker, start, ScanContext.MATH)

        if char == "\n":
            return self._scan_newline(start, ScanContext.MATH)

        if char in MATH_PASSTHROUGH:
            self._advance_to(start + 1)
            return self._make_token(TokenType.LITERAL, MATH_PASSTHROUGH[char], start)

        if char == "\\":
            return self._scan_escape(start, MATH_ESCAPES, ScanContext.MATH)

        if char == "/":
            opener = self._try_classify_comment_opener(start)
            if opener is not None:
                return self._scan_comment(opener)

        if char == "(":
            self._advance_to(start + 1)
            return self._make_token(TokenType.LITERAL, "(", start)

        if char in MATH_UNEXPECTED:
            self._advance_to(start + 1)
            raise self._error(
                UnexpectedCharacterError,
                f"reserved character {char!r} is not allowed in math",
                start,
                ScanContext.MATH,
            )

        end = self._find_run_end(start, MATH_RESERVED)
        self._advance_to(end)
        return self._make_token(TokenType.LITERAL, source[start:end], start)
