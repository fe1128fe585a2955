"""Text mode scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipemark.errors import LexError, ScanContext, UnexpectedCharacterError
from pipemark.lexer.classifiers.comment import CommentOpener
from pipemark.lexer.classifiers.marker import TEXT_SWITCHES, Marker, MarkerKind
from pipemark.lexer.modes import (
    TEXT_ESCAPES,
    TEXT_PASSTHROUGH,
    TEXT_RESERVED,
    TEXT_UNEXPECTED,
)
from pipemark.tokens import Token, TokenType

if TYPE_CHECKING:
    from pipemark.lexer.modes import Mode


class TextScannerMixin:
    """Mixin providing text mode scanning logic.

    Handles, by first character:
    - "|" markers (|m, |END, |name->, |name, lone |)
    - newlines (paragraph breaks, tab-indented command lines, plain)
    - bare # _ % (escaped for the target markup)
    - backslash escapes
    - comment openers
    - "(" and plain literal runs

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

    def _scan_text(self) -> Token | None:
        """Scan one token in text mode.

        Returns:
            The next token, or None if the input was consumed without
            producing one.
        """
        source = self._source
        start = self._pos
        char = source[start]

        if char == "|":
            marker = self._classify_marker(start, TEXT_SWITCHES)
            return self._emit_marker(marker, start, ScanContext.TEXT)

        if char == "\n":
            return self._scan_newline(start, ScanContext.TEXT)

        if char in TEXT_PASSTHROUGH:
            self._advance_to(start + 1)
            return self._make_token(TokenType.LITERAL, TEXT_PASSTHROUGH[char], start)

        if char == "\\":
            return self._scan_escape(start, TEXT_ESCAPES, ScanContext.TEXT)

        if char == "/":
            opener = self._try_classify_comment_opener(start)
            if opener is not None:
                return self._scan_comment(opener)

        if char == "(":
            self._advance_to(start + 1)
            return self._make_token(TokenType.LITERAL, "(", start)

        if char in TEXT_UNEXPECTED:
            self._advance_to(start + 1)
            raise self._error(
                UnexpectedCharacterError,
                f"reserved character {char!r} is not allowed in text",
                start,
                ScanContext.TEXT,
            )

        end = self._find_run_end(start, TEXT_RESERVED)
        self._advance_to(end)
        return self._make_token(TokenType.LITERAL, source[start:end], start)
