"""Comment scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipemark.errors import LexError, ScanContext, UnexpectedEndOfInputError
from pipemark.lexer.classifiers.comment import CommentKind, CommentOpener
from pipemark.lexer.modes import COMMENT_SPECIAL
from pipemark.lexer.state import CommentState
from pipemark.tokens import Token, TokenType

if TYPE_CHECKING:
    from pipemark.lexer.modes import Mode


class CommentScannerMixin:
    """Mixin providing comment scanning logic.

    Block comments nest. One COMMENT token is produced per outermost
    comment, holding the full text with every nested delimiter. Inside a
    comment the escaped quote \\" is kept as a bare quote.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _comment: CommentState

    def _advance_to(self, end: int) -> None:
        """Advance position to end. Implemented by Lexer."""
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

    def _error(
        self,
        error_type: type[LexError],
        message: str,
        start_pos: int,
        context: ScanContext | None,
    ) -> LexError:
        """Build a LexError at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_comment(self, opener: CommentOpener) -> Token:
        """Scan a comment starting at the current position.

        Args:
            opener: Classified comment opener at the current position

        Returns:
            COMMENT token for the complete outermost comment.
        """
        start = self._pos
        text = self._source[start : opener.end]
        self._advance_to(opener.end)

        if opener.kind is CommentKind.LINE:
            return self._make_token(TokenType.COMMENT, self._comment.line_comment(text), start)

        self._comment.open(text)
        return self._scan_comment_body(start)

    def _scan_comment_body(self, start_pos: int) -> Token:
        """Accumulate an open comment until its nesting depth returns to 0.

        Args:
            start_pos: Where the outermost comment started

        Raises:
            UnexpectedEndOfInputError: If input ends inside the comment.
        """
        source = self._source
        source_len = self._source_len
        state = self._comment
        pos = self._pos

        while pos < source_len:
            char = source[pos]
            if char not in COMMENT_SPECIAL:
                run_start = pos
                while pos < source_len and source[pos] not in COMMENT_SPECIAL:
                    pos += 1
                state.append(source[run_start:pos])
                continue

            if source.startswith("*/", pos):
                pos += 2
                if state.close():
                    self._advance_to(pos)
                    return self._make_token(TokenType.COMMENT, state.finish(), start_pos)
            elif source.startswith("/*", pos):
                state.open("/*")
                pos += 2
            elif source.startswith('\\"', pos):
                state.append('"')
                pos += 2
            else:
                state.append(char)
                pos += 1

        self._advance_to(pos)
        raise self._error(
            UnexpectedEndOfInputError,
            "unexpected end of input inside comment",
            start_pos,
            ScanContext.COMMENT,
        )
