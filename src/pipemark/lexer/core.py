"""State-machine lexer for pipemark markup.

The lexer keeps a stack of open regions (text, math, command) and picks
the scanner for the innermost one each time a token is requested. Each
request consumes zero or more characters and returns exactly one token
or raises a LexError.

Thread Safety:
All state (position, mode stack, comment state) is instance-local.
Use one Lexer per lexing pass; never share an instance between threads.

"""

from __future__ import annotations

from collections.abc import Iterator

from pipemark.config import LexConfig, get_lex_config
from pipemark.errors import (
    InvalidEscapeError,
    LexError,
    ScanContext,
    UnexpectedEndOfInputError,
)
from pipemark.lexer.classifiers import (
    CommentClassifierMixin,
    EscapeClassifierMixin,
    MarkerClassifierMixin,
    NewlineClassifierMixin,
    NewlineKind,
)
from pipemark.lexer.modes import Mode, ModeFrame, ModeKind
from pipemark.lexer.scanners import (
    CommandScannerMixin,
    CommentScannerMixin,
    MathScannerMixin,
    TextScannerMixin,
)
from pipemark.lexer.stack import ModeStack, ModeStackMixin
from pipemark.lexer.state import CommentState
from pipemark.location import Span
from pipemark.tokens import Token, TokenType
from pipemark.utils.logger import get_logger

logger = get_logger(__name__)

_CONTEXT_FOR_KIND = {
    ModeKind.TEXT: ScanContext.TEXT,
    ModeKind.MATH: ScanContext.MATH,
    ModeKind.COMMAND: ScanContext.COMMAND,
}


class Lexer(
    # Classifiers (lookahead only, no position changes)
    MarkerClassifierMixin,
    EscapeClassifierMixin,
    NewlineClassifierMixin,
    CommentClassifierMixin,
    # Region bookkeeping
    ModeStackMixin,
    # Scanners (providers before the scanners that call them)
    CommentScannerMixin,
    CommandScannerMixin,
    MathScannerMixin,
    TextScannerMixin,
):
    """State-machine lexer for text, math and command regions.

    Usage:
            >>> lexer = Lexer("|m x |t y|")
            >>> lexer.next_token()
        Token(REGION_BEGIN, Math, 1:1)
            >>> lexer.next_token()
        Token(LITERAL, 'x ', 1:4)

    Thread Safety:
        One instance per lexing pass. Call reset() before reusing it.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_config",
        "_stack",
        "_comment",
        "_saved_lineno",
        "_saved_col",
        "_pending_newline",  # Newline owed after a command line closed
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for spans and errors
            config: Lexer options (defaults to the active context config)
        """
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()
        self._stack = ModeStack()
        self._comment = CommentState()
        self.reset(source)

    def reset(self, source: str | None = None) -> None:
        """Rewind to the start of input and clear all nesting state.

        Args:
            source: New source text (keeps the current source if None)
        """
        if source is not None:
            self._source = source
            self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._pending_newline = False
        self._stack.reset()
        self._comment.reset()

    # =========================================================================
    # Public API
    # =========================================================================

    def next_token(self) -> Token:
        """Produce the next token.

        At end of input with no region open this returns an EOF token
        (again on every further call).

        Raises:
            LexError: On any lexing failure. The pass cannot continue.
        """
        try:
            while True:
                token = self._dispatch_mode()
                if token is not None:
                    return token
        except LexError as err:
            logger.debug("lexing failed: %s", err.describe())
            raise

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream ending with EOF.

        Yields:
            Token objects one at a time, in source order

        Raises:
            LexError: On any lexing failure.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    @property
    def current_mode(self) -> Mode:
        return self._stack.current_mode()

    @property
    def mode_stack(self) -> tuple[ModeFrame, ...]:
        """Snapshot of the open regions, outermost first."""
        return self._stack.snapshot()

    @property
    def comment_depth(self) -> int:
        return self._comment.depth

    @property
    def config(self) -> LexConfig:
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _dispatch_mode(self) -> Token | None:
        """Run the scanner for the innermost region once."""
        self._save_location()
        if self._pending_newline:
            self._pending_newline = False
            return self._emit_newline(self._pos)
        if self._pos >= self._source_len:
            return self._scan_end_of_input()

        kind = self._stack.current_mode().kind
        if kind is ModeKind.TEXT:
            return self._scan_text()
        if kind is ModeKind.MATH:
            return self._scan_math()
        return self._scan_command()

    def _scan_end_of_input(self) -> Token:
        """EOF at top level; an error if any region is still open."""
        frame = self._stack.top
        if frame is None:
            return self._make_token(TokenType.EOF, "", self._pos)
        raise self._error(
            UnexpectedEndOfInputError,
            f"unexpected end of input: {frame} is never closed",
            self._pos,
            _CONTEXT_FOR_KIND[frame.mode.kind],
        )

    # =========================================================================
    # Rules shared by the region scanners
    # =========================================================================

    def _scan_newline(self, start_pos: int, context: ScanContext) -> Token | None:
        """Handle a newline in text or math mode.

        A paragraph break (text only) becomes PARAGRAPH_BREAK; a newline
        followed by tabs hands one token to the command scanner; anything
        else is a plain newline.
        """
        run = self._classify_newline(start_pos, allow_paragraph=context is ScanContext.TEXT)

        if run.kind is NewlineKind.PARAGRAPH:
            self._advance_to(run.end)
            return self._make_token(
                TokenType.PARAGRAPH_BREAK,
                self._source[start_pos : run.end],
                start_pos,
                blank_lines=run.newlines,
            )

        if run.kind is NewlineKind.COMMAND_TRIGGER:
            self._advance_to(run.end)
            self._save_location()
            if self._pos >= self._source_len:
                return self._scan_end_of_input()
            return self._scan_command()

        return self._scan_plain_newline(start_pos)

    def _scan_plain_newline(self, start_pos: int) -> Token | None:
        """Consume one newline, ending the current command line if any.

        A closed command yields a zero-width REGION_END at the newline;
        the newline itself follows on the next call.
        """
        closed = self._close_if_command(start_pos)
        if closed.type is TokenType.REGION_END:
            self._pending_newline = True
            return closed
        return self._emit_newline(start_pos)

    def _emit_newline(self, start_pos: int) -> Token | None:
        self._advance_to(start_pos + 1)
        if self._config.newline_literals:
            return self._make_token(TokenType.LITERAL, "\n", start_pos)
        return None

    def _scan_escape(
        self, start_pos: int, escapes: dict[str, str], context: ScanContext
    ) -> Token:
        """Substitute the backslash escape at start_pos.

        Raises:
            InvalidEscapeError: If the region does not support the sequence.
        """
        replacement = self._classify_escape(start_pos, escapes)
        end = min(start_pos + 2, self._source_len)
        self._advance_to(end)
        if replacement is None:
            sequence = self._source[start_pos:end]
            raise self._error(
                InvalidEscapeError,
                f"invalid escape sequence {sequence!r} in {str(context).lower()}",
                start_pos,
                context,
            )
        return self._make_token(TokenType.LITERAL, replacement, start_pos)

    def _find_run_end(self, start: int, reserved: frozenset[str]) -> int:
        """Find the end of a plain literal run.

        A run stops at a reserved character, at "|", and at a comment
        opener. A "/" that opens nothing stays in the run.
        """
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len:
            char = source[pos]
            if char in reserved or char == "|":
                break
            if char == "/" and self._try_classify_comment_opener(pos) is not None:
                break
            pos += 1
        return pos

    # =========================================================================
    # Position and location tracking
    # =========================================================================

    def _advance_to(self, end: int) -> None:
        """Move position to end, updating line and column.

        Uses str.count / str.rfind instead of a per-character loop.
        """
        if end <= self._pos:
            return
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count:
            self._lineno += newline_count
            self._col = len(segment) - segment.rfind("\n")
        else:
            self._col += len(segment)
        self._pos = end

    def _save_location(self) -> None:
        """Save current line/column as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _span_from(self, start_pos: int) -> Span:
        return Span(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            offset=start_pos,
            end_offset=self._pos,
            end_lineno=self._lineno,
            end_col_offset=self._col,
            source_file=self._source_file,
        )

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        *,
        mode: Mode | None = None,
        blank_lines: int = 0,
    ) -> Token:
        """Create a Token from the saved location to the current position."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            mode=mode,
            blank_lines=blank_lines,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _error(
        self,
        error_type: type[LexError],
        message: str,
        start_pos: int,
        context: ScanContext | None,
    ) -> LexError:
        """Build a LexError covering start_pos to the current position."""
        return error_type(message, self._span_from(start_pos), self._stack.snapshot(), context)
