"""Command body scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipemark.config import LexConfig
from pipemark.errors import ScanContext
from pipemark.lexer.classifiers.comment import CommentOpener
from pipemark.lexer.classifiers.marker import COMMAND_SWITCHES, Marker, MarkerKind
from pipemark.lexer.state import CommentState
from pipemark.tokens import Token, TokenType
from pipemark.utils.logger import get_logger

if TYPE_CHECKING:
    from pipemark.lexer.modes import Mode

logger = get_logger(__name__)

# A command body literal run ends at a newline (plus "|" and comment openers)
COMMAND_RESERVED = frozenset("\n")


class CommandScannerMixin:
    """Mixin providing command body scanning logic.

    Entered when the innermost region is a command, or for one token after
    a tab-indented line start. Recognizes comment openers, "|" markers and
    newlines. Any other character opens a comment and is read up to the
    next */ unless LexConfig.command_fallthrough is off, in which case the
    characters come back as a literal run.

    "|" markers are limited to |m, |t, |END and the lone close; a
    command body cannot open another command. A newline only ends the
    command line, so tabs on the following line are not a command
    trigger and belong to the enclosing region.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _config: LexConfig
    _comment: CommentState

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

    def _find_run_end(self, start: int, reserved: frozenset[str]) -> int:
        raise NotImplementedError

    def _scan_plain_newline(self, start_pos: int) -> Token | None:
        raise NotImplementedError

    # Provided by classifier mixins, the mode stack mixin and the comment scanner
    def _try_classify_comment_opener(self, pos: int) -> CommentOpener | None:
        raise NotImplementedError

    def _classify_marker(self, pos: int, switches: frozenset[MarkerKind]) -> Marker:
        raise NotImplementedError

    def _emit_marker(self, marker: Marker, start_pos: int, context: ScanContext) -> Token:
        raise NotImplementedError

    def _scan_comment(self, opener: CommentOpener) -> Token:
        raise NotImplementedError

    def _scan_comment_body(self, start_pos: int) -> Token:
        raise NotImplementedError

    def _scan_command(self) -> Token | None:
        """Scan one token of a command body.

        Returns:
            The next token, or None if the input was consumed without
            producing one.
        """
        source = self._source
        start = self._pos
        char = source[start]

        if char == "/":
            opener = self._try_classify_comment_opener(start)
            if opener is not None:
                return self._scan_comment(opener)

        if char == "|":
            marker = self._classify_marker(start, COMMAND_SWITCHES)
            return self._emit_marker(marker, start, ScanContext.COMMAND)

        if char == "\n":
            return self._scan_plain_newline(start)

        if self._config.command_fallthrough:
            logger.debug("command body character %r at offset %d opens a comment", char, start)
            self._comment.open(char)
            self._advance_to(start + 1)
            return self._scan_comment_body(start)

        end = self._find_run_end(start, COMMAND_RESERVED)
        self._advance_to(end)
        return self._make_token(TokenType.LITERAL, source[start:end], start)
