"""Token and TokenType definitions for the pipemark lexer.

The lexer produces a stream of Token objects that an external parser
consumes, one at a time, in source order.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates its Span on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pipemark.lexer.modes import Mode
    from pipemark.location import Span


class TokenType(Enum):
    """Token types produced by the lexer."""

    REGION_BEGIN = auto()  # |m  |t  |name->  |name
    REGION_END = auto()  # |  |END  end of a command line
    LITERAL = auto()  # verbatim or escape-substituted text
    PARAGRAPH_BREAK = auto()  # run of blank lines
    COMMENT = auto()  # /* ... */ with nested delimiters kept
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type
        value: Literal or comment text; the raw marker for region tokens;
            the consumed newlines and blanks for a paragraph break
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        mode: Region opened or closed (REGION_BEGIN / REGION_END only)
        blank_lines: Newlines consumed by a PARAGRAPH_BREAK
        _end_lineno: End line number
        _end_col: End column
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    mode: Mode | None = None
    blank_lines: int = 0
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    _span_cache: Span | None = field(default=None, repr=False, compare=False, hash=False)

    @property
    def span(self) -> Span:
        """Source span (lazily created and cached)."""
        if self._span_cache is not None:
            return self._span_cache

        from pipemark.location import Span

        span = Span(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_span_cache", span)
        return span

    @property
    def payload(self) -> Mode | int | str | None:
        """The token's meaningful content.

        Mode for region tokens, blank-line count for paragraph breaks,
        text otherwise.
        """
        if self.type is TokenType.REGION_BEGIN or self.type is TokenType.REGION_END:
            return self.mode
        if self.type is TokenType.PARAGRAPH_BREAK:
            return self.blank_lines
        return self.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.mode is not None:
            detail = str(self.mode)
        elif self.type is TokenType.PARAGRAPH_BREAK:
            detail = str(self.blank_lines)
        else:
            val = self.value
            if len(val) > 20:
                val = val[:17] + "..."
            detail = repr(val)
        return f"Token({self.type.name}, {detail}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col
