"""Source spans for tokens and error messages.

Provides the Span dataclass used by every token and every LexError.
Offsets are 0-indexed positions into the source string; line and column
numbers are 1-indexed.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """A region of source text.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the source string
        end_offset: Absolute end offset (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional)

    Examples:
            >>> span = Span(lineno=3, col_offset=7, offset=20, end_offset=22)
            >>> str(span)
            '3:7'

            >>> Span(1, 1, source_file="notes.pm").__str__()
            'notes.pm:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return max(self.end_offset - self.offset, 0)

    def span_to(self, end: Span) -> Span:
        """Create a new span from the start of this one to the end of end."""
        return Span(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    def text(self, source: str) -> str:
        """Slice the covered text out of source."""
        return source[self.offset : self.end_offset]

    @classmethod
    def unknown(cls) -> Span:
        """Placeholder span for synthesized values."""
        return cls(lineno=0, col_offset=0)
