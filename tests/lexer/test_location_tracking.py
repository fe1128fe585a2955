"""Tests for token and error source locations."""

from __future__ import annotations

import pytest

from pipemark import InvalidEscapeError, LexError, Span, tokenize
from pipemark.tokens import TokenType


class TestTokenSpans:
    def test_positions_across_lines(self) -> None:
        tokens = tokenize("ab\ncd")
        assert [(t.value, t.lineno, t.col) for t in tokens] == [
            ("ab", 1, 1),
            ("\n", 1, 3),
            ("cd", 2, 1),
            ("", 2, 3),
        ]

    def test_offsets_cover_consumed_source(self) -> None:
        source = "ab\ncd"
        tokens = tokenize(source)
        assert [t.span.text(source) for t in tokens] == ["ab", "\n", "cd", ""]

    def test_region_begin_covers_marker_and_space(self) -> None:
        tokens = tokenize("x |m y|")
        begin = tokens[1]
        assert begin.type is TokenType.REGION_BEGIN
        assert (begin.span.offset, begin.span.end_offset) == (2, 5)
        assert begin.value == "|m "
        assert begin.col == 3

    def test_paragraph_break_span(self) -> None:
        tokens = tokenize("a\n\n\nb")
        brk = tokens[1]
        assert brk.type is TokenType.PARAGRAPH_BREAK
        assert brk.span.lineno == 1
        assert brk.span.col_offset == 2
        assert brk.span.end_lineno == 4
        assert brk.span.end_col_offset == 1
        assert tokens[2].lineno == 4

    def test_comment_spanning_lines(self) -> None:
        tokens = tokenize("/* a\nb */x")
        comment, literal = tokens[0], tokens[1]
        assert comment.span.end_lineno == 2
        assert (literal.lineno, literal.col) == (2, 5)

    def test_source_file_in_span(self) -> None:
        tokens = tokenize("hi", source_file="notes.pm")
        assert str(tokens[0].span) == "notes.pm:1:1"

    def test_span_is_cached(self) -> None:
        token = tokenize("hi")[0]
        assert token.span is token.span

    def test_tab_trigger_token_starts_after_tabs(self) -> None:
        tokens = tokenize("a\n\t|m x|")
        begin = tokens[1]
        assert begin.type is TokenType.REGION_BEGIN
        assert (begin.lineno, begin.col) == (2, 2)
        assert begin.span.offset == 3


class TestErrorSpans:
    def test_invalid_escape_span(self) -> None:
        with pytest.raises(InvalidEscapeError) as exc_info:
            tokenize("ab \\q")
        span = exc_info.value.span
        assert (span.lineno, span.col_offset) == (1, 4)
        assert (span.offset, span.end_offset) == (3, 5)

    def test_error_on_later_line(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("fine\nstill fine\nbad {")
        assert str(exc_info.value.span) == "3:5"

    def test_error_message_includes_source_file(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("|", source_file="doc.pm")
        assert str(exc_info.value).startswith("doc.pm:1:1 ")


class TestSpan:
    def test_length_and_text(self) -> None:
        span = Span(lineno=1, col_offset=3, offset=2, end_offset=5)
        assert span.length == 3
        assert span.text("x |m y") == "|m "

    def test_empty_span_has_zero_length(self) -> None:
        assert Span(1, 1, 4, 4).length == 0

    def test_span_to(self) -> None:
        start = Span(1, 1, 0, 2, 1, 3)
        end = Span(2, 4, 8, 10, 2, 6)
        joined = start.span_to(end)
        assert (joined.offset, joined.end_offset) == (0, 10)
        assert (joined.end_lineno, joined.end_col_offset) == (2, 6)

    def test_unknown(self) -> None:
        assert str(Span.unknown()) == "0:0"
