"""Tests for command body scanning.

Command bodies only recognize comment openers, "|" markers and newlines.
Any other character opens a comment that runs to the next */ unless
command_fallthrough is turned off.
"""

from __future__ import annotations

import pytest

from pipemark import (
    MATH,
    LexConfig,
    ScanContext,
    UnexpectedEndOfInputError,
    command,
    tokenize,
)
from pipemark.lexer import Lexer
from pipemark.tokens import TokenType

LIT = TokenType.LITERAL
BEGIN = TokenType.REGION_BEGIN
END = TokenType.REGION_END
EOF = TokenType.EOF

NOTE = command("note")
NO_FALLTHROUGH = LexConfig(command_fallthrough=False)


def summarize(source: str, config: LexConfig | None = None) -> list[tuple[TokenType, object]]:
    return [(t.type, t.payload) for t in tokenize(source, config=config)]


class TestCommandLines:
    def test_newline_closes_command(self) -> None:
        assert summarize("|note->\nafter") == [
            (BEGIN, NOTE),
            (END, NOTE),
            (LIT, "\n"),
            (LIT, "after"),
            (EOF, ""),
        ]

    def test_end_marker_closes_command(self) -> None:
        tokens = tokenize("|note->|END rest", config=NO_FALLTHROUGH)
        assert [(t.type, t.payload) for t in tokens] == [
            (BEGIN, NOTE),
            (END, NOTE),
            (LIT, " rest"),
            (EOF, ""),
        ]
        assert tokens[1].value == "|END"

    def test_math_inside_command(self) -> None:
        assert summarize("|note->|m x|\n") == [
            (BEGIN, NOTE),
            (BEGIN, MATH),
            (LIT, "x"),
            (END, MATH),
            (END, NOTE),
            (LIT, "\n"),
            (EOF, ""),
        ]

    def test_bar_before_name_closes_command(self) -> None:
        lexer = Lexer("|a->|b */")
        tokens = list(lexer.tokenize())
        assert [(t.type, t.payload) for t in tokens] == [
            (BEGIN, command("a")),
            (END, command("a")),
            (LIT, "b */"),
            (EOF, ""),
        ]
        assert tokens[1].value == "|"

    def test_command_body_cannot_open_command(self) -> None:
        assert summarize("|a->|b->\n", NO_FALLTHROUGH) == [
            (BEGIN, command("a")),
            (END, command("a")),
            (LIT, "b->"),
            (LIT, "\n"),
            (EOF, ""),
        ]

    def test_newline_ending_command_is_kept_as_literal(self) -> None:
        source = "|a->|END x\n|b->\nz"
        tokens = tokenize(source, config=NO_FALLTHROUGH)
        literals = "".join(t.value for t in tokens if t.type is LIT)
        assert literals == " x\n\nz"
        assert literals.count("\n") == source.count("\n")

    def test_region_end_at_newline_is_zero_width(self) -> None:
        tokens = tokenize("|note->\nafter")
        end, newline = tokens[1], tokens[2]
        assert end.type is END
        assert end.value == ""
        assert (end.span.offset, end.span.end_offset) == (7, 7)
        assert newline.value == "\n"
        assert (newline.span.offset, newline.span.end_offset) == (7, 8)

    def test_newline_after_command_can_be_skipped(self) -> None:
        config = LexConfig(newline_literals=False)
        assert summarize("|note->\nafter", config) == [
            (BEGIN, NOTE),
            (END, NOTE),
            (LIT, "after"),
            (EOF, ""),
        ]

    def test_tabs_after_command_line_stay_in_text(self) -> None:
        assert summarize("|note->\n\tx")[2:] == [
            (LIT, "\n"),
            (LIT, "\tx"),
            (EOF, ""),
        ]

    def test_input_ending_inside_command(self) -> None:
        lexer = Lexer("|note->")
        lexer.next_token()
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            lexer.next_token()
        assert exc_info.value.context is ScanContext.COMMAND
        assert [f.mode for f in exc_info.value.stack_snapshot] == [NOTE]


class TestCommandFallthrough:
    def test_unrecognized_text_reads_to_comment_close(self) -> None:
        assert summarize("|note-> hi */\nafter") == [
            (BEGIN, NOTE),
            (TokenType.COMMENT, " hi */"),
            (END, NOTE),
            (LIT, "\n"),
            (LIT, "after"),
            (EOF, ""),
        ]

    def test_unterminated_fallthrough_is_comment_error(self) -> None:
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            tokenize("|note-> hi\n")
        assert exc_info.value.context is ScanContext.COMMENT
        assert [f.mode for f in exc_info.value.stack_snapshot] == [NOTE]

    def test_fallthrough_disabled_returns_literal(self) -> None:
        assert summarize("|note-> hi there\nafter", NO_FALLTHROUGH) == [
            (BEGIN, NOTE),
            (LIT, " hi there"),
            (END, NOTE),
            (LIT, "\n"),
            (LIT, "after"),
            (EOF, ""),
        ]

    def test_fallthrough_disabled_still_sees_comments(self) -> None:
        assert summarize("|note-> a /* b */\n", NO_FALLTHROUGH)[1:4] == [
            (LIT, " a "),
            (TokenType.COMMENT, "/* b */"),
            (END, NOTE),
        ]


class TestTabIndentedLines:
    def test_tab_line_is_scanned_as_command(self) -> None:
        assert summarize("a\n\t|m x|") == [
            (LIT, "a"),
            (BEGIN, MATH),
            (LIT, "x"),
            (END, MATH),
            (EOF, ""),
        ]

    def test_tab_line_text_falls_through(self) -> None:
        assert summarize("a\n\t\tb*/") == [
            (LIT, "a"),
            (TokenType.COMMENT, "b*/"),
            (EOF, ""),
        ]

    def test_tab_line_does_not_push_a_frame(self) -> None:
        lexer = Lexer("a\n\t/* c */ rest", config=NO_FALLTHROUGH)
        lexer.next_token()
        assert lexer.next_token().type is TokenType.COMMENT
        assert lexer.mode_stack == ()

    def test_tabs_at_end_of_input(self) -> None:
        assert summarize("a\n\t") == [(LIT, "a"), (EOF, "")]
