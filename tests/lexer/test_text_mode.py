"""Tests for text mode scanning rules."""

from __future__ import annotations

import pytest

from pipemark import (
    MATH,
    InvalidEscapeError,
    LexConfig,
    MismatchedDelimiterError,
    ScanContext,
    UnexpectedCharacterError,
    command,
    tokenize,
)
from pipemark.lexer import Lexer
from pipemark.tokens import TokenType

LIT = TokenType.LITERAL
EOF = TokenType.EOF


def summarize(source: str, **kwargs) -> list[tuple[TokenType, object]]:  # type: ignore[no-untyped-def]
    return [(t.type, t.payload) for t in tokenize(source, **kwargs)]


class TestLiteralRuns:
    def test_plain_text_is_one_literal(self) -> None:
        assert summarize("hello world") == [(LIT, "hello world"), (EOF, "")]

    def test_empty_source(self) -> None:
        assert summarize("") == [(EOF, "")]

    def test_slash_that_opens_nothing_stays_in_run(self) -> None:
        assert summarize("a/b and c/d") == [(LIT, "a/b and c/d"), (EOF, "")]

    def test_open_paren_is_its_own_literal(self) -> None:
        assert summarize("f(x)") == [(LIT, "f"), (LIT, "("), (LIT, "x)"), (EOF, "")]

    def test_run_stops_at_marker(self) -> None:
        tokens = tokenize("see |m x|")
        assert tokens[0].value == "see "


class TestPassthroughEscaping:
    @pytest.mark.parametrize(
        "char,expected",
        [("#", "\\#"), ("_", "\\_"), ("%", "\\%")],
    )
    def test_bare_character_is_escaped(self, char: str, expected: str) -> None:
        assert summarize(f"a{char}b") == [(LIT, "a"), (LIT, expected), (LIT, "b"), (EOF, "")]


class TestBackslashEscapes:
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("\\\\", "\\\\"),
            ("\\{", "\\{"),
            ("\\}", "\\}"),
            ("\\$", "\\$"),
            ('\\"', '"'),
            ("\\&", "\\&"),
            ("\\ ", "\\ "),
            ("\\'", "\\'"),
            ("\\`", "\\`"),
        ],
    )
    def test_supported_escape(self, source: str, expected: str) -> None:
        assert summarize(source) == [(LIT, expected), (EOF, "")]

    @pytest.mark.parametrize("source", ["\\q", "\\_", "\\n", "\\#"])
    def test_unsupported_escape_raises(self, source: str) -> None:
        with pytest.raises(InvalidEscapeError) as exc_info:
            tokenize(source)
        assert exc_info.value.context is ScanContext.TEXT

    def test_backslash_at_end_of_input(self) -> None:
        lexer = Lexer("abc\\")
        assert lexer.next_token().value == "abc"
        with pytest.raises(InvalidEscapeError):
            lexer.next_token()


class TestReservedCharacters:
    @pytest.mark.parametrize("char", ['"', "$", "{", "}", "<", "^"])
    def test_reserved_character_without_rule_raises(self, char: str) -> None:
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            tokenize(f"x{char}y")
        assert exc_info.value.context is ScanContext.TEXT
        assert exc_info.value.span.offset == 1


class TestNewlines:
    def test_plain_newline_is_a_literal(self) -> None:
        assert summarize("a\nb") == [(LIT, "a"), (LIT, "\n"), (LIT, "b"), (EOF, "")]

    def test_plain_newline_can_be_skipped(self) -> None:
        config = LexConfig(newline_literals=False)
        assert summarize("a\nb", config=config) == [(LIT, "a"), (LIT, "b"), (EOF, "")]

    def test_blank_line_is_paragraph_break(self) -> None:
        assert summarize("a\n\nb") == [
            (LIT, "a"),
            (TokenType.PARAGRAPH_BREAK, 2),
            (LIT, "b"),
            (EOF, ""),
        ]

    def test_paragraph_break_counts_every_newline(self) -> None:
        tokens = tokenize("a\n  \n\t\nb")
        assert tokens[1].type is TokenType.PARAGRAPH_BREAK
        assert tokens[1].blank_lines == 3
        assert tokens[1].value == "\n  \n\t\n"

    def test_indent_after_paragraph_break_stays_in_text(self) -> None:
        assert summarize("a\n\n  b") == [
            (LIT, "a"),
            (TokenType.PARAGRAPH_BREAK, 2),
            (LIT, "  b"),
            (EOF, ""),
        ]

    def test_paragraph_break_beats_tab_trigger(self) -> None:
        tokens = tokenize("a\n\t\nb")
        assert [t.type for t in tokens] == [LIT, TokenType.PARAGRAPH_BREAK, LIT, EOF]


class TestRegionMarkers:
    def test_math_region(self) -> None:
        assert summarize("x |m y|") == [
            (LIT, "x "),
            (TokenType.REGION_BEGIN, MATH),
            (LIT, "y"),
            (TokenType.REGION_END, MATH),
            (EOF, ""),
        ]

    def test_math_marker_wins_over_command_name(self) -> None:
        assert summarize("|mfoo|") == [
            (TokenType.REGION_BEGIN, MATH),
            (LIT, "foo"),
            (TokenType.REGION_END, MATH),
            (EOF, ""),
        ]

    def test_explicit_command_call(self) -> None:
        token = Lexer("|bold->").next_token()
        assert token.type is TokenType.REGION_BEGIN
        assert token.mode == command("bold")
        assert token.value == "|bold->"

    def test_implicit_command_call(self) -> None:
        token = Lexer("|bold").next_token()
        assert token.type is TokenType.REGION_BEGIN
        assert token.mode == command("bold")
        assert token.value == "|bold"

    def test_command_name_includes_spaces_and_dots(self) -> None:
        token = Lexer("|fig 2.1->").next_token()
        assert token.mode == command("fig 2.1")

    def test_text_switch_is_a_command_name_in_text(self) -> None:
        token = Lexer("|t").next_token()
        assert token.mode == command("t")

    def test_bar_before_space_opens_command(self) -> None:
        assert summarize("|m x| y\n|") == [
            (TokenType.REGION_BEGIN, MATH),
            (LIT, "x"),
            (TokenType.REGION_BEGIN, command(" y")),
            (TokenType.REGION_END, command(" y")),
            (LIT, "\n"),
            (TokenType.REGION_END, MATH),
            (EOF, ""),
        ]

    def test_end_marker_without_command_is_empty_literal(self) -> None:
        assert summarize("|END") == [(LIT, ""), (EOF, "")]

    def test_lone_close_at_top_level_is_mismatched(self) -> None:
        with pytest.raises(MismatchedDelimiterError) as exc_info:
            tokenize("text|")
        assert exc_info.value.stack_snapshot == ()
        assert exc_info.value.span.offset == 4


class TestComments:
    def test_block_comment_between_literals(self) -> None:
        assert summarize("a /* c */ b") == [
            (LIT, "a "),
            (TokenType.COMMENT, "/* c */"),
            (LIT, " b"),
            (EOF, ""),
        ]

    def test_one_line_comment_shorthand(self) -> None:
        assert summarize("//x\nrest") == [
            (TokenType.COMMENT, "//x\n"),
            (LIT, "rest"),
            (EOF, ""),
        ]

    def test_longer_double_slash_is_text(self) -> None:
        assert summarize("// note\n") == [(LIT, "// note"), (LIT, "\n"), (EOF, "")]
