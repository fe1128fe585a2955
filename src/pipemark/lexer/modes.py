"""Lexer region modes and character constants.

This module defines the region kinds the lexer can be inside, the frames
kept on the mode stack, and the constant sets used to classify characters
in each region.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pipemark.location import Span


class ModeKind(Enum):
    """Kinds of lexical region.

    - TEXT: descriptive text (the implicit top-level region)
    - MATH: mathematical text
    - COMMAND: a named command body

    """

    TEXT = auto()
    MATH = auto()
    COMMAND = auto()


@dataclass(frozen=True, slots=True)
class Mode:
    """A region kind, plus the command name for COMMAND regions.

    Examples:
            >>> str(TEXT)
            'Text'
            >>> str(command("section"))
            'Command(section)'

    """

    kind: ModeKind
    name: str = ""

    @property
    def is_command(self) -> bool:
        return self.kind is ModeKind.COMMAND

    def __str__(self) -> str:
        if self.kind is ModeKind.COMMAND:
            return f"Command({self.name})"
        return self.kind.name.capitalize()


TEXT = Mode(ModeKind.TEXT)
MATH = Mode(ModeKind.MATH)


def command(name: str) -> Mode:
    """Mode for a named command region."""
    return Mode(ModeKind.COMMAND, name)


@dataclass(frozen=True, slots=True)
class ModeFrame:
    """A mode on the stack, with the span of the marker that opened it.

    The span is only used for diagnostics.
    """

    mode: Mode
    opened_at: Span

    def __str__(self) -> str:
        return f"{self.mode} region opened at {self.opened_at}"


# Characters that end a plain literal run. "|" and comment openers also
# end a run in every region.
TEXT_RESERVED = frozenset('"${<\n\\#_^}%(')
MATH_RESERVED = frozenset('"${\n\\}%(')

# Reserved characters that have no rule of their own in each region
TEXT_UNEXPECTED = frozenset('"${}<^')
MATH_UNEXPECTED = frozenset('"${}')

# Bare characters escaped for the target markup
TEXT_PASSTHROUGH = {"#": "\\#", "_": "\\_", "%": "\\%"}
MATH_PASSTHROUGH = {"%": "\\%"}

# Two-character escapes: character after the backslash -> substitution
TEXT_ESCAPES = {
    "\\": "\\\\",
    "{": "\\{",
    "}": "\\}",
    "$": "\\$",
    '"': '"',
    "&": "\\&",
    " ": "\\ ",
    "'": "\\'",
    "`": "\\`",
}
MATH_ESCAPES = {**TEXT_ESCAPES, "_": "\\_"}

# Command names: |NAME-> and |NAME
COMMAND_NAME_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789._ "
)

# Characters that need a closer look inside an open comment
COMMENT_SPECIAL = frozenset("*/\\")

# Horizontal whitespace allowed on a blank line of a paragraph break
BLANK_CHARS = frozenset(" \t")
