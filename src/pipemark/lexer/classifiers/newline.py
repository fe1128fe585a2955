"""Newline classifier mixin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pipemark.lexer.modes import BLANK_CHARS


class NewlineKind(Enum):
    PLAIN = auto()  # single \n
    PARAGRAPH = auto()  # \n, blank lines, closing \n
    COMMAND_TRIGGER = auto()  # \n followed by tabs


@dataclass(frozen=True, slots=True)
class NewlineRun:
    kind: NewlineKind
    end: int
    newlines: int = 1


class NewlineClassifierMixin:
    """Mixin providing newline classification.

    A paragraph break is a run of newlines, each optionally followed by
    spaces/tabs, that ends on a newline. It takes precedence over the
    tab-indented command trigger because it is always the longer match.
    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _classify_newline(self, pos: int, allow_paragraph: bool = True) -> NewlineRun:
        """Classify the newline at pos.

        Args:
            pos: Position of a "\\n" character
            allow_paragraph: Whether paragraph breaks exist in this region

        Returns:
            NewlineRun with the end of the match and the newline count.
        """
        source = self._source
        source_len = self._source_len

        if allow_paragraph:
            newlines = 0
            end = pos
            scan = pos
            while scan < source_len and source[scan] == "\n":
                newlines += 1
                scan += 1
                end = scan
                while scan < source_len and source[scan] in BLANK_CHARS:
                    scan += 1
            if newlines >= 2:
                return NewlineRun(NewlineKind.PARAGRAPH, end, newlines)

        tabs_end = pos + 1
        while tabs_end < source_len and source[tabs_end] == "\t":
            tabs_end += 1
        if tabs_end > pos + 1:
            return NewlineRun(NewlineKind.COMMAND_TRIGGER, tabs_end)

        return NewlineRun(NewlineKind.PLAIN, pos + 1)
