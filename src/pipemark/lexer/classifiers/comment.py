"""Comment opener classifier mixin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CommentKind(Enum):
    BLOCK = auto()  # /* ... */, nestable
    LINE = auto()  # // + one character + newline


@dataclass(frozen=True, slots=True)
class CommentOpener:
    kind: CommentKind
    end: int


class CommentClassifierMixin:
    """Mixin providing comment opener classification."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _try_classify_comment_opener(self, pos: int) -> CommentOpener | None:
        """Try to classify the "/" at pos as a comment opener.

        Returns:
            CommentOpener for "/*" or a complete one-line comment,
            None otherwise.
        """
        source = self._source
        if source.startswith("/*", pos):
            return CommentOpener(CommentKind.BLOCK, pos + 2)
        if (
            source.startswith("//", pos)
            and pos + 3 < self._source_len
            and source[pos + 3] == "\n"
        ):
            return CommentOpener(CommentKind.LINE, pos + 4)
        return None
