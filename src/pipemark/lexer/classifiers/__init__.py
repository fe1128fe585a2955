"""Lookahead classifiers for the pipemark lexer.

Each classifier is a mixin that inspects the source at a position and
reports what it found. Classifiers never move the lexer position; the
scanners commit.
"""

from pipemark.lexer.classifiers.comment import (
    CommentClassifierMixin,
    CommentKind,
    CommentOpener,
)
from pipemark.lexer.classifiers.escape import EscapeClassifierMixin
from pipemark.lexer.classifiers.marker import (
    COMMAND_SWITCHES,
    MATH_SWITCHES,
    TEXT_SWITCHES,
    Marker,
    MarkerClassifierMixin,
    MarkerKind,
)
from pipemark.lexer.classifiers.newline import (
    NewlineClassifierMixin,
    NewlineKind,
    NewlineRun,
)

__all__ = [
    "COMMAND_SWITCHES",
    "CommentClassifierMixin",
    "CommentKind",
    "CommentOpener",
    "EscapeClassifierMixin",
    "MATH_SWITCHES",
    "Marker",
    "MarkerClassifierMixin",
    "MarkerKind",
    "NewlineClassifierMixin",
    "NewlineKind",
    "NewlineRun",
    "TEXT_SWITCHES",
]
