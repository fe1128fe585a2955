"""Region scanners for the pipemark lexer.

Each scanner is a mixin that produces one token for a specific region
(text, math, command body) or for a comment.
"""

from __future__ import annotations

from pipemark.lexer.scanners.command import CommandScannerMixin
from pipemark.lexer.scanners.comment import CommentScannerMixin
from pipemark.lexer.scanners.math import MathScannerMixin
from pipemark.lexer.scanners.text import TextScannerMixin

__all__ = [
    "CommandScannerMixin",
    "CommentScannerMixin",
    "MathScannerMixin",
    "TextScannerMixin",
]
