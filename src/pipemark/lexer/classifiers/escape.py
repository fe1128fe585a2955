"""Backslash escape classifier mixin."""

from __future__ import annotations


class EscapeClassifierMixin:
    """Mixin providing two-character escape classification."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _classify_escape(self, pos: int, escapes: dict[str, str]) -> str | None:
        """Look up the substitution for the backslash at pos.

        Args:
            pos: Position of the backslash
            escapes: Escape table of the current region

        Returns:
            Replacement text, or None if the sequence is not supported
            (including a backslash at end of input).
        """
        if pos + 1 >= self._source_len:
            return None
        return escapes.get(self._source[pos + 1])
