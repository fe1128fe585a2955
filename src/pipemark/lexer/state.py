"""Comment nesting state for one lexing pass."""

from __future__ import annotations


class CommentState:
    """Nesting depth and text accumulator for comments.

    The accumulator is cleared exactly when the depth goes from 0 to 1
    (start of an outermost comment). Reaching depth 0 again finalizes the
    comment; the depth never goes negative.

    Usage:
            >>> state = CommentState()
            >>> state.open("/*")
            >>> state.append(" a ")
            >>> state.close()
            True
            >>> state.finish()
            '/* a */'

    Thread Safety:
        Owned by a single Lexer. Never share between passes.

    """

    __slots__ = ("depth", "_parts")

    def __init__(self) -> None:
        self.depth: int = 0
        self._parts: list[str] = []

    def open(self, text: str = "/*") -> None:
        """Enter a comment (outermost or nested), recording its opener."""
        if self.depth == 0:
            self._parts.clear()
        self.depth += 1
        self._parts.append(text)

    def close(self) -> bool:
        """Record a */ and leave one nesting level.

        Returns:
            True if the outermost comment is now complete.

        Raises:
            ValueError: If no comment is open.
        """
        if self.depth == 0:
            raise ValueError("no open comment to close")
        self.depth -= 1
        self._parts.append("*/")
        return self.depth == 0

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def finish(self) -> str:
        """Take the accumulated comment text and clear the accumulator."""
        text = "".join(self._parts)
        self._parts.clear()
        return text

    def line_comment(self, text: str) -> str:
        """Open and immediately close a one-line comment."""
        self.open(text)
        self.depth -= 1
        return self.finish()

    def reset(self) -> None:
        self.depth = 0
        self._parts.clear()

    @property
    def is_open(self) -> bool:
        return self.depth > 0
