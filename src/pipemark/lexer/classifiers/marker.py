"""Region marker classifier mixin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pipemark.lexer.modes import COMMAND_NAME_CHARS


class MarkerKind(Enum):
    """Surface forms that start with "|"."""

    MATH = auto()  # |m
    TEXT = auto()  # |t
    END = auto()  # |END
    CALL = auto()  # |name->
    COMMAND = auto()  # |name
    CLOSE = auto()  # lone |


@dataclass(frozen=True, slots=True)
class Marker:
    kind: MarkerKind
    end: int
    name: str = ""


# Optional marker forms each region recognizes. |END and the lone close
# are recognized everywhere; command bodies cannot open commands.
TEXT_SWITCHES = frozenset({MarkerKind.MATH, MarkerKind.CALL, MarkerKind.COMMAND})
MATH_SWITCHES = frozenset({MarkerKind.TEXT, MarkerKind.CALL, MarkerKind.COMMAND})
COMMAND_SWITCHES = frozenset({MarkerKind.MATH, MarkerKind.TEXT})


class MarkerClassifierMixin:
    """Mixin providing "|" marker classification."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _classify_marker(self, pos: int, switches: frozenset[MarkerKind]) -> Marker:
        """Classify the marker starting at the "|" at pos.

        Forms are tried in order and the first match wins:
        |m / |t (plus one optional space), |END, |name->, |name, then a
        lone |. Forms other than |END and the lone | only match when the
        region lists them in switches.

        Args:
            pos: Position of the "|" character
            switches: Optional forms allowed in the current region

        Returns:
            The matched Marker (a lone | if nothing longer matches).
        """
        source = self._source
        after = pos + 1

        if MarkerKind.MATH in switches and source.startswith("m", after):
            return Marker(MarkerKind.MATH, self._skip_one_space(after + 1))
        if MarkerKind.TEXT in switches and source.startswith("t", after):
            return Marker(MarkerKind.TEXT, self._skip_one_space(after + 1))

        if source.startswith("END", after):
            return Marker(MarkerKind.END, after + 3)

        if MarkerKind.COMMAND not in switches:
            return Marker(MarkerKind.CLOSE, after)

        end = after
        source_len = self._source_len
        while end < source_len and source[end] in COMMAND_NAME_CHARS:
            end += 1
        if end > after:
            name = source[after:end]
            if source.startswith("->", end):
                return Marker(MarkerKind.CALL, end + 2, name)
            return Marker(MarkerKind.COMMAND, end, name)

        return Marker(MarkerKind.CLOSE, after)

    def _skip_one_space(self, pos: int) -> int:
        if pos < self._source_len and self._source[pos] == " ":
            return pos + 1
        return pos
