"""Token serialization: JSON-compatible dicts for tokens and errors.

Lets a parser or editor running in another process consume the token
stream and lexing diagnostics.

All JSON output is deterministic (sorted keys).

Example:
    from pipemark import tokenize
    from pipemark.serialization import to_json, from_json

    tokens = tokenize("a |m x|")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from typing import Any

from pipemark.errors import LexError
from pipemark.lexer.modes import Mode, ModeFrame, ModeKind
from pipemark.location import Span
from pipemark.tokens import Token, TokenType


def _mode_to_dict(mode: Mode) -> dict[str, Any]:
    return {"kind": mode.kind.name, "name": mode.name}


def _mode_from_dict(data: dict[str, Any]) -> Mode:
    return Mode(ModeKind[data["kind"]], data.get("name", ""))


def _span_to_dict(span: Span) -> dict[str, Any]:
    return {
        "lineno": span.lineno,
        "col_offset": span.col_offset,
        "offset": span.offset,
        "end_offset": span.end_offset,
        "end_lineno": span.end_lineno,
        "end_col_offset": span.end_col_offset,
        "source_file": span.source_file,
    }


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict.

    Example:
        >>> from pipemark import tokenize
        >>> token_to_dict(tokenize("hi")[0])["type"]
        'LITERAL'
    """
    result: dict[str, Any] = {
        "type": token.type.name,
        "value": token.value,
        "span": _span_to_dict(token.span),
    }
    if token.mode is not None:
        result["mode"] = _mode_to_dict(token.mode)
    if token.type is TokenType.PARAGRAPH_BREAK:
        result["blank_lines"] = token.blank_lines
    return result


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a Token from token_to_dict() output.

    Raises:
        KeyError: If the token type or mode kind is unknown.
    """
    span = data["span"]
    mode = data.get("mode")
    return Token(
        type=TokenType[data["type"]],
        value=data["value"],
        _lineno=span["lineno"],
        _col=span["col_offset"],
        _start_offset=span["offset"],
        _end_offset=span["end_offset"],
        mode=_mode_from_dict(mode) if mode is not None else None,
        blank_lines=data.get("blank_lines", 0),
        _end_lineno=span.get("end_lineno"),
        _end_col=span.get("end_col_offset"),
        _source_file=span.get("source_file"),
    )


def error_to_dict(error: LexError) -> dict[str, Any]:
    """Convert a LexError to a JSON-compatible dict.

    The stack snapshot is listed outermost first.
    """
    return {
        "kind": error.kind.name,
        "context": error.context.name if error.context is not None else None,
        "message": error.message,
        "span": _span_to_dict(error.span),
        "stack": [_frame_to_dict(frame) for frame in error.stack_snapshot],
    }


def _frame_to_dict(frame: ModeFrame) -> dict[str, Any]:
    return {"mode": _mode_to_dict(frame.mode), "opened_at": _span_to_dict(frame.opened_at)}


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a list of tokens to a JSON string."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=indent, sort_keys=True)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON string produced by to_json()."""
    return [token_from_dict(item) for item in json.loads(json_str)]
