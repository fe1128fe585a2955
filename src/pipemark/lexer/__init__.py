"""State-machine lexer for pipemark markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Mode, ModeKind, ModeFrame, ModeStack
├── core.py              # Lexer class (mixin composition + dispatch + navigation)
├── modes.py             # ModeKind, Mode, ModeFrame, character sets, escape tables
├── stack.py             # ModeStack + region token mixin
├── state.py             # CommentState (nesting depth + accumulator)
├── classifiers/         # Lookahead mixins
│   ├── marker.py        # |m |t |END |name-> |name |
│   ├── escape.py        # backslash escapes
│   ├── newline.py       # paragraph breaks, tab-indented command lines
│   └── comment.py       # /* and // openers
└── scanners/            # One token per call
    ├── text.py          # Text mode
    ├── math.py          # Math mode
    ├── command.py       # Command bodies
    └── comment.py       # Nested comments

Usage:
    >>> from pipemark.lexer import Lexer
    >>> for token in Lexer("a |m x|").tokenize():
    ...     print(token)
Token(LITERAL, 'a ', 1:1)
Token(REGION_BEGIN, Math, 1:3)
Token(LITERAL, 'x', 1:6)
Token(REGION_END, Math, 1:7)
Token(EOF, '', 1:8)

"""

from pipemark.lexer.core import Lexer
from pipemark.lexer.modes import MATH, TEXT, Mode, ModeFrame, ModeKind, command
from pipemark.lexer.stack import ModeStack
from pipemark.lexer.state import CommentState

__all__ = [
    "MATH",
    "TEXT",
    "CommentState",
    "Lexer",
    "Mode",
    "ModeFrame",
    "ModeKind",
    "ModeStack",
    "command",
]
