"""Tokenizer operating modes and character sets.

The tokenizer picks its next scanning rule from the kind of the token it
emitted last. This module holds that finite state machine as data: the
modes, and the table mapping a previous token kind to a mode.
"""

from __future__ import annotations

import string
from enum import Enum, auto
from typing import TypeAlias

from writedown.tokens import Token, TokenKind

# A scanned token plus the cursor offset after it (closing delimiters skipped)
ScanResult: TypeAlias = tuple[Token, int]


class LexerMode(Enum):
    """Tokenizer operating modes.

    - LINE_START: start of input or just after a newline
    - FUNC_NAME: just after ``@<name>``
    - FUNC_ARGS: inside an argument list
    - FUNC_TAIL: after ``)`` or a ``{block}``, where another block may follow
    - INLINE: anywhere else on a line

    """

    LINE_START = auto()
    FUNC_NAME = auto()
    FUNC_ARGS = auto()
    FUNC_TAIL = auto()
    INLINE = auto()


# Previous token kind -> mode. Kinds not listed select INLINE.
MODE_BY_KIND: dict[TokenKind, LexerMode] = {
    TokenKind.NEWLINE: LexerMode.LINE_START,
    TokenKind.FUNC: LexerMode.FUNC_NAME,
    TokenKind.FUNC_ARG_OPEN: LexerMode.FUNC_ARGS,
    TokenKind.FUNC_ARG: LexerMode.FUNC_ARGS,
    TokenKind.FUNC_ARG_CLOSE: LexerMode.FUNC_TAIL,
    TokenKind.FUNC_BLOCK: LexerMode.FUNC_TAIL,
}


def mode_for(kind: TokenKind) -> LexerMode:
    """Return the scanning mode selected by the previously emitted kind."""
    return MODE_BY_KIND.get(kind, LexerMode.INLINE)


# Characters allowed in @name / @user@domain runs
AT_STRING_CHARS = frozenset(string.ascii_letters + string.digits + "._")

# Horizontal whitespace skipped after "(" and ","
INLINE_SPACE = frozenset(" \t")

# Whitespace that lets an "@" end a sentence early
SENTENCE_BREAK_SPACE = frozenset(" \t")

TITLE_MARKER = "="
FENCE = "```"
