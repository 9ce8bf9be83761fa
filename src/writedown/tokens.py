"""Token and TokenKind definitions for the writedown tokenizer.

Tokens are spans into the immutable source string. They never own text;
the tokenizer resolves a token to its slice with ``text_of``. Only the
parser promotes text into owned strings when it builds the tree.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token kinds produced by the tokenizer.

    The set is closed. Some kinds (COMMENT, INDENT, TAB_INDENT, LITERAL,
    MATH, UNKNOWN) are reserved by the language and have no scanning rule
    yet; the parser still knows how to treat them.

    """

    # Line structure
    COMMENT = auto()
    NEWLINE = auto()
    SENTENCE = auto()
    INDENT = auto()  # width in spaces
    TAB_INDENT = auto()  # width in tabs

    # Headings: = title, == title, ...
    TITLE = auto()

    LITERAL = auto()  # Str | Int | Float

    # At-sign constructs
    AT_STRING = auto()  # @name
    TAG = auto()  # @[name]
    FUNC = auto()  # @<name>
    FUNC_ARG_OPEN = auto()  # (
    FUNC_ARG_CLOSE = auto()  # )
    FUNC_ARG = auto()  # arg between ( , )
    FUNC_BLOCK = auto()  # {block}

    MATH = auto()  # $y = f(x)$

    # Code
    INLINE_CODE = auto()  # `code`
    CODE_BLOCK = auto()  # ```\n...\n```

    UNKNOWN = auto()


class LiteralKind(Enum):
    """Payload of a LITERAL token."""

    STR = auto()
    INT = auto()
    FLOAT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        start: Start offset in the source string
        length: Number of characters covered by the token
        level: Heading level for TITLE tokens (count of ``=``)
        width: Indent width for INDENT / TAB_INDENT tokens
        literal: Literal payload kind for LITERAL tokens

    For TITLE tokens the span covers the title name only.

    """

    kind: TokenKind
    start: int
    length: int
    level: int = 0
    width: int = 0
    literal: LiteralKind | None = None

    @property
    def end(self) -> int:
        """Offset one past the last character of the span."""
        return self.start + self.length

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        extra = f", level={self.level}" if self.kind is TokenKind.TITLE else ""
        return f"Token({self.kind.name}, {self.start}+{self.length}{extra})"
