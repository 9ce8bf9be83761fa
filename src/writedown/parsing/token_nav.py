"""Token navigation utilities for the writedown parser.

Provides the parser's view of the tokenizer: peek/advance, text promotion
and located errors. The parser never looks at raw characters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from writedown.errors import ParseError
from writedown.tokens import Token, TokenKind

if TYPE_CHECKING:
    from writedown.lexer import Tokenizer
    from writedown.location import SourceLocation


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokenizer: Tokenizer (exclusively owned for the parse)

    """

    _tokenizer: Tokenizer

    def _peek(self) -> Token | None:
        """Next token without consuming it."""
        return self._tokenizer.peek()

    def _advance(self) -> Token | None:
        """Consume and return the next token."""
        return self._tokenizer.advance()

    def _text(self, token: Token) -> str:
        """Copy a token's text out of the source."""
        return self._tokenizer.text_of(token)

    def _location(self, token: Token) -> SourceLocation:
        """Source location covering a token's span."""
        return self._tokenizer.location_of(token.start, token.end)

    def _error(
        self,
        message: str,
        offset: int,
        expected: str | None = None,
    ) -> ParseError:
        """Build a ParseError located at offset."""
        loc = self._tokenizer.location_of(offset)
        return ParseError(
            message,
            offset=offset,
            expected=expected,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=loc.source_file,
        )

    def _expect(self, kind: TokenKind, expected: str, offset: int) -> Token:
        """Consume a token of the given kind or raise.

        Args:
            kind: Required token kind
            expected: Human-readable name of the construct for the error
            offset: Offset to report if the stream ends here
        """
        token = self._peek()
        if token is None:
            raise self._error("unexpected end of input", offset, expected)
        if token.kind is not kind:
            raise self._error(f"unexpected {token.kind.name} token", token.start, expected)
        self._advance()
        return token
