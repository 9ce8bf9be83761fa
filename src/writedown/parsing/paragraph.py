"""Paragraph assembly for the writedown parser.

A paragraph collects sentences and function calls until a blank line,
a title, a code block, or end of input. Single newlines are soft breaks
and stay inside the paragraph.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from writedown.nodes import FuncCall, Paragraph, ParagraphChild, Sentence
from writedown.tokens import TokenKind
from writedown.utils.logger import get_logger

if TYPE_CHECKING:
    from writedown.errors import ParseError
    from writedown.location import SourceLocation
    from writedown.tokens import Token

logger = get_logger(__name__)


class ParagraphParsingMixin:
    """Mixin providing paragraph and function call parsing.

    Required Host Attributes:
        - _text_transformer: Callable[[str], str] | None
        - _strip_args: bool

    """

    _text_transformer: Callable[[str], str] | None
    _strip_args: bool

    # Provided by TokenNavigationMixin
    def _peek(self) -> Token | None:
        raise NotImplementedError

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _text(self, token: Token) -> str:
        raise NotImplementedError

    def _location(self, token: Token) -> SourceLocation:
        raise NotImplementedError

    def _error(self, message: str, offset: int, expected: str | None = None) -> ParseError:
        raise NotImplementedError

    def _expect(self, kind: TokenKind, expected: str, offset: int) -> Token:
        raise NotImplementedError

    def _parse_paragraph(self) -> Paragraph | None:
        """Assemble one paragraph from the token stream.

        Returns:
            Paragraph, or None if no sentence or call was collected
        """
        children: list[ParagraphChild] = []

        while (token := self._peek()) is not None:
            kind = token.kind

            if kind is TokenKind.SENTENCE:
                self._advance()
                text = self._text(token)
                if self._text_transformer is not None:
                    text = self._text_transformer(text)
                children.append(Sentence(text=text, location=self._location(token)))
            elif kind is TokenKind.FUNC:
                children.append(self._parse_func_call())
            elif kind is TokenKind.NEWLINE:
                self._advance()
                following = self._peek()
                if following is not None and following.kind is TokenKind.NEWLINE:
                    self._advance()
                    break
            elif kind is TokenKind.TITLE or kind is TokenKind.CODE_BLOCK:
                break
            else:
                logger.debug(
                    "Ending paragraph at unsupported %s token (%s)",
                    kind.name,
                    self._location(token),
                )
                self._advance()
                break

        if not children:
            return None
        return Paragraph(children=tuple(children), location=children[0].location)

    def _parse_func_call(self) -> FuncCall:
        """Parse ``@<name>(args){block}`` starting at a FUNC token.

        The argument list is required unless a block follows the name
        directly; in that case the call has no arguments.

        Raises:
            ParseError: If neither ``(`` nor ``{`` follows the name, or the
                argument list is malformed, or a second block follows the first.
        """
        name_token = self._advance()
        assert name_token is not None and name_token.kind is TokenKind.FUNC
        name = self._text(name_token)
        args: list[str] = []

        following = self._peek()
        if following is not None and following.kind is TokenKind.FUNC_ARG_OPEN:
            self._advance()
            while True:
                token = self._peek()
                if token is not None and token.kind is TokenKind.FUNC_ARG:
                    self._advance()
                    arg = self._text(token)
                    args.append(arg.strip() if self._strip_args else arg)
                    continue
                self._expect(TokenKind.FUNC_ARG_CLOSE, "')'", name_token.end)
                break
        elif following is None or following.kind is not TokenKind.FUNC_BLOCK:
            offset = following.start if following is not None else name_token.end + 1
            raise self._error(f"function {name!r} has no argument list", offset, "'('")

        block: str | None = None
        following = self._peek()
        if following is not None and following.kind is TokenKind.FUNC_BLOCK:
            self._advance()
            block = self._text(following)
            extra = self._peek()
            if extra is not None and extra.kind is TokenKind.FUNC_BLOCK:
                # Block spans exclude the opening brace
                raise self._error(f"function {name!r} has more than one block", extra.start - 1)

        return FuncCall(
            name=name,
            args=tuple(args),
            block=block,
            location=self._location(name_token),
        )
