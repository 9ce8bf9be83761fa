"""Context-sensitive tokenizer with single-token lookahead.

The rule used to scan the next token depends on the kind of the token
emitted before it. That dependency is an explicit finite state machine:
``modes.mode_for`` maps the previous kind to a LexerMode, and a dispatch
table maps each mode to a scanner method.

Scanners are pure with respect to tokenizer state: they return the token
and the offset after it, and only ``advance`` commits. This is what makes
``peek`` idempotent.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from writedown.errors import ParseError, UnterminatedConstructError
from writedown.lexer.classifiers import TitleClassifierMixin
from writedown.lexer.modes import LexerMode, ScanResult, mode_for
from writedown.lexer.scanners import (
    AtSignScannerMixin,
    CodeScannerMixin,
    FuncScannerMixin,
    LineScannerMixin,
)
from writedown.location import SourceLocation
from writedown.tokens import Token, TokenKind

# Marks an empty lookahead cell (None is a valid cached value: end of input)
_NOT_PEEKED = object()


class Tokenizer(
    # Classifiers (pure logic, no position mutation)
    TitleClassifierMixin,
    # Scanners (mode-specific scanning logic)
    AtSignScannerMixin,
    CodeScannerMixin,
    LineScannerMixin,
    FuncScannerMixin,
):
    """Pull-based tokenizer for writedown markup.

    Usage:
            >>> tok = Tokenizer("= Intro\\nhello @<b>(x)\\n")
            >>> [t.kind.name for t in tok.tokenize()]
        ['TITLE', 'NEWLINE', 'SENTENCE', 'FUNC', 'FUNC_ARG_OPEN', 'FUNC_ARG',
         'FUNC_ARG_CLOSE', 'NEWLINE']

    Contract:
        - peek() returns the next token without consuming it (idempotent)
        - advance() consumes and returns it
        - both return None at end of input; malformed constructs raise
          ParseError subclasses instead of yielding a best-effort token

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_source_file",
        "_pos",
        "_prev_kind",  # Kind of the last emitted token; selects the mode
        "_peeked",  # Lookahead cell: ScanResult, None (end), or _NOT_PEEKED
        "_scanners",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._prev_kind = TokenKind.NEWLINE
        self._peeked: ScanResult | None | object = _NOT_PEEKED

        self._scanners: dict[LexerMode, Callable[[int], ScanResult]] = {
            LexerMode.LINE_START: self._scan_line_start,
            LexerMode.FUNC_NAME: self._scan_func_name_tail,
            LexerMode.FUNC_ARGS: self._scan_func_args,
            LexerMode.FUNC_TAIL: self._scan_func_tail,
            LexerMode.INLINE: self._scan_inline,
        }

    @property
    def source(self) -> str:
        """The source string tokens are resolved against."""
        return self._source

    @property
    def mode(self) -> LexerMode:
        """Mode that will be used to scan the next unpeeked token."""
        return mode_for(self._prev_kind)

    # =========================================================================
    # Public contract
    # =========================================================================

    def peek(self) -> Token | None:
        """Return the next token without consuming it.

        Computed on the first call and cached until advance().
        """
        if self._peeked is _NOT_PEEKED:
            self._peeked = self._compute_next()
        if self._peeked is None:
            return None
        return self._peeked[0]

    def advance(self) -> Token | None:
        """Consume and return the next token, or None at end of input."""
        if self._peeked is _NOT_PEEKED:
            result = self._compute_next()
        else:
            result = self._peeked
            self._peeked = _NOT_PEEKED

        if result is None:
            return None

        token, next_pos = result
        assert token.start >= self._pos, "token spans must move forward"
        self._pos = next_pos
        self._prev_kind = token.kind
        return token

    def text_of(self, token: Token) -> str:
        """Resolve a token to its slice of the source."""
        return self._source[token.start : token.end]

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until end of input.

        Complexity: O(n) where n = len(source)
        """
        while (token := self.advance()) is not None:
            yield token

    def location_of(self, offset: int, end_offset: int | None = None) -> SourceLocation:
        """Get the source location of an offset."""
        return SourceLocation.from_offset(
            self._source, offset, end_offset, source_file=self._source_file
        )

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _compute_next(self) -> ScanResult | None:
        """Scan the token at the cursor using the current mode's scanner.

        Pure: the cursor and previous kind are left untouched.
        """
        mode = mode_for(self._prev_kind)
        if self._pos >= self._source_len:
            if mode is LexerMode.FUNC_ARGS:
                raise self._unterminated("argument list", self._pos, "')'")
            return None
        return self._scanners[mode](self._pos)

    # =========================================================================
    # Helpers shared by scanners
    # =========================================================================

    def _find_line_end(self, pos: int) -> int:
        """Find the end of the line containing pos (offset of \\n or EOF)."""
        idx = self._source.find("\n", pos)
        return idx if idx != -1 else self._source_len

    def _find_content_end(self, pos: int) -> int:
        """Find the end of the line content at pos, excluding the \\r of a CRLF."""
        end = self._find_line_end(pos)
        if pos < end < self._source_len and self._source[end - 1] == "\r":
            return end - 1
        return end

    def _error(
        self,
        error_cls: type[ParseError],
        message: str,
        offset: int,
        expected: str | None = None,
    ) -> ParseError:
        """Build a ParseError located at offset."""
        loc = self.location_of(offset)
        return error_cls(
            message,
            offset=offset,
            expected=expected,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=self._source_file,
        )

    def _unterminated(self, construct: str, offset: int, expected: str) -> ParseError:
        """Build an UnterminatedConstructError for construct opened at offset."""
        return self._error(
            UnterminatedConstructError, f"unterminated {construct}", offset, expected
        )
