"""At-sign scanner mixin: ``@<func>``, ``@[tag]`` and ``@name``."""

from __future__ import annotations

from writedown.errors import ParseError
from writedown.lexer.modes import AT_STRING_CHARS, ScanResult
from writedown.tokens import Token, TokenKind

# Opening bracket -> (closing bracket, token kind, construct name)
_DELIMITED = {
    "<": (">", TokenKind.FUNC, "function name"),
    "[": ("]", TokenKind.TAG, "tag"),
}


class AtSignScannerMixin:
    """Mixin providing scanning for constructs introduced by ``@``."""

    _source: str
    _source_len: int

    def _find_line_end(self, pos: int) -> int:
        """Find end of line starting at pos. Implemented by Tokenizer."""
        raise NotImplementedError

    def _unterminated(self, construct: str, offset: int, expected: str) -> ParseError:
        """Build an unterminated-construct error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_at_sign(self, pos: int) -> ScanResult:
        """Scan the construct starting with the ``@`` at pos.

        ``@<name>`` yields FUNC and ``@[name]`` yields TAG; the spans exclude
        the brackets and the closing bracket is skipped. Anything else yields
        AT_STRING over the following run of letters, digits, ``.`` and ``_``
        (which may be empty).

        Raises:
            UnterminatedConstructError: If the closing bracket is not found
                before the end of the line.
        """
        source = self._source
        start = pos + 1

        if start < self._source_len and source[start] in _DELIMITED:
            closer, kind, construct = _DELIMITED[source[start]]
            name_start = start + 1
            close = source.find(closer, name_start, self._find_line_end(name_start))
            if close == -1:
                raise self._unterminated(construct, pos, repr(closer))
            return Token(kind, name_start, close - name_start), close + 1

        end = start
        while end < self._source_len and source[end] in AT_STRING_CHARS:
            end += 1
        return Token(TokenKind.AT_STRING, start, end - start), end
