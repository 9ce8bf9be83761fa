"""Function call scanner mixin: argument lists and blocks."""

from __future__ import annotations

from writedown.errors import ParseError
from writedown.lexer.modes import INLINE_SPACE, ScanResult
from writedown.tokens import Token, TokenKind


class FuncScannerMixin:
    """Mixin providing FUNC_NAME, FUNC_ARGS and FUNC_TAIL mode scanning.

    Covers everything after ``@<name>``::

        @<name>(arg1, arg2){block}{block}

    """

    _source: str
    _source_len: int

    def _scan_inline(self, pos: int) -> ScanResult:
        """Generic scanning. Implemented by LineScannerMixin."""
        raise NotImplementedError

    def _unterminated(self, construct: str, offset: int, expected: str) -> ParseError:
        """Build an unterminated-construct error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _skip_inline_space(self, pos: int) -> int:
        """Return the first offset at or after pos that is not a space or tab."""
        while pos < self._source_len and self._source[pos] in INLINE_SPACE:
            pos += 1
        return pos

    def _scan_func_name_tail(self, pos: int) -> ScanResult:
        """Scan right after a function name: ``(``, ``{`` or generic text."""
        char = self._source[pos]
        if char == "(":
            return Token(TokenKind.FUNC_ARG_OPEN, pos, 1), self._skip_inline_space(pos + 1)
        if char == "{":
            return self._scan_func_block(pos)
        return self._scan_inline(pos)

    def _scan_func_args(self, pos: int) -> ScanResult:
        """Scan inside an argument list: ``)`` or one argument.

        An argument runs up to the next ``,`` or ``)``, delimiter excluded.
        A following ``,`` and the spaces after it are skipped.

        Raises:
            UnterminatedConstructError: If the line ends before ``)``.
        """
        source = self._source
        if source[pos] == ")":
            return Token(TokenKind.FUNC_ARG_CLOSE, pos, 1), pos + 1

        end = pos
        while end < self._source_len and source[end] not in ",)\n":
            end += 1
        if end >= self._source_len or source[end] == "\n":
            raise self._unterminated("argument list", pos, "')'")

        token = Token(TokenKind.FUNC_ARG, pos, end - pos)
        if source[end] == ",":
            return token, self._skip_inline_space(end + 1)
        return token, end

    def _scan_func_tail(self, pos: int) -> ScanResult:
        """Scan after ``)`` or a block: another block or generic text."""
        if self._source[pos] == "{":
            return self._scan_func_block(pos)
        return self._scan_inline(pos)

    def _scan_func_block(self, pos: int) -> ScanResult:
        """Scan ``{...}`` with nested braces; the span excludes the braces.

        Blocks may span several lines.

        Raises:
            UnterminatedConstructError: If the braces never balance.
        """
        source = self._source
        depth = 0
        cur = pos
        while cur < self._source_len:
            char = source[cur]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return Token(TokenKind.FUNC_BLOCK, pos + 1, cur - pos - 1), cur + 1
            cur += 1
        raise self._unterminated("function block", pos, "'}'")
