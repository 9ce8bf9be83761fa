"""Code scanner mixin: inline code spans and fenced code blocks."""

from __future__ import annotations

from writedown.errors import ParseError, UnsupportedSyntaxError
from writedown.lexer.modes import FENCE, ScanResult
from writedown.tokens import Token, TokenKind


class CodeScannerMixin:
    """Mixin providing scanning for constructs introduced by a backtick.

    Only reached from LINE_START mode: code is recognized when it opens a line.

    """

    _source: str
    _source_len: int

    def _find_line_end(self, pos: int) -> int:
        """Find end of line starting at pos. Implemented by Tokenizer."""
        raise NotImplementedError

    def _unterminated(self, construct: str, offset: int, expected: str) -> ParseError:
        """Build an unterminated-construct error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _error(
        self,
        error_cls: type[ParseError],
        message: str,
        offset: int,
        expected: str | None = None,
    ) -> ParseError:
        """Build a located parse error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _scan_code(self, pos: int) -> ScanResult:
        """Scan inline code or a fenced block starting at the backtick at pos."""
        if pos + 1 < self._source_len and self._source[pos + 1] == "`":
            return self._scan_code_block(pos)
        return self._scan_inline_code(pos)

    def _scan_inline_code(self, pos: int) -> ScanResult:
        """Scan `code` up to the next backtick not escaped by a backslash.

        Raises:
            UnterminatedConstructError: If no closing backtick exists.
        """
        source = self._source
        body_start = pos + 1
        search = body_start
        while True:
            close = source.find("`", search)
            if close == -1:
                raise self._unterminated("inline code", pos, "'`'")
            backslashes = 0
            while close - backslashes - 1 >= body_start and source[close - backslashes - 1] == "\\":
                backslashes += 1
            if backslashes % 2 == 0:
                break
            search = close + 1

        return Token(TokenKind.INLINE_CODE, body_start, close - body_start), close + 1

    def _scan_code_block(self, pos: int) -> ScanResult:
        """Scan a fenced code block whose opening fence starts at pos.

        The opener must be exactly three backticks followed by the end of the
        line. The body runs up to the first run of exactly three backticks.

        Raises:
            ParseError: If the opener is malformed.
            UnsupportedSyntaxError: If the opener carries a language tag.
            UnterminatedConstructError: If no closing fence exists.
        """
        source = self._source
        if not source.startswith(FENCE, pos):
            raise self._error(ParseError, "malformed code fence", pos, repr(FENCE))

        info_start = pos + len(FENCE)
        line_end = self._find_line_end(info_start)
        info = source[info_start:line_end]
        if info.strip():
            if info.startswith("`"):
                raise self._error(
                    ParseError, "code fence must be exactly three backticks", pos, repr(FENCE)
                )
            raise self._error(
                UnsupportedSyntaxError,
                f"language-tagged code fences are not supported ({info.strip()!r})",
                info_start,
            )
        if line_end >= self._source_len:
            raise self._unterminated("code block", pos, "closing '```'")

        body_start = line_end + 1
        search = body_start
        while True:
            run_start = source.find(FENCE, search)
            if run_start == -1:
                raise self._unterminated("code block", pos, "closing '```'")
            while run_start > body_start and source[run_start - 1] == "`":
                run_start -= 1
            run_end = run_start
            while run_end < self._source_len and source[run_end] == "`":
                run_end += 1
            if run_end - run_start == len(FENCE):
                break
            search = run_end

        token = Token(TokenKind.CODE_BLOCK, body_start, run_start - body_start)
        return token, run_end
