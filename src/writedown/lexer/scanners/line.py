"""Line-level scanner mixin: line starts, newlines and sentences."""

from __future__ import annotations

from writedown.lexer.modes import SENTENCE_BREAK_SPACE, TITLE_MARKER, ScanResult
from writedown.tokens import Token, TokenKind


class LineScannerMixin:
    """Mixin providing LINE_START and INLINE mode scanning.

    LINE_START adds titles and code to the generic rules, since both are
    only recognized as the first thing on a line.

    """

    # These will be set by the Tokenizer class
    _source: str
    _source_len: int

    def _find_content_end(self, pos: int) -> int:
        """Find end of line content starting at pos. Implemented by Tokenizer."""
        raise NotImplementedError

    def _try_classify_title(self, pos: int) -> Token | None:
        """Classify a title line. Implemented by TitleClassifierMixin."""
        raise NotImplementedError

    def _scan_at_sign(self, pos: int) -> ScanResult:
        """Scan an @ construct. Implemented by AtSignScannerMixin."""
        raise NotImplementedError

    def _scan_code(self, pos: int) -> ScanResult:
        """Scan inline or fenced code. Implemented by CodeScannerMixin."""
        raise NotImplementedError

    def _scan_line_start(self, pos: int) -> ScanResult:
        """Scan the first token of a line.

        Args:
            pos: Offset of the first character of the line

        Returns:
            (token, offset after token)
        """
        char = self._source[pos]
        if char == TITLE_MARKER:
            title = self._try_classify_title(pos)
            if title is not None:
                return title, title.end
            return self._scan_sentence(pos)
        if char == "`":
            return self._scan_code(pos)
        return self._scan_inline(pos)

    def _scan_inline(self, pos: int) -> ScanResult:
        """Generic scanning: newline, @ construct, or sentence.

        A CRLF pair is a single NEWLINE token of length 2.
        """
        char = self._source[pos]
        if char == "\n":
            return Token(TokenKind.NEWLINE, pos, 1), pos + 1
        if char == "\r" and self._source.startswith("\n", pos + 1):
            return Token(TokenKind.NEWLINE, pos, 2), pos + 2
        if char == "@":
            return self._scan_at_sign(pos)
        return self._scan_sentence(pos)

    def _scan_sentence(self, pos: int) -> ScanResult:
        """Scan a sentence up to the end of the line.

        An ``@`` preceded by whitespace ends the sentence early since it
        may start an inline construct. The newline is not included.
        """
        source = self._source
        end = self._find_content_end(pos)
        at = source.find("@", pos + 1, end)
        while at != -1:
            if source[at - 1] in SENTENCE_BREAK_SPACE:
                end = at
                break
            at = source.find("@", at + 1, end)
        return Token(TokenKind.SENTENCE, pos, end - pos), end
