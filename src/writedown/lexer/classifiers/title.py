"""Title classifier mixin."""

from writedown.lexer.modes import TITLE_MARKER
from writedown.tokens import Token, TokenKind


class TitleClassifierMixin:
    """Mixin providing title line classification.

    Pure logic: never moves the cursor. A line that fails classification
    is re-lexed from the same offset as a sentence.

    """

    _source: str
    _source_len: int

    def _find_content_end(self, pos: int) -> int:
        """Find end of line content starting at pos. Implemented by Tokenizer."""
        raise NotImplementedError

    def _try_classify_title(self, pos: int) -> Token | None:
        """Try to classify the line at pos as a title.

        A title is a run of ``=`` (the level), exactly one space, then a
        non-blank name running to the end of the line.

        Args:
            pos: Offset of the first ``=``

        Returns:
            TITLE token spanning the name, or None if the line is not a title.
        """
        source = self._source
        level = 0
        cur = pos
        while cur < self._source_len and source[cur] == TITLE_MARKER:
            level += 1
            cur += 1

        if level == 0 or cur >= self._source_len or source[cur] != " ":
            return None

        name_start = cur + 1
        line_end = self._find_content_end(name_start)
        if not source[name_start:line_end].strip():
            return None

        return Token(
            kind=TokenKind.TITLE,
            start=name_start,
            length=line_end - name_start,
            level=level,
        )
