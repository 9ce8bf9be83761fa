"""Exception classes for writedown.

Two error classes matter to callers:
- ParseError (and subclasses): fatal structural problems in the source.
  The parse is aborted and no partial tree is returned.
- RenderError: a renderer met a node it cannot project.
"""

from __future__ import annotations


class WritedownError(Exception):
    """Base exception for all writedown errors."""

    pass


def _position(source_file: str | None, lineno: int | None, col_offset: int | None) -> str:
    """Render "file:line:col", dropping the parts that are unknown."""
    parts: list[str] = [source_file] if source_file else []
    if lineno is not None:
        parts.append(str(lineno))
        if col_offset is not None:
            parts.append(str(col_offset))
    return ":".join(parts)


class ParseError(WritedownError):
    """Fatal structural error while tokenizing or parsing.

    Carries the offending source offset and, where known, the construct
    the tokenizer or parser expected to find there.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        expected: str | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """
        Args:
            message: What went wrong, without location
            offset: Offset into the source string where the problem starts
            expected: The delimiter or construct that would have been valid
                there, quoted (e.g. "'>'")
            lineno: 1-indexed line of offset
            col_offset: 1-indexed column of offset
            source_file: Name of the document, if it came from a file
        """
        self.message = message
        self.offset = offset
        self.expected = expected
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        text = message if expected is None else f"{message} (expected {expected})"
        position = _position(source_file, lineno, col_offset)
        super().__init__(f"{position} {text}" if position else text)


class UnterminatedConstructError(ParseError):
    """A delimited construct reached end of line or input without closing.

    Covers function names (``@<...>``), tags (``@[...]``), argument lists,
    function blocks, inline code and fenced code blocks.
    """


class UnsupportedSyntaxError(ParseError):
    """Recognized but unimplemented syntax, such as a language-tagged fence."""


class RenderError(WritedownError):
    """Error during rendering.

    Raised when a renderer encounters a node type it does not handle
    or a function handler fails.
    """

    pass
