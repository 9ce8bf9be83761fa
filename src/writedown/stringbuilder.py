"""Output buffer for the HTML renderer.

Fragments are collected in a list and joined once at the end. Text that
comes from the document goes through ``text()``, which escapes it, so
raw markup from the renderer and user content are never mixed up.
"""

from __future__ import annotations

from writedown.utils.text import escape_html


class StringBuilder:
    """Accumulates output fragments for a single render call.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.raw("<p>").text("a < b").line("</p>")
            >>> sb.build()
            '<p>a &lt; b</p>\\n'

    """

    __slots__ = ("_fragments",)

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def raw(self, markup: str) -> StringBuilder:
        """Append trusted markup as is."""
        if markup:
            self._fragments.append(markup)
        return self

    def text(self, content: str) -> StringBuilder:
        """Append document text, HTML-escaped."""
        if content:
            self._fragments.append(escape_html(content))
        return self

    def line(self, markup: str = "") -> StringBuilder:
        """Append trusted markup and end the output line."""
        if markup:
            self._fragments.append(markup)
        self._fragments.append("\n")
        return self

    def build(self) -> str:
        return "".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)
