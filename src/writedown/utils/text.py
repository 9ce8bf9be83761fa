"""Text utilities shared by renderers."""

from __future__ import annotations

import html as html_module
import re

_SLUG_STRIP = re.compile(r"[^\w\s-]")
_SLUG_DASH = re.compile(r"[-\s]+")


def escape_html(text: str) -> str:
    """Escape HTML special characters for text and attribute values.

    Examples:
        >>> escape_html("<a href='x'>")
        '&lt;a href=&#x27;x&#x27;&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def slugify(text: str) -> str:
    """Turn a section title into an id-safe slug.

    Examples:
        >>> slugify("Title Level 1!")
        'title-level-1'
    """
    slug = _SLUG_STRIP.sub("", text.lower()).strip()
    return _SLUG_DASH.sub("-", slug)
