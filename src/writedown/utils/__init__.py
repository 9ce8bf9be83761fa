"""Utility modules for writedown.

Provides:
- text: escape_html, slugify for renderers
- logger: get_logger, namespaced under "writedown"
"""

from writedown.utils.logger import get_logger
from writedown.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
