"""writedown renderers.

Renderers project a parsed section tree into an output format.

Available Renderers:
- HtmlRenderer: Renders the tree to HTML using StringBuilder pattern

"""

from writedown.renderers.html import HeadingInfo, HtmlRenderer

__all__ = ["HeadingInfo", "HtmlRenderer"]
