"""HTML renderer using StringBuilder pattern.

Renders a parsed section tree to HTML in one walk.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from writedown.errors import RenderError
from writedown.nodes import (
    CodeBlock,
    FuncCall,
    Node,
    Paragraph,
    Section,
    Sentence,
    Unknown,
)
from writedown.stringbuilder import StringBuilder
from writedown.utils.logger import get_logger
from writedown.utils.text import escape_html
from writedown.utils.text import slugify as default_slugify

logger = get_logger(__name__)

FuncHandler = Callable[[FuncCall], str]


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected during rendering, for building a TOC."""

    level: int
    text: str
    slug: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state."""

    headings: list[HeadingInfo] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render a section tree to HTML.

    Usage:
        >>> from writedown import parse
        >>> HtmlRenderer().render(parse("= Intro\\nhello\\n"))
        '<section id="intro">\\n<h2>Intro</h2>\\n<p>hello</p>\\n</section>\\n'

    Sections render as ``<section>`` with an ``<h{level + 1}>`` heading (capped
    at h6); the root section has no heading of its own. Function calls go
    through ``functions[name]`` when a handler is registered; otherwise they
    render as a ``<span class="wd-func">`` carrying the name and arguments.

    Thread Safety:
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_functions", "_slugify", "_class_prefix", "_last_context")

    def __init__(
        self,
        *,
        functions: Mapping[str, FuncHandler] | None = None,
        slugify: Callable[[str], str] | None = None,
        class_prefix: str = "wd",
    ) -> None:
        """Initialize renderer.

        Args:
            functions: Handlers for function calls, keyed by function name.
                A handler returns ready-made HTML.
            slugify: Optional custom slugify function for section ids
            class_prefix: Prefix for CSS classes on generated elements
        """
        self._functions = dict(functions or {})
        self._slugify = slugify or default_slugify
        self._class_prefix = class_prefix
        self._last_context: RenderContext | None = None

    def render(self, node: Section) -> str:
        """Render a root section to an HTML string."""
        if not isinstance(node, Section):
            raise RenderError(f"Expected a Section root, got {type(node).__name__}")
        ctx = RenderContext()
        sb = StringBuilder()
        if node.level == 0 and not node.title:
            for child in node.children:
                self._render_node(child, sb, ctx)
        else:
            self._render_section(node, sb, ctx)
        self._last_context = ctx
        return sb.build()

    def get_headings(self) -> list[HeadingInfo]:
        """Headings collected during the last render() call."""
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_node(self, node: Node, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a section-level node."""
        match node:
            case Section():
                self._render_section(node, sb, ctx)
            case Paragraph():
                self._render_paragraph(node, sb)
            case CodeBlock():
                sb.raw("<pre><code>").text(node.code).line("</code></pre>")
            case FuncCall():
                sb.line(self._render_func(node))
            case Unknown():
                sb.raw(f'<pre class="{self._class_prefix}-unknown">')
                sb.text(node.raw).line("</pre>")
            case _:
                raise RenderError(f"Cannot render node type {type(node).__name__}")

    def _render_section(self, section: Section, sb: StringBuilder, ctx: RenderContext) -> None:
        slug = self._unique_slug(section.title, ctx)
        ctx.headings.append(HeadingInfo(level=section.level, text=section.title, slug=slug))

        tag = f"h{min(section.level + 1, 6)}"
        sb.raw('<section id="').text(slug).line('">')
        sb.raw(f"<{tag}>").text(section.title).line(f"</{tag}>")
        for child in section.children:
            self._render_node(child, sb, ctx)
        sb.line("</section>")

    def _render_paragraph(self, paragraph: Paragraph, sb: StringBuilder) -> None:
        sb.raw("<p>")
        previous_line = None
        for child in paragraph.children:
            line = child.location.lineno
            # Children that started on a new source line keep the soft break
            if previous_line is not None and line > previous_line:
                sb.line()
            previous_line = line
            match child:
                case Sentence():
                    sb.text(child.text)
                case FuncCall():
                    sb.raw(self._render_func(child))
                case _:
                    raise RenderError(
                        f"Cannot render paragraph child {type(child).__name__}"
                    )
        sb.line("</p>")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_func(self, call: FuncCall) -> str:
        handler = self._functions.get(call.name)
        if handler is not None:
            try:
                return handler(call)
            except Exception as exc:
                logger.debug("Function handler %r failed", call.name, exc_info=True)
                raise RenderError(f"Function handler {call.name!r} failed: {exc}") from exc

        prefix = self._class_prefix
        attrs = f'class="{prefix}-func" data-name="{escape_html(call.name)}"'
        if call.args:
            attrs += f' data-args="{escape_html(", ".join(call.args))}"'
        body = escape_html(call.block) if call.block is not None else ""
        return f"<span {attrs}>{body}</span>"

    def _unique_slug(self, title: str, ctx: RenderContext) -> str:
        base = self._slugify(title) or "section"
        slug = base
        counter = 1
        while slug in ctx.seen_slugs:
            slug = f"{base}-{counter}"
            counter += 1
        ctx.seen_slugs.add(slug)
        return slug
