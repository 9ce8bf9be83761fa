"""Section stack and section-level parsing.

Titles open a new section that becomes a child of the section currently
being filled and collects everything up to end of input. Sections
therefore nest by order of appearance; title levels are recorded but
never compared.

Nesting is tracked on an explicit stack of mutable frames rather than
the Python call stack, so a document with thousands of titles cannot
hit the recursion limit. Frames are frozen into immutable Section nodes
once input is exhausted.

Usage:
    stack = SectionStack(root_location)
    stack.push(SectionFrame(level=1, title="Intro"))
    stack.current.children.append(paragraph)
    root = stack.close_all()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from writedown.location import SourceLocation
from writedown.nodes import CodeBlock, Node, Paragraph, Section
from writedown.tokens import TokenKind

if TYPE_CHECKING:
    from writedown.errors import ParseError
    from writedown.tokens import Token

_SECTION_CONTENT = "a title, sentence, function call or code block"


@dataclass(slots=True)
class SectionFrame:
    """A section under construction.

    Attributes:
        level: Title level (count of ``=``); 0 for the root
        title: Title text; empty for the root
        children: Nodes collected so far, in appearance order
        location: Location of the title (or the whole source for the root)
    """

    level: int
    title: str
    children: list[Node] = field(default_factory=list)
    location: SourceLocation = field(default_factory=SourceLocation.unknown)

    def build(self) -> Section:
        """Freeze this frame into an immutable Section."""
        return Section(
            level=self.level,
            title=self.title,
            children=tuple(self.children),
            location=self.location,
        )


class SectionStack:
    """Stack of open sections; the bottom frame is the synthetic root."""

    __slots__ = ("_frames",)

    def __init__(self, root_location: SourceLocation | None = None) -> None:
        root = SectionFrame(level=0, title="")
        if root_location is not None:
            root.location = root_location
        self._frames: list[SectionFrame] = [root]

    @property
    def current(self) -> SectionFrame:
        """The section receiving new children."""
        return self._frames[-1]

    @property
    def depth(self) -> int:
        """Number of open sections below the root."""
        return len(self._frames) - 1

    def push(self, frame: SectionFrame) -> None:
        """Open a child section of the current one."""
        self._frames.append(frame)

    def close_all(self) -> Section:
        """Fold every open frame into its parent and return the root."""
        frames = self._frames
        while len(frames) > 1:
            section = frames.pop().build()
            frames[-1].children.append(section)
        return frames[0].build()


class SectionParsingMixin:
    """Mixin providing the section loop.

    Required Host Attributes:
        - _stack: SectionStack
        - _max_section_depth: int | None

    """

    _stack: SectionStack
    _max_section_depth: int | None

    # Provided by TokenNavigationMixin / ParagraphParsingMixin
    def _peek(self) -> Token | None:
        raise NotImplementedError

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _text(self, token: Token) -> str:
        raise NotImplementedError

    def _location(self, token: Token) -> SourceLocation:
        raise NotImplementedError

    def _error(self, message: str, offset: int, expected: str | None = None) -> ParseError:
        raise NotImplementedError

    def _parse_paragraph(self) -> Paragraph | None:
        raise NotImplementedError

    def _parse_sections(self) -> Section:
        """Consume all tokens and return the root section."""
        stack = self._stack
        while (token := self._peek()) is not None:
            kind = token.kind

            if kind is TokenKind.TITLE:
                self._advance()
                self._open_section(token)
            elif kind is TokenKind.COMMENT or kind is TokenKind.NEWLINE:
                self._advance()
            elif kind is TokenKind.UNKNOWN:
                raise self._error("unknown token", token.start, _SECTION_CONTENT)
            elif kind is TokenKind.CODE_BLOCK:
                self._advance()
                stack.current.children.append(
                    CodeBlock(code=self._text(token), location=self._location(token))
                )
            else:
                paragraph = self._parse_paragraph()
                if paragraph is not None:
                    stack.current.children.append(paragraph)

        return stack.close_all()

    def _open_section(self, title: Token) -> None:
        """Push a section seeded from a TITLE token."""
        if self._max_section_depth is not None and self._stack.depth >= self._max_section_depth:
            raise self._error(
                f"sections nested deeper than {self._max_section_depth}", title.start
            )
        self._stack.push(
            SectionFrame(
                level=title.level,
                title=self._text(title),
                location=self._location(title),
            )
        )
