"""Typed AST nodes for writedown.

All AST nodes are frozen dataclasses with slots, so a parsed tree can be
shared freely and matched with ``match`` statements.

Node Hierarchy:
Node (base)
├── Section       heading-delimited subtree (root is level 0, empty title)
├── Paragraph     run of sentences and function calls
├── Block         block bodies
│   └── CodeBlock fenced code
├── FuncCall      @<name>(args){block}
├── Sentence      plain text inside a paragraph
└── Unknown       raw text the parser could not classify

Every node carries a ``location`` that is excluded from equality, so two
trees parsed from differently laid out sources compare by content only.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from writedown.location import SourceLocation

_UNKNOWN_LOCATION = SourceLocation.unknown()


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Paragraph children
# =============================================================================


@dataclass(frozen=True, slots=True)
class Sentence(Node):
    """Plain text line (or part of a line) inside a paragraph."""

    text: str
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)


@dataclass(frozen=True, slots=True)
class FuncCall(Node):
    """Inline function call.

    Markup: ``@<name>(arg1, arg2){block}``

    ``args`` is empty when the call has no argument list and ``block`` is
    None when no block body follows.

    """

    name: str
    args: tuple[str, ...] = ()
    block: str | None = None
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)


ParagraphChild: TypeAlias = Sentence | FuncCall


# =============================================================================
# Block nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A run of sentences and function calls ended by a blank line,
    a title, a code block or end of input. Never empty."""

    children: tuple[ParagraphChild, ...]
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Base class for block bodies."""


@dataclass(frozen=True, slots=True)
class CodeBlock(Block):
    """Fenced code block.

    ``code`` is the raw body between the opening fence line and the
    closing fence, newline after the opener excluded.

    """

    code: str
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)


@dataclass(frozen=True, slots=True)
class Unknown(Node):
    """Raw text that no rule claimed."""

    raw: str
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)


@dataclass(frozen=True, slots=True)
class Section(Node):
    """Heading-delimited subtree.

    ``level`` comes straight from the title's ``=`` count and is advisory:
    children nest in order of appearance regardless of level.

    """

    level: int
    title: str
    children: tuple[Node, ...] = ()
    location: SourceLocation = field(default=_UNKNOWN_LOCATION, compare=False)

    def walk(self) -> Iterator[Node]:
        """Yield every node below this section, depth first, in order."""
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Section):
                stack.extend(reversed(node.children))
            elif isinstance(node, Paragraph):
                stack.extend(reversed(node.children))


__all__ = [
    "Block",
    "CodeBlock",
    "FuncCall",
    "Node",
    "Paragraph",
    "ParagraphChild",
    "Section",
    "Sentence",
    "Unknown",
]
