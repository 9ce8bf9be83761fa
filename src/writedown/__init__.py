"""
writedown: a lightweight, line-oriented markup language front end.

Turns raw text with section titles, paragraphs, inline function calls,
tags and code into a typed, immutable section tree.

Quick Start:
    >>> from writedown import parse, render
    >>> doc = parse("intro\\n= Usage\\ncall @<ref>(install)\\n")
    >>> doc.children[1].title
    'Usage'
    >>> print(render(doc))
    <p>intro</p>
    <section id="usage">
    <h2>Usage</h2>
    <p>call <span class="wd-func" data-name="ref" data-args="install"></span></p>
    </section>

Markup:
    = Title            section (one "=" per level)
    @<name>(a, b){x}   function call with arguments and block
    @[name]            tag
    @name              at-string
    `code`             inline code (at line start)
    ```                fenced code block
"""

from collections.abc import Callable, Mapping

from writedown.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from writedown.errors import (
    ParseError,
    RenderError,
    UnsupportedSyntaxError,
    UnterminatedConstructError,
    WritedownError,
)
from writedown.lexer import LexerMode, Tokenizer
from writedown.location import SourceLocation
from writedown.nodes import (
    Block,
    CodeBlock,
    FuncCall,
    Node,
    Paragraph,
    ParagraphChild,
    Section,
    Sentence,
    Unknown,
)
from writedown.parser import Parser
from writedown.renderers.html import HtmlRenderer
from writedown.serialization import from_dict, from_json, to_dict, to_json
from writedown.tokens import LiteralKind, Token, TokenKind

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Section:
    """Parse markup source into a section tree.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        config: Parse configuration for this call; the context's current
            configuration is used when None

    Returns:
        Synthetic level-0 root Section

    Raises:
        ParseError: On any structural error in the source.

    Example:
        >>> parse("= Hello\\nworld\\n").children[0].level
        1
    """
    if config is None:
        return Parser(source, source_file=source_file).parse()
    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize source into a list of tokens.

    Example:
        >>> [t.kind.name for t in tokenize("hi\\n")]
        ['SENTENCE', 'NEWLINE']
    """
    return list(Tokenizer(source, source_file).tokenize())


def render(
    doc: Section,
    *,
    functions: Mapping[str, Callable[[FuncCall], str]] | None = None,
) -> str:
    """Render a section tree to HTML.

    Args:
        doc: Root section (as returned by parse)
        functions: Optional handlers for function calls, keyed by name

    Returns:
        HTML string
    """
    return HtmlRenderer(functions=functions).render(doc)


__all__ = [
    # Main API
    "parse",
    "render",
    "tokenize",
    # Parser and tokenizer
    "LexerMode",
    "Parser",
    "Tokenizer",
    "Token",
    "TokenKind",
    "LiteralKind",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ParseError",
    "RenderError",
    "UnsupportedSyntaxError",
    "UnterminatedConstructError",
    "WritedownError",
    # Nodes
    "Block",
    "CodeBlock",
    "FuncCall",
    "Node",
    "Paragraph",
    "ParagraphChild",
    "Section",
    "Sentence",
    "SourceLocation",
    "Unknown",
    # Rendering and serialization
    "HtmlRenderer",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
