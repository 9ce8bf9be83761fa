"""Recursive descent parser producing a typed section tree.

Pulls tokens from the Tokenizer with single-token lookahead and builds
immutable (frozen) dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: peek/advance over the tokenizer
- `ParagraphParsingMixin`: sentences and function calls
- `SectionParsingMixin`: titles, code blocks and the section stack

Thread Safety:
- Parser produces an immutable tree (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the tree across threads

"""

from __future__ import annotations

from collections.abc import Callable

from writedown.config import ParseConfig, get_parse_config
from writedown.lexer import Tokenizer
from writedown.location import SourceLocation
from writedown.nodes import Section
from writedown.parsing import (
    ParagraphParsingMixin,
    SectionParsingMixin,
    SectionStack,
    TokenNavigationMixin,
)
from writedown.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    ParagraphParsingMixin,
    SectionParsingMixin,
):
    """Parser for writedown markup.

    Usage:
            >>> doc = Parser("intro\\n= Title\\nbody\\n").parse()
            >>> [type(c).__name__ for c in doc.children]
        ['Paragraph', 'Section']

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_tokenizer",
        "_stack",
        "_config",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar when the parser is created.
        Use set_parse_config() or parse_config_context() first if you need
        non-default configuration.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._tokenizer: Tokenizer | None = None
        self._stack: SectionStack | None = None
        self._config: ParseConfig = get_parse_config()

    @property
    def _text_transformer(self) -> Callable[[str], str] | None:
        """Optional callback applied to sentence text."""
        return self._config.text_transformer

    @property
    def _strip_args(self) -> bool:
        """Whether function arguments are stripped of surrounding whitespace."""
        return self._config.strip_args

    @property
    def _max_section_depth(self) -> int | None:
        """Maximum title nesting depth, or None."""
        return self._config.max_section_depth

    def parse(self) -> Section:
        """Parse source into the root section.

        Returns:
            Synthetic level-0 Section with an empty title holding the document

        Raises:
            ParseError: On any structural error; no partial tree is returned.
        """
        if self._tokenizer is not None:
            raise RuntimeError("Parser instances are single-use")

        self._tokenizer = Tokenizer(self._source, self._source_file)
        self._stack = SectionStack(
            SourceLocation(
                lineno=1,
                col_offset=1,
                offset=0,
                end_offset=len(self._source),
                source_file=self._source_file,
            )
        )
        logger.debug(
            "Parsing %s (%d chars)", self._source_file or "<string>", len(self._source)
        )
        try:
            return self._parse_sections()
        finally:
            # Builder frames are not needed once the tree is frozen
            self._stack = None
