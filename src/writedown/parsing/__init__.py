"""Parsing mixins for the writedown parser.

- TokenNavigationMixin: peek/advance over the tokenizer, located errors
- SectionParsingMixin: the section loop over an explicit section stack
- ParagraphParsingMixin: paragraphs and function calls
"""

from writedown.parsing.paragraph import ParagraphParsingMixin
from writedown.parsing.sections import SectionFrame, SectionParsingMixin, SectionStack
from writedown.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "ParagraphParsingMixin",
    "SectionFrame",
    "SectionParsingMixin",
    "SectionStack",
    "TokenNavigationMixin",
]
