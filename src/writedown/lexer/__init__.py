"""Context-sensitive tokenizer for writedown markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, LexerMode
├── core.py              # Tokenizer class (mixin composition + peek/advance)
├── modes.py             # LexerMode enum, mode table, character sets
├── classifiers/
│   └── title.py         # = title lines
└── scanners/
    ├── line.py          # line starts, newlines, sentences
    ├── at_sign.py       # @<func>, @[tag], @name
    ├── code.py          # `inline` and ``` fenced code
    └── func.py          # (args) and {blocks} after a function name

Usage:
    >>> from writedown.lexer import Tokenizer
    >>> tok = Tokenizer("= Hello\\nWorld\\n")
    >>> for token in tok.tokenize():
    ...     print(token.kind.name, repr(tok.text_of(token)))
TITLE 'Hello'
NEWLINE '\\n'
SENTENCE 'World'
NEWLINE '\\n'

"""

from writedown.lexer.core import Tokenizer
from writedown.lexer.modes import LexerMode, mode_for

__all__ = ["LexerMode", "Tokenizer", "mode_for"]
