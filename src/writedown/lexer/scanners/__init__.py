"""Mode-specific scanners for the writedown tokenizer.

Each scanner is a mixin whose methods take the current offset and return
``(token, next_offset)`` without touching tokenizer state. The tokenizer
commits the result.
"""

from __future__ import annotations

from writedown.lexer.scanners.at_sign import AtSignScannerMixin
from writedown.lexer.scanners.code import CodeScannerMixin
from writedown.lexer.scanners.func import FuncScannerMixin
from writedown.lexer.scanners.line import LineScannerMixin

__all__ = [
    "AtSignScannerMixin",
    "CodeScannerMixin",
    "FuncScannerMixin",
    "LineScannerMixin",
]
