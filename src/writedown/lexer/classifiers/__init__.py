"""Line classifiers for the writedown tokenizer.

Classifiers are pure: they inspect the source and return a token or None
without moving the cursor.
"""

from writedown.lexer.classifiers.title import TitleClassifierMixin

__all__ = ["TitleClassifierMixin"]
