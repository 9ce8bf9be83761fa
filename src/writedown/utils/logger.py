"""Minimal logging utilities for writedown.

Wraps the standard library logging; the library never installs handlers.

Example:
    >>> from writedown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "writedown".

    Example:
        >>> get_logger("mymodule").name
        'writedown.mymodule'
    """
    if not (name == "writedown" or name.startswith("writedown.")):
        name = f"writedown.{name}"
    return logging.getLogger(name)
