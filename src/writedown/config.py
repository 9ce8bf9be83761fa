"""Parse options for writedown, held in a ContextVar.

The parser captures the active ParseConfig when it is constructed, so a
configuration set for one thread or task never leaks into another.

Usage:
    from writedown.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_section_depth=8)):
        doc = Parser(source).parse()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Options that change how token text is promoted into the tree.

    Attributes:
        text_transformer: Callback applied to each sentence's text, e.g. to
            normalize typography. Titles, arguments and code are untouched.
        strip_args: Strip whitespace around function arguments
        max_section_depth: Reject documents whose titles nest deeper than
            this; None means unlimited

    """

    text_transformer: Callable[[str], str] | None = None
    strip_args: bool = True
    max_section_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_section_depth is not None and self.max_section_depth < 1:
            raise ValueError(
                f"max_section_depth must be a positive integer, got {self.max_section_depth}"
            )

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> "ParseConfig":
        """Build a config from a mapping such as a loaded settings file.

        Keys that are not ParseConfig fields are ignored.

        Example:
            >>> ParseConfig.from_dict({"strip_args": False, "theme": "dark"}).strip_args
            False

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})


_DEFAULT_CONFIG = ParseConfig()

_active_config: ContextVar[ParseConfig] = ContextVar(
    "writedown_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Config that a Parser created now would use."""
    return _active_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Make config active for the current context."""
    _active_config.set(config)


def reset_parse_config() -> None:
    """Return the current context to the default config."""
    _active_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Activate config for the duration of a with block.

    The previously active config is restored on exit, also when the block
    raises.

    Example:
        >>> with parse_config_context(ParseConfig(strip_args=False)):
        ...     doc = Parser("@<f>( a )\\n").parse()

    """
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
