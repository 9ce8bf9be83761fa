"""Line and column positions for nodes and errors.

Tokens only carry offsets; SourceLocation turns an offset into a
line/column pair on demand so the hot path stays allocation-free.

Locations are frozen and may be shared between trees and threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a node or error sits in the source.

    Line and column are 1-indexed; offsets are 0-based string indices.

    Attributes:
        lineno: Line of offset
        col_offset: Column of offset, counted in characters
        offset: Absolute start offset in the source string
        end_offset: Absolute end offset in the source string
        source_file: Source file path (optional)

    Examples:
            >>> SourceLocation.from_offset("ab\\ncd", 4)
        SourceLocation(lineno=2, col_offset=2, offset=4, end_offset=4, source_file=None)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as "doc.wd:10:5", or "10:5" without a source file."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        source: str,
        offset: int,
        end_offset: int | None = None,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute line and column for an offset into source.

        Args:
            source: The full source string
            offset: Start offset (clamped to the source length)
            end_offset: Optional end offset, defaults to offset
            source_file: Optional source file path

        Returns:
            SourceLocation for the offset
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset if end_offset is None else end_offset,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
