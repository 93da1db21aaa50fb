"""Property path model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PropertyPath:
    """Parsed dotted path identifying a possibly nested property.

    Args:
        segments: Successive key or attribute names, outermost first.
        separator: Separator the path was parsed with, used by __str__.
    """

    segments: tuple[str, ...]
    separator: str = "."

    @classmethod
    def parse(cls, path: str, separator: str = ".") -> PropertyPath:
        """Split a path string into segments.

        Args:
            path: Path string such as "a.b.c".
            separator: Segment separator.

        Returns:
            Parsed PropertyPath. Always has at least one segment.
        """
        return cls(segments=tuple(path.split(separator)), separator=separator)

    @property
    def parent(self) -> tuple[str, ...]:
        """Segments leading to the container of the leaf."""
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        """Name of the property read or written at the end of the path."""
        return self.segments[-1]

    @property
    def has_empty_segment(self) -> bool:
        return "" in self.segments

    def __str__(self) -> str:
        return self.separator.join(self.segments)
