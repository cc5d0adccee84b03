"""Parsed path model used by the path reader."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SegmentMode(Enum):
    """Access mode of a single path segment."""
    PLAIN = "plain"
    INDEX = "index"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class PathSegment:
    """
    One dotted component of a path.

    ``key`` is the field name to dereference. ``index`` is only set for
    INDEX mode (``list[2]``).
    """

    key: str
    mode: SegmentMode = SegmentMode.PLAIN
    index: Optional[int] = None

    def __post_init__(self):
        """Validate segment after initialization."""
        self._validate()

    def _validate(self) -> None:
        if self.mode == SegmentMode.INDEX:
            if self.index is None or self.index < 0:
                raise ValueError("index segments require a non-negative index")
        elif self.index is not None:
            raise ValueError(f"{self.mode.value} segments cannot carry an index")

    def is_wildcard(self) -> bool:
        return self.mode == SegmentMode.WILDCARD

    def __str__(self) -> str:
        if self.mode == SegmentMode.WILDCARD:
            return f"{self.key}[]"
        if self.mode == SegmentMode.INDEX:
            return f"{self.key}[{self.index}]"
        return self.key


@dataclass(frozen=True)
class Path:
    """An immutable, ordered sequence of path segments."""

    segments: Tuple[PathSegment, ...]

    def __iter__(self):
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def has_wildcard(self) -> bool:
        """Check if any segment fans out over an array."""
        return any(segment.is_wildcard() for segment in self.segments)

    def __str__(self) -> str:
        return ".".join(str(segment) for segment in self.segments)
