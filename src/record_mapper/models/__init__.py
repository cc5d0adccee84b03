"""Data models for the Record Mapper."""

from .path import Path, PathSegment, SegmentMode
from .mapping_entry import (
    Literal,
    MappingEntry,
    PathRef,
    Skip,
    TransformDirective,
    classify_entry,
)

__all__ = [
    "Path",
    "PathSegment",
    "SegmentMode",
    "Literal",
    "MappingEntry",
    "PathRef",
    "Skip",
    "TransformDirective",
    "classify_entry",
]
