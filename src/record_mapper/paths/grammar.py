"""Path grammar: turns dotted path strings into segment sequences."""

import re
from ..models.path import Path, PathSegment, SegmentMode

SEGMENT_SEPARATOR = "."

_SEGMENT_RE = re.compile(r"([^\[]+)(\[([0-9]*)\])?")


def parse_segment(text: str) -> PathSegment:
    """
    Parse one segment such as ``name``, ``items[]`` or ``items[2]``.

    Text that does not follow the grammar is kept whole as a plain key,
    so no input is ever rejected.

    Args:
        text: Segment text without separators

    Returns:
        PathSegment describing the key and access mode
    """
    match = _SEGMENT_RE.fullmatch(text)
    if not match:
        return PathSegment(key=text)

    key, bracket, digits = match.group(1), match.group(2), match.group(3)
    if not bracket:
        return PathSegment(key=key)
    if not digits:
        return PathSegment(key=key, mode=SegmentMode.WILDCARD)
    return PathSegment(key=key, mode=SegmentMode.INDEX, index=int(digits))


def parse_path(text: str) -> Path:
    """Split a path string on '.' and parse each segment independently."""
    return Path(tuple(parse_segment(part) for part in str(text).split(SEGMENT_SEPARATOR)))
