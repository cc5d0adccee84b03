"""Path reader for nested JSON values."""

import logging
import re
from typing import Any, List, Optional, Union
from ..types import MISSING, PathReaderInterface
from ..models.path import Path, PathSegment, SegmentMode
from .grammar import parse_path

_LIST_INDEX_RE = re.compile(r"0|[1-9][0-9]*")


def dereference(value: Any, key: str) -> Any:
    """
    Look up a key on a single JSON value.

    Dicts are looked up by key, lists accept a canonical non-negative
    integer key (``0``, ``12``; not ``01``) as a position. Anything else
    has no keys.

    Returns:
        The stored value or MISSING
    """
    if isinstance(value, dict):
        return value.get(key, MISSING)
    if isinstance(value, list) and _LIST_INDEX_RE.fullmatch(key):
        position = int(key)
        return value[position] if position < len(value) else MISSING
    return MISSING


def _is_absent(value: Any) -> bool:
    return value is None or value is MISSING


class PathReader(PathReaderInterface):
    """
    Reads the value(s) a path addresses inside a JSON value.

    Traversal starts on a single value. The first wildcard segment switches
    to array flow, where every remaining segment is mapped over the
    collected sequence and each further wildcard flattens one level.
    Missing data never raises; it yields MISSING.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the path reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read(self, root: Any, path: Union[str, Path, None]) -> Any:
        """
        Read the value addressed by path.

        Args:
            root: JSON value to read from
            path: Path string or pre-parsed Path

        Returns:
            The addressed value, a list when a wildcard was used, or MISSING
        """
        if path is None or path == "":
            return MISSING

        if not isinstance(path, Path):
            path = parse_path(path)

        current = root
        array_flow = False

        for segment in path:
            if array_flow:
                current = self._step_sequence(current, segment)
                continue

            if _is_absent(current):
                return MISSING

            candidate = dereference(current, segment.key)

            if segment.mode == SegmentMode.PLAIN:
                current = candidate
            elif segment.mode == SegmentMode.INDEX:
                if not isinstance(candidate, list) or segment.index >= len(candidate):
                    return MISSING
                current = candidate[segment.index]
            else:
                if isinstance(candidate, list):
                    current = list(candidate)
                elif _is_absent(candidate):
                    current = []
                else:
                    current = [candidate]
                array_flow = True

        return current

    def _step_sequence(self, items: List[Any], segment: PathSegment) -> List[Any]:
        """Apply one segment to every element of an array-flow sequence."""
        mapped = []

        for item in items:
            if _is_absent(item):
                continue

            value = dereference(item, segment.key)

            if segment.mode == SegmentMode.PLAIN:
                mapped.append(self._as_element(value))
            elif segment.mode == SegmentMode.INDEX:
                if isinstance(value, list) and segment.index < len(value):
                    mapped.append(value[segment.index])
                else:
                    mapped.append(None)
            elif isinstance(value, list):
                mapped.extend(value)
            elif not _is_absent(value):
                mapped.append(value)

        return mapped

    @staticmethod
    def _as_element(value: Any) -> Any:
        # absent members of a result list serialize as null
        return None if value is MISSING else value
