"""Path writer that assembles output records."""

import logging
from typing import Any, Dict, Optional
from ..types import MISSING, PathWriterInterface
from .grammar import SEGMENT_SEPARATOR

ARRAY_MARKER = "[]"


class PathWriter(PathWriterInterface):
    """
    Writes values into an output tree by dotted target path.

    Only a trailing ``[]`` marker is recognised on the write side; numeric
    indices are treated as part of the key. A non-final ``key[]`` segment
    uses element 0 of the array as the carrier object, so several mapping
    entries sharing the prefix fill in fields of the same single element.
    A final ``key[]`` segment replaces the array when given a list and
    appends any other value.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the path writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write(self, target: Dict[str, Any], path: str, value: Any) -> None:
        """
        Assign value at path inside target.

        Args:
            target: Output tree to mutate in place
            path: Dotted target path
            value: Value to store; MISSING leaves target untouched
        """
        if value is MISSING:
            return

        self.logger.debug(f"Writing value at {path}")
        segments = path.split(SEGMENT_SEPARATOR)
        current = target
        last_position = len(segments) - 1

        for position, raw in enumerate(segments):
            is_last = position == last_position

            if raw.endswith(ARRAY_MARKER):
                key = raw[:-len(ARRAY_MARKER)]
                if not isinstance(current.get(key), list):
                    current[key] = []
                array = current[key]

                if is_last:
                    if isinstance(value, list):
                        current[key] = list(value)
                    else:
                        array.append(value)
                    return

                if not array:
                    array.append({})
                elif not isinstance(array[0], dict):
                    array[0] = {}
                current = array[0]
            else:
                if is_last:
                    current[raw] = value
                    return

                if not isinstance(current.get(raw), dict):
                    current[raw] = {}
                current = current[raw]
