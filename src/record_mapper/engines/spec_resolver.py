"""Resolution of mapping entry values against an input record."""

import logging
from typing import Any, Optional
from ..types import MISSING
from ..models.mapping_entry import (
    Literal,
    MappingEntry,
    PathRef,
    Skip,
    TransformDirective,
    classify_entry,
)
from ..paths.reader import PathReader


class SpecResolver:
    """
    Resolves a mapping value to the JSON value it stands for.

    Classification order is: null or empty string (skipped), ``$literal``
    wrapper, any other non-string, ``=``-prefixed string literal, and
    finally a source path read from the input record.
    """

    def __init__(self, reader: Optional[PathReader] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the spec resolver.

        Args:
            reader: Optional PathReader instance
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.reader = reader or PathReader(self.logger)

    def resolve(self, input_root: Any, entry_value: Any) -> Any:
        """
        Resolve a raw mapping value.

        A ``$transform`` object is not a directive here; it is an ordinary
        object literal and is returned as-is.

        Args:
            input_root: Input record paths are read from
            entry_value: Raw mapping value

        Returns:
            Resolved value or MISSING
        """
        return self.resolve_entry(input_root, classify_entry(entry_value, allow_transform=False))

    def resolve_entry(self, input_root: Any, entry: MappingEntry) -> Any:
        """Resolve an already classified entry."""
        if isinstance(entry, Skip):
            return MISSING
        if isinstance(entry, Literal):
            return entry.materialize()
        if isinstance(entry, PathRef):
            return self.reader.read(input_root, entry.path)
        if isinstance(entry, TransformDirective):
            raise TypeError("Transform directives are evaluated by the mapping interpreter")
        raise TypeError(f"Unsupported mapping entry: {entry!r}")
