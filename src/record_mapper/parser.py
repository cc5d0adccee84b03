"""JSON parser for input documents and mapping specs."""

import json
import logging
from typing import Any, Dict, Optional, Tuple
from .types import RootKind
from .error_handler import ErrorHandler


class JSONParser:
    """
    JSON parser with validation for mapping runs.

    Input documents may have any JSON root; a list root is a batch of
    records. Mapping documents must be JSON objects.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Tuple[Any, RootKind]:
        """
        Parse an input JSON string and detect whether it is a batch.

        Args:
            json_string: JSON string to parse

        Returns:
            Tuple of (parsed_data, root_kind)

        Raises:
            ValueError: If JSON is invalid
        """
        data = self._load(json_string, "input")
        root_kind = self.detect_root_kind(data)

        self.logger.info(f"Parsed JSON input with root kind: {root_kind.value}")
        return data, root_kind

    def parse_mapping(self, json_string: str) -> Dict[str, Any]:
        """
        Parse and validate a mapping spec.

        Args:
            json_string: Mapping JSON string

        Returns:
            Mapping spec as a dict

        Raises:
            ValueError: If JSON is invalid or not a valid mapping spec
        """
        mapping = self._load(json_string, "mapping")

        validation_result = self.error_handler.validate_mapping(mapping)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ValueError(f"Invalid mapping: {'; '.join(error_messages)}")

        self.logger.info(f"Parsed mapping with {len(mapping)} entries")
        return mapping

    def detect_root_kind(self, data: Any) -> RootKind:
        """
        Detect whether parsed input is a single record or a batch.

        Args:
            data: Parsed JSON data

        Returns:
            RootKind.BATCH for a list root, otherwise RootKind.RECORD
        """
        if isinstance(data, list):
            return RootKind.BATCH
        return RootKind.RECORD

    def _load(self, json_string: str, label: str) -> Any:
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [
                f"{error.message} ({error.location})" if error.location else error.message
                for error in validation_result.errors
            ]
            raise ValueError(f"Invalid JSON {label}: {'; '.join(error_messages)}")

        try:
            return json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")
