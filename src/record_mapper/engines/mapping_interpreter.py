"""Mapping interpreter: builds output records from a mapping spec."""

import copy
import logging
from concurrent.futures import Executor
from itertools import repeat
from typing import Any, Dict, List, Optional, Tuple
from ..types import MISSING, TransformWarning
from ..models.mapping_entry import PathRef, Skip, TransformDirective, classify_entry
from ..paths.reader import PathReader
from ..paths.writer import PathWriter
from ..transforms.registry import TransformRegistry
from .spec_resolver import SpecResolver

LOG_PREFIX = "[record-mapper]"


class MappingInterpreter:
    """
    Applies a mapping spec to input records.

    Mapping keys are target paths in the output record, mapping values are
    source paths, literals or transform directives. Every entry reads from
    the original input record only, and results are written additively into
    one output record per input item.
    """

    def __init__(self, registry: Optional[TransformRegistry] = None,
                 resolver: Optional[SpecResolver] = None,
                 writer: Optional[PathWriter] = None,
                 logger: Optional[logging.Logger] = None,
                 executor: Optional[Executor] = None):
        """
        Initialize the mapping interpreter.

        Args:
            registry: Transform functions available to directives
            resolver: Optional SpecResolver instance
            writer: Optional PathWriter instance
            logger: Optional logger instance
            executor: Optional executor used to map array items in parallel
        """
        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry if registry is not None else TransformRegistry.default()
        self.resolver = resolver or SpecResolver(PathReader(self.logger), self.logger)
        self.writer = writer or PathWriter(self.logger)
        self.executor = executor

    def transform(self, input_value: Any, mapping: Dict[str, Any]) -> Any:
        """
        Map an input record, or each record of an input list.

        Args:
            input_value: Parsed input JSON
            mapping: Mapping spec

        Returns:
            Output record, or a list of output records in input order
        """
        output, _ = self.transform_with_warnings(input_value, mapping)
        return output

    def transform_with_warnings(self, input_value: Any,
                                mapping: Dict[str, Any]) -> Tuple[Any, List[TransformWarning]]:
        """
        Map input and collect the warnings raised by skipped entries.

        Returns:
            Tuple of (output, warnings)
        """
        if not isinstance(mapping, dict):
            raise TypeError(f"Mapping spec must be a JSON object, got {type(mapping).__name__}")

        if not isinstance(input_value, list):
            return self.map_record(input_value, mapping)

        self.logger.debug(f"Mapping {len(input_value)} records")
        if self.executor is not None:
            results = list(self.executor.map(self.map_record, input_value, repeat(mapping)))
        else:
            results = [self.map_record(item, mapping) for item in input_value]

        outputs = []
        warnings: List[TransformWarning] = []
        for output, item_warnings in results:
            outputs.append(output)
            warnings.extend(item_warnings)
        return outputs, warnings

    def map_record(self, record: Any, mapping: Dict[str, Any]) -> Tuple[Dict[str, Any], List[TransformWarning]]:
        """
        Build one output record.

        Args:
            record: Single input record
            mapping: Mapping spec

        Returns:
            Tuple of (output_record, warnings)
        """
        output: Dict[str, Any] = {}
        warnings: List[TransformWarning] = []

        for target_path, entry_value in mapping.items():
            entry = classify_entry(entry_value)

            if isinstance(entry, Skip):
                continue

            if isinstance(entry, TransformDirective):
                value = self._evaluate_directive(record, target_path, entry, warnings)
            else:
                value = self.resolver.resolve_entry(record, entry)

            if value is MISSING:
                continue

            if isinstance(entry, PathRef) and isinstance(value, (dict, list)):
                # the output must never alias the input record
                value = copy.deepcopy(value)

            self.writer.write(output, target_path, value)

        return output, warnings

    def _evaluate_directive(self, record: Any, target_path: str,
                            directive: TransformDirective,
                            warnings: List[TransformWarning]) -> Any:
        """Run a transform directive, turning failures into warnings."""
        function = self.registry.lookup(directive.name)
        if function is None:
            self._warn(warnings, target_path, directive.name,
                       f"Unknown transform: {directive.name}")
            return MISSING

        args = [self.resolver.resolve_entry(record, arg) for arg in directive.args]
        # functions receive JSON values only; absent arguments arrive as null
        args = [None if arg is MISSING else arg for arg in args]

        try:
            return function(*args)
        except Exception as e:
            self._warn(warnings, target_path, directive.name,
                       f"Transform {directive.name} failed: {e}")
            return MISSING

    def _warn(self, warnings: List[TransformWarning], target_path: str,
              name: Any, message: str) -> None:
        self.logger.warning(f"{LOG_PREFIX} {message}")
        warnings.append(TransformWarning(
            target_path=target_path,
            transform_name=name,
            message=message,
        ))
