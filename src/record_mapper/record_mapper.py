"""Main Record Mapper implementation."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional, Union
from .types import RecordMapperInterface, MappingResult
from .parser import JSONParser
from .error_handler import ErrorHandler
from .engines import MappingInterpreter
from .transforms import TransformRegistry
from .io.file_writer import FileWriter, DEFAULT_OUTPUT_FILE
from .profiler import PerformanceProfiler


class RecordMapper(RecordMapperInterface):
    """
    Main implementation of the Record Mapper interface.

    Transforms a JSON record, or a list of records, into a new shape
    described by a declarative mapping spec.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 registry: Optional[TransformRegistry] = None,
                 enable_parallel_processing: bool = False,
                 max_workers: Optional[int] = None,
                 enable_profiling: bool = False,
                 indent: int = 2):
        """
        Initialize the Record Mapper.

        Args:
            logger: Optional logger instance
            registry: Transform functions available to mapping directives
                (defaults to the built-in transforms)
            enable_parallel_processing: Map the records of a list input on a
                thread pool
            max_workers: Maximum number of worker threads (None = auto-detect)
            enable_profiling: Collect timing and memory metrics per run
            indent: JSON indentation for output files
        """
        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry if registry is not None else TransformRegistry.default()
        self.enable_parallel_processing = enable_parallel_processing
        self.max_workers = max_workers
        self.indent = indent

        if enable_parallel_processing:
            self.executor = ThreadPoolExecutor(max_workers=max_workers)
        else:
            self.executor = None

        self.error_handler = ErrorHandler(self.logger, registry=self.registry)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.interpreter = MappingInterpreter(
            registry=self.registry,
            logger=self.logger,
            executor=self.executor
        )
        self.file_writer = FileWriter(self.logger, indent=indent)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def transform(self, input_value: Any, mapping: Dict[str, Any]) -> Any:
        """
        Map an input record, or each record of an input list.

        Args:
            input_value: Parsed input JSON
            mapping: Mapping spec (target path -> source spec)

        Returns:
            Output record, or a same-length list of output records
        """
        return self.interpreter.transform(input_value, mapping)

    def run(self, input_value: Any, mapping: Dict[str, Any]) -> MappingResult:
        """
        Map input and report warnings alongside the output.

        Args:
            input_value: Parsed input JSON
            mapping: Mapping spec

        Returns:
            MappingResult with output and warnings
        """
        if not isinstance(mapping, dict):
            return MappingResult(
                success=False,
                errors=[f"Mapping spec must be a JSON object, got {type(mapping).__name__}"]
            )

        record_count = len(input_value) if isinstance(input_value, list) else 1

        if self.profiler is None:
            output, warnings = self.interpreter.transform_with_warnings(input_value, mapping)
        else:
            with self.profiler.profile_operation("transform", self._json_size(input_value)) as session:
                output, warnings = self.interpreter.transform_with_warnings(input_value, mapping)
                session.sample_performance()
                session.stop_profiling(
                    output_size=self._json_size(output),
                    records_processed=record_count
                )

        if warnings:
            self.logger.info(f"Mapping finished with {len(warnings)} skipped entries")

        return MappingResult(
            success=True,
            output=output,
            record_count=record_count,
            warnings=warnings
        )

    def transform_json(self, input_string: str, mapping_string: str) -> MappingResult:
        """
        Parse JSON documents and map them.

        Args:
            input_string: Input JSON text
            mapping_string: Mapping JSON text

        Returns:
            MappingResult; malformed documents give success=False with errors
        """
        try:
            input_value, root_kind = self.parser.parse(input_string)
            mapping = self.parser.parse_mapping(mapping_string)
        except ValueError as e:
            return MappingResult(success=False, errors=[str(e)])

        self.logger.debug(f"Mapping {root_kind.value} input")
        return self.run(input_value, mapping)

    def transform_files(self, input_path: Union[str, Path], mapping_path: Union[str, Path],
                        output_path: Union[str, Path] = DEFAULT_OUTPUT_FILE) -> MappingResult:
        """
        Map an input file through a mapping file and write the result.

        Args:
            input_path: Input JSON file
            mapping_path: Mapping JSON file
            output_path: Output JSON file (defaults to output.json)

        Returns:
            MappingResult with output_file set on success

        Raises:
            ProcessingError: If a file cannot be read or written
        """
        input_string = self.file_writer.read_json_text(input_path)
        mapping_string = self.file_writer.read_json_text(mapping_path)

        result = self.transform_json(input_string, mapping_string)
        if not result.success:
            return result

        write_result = self.file_writer.write_output(result.output, output_path)
        result.output_file = write_result["output_file"]
        return result

    def close(self) -> None:
        """Release the worker pool, if any."""
        if self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None
            self.interpreter.executor = None

    def __enter__(self) -> "RecordMapper":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _json_size(value: Any) -> int:
        try:
            return len(json.dumps(value, ensure_ascii=False).encode('utf-8'))
        except (TypeError, ValueError):
            return 0


def transform(input_value: Any, mapping: Dict[str, Any],
              registry: Optional[TransformRegistry] = None) -> Any:
    """
    Map input JSON through a mapping spec.

    Args:
        input_value: Parsed input JSON (a record or a list of records)
        mapping: Mapping spec
        registry: Optional transform registry (defaults to the built-ins)

    Returns:
        Output record, or a list of output records in input order
    """
    return MappingInterpreter(registry=registry).transform(input_value, mapping)
