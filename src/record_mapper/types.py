"""Core type definitions for the Record Mapper."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class _Missing:
    """Marker for a value that is absent, as opposed to JSON null."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


MISSING = _Missing()


class RootKind(Enum):
    """Enumeration of input root shapes."""
    RECORD = "record"
    BATCH = "batch"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    PATH = "path"
    TRANSFORM = "transform"
    FILESYSTEM = "filesystem"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


@dataclass
class TransformWarning:
    """A mapping entry that was skipped because its transform could not run."""
    target_path: str
    transform_name: Any
    message: str

    def __str__(self) -> str:
        return f"{self.target_path}: {self.message}"


@dataclass
class MappingResult:
    """Result of a mapping run."""
    success: bool
    output: Any = None
    record_count: int = 0
    warnings: List[TransformWarning] = field(default_factory=list)
    errors: Optional[List[str]] = None
    output_file: Optional[str] = None


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class RecordMapperInterface(ABC):
    """Abstract interface for the Record Mapper."""

    @abstractmethod
    def transform(self, input_value: Any, mapping: Dict[str, Any]) -> Any:
        """Map an input record (or list of records) through a mapping spec."""
        pass

    @abstractmethod
    def run(self, input_value: Any, mapping: Dict[str, Any]) -> MappingResult:
        """Map input and report warnings alongside the output."""
        pass


class PathReaderInterface(ABC):
    """Abstract interface for reading values by path."""

    @abstractmethod
    def read(self, root: Any, path: Any) -> Any:
        """Return the value(s) addressed by path, or MISSING."""
        pass


class PathWriterInterface(ABC):
    """Abstract interface for writing values by path."""

    @abstractmethod
    def write(self, target: Dict[str, Any], path: str, value: Any) -> None:
        """Assign value at path inside target, creating containers as needed."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def validate_mapping(self, mapping: Any) -> ValidationResult:
        """Validate a mapping spec."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
