"""Error handling implementation for the Record Mapper."""

import logging
from typing import Any, Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils
from .transforms.registry import TransformRegistry


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for Record Mapper operations.

    Validates documents before they reach the interpreter and turns
    processing errors into recovery suggestions. Missing source data is
    never an error; only unreadable or malformed documents are.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 registry: Optional[TransformRegistry] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
            registry: Optional transform registry used to flag unknown transforms
        """
        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_mapping(self, mapping: Any) -> ValidationResult:
        """
        Validate a parsed mapping spec.

        Args:
            mapping: Parsed mapping spec

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_mapping_spec(mapping, self.registry)
        for warning in result.warnings:
            self.logger.warning(f"Mapping warning: {warning}")
        return result

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide recovery suggestions.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Fix the JSON syntax of the input or mapping file. "
                                 "Comments and trailing commas are not valid JSON.",
                partial_results=None
            )
        elif error.error_type == ErrorType.STRUCTURE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The mapping file must contain a JSON object whose keys are "
                                 "target paths.",
                partial_results=None
            )
        elif error.error_type == ErrorType.TRANSFORM:
            return self._handle_transform_error(error)
        elif error.error_type == ErrorType.FILESYSTEM:
            return self._handle_filesystem_error(error)
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                partial_results=None
            )

    def _handle_transform_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle transform failures; the rest of the record is still usable."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Check the transform name and its arguments. "
                             "The affected entry is omitted from the output.",
            partial_results=error.context.get('partial_results') if error.context else None
        )

    def _handle_filesystem_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle filesystem-related errors."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Check that the input files exist and are readable, and that "
                             "the output location is writable.",
            partial_results=error.context.get('partial_results') if error.context else None
        )
