"""Validation utilities for JSON documents and mapping specs."""

import json
import re
from typing import Any, List, Optional
from ..types import ValidationResult, ValidationError, ErrorType
from ..transforms.registry import TransformRegistry
from ..models.mapping_entry import (
    ARGS_KEY,
    PATH_KEY,
    TRANSFORM_KEY,
)

_INDEXED_TARGET_RE = re.compile(r"\[[0-9]+\]")


class ValidationUtils:
    """Utility class for validating JSON input and mapping specs."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_mapping_spec(mapping: Any, registry: Optional[TransformRegistry] = None) -> ValidationResult:
        """
        Validate the shape of a mapping spec.

        Problems that the interpreter tolerates at run time (unknown
        transforms, odd directive shapes) are reported as warnings.

        Args:
            mapping: Parsed mapping spec
            registry: Optional transform registry used to flag unknown names

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(mapping, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Mapping root must be an object, got {type(mapping).__name__}",
                location="root"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        for target_path, entry_value in mapping.items():
            if not target_path:
                warnings.append("target path is empty, the value is written under an empty key")

            if _INDEXED_TARGET_RE.search(target_path):
                warnings.append(f"{target_path}: numeric indices are not supported in target "
                                f"paths and are kept as part of the key")

            if isinstance(entry_value, dict) and TRANSFORM_KEY in entry_value:
                warnings.extend(ValidationUtils._validate_directive(
                    target_path, entry_value, registry
                ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _validate_directive(target_path: str, directive: dict,
                            registry: Optional[TransformRegistry]) -> List[str]:
        """Collect warnings for one transform directive."""
        warnings = []

        name = directive[TRANSFORM_KEY]
        if not isinstance(name, str) or not name:
            warnings.append(f"{target_path}: transform name must be a non-empty string, "
                            f"got {name!r}; the entry is skipped")
            return warnings

        if registry is not None and name not in registry:
            warnings.append(f"{target_path}: unknown transform '{name}'")

        has_args = ARGS_KEY in directive
        has_path = PATH_KEY in directive
        if has_args and has_path:
            warnings.append(f"{target_path}: both {ARGS_KEY} and {PATH_KEY} given, {PATH_KEY} is ignored")
        elif not has_args and not has_path:
            warnings.append(f"{target_path}: transform '{name}' has no {ARGS_KEY} or {PATH_KEY}")

        if has_args:
            raw_args = directive[ARGS_KEY]
            if not isinstance(raw_args, list):
                raw_args = [raw_args]
            for position, arg in enumerate(raw_args):
                if isinstance(arg, dict) and TRANSFORM_KEY in arg:
                    warnings.append(f"{target_path}: argument {position} is a nested transform "
                                    f"and will be passed as a plain object")

        return warnings
