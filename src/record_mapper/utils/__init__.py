"""Utility functions for the Record Mapper."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
