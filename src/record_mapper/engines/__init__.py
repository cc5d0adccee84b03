"""Mapping engines."""

from .spec_resolver import SpecResolver
from .mapping_interpreter import MappingInterpreter

__all__ = ["SpecResolver", "MappingInterpreter"]
