"""Built-in transform functions and their registry."""

from .country import country_from_iso
from .registry import BUILTIN_TRANSFORMS, TransformRegistry

__all__ = ["country_from_iso", "BUILTIN_TRANSFORMS", "TransformRegistry"]
