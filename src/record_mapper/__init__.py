"""
Record Mapper - Declarative JSON-to-JSON record transformation.

Builds output records from input JSON using a mapping spec whose keys
are target paths and whose values are source paths, literals or named
transform directives.
"""

from .record_mapper import RecordMapper, transform
from .types import MISSING, MappingResult, TransformWarning
from .transforms import TransformRegistry

__version__ = "1.0.0"
__all__ = [
    "RecordMapper",
    "transform",
    "MISSING",
    "MappingResult",
    "TransformWarning",
    "TransformRegistry",
]
