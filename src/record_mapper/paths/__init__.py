"""Path grammar, reader and writer."""

from .grammar import parse_path, parse_segment
from .reader import PathReader
from .writer import PathWriter

__all__ = ["parse_path", "parse_segment", "PathReader", "PathWriter"]
