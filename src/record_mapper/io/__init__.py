"""File I/O operations for the Record Mapper."""

from .file_writer import FileWriter, DEFAULT_OUTPUT_FILE

__all__ = ["FileWriter", "DEFAULT_OUTPUT_FILE"]
