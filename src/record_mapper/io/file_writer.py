"""File utilities for reading mapping inputs and writing mapping output."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..types import ProcessingError, ErrorType

DEFAULT_OUTPUT_FILE = "output.json"


class FileWriter:
    """
    File writer for mapping results.

    Handles directory creation, pretty-printed JSON serialization and
    reading the JSON documents a mapping run starts from.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, indent: int = 2):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
            indent: JSON indentation used for output files
        """
        self.logger = logger or logging.getLogger(__name__)
        self.indent = indent

    def write_output(self, data: Any, output_path: Union[str, Path] = DEFAULT_OUTPUT_FILE,
                     indent: Optional[int] = None) -> Dict[str, Any]:
        """
        Write a mapping result to a JSON file.

        Args:
            data: JSON value to write
            output_path: Destination file path
            indent: Optional indentation overriding the writer default

        Returns:
            Dictionary with write operation results

        Raises:
            ProcessingError: If writing fails
        """
        file_path = Path(output_path)
        indent = self.indent if indent is None else indent

        try:
            self._ensure_directory_exists(file_path.parent)

            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=indent, ensure_ascii=False)
                f.write("\n")

            file_size = file_path.stat().st_size

        except ProcessingError:
            raise
        except (OSError, TypeError, ValueError) as e:
            raise ProcessingError(
                f"Failed to write output {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"output_file": str(file_path)}
            )

        self.logger.info(f"Wrote {file_size} bytes to {file_path}")
        return {
            "success": True,
            "output_file": str(file_path.absolute()),
            "size": file_size
        }

    def read_json_text(self, input_path: Union[str, Path]) -> str:
        """
        Read a UTF-8 JSON document as text.

        Args:
            input_path: File to read

        Returns:
            File content

        Raises:
            ProcessingError: If the file cannot be read
        """
        file_path = Path(input_path)
        try:
            return file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ProcessingError(
                f"Failed to read {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"input_file": str(file_path)}
            )

    def _ensure_directory_exists(self, directory_path: Path) -> None:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory_path: Path to directory

        Raises:
            ProcessingError: If directory creation fails
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)

            if not os.access(directory_path, os.W_OK):
                raise ProcessingError(
                    f"Directory {directory_path} is not writable",
                    ErrorType.FILESYSTEM
                )

        except OSError as e:
            raise ProcessingError(
                f"Failed to create directory {directory_path}: {str(e)}",
                ErrorType.FILESYSTEM
            )
