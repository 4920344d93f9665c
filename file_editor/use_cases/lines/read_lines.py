"""
Use case for reading a range of lines from a file.
"""

import logging
from typing import Optional

from file_editor.entities.LineSequence import LineSequence
from file_editor.entities.OperationResults import ReadLinesResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.utils.range_validator import validate_range


class ReadLinesUseCase:
    """Use case for reading an inclusive 1-based line range."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, start_line: int, end_line: int) -> ReadLinesResult:
        """
        Read lines start_line..end_line of a file.

        Args:
            path: Path of the file to read
            start_line: First line to return (1-based)
            end_line: Last line to return (inclusive)

        Returns:
            ReadLinesResult with the joined text and per-line records

        Raises:
            LineRangeError: If the range is outside the file
            FileRepositoryError: If the file cannot be read
        """
        try:
            self._logger.info(f"Reading lines {start_line}-{end_line} from {path}")
            lines = LineSequence.split(self._file_repository.read_text(path))
            validate_range(len(lines), start_line, end_line)
            return ReadLinesResult(
                path=path,
                total_lines=len(lines),
                start_line=start_line,
                end_line=end_line,
                content=LineSequence(lines.get_slice(start_line, end_line)).join(),
                lines=lines.get_records(start_line, end_line),
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading lines: {e}")
            raise FileRepositoryError(f"Failed to read lines from {path}: {str(e)}")
