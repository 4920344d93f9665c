"""
Use case for deleting a range of lines from a file.
"""

import logging
from typing import Optional

from file_editor.entities.LineSequence import LineSequence
from file_editor.entities.OperationResults import DeleteLinesResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.utils.range_validator import validate_range


class DeleteLinesUseCase:
    """Use case for removing an inclusive 1-based line range."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, start_line: int, end_line: int) -> DeleteLinesResult:
        """
        Delete lines start_line..end_line and write the file back.

        Raises:
            LineRangeError: If the range is outside the file
            FileRepositoryError: If the file cannot be read or written
        """
        try:
            self._logger.info(f"Deleting lines {start_line}-{end_line} from {path}")
            lines = LineSequence.split(self._file_repository.read_text(path))
            validate_range(len(lines), start_line, end_line)

            deleted = lines.delete(start_line, end_line)
            self._file_repository.write_text(path, lines.join())
            return DeleteLinesResult(
                path=path,
                start_line=start_line,
                end_line=end_line,
                deleted_count=deleted,
                remaining_lines=len(lines),
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting lines: {e}")
            raise FileRepositoryError(f"Failed to delete lines in {path}: {str(e)}")
