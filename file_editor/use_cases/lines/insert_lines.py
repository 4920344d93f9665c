"""
Use case for inserting lines into a file.
"""

import logging
from typing import Optional, Sequence

from file_editor.entities.LineSequence import LineSequence
from file_editor.entities.OperationResults import InsertLinesResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.utils.range_validator import validate_position


class InsertLinesUseCase:
    """Use case for inserting lines at a position without removing any."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, path: str, position: int, new_lines: Sequence[str]
    ) -> InsertLinesResult:
        """
        Insert lines after line `position` and write the file back.

        Args:
            path: Path of the file to modify
            position: 0 inserts before the first line, N inserts after line N
            new_lines: Lines to insert, in order

        Returns:
            InsertLinesResult with the new total line count

        Raises:
            LineRangeError: If position is outside [0, line count]
            FileRepositoryError: If the file cannot be read or written
        """
        try:
            self._logger.info(
                f"Inserting {len(new_lines)} lines at position {position} in {path}"
            )
            lines = LineSequence.split(self._file_repository.read_text(path))
            validate_position(len(lines), position)

            lines.insert(position, list(new_lines))
            content = lines.join()
            self._file_repository.write_text(path, content)
            return InsertLinesResult(
                path=path,
                position=position,
                inserted_count=len(new_lines),
                total_lines=len(LineSequence.split(content)),
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error inserting lines: {e}")
            raise FileRepositoryError(f"Failed to insert lines in {path}: {str(e)}")
