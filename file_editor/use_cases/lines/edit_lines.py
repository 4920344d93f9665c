"""
Use case for overwriting individual lines of a file.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from file_editor.entities.LineSequence import LineSequence
from file_editor.entities.OperationResults import EditLinesResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.utils.range_validator import validate_line_numbers


class LineEdit(NamedTuple):
    """New content for one 1-based line."""

    line: int
    content: str


class EditLinesUseCase:
    """Use case for replacing lines by number in a single batch."""

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

    def execute(self, path: str, edits: Sequence[LineEdit]) -> EditLinesResult:
        """
        Apply a batch of line edits and write the file back.

        The whole batch is validated against the current line count before any
        edit is applied, so an out-of-range line leaves the file untouched.
        Edits are applied in order; a later edit of the same line wins.

        Args:
            path: Path of the file to edit
            edits: Line edits to apply

        Returns:
            EditLinesResult with the sorted edited line numbers

        Raises:
            LineRangeError: If any edit targets a line outside the file
            FileRepositoryError: If the file cannot be read or written
        """
        try:
            self._logger.info(f"Editing {len(edits)} lines in {path}")
            lines = LineSequence.split(self._file_repository.read_text(path))
            validate_line_numbers(len(lines), [e.line for e in edits])

            for edit in edits:
                lines.replace_line(edit.line, edit.content)

            content = lines.join()
            self._file_repository.write_text(path, content)
            result = EditLinesResult(
                path=path,
                edit_count=len(edits),
                edited_lines=sorted({e.line for e in edits}),
                total_lines=len(LineSequence.split(content)),
            )
            self._logger.info(f"Edited lines {result.edited_lines} in {path}")
            return result
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error editing lines: {e}")
            raise FileRepositoryError(f"Failed to edit lines in {path}: {str(e)}")
