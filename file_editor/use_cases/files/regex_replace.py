"""
Use case for regular-expression substitution over a whole file.
"""

import logging
from typing import Optional

from file_editor.entities.OperationResults import RegexReplaceResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.utils.regex_flags import (
    DEFAULT_FLAGS,
    compile_pattern,
    count_matches,
    substitute,
)


class RegexReplaceUseCase:
    """Use case for replacing pattern matches in a file."""

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

    def execute(
        self,
        path: str,
        pattern: str,
        replacement: str,
        flags: Optional[str] = DEFAULT_FLAGS,
    ) -> RegexReplaceResult:
        """
        Replace matches of `pattern` in a file.

        The match count is taken from the original content. The file is
        always written back, also when nothing matched.

        Args:
            path: Path of the file to modify
            pattern: Regular expression
            replacement: "$"-style replacement template
            flags: Flag characters (default "g")

        Returns:
            RegexReplaceResult with the number of matches

        Raises:
            PatternError: If the pattern or flags are invalid (nothing is written)
            FileRepositoryError: If the file cannot be read or written
        """
        try:
            self._logger.info(
                f"Replacing pattern '{pattern}' with flags '{flags}' in {path}"
            )
            compiled = compile_pattern(pattern, flags)
            content = self._file_repository.read_text(path)

            match_count = count_matches(compiled, content)
            self._file_repository.write_text(
                path, substitute(compiled, replacement, content)
            )
            self._logger.info(f"Replaced {match_count} matches in {path}")
            return RegexReplaceResult(path=path, pattern=pattern, match_count=match_count)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error replacing pattern: {e}")
            raise FileRepositoryError(
                f"Failed to replace pattern {pattern} in {path}: {str(e)}"
            )
