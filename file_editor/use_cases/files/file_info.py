"""
Use case for reading file metadata.
"""

import logging
from typing import Optional

from file_editor.entities.FileInfo import FileInfo
from file_editor.exceptions import FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort


class GetFileInfoUseCase:
    """Use case for reading size, timestamps and kind of a path."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> FileInfo:
        try:
            self._logger.info(f"Getting file info for: {path}")
            return self._file_repository.get_file_info(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error getting file info: {e}")
            raise FileRepositoryError(f"Failed to get file info for {path}: {str(e)}")
