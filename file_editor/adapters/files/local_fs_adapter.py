"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.entities.FileInfo import FileInfo
from file_editor.exceptions import FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(
        self, logger: logging.Logger | None = None, encoding: str = "utf-8"
    ):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            encoding: Text encoding used for every read and write
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._encoding = encoding

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    @override
    def read_text(self, path: str) -> str:
        try:
            # newline="" keeps "\r\n" intact so line splitting sees the raw bytes
            with open(path, "r", encoding=self._encoding, newline="") as f:
                return f.read()
        except FileNotFoundError:
            raise FileRepositoryError(f"File does not exist: {path}")
        except IsADirectoryError:
            raise FileRepositoryError(f"Path is a directory: {path}")
        except UnicodeDecodeError:
            raise FileRepositoryError(f"File is not valid {self._encoding} text: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def write_text(self, path: str, content: str) -> None:
        try:
            with open(path, "w", encoding=self._encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")
        self._logger.debug(f"Wrote {len(content)} characters to {path}")

    @override
    def scan_directory(self, directory: str) -> list[DirectoryEntry]:
        """
        List the direct children of a directory, sorted by name.

        Symbolic links are reported by what they are, not what they point to,
        so a link to a directory is never descended into.

        Args:
            directory: Path to the directory to scan

        Returns:
            List of DirectoryEntry entities without sizes

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            with os.scandir(directory) as it:
                entries = [
                    DirectoryEntry(
                        os.path.join(directory, item.name),
                        item.is_dir(follow_symlinks=False),
                    )
                    for item in it
                ]
            return sorted(entries, key=lambda e: e.name)

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def get_size(self, path: str) -> int:
        try:
            return os.path.getsize(path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file size: {e}")

    @override
    def get_file_info(self, path: str) -> FileInfo:
        try:
            return FileInfo(path, os.stat(path))
        except FileNotFoundError:
            raise FileRepositoryError(f"File does not exist: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file info for {path}: {e}")
