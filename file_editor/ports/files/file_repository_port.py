"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.entities.FileInfo import FileInfo


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read the whole content of a text file.

        Args:
            path: Path to the file to read

        Returns:
            File content, without newline translation

        Raises:
            FileRepositoryError: If the file cannot be read or decoded
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """
        Replace the whole content of a text file.

        Args:
            path: Path to the file to write
            content: New content, written without newline translation

        Raises:
            FileRepositoryError: If the file cannot be written
        """
        pass

    @abstractmethod
    def scan_directory(self, directory: str) -> list[DirectoryEntry]:
        """
        List the direct children of a directory, sorted by name.

        Args:
            directory: Path to the directory to scan

        Returns:
            List of DirectoryEntry entities without sizes

        Raises:
            FileRepositoryError: If the directory cannot be listed
        """
        pass

    @abstractmethod
    def get_size(self, path: str) -> int:
        """
        Get the size of a file in bytes.

        Raises:
            FileRepositoryError: If the path cannot be stat'ed
        """
        pass

    @abstractmethod
    def get_file_info(self, path: str) -> FileInfo:
        """
        Get metadata of a path.

        Args:
            path: Path to inspect

        Returns:
            FileInfo entity

        Raises:
            FileRepositoryError: If the path cannot be stat'ed
        """
        pass
