"""
Directory entry domain entity.
"""

import os
from typing import Any, Optional

from file_editor.exceptions import FileRepositoryError

FILE_TYPE = "file"
DIRECTORY_TYPE = "directory"


class DirectoryEntry:
    """
    File system entry (file or directory) produced by a directory listing.
    """

    def __init__(self, path: str, is_dir: bool, size: Optional[int] = None):
        """
        Initialize the DirectoryEntry entity.

        Args:
            path: Full path of the entry
            is_dir: Whether the entry is a directory
            size: File size in bytes, None when not collected

        Raises:
            FileRepositoryError: If path is empty
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = path
        self.name = os.path.basename(path)
        self.is_dir = is_dir
        self.size = None if is_dir else size
        self.extension = "" if is_dir else os.path.splitext(self.name)[1]

    @property
    def entry_type(self) -> str:
        """Entry kind: "file" or "directory"."""
        return DIRECTORY_TYPE if self.is_dir else FILE_TYPE

    def with_size(self, size: int) -> "DirectoryEntry":
        """Return a copy of this entry carrying a file size."""
        return DirectoryEntry(self.path, self.is_dir, size)

    def get_details(self) -> dict[str, Any]:
        """
        Get the serializable entry details.

        Files carry size and extension only once a size has been collected.

        Returns:
            Dictionary with entry information
        """
        details: dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "type": self.entry_type,
        }
        if not self.is_dir and self.size is not None:
            details["size"] = self.size
            details["extension"] = self.extension
        return details

    def __str__(self) -> str:
        """String representation of the DirectoryEntry."""
        return f"DirectoryEntry(name='{self.name}', type='{self.entry_type}')"

    def __repr__(self) -> str:
        """Detailed string representation of the DirectoryEntry."""
        return f"DirectoryEntry(path='{self.path}', is_dir={self.is_dir})"
