"""
File metadata entity.
"""

import os
import stat
from datetime import datetime, timezone
from typing import Any


def _iso(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


class FileInfo:
    """Metadata of a single path taken from one stat call."""

    def __init__(self, path: str, stat_result: os.stat_result):
        self.path = path
        self.size = int(stat_result.st_size)
        self.is_file = stat.S_ISREG(stat_result.st_mode)
        self.is_directory = stat.S_ISDIR(stat_result.st_mode)
        self.modified = _iso(stat_result.st_mtime)
        self.accessed = _iso(stat_result.st_atime)
        # st_birthtime only exists on some platforms; st_ctime is the fallback
        self.created = _iso(getattr(stat_result, "st_birthtime", stat_result.st_ctime))

    @property
    def size_readable(self) -> str:
        return f"{self.size / 1024:.2f} KB"

    def get_details(self) -> dict[str, Any]:
        """
        Get file metadata.

        Returns:
            Dictionary with file metadata
        """
        return {
            "path": self.path,
            "size": self.size,
            "sizeReadable": self.size_readable,
            "created": self.created,
            "modified": self.modified,
            "accessed": self.accessed,
            "isFile": self.is_file,
            "isDirectory": self.is_directory,
        }

    def __repr__(self) -> str:
        return f"FileInfo(path='{self.path}', size={self.size})"
