"""
Use case for listing a directory, flat or recursively.
"""

import logging
from typing import Optional, Sequence

from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.entities.OperationResults import DirectoryListing
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.exclusion_policy_port import ExclusionPolicyPort
from file_editor.ports.files.file_repository_port import FileRepositoryPort

DEFAULT_MAX_DEPTH = 3


class ListDirectoryUseCase:
    """Use case for listing directory entries."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        exclusion_policy: ExclusionPolicyPort,
        default_max_depth: int = DEFAULT_MAX_DEPTH,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            exclusion_policy: Policy naming directories never listed recursively
            default_max_depth: Depth bound used when none is given
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._exclusion_policy = exclusion_policy
        self._default_max_depth = default_max_depth
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        path: str,
        recursive: bool = False,
        extensions: Optional[Sequence[str]] = None,
        max_depth: Optional[int] = None,
    ) -> DirectoryListing:
        """
        List the entries of a directory.

        A flat listing returns the direct children only. A recursive listing
        walks down to `max_depth` (the root is depth 0), skips excluded
        directories, keeps files whose extension is in `extensions` and always
        keeps directories.

        Args:
            path: Directory to list
            recursive: Whether to walk subdirectories
            extensions: Extensions with leading dot (e.g. [".py"]), recursive only
            max_depth: Deepest level to list, recursive only

        Returns:
            DirectoryListing with the entries in traversal order

        Raises:
            FileRepositoryError: If the directory cannot be listed
        """
        try:
            self._logger.info(f"Listing directory: {path} (recursive={recursive})")
            if recursive:
                depth = self._default_max_depth if max_depth is None else max_depth
                allowed = None if extensions is None else frozenset(extensions)
                items = self._list_recursive(path, allowed, 0, depth)
            else:
                items = self._file_repository.scan_directory(path)
            self._logger.info(f"Found {len(items)} entries")
            return DirectoryListing(path=path, items=items)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileRepositoryError(f"Failed to list directory {path}: {str(e)}")

    def _list_recursive(
        self,
        directory: str,
        extensions: Optional[frozenset[str]],
        current_depth: int,
        max_depth: int,
    ) -> list[DirectoryEntry]:
        if current_depth > max_depth:
            return []

        results: list[DirectoryEntry] = []
        for entry in self._file_repository.scan_directory(directory):
            if entry.is_dir:
                if self._exclusion_policy.is_excluded(entry.name):
                    continue
                results.append(entry)
                if current_depth < max_depth:
                    results.extend(
                        self._list_recursive(
                            entry.path, extensions, current_depth + 1, max_depth
                        )
                    )
            elif extensions is None or entry.extension in extensions:
                try:
                    results.append(entry.with_size(self._file_repository.get_size(entry.path)))
                except FileRepositoryError as e:
                    # Log the error but continue with other files
                    self._logger.warning(f"Could not process file {entry.path}: {e}")
        return results
