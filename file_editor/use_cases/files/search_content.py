"""
Use case for searching text inside the files of a directory tree.
"""

import logging
import re
from typing import Optional

from file_editor.entities.LineSequence import LineSequence
from file_editor.entities.OperationResults import SearchMatch, SearchResult
from file_editor.exceptions import BaseAppError, FileRepositoryError
from file_editor.ports.files.exclusion_policy_port import ExclusionPolicyPort
from file_editor.ports.files.file_repository_port import FileRepositoryPort

DEFAULT_MAX_RESULTS = 50


class SearchContentUseCase:
    """Use case for per-line pattern search across a directory tree."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        exclusion_policy: ExclusionPolicyPort,
        max_results: int = DEFAULT_MAX_RESULTS,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            exclusion_policy: Policy naming directories never searched
            max_results: Number of matches returned after collection
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._exclusion_policy = exclusion_policy
        self._max_results = max_results
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str, pattern: str, recursive: bool = True) -> SearchResult:
        """
        Search every readable file under `directory` for `pattern`.

        A line matches when it contains `pattern` literally or when `pattern`
        matches it as a regular expression. A pattern that does not compile
        skips every file, so the result is empty. Every match is collected
        before the result is truncated to the result cap.

        Args:
            directory: Root directory of the search
            pattern: Literal text or regular expression
            recursive: Whether to descend into subdirectories

        Returns:
            SearchResult with the truncated matches and the full match count

        Raises:
            FileRepositoryError: If the root directory cannot be listed
        """
        try:
            self._logger.info(
                f"Searching for pattern '{pattern}' in directory: {directory}"
            )
            regex = self._compile(pattern)
            matches: list[SearchMatch] = []
            self._search_directory(directory, pattern, regex, recursive, matches, is_root=True)
            self._logger.info(f"Found {len(matches)} matches for pattern '{pattern}'")
            return SearchResult(
                directory=directory,
                pattern=pattern,
                matches_count=len(matches),
                matches=matches[: self._max_results],
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise FileRepositoryError(
                f"Failed to search files in {directory} with pattern {pattern}: {str(e)}"
            )

    def _compile(self, pattern: str) -> Optional[re.Pattern[str]]:
        try:
            return re.compile(pattern)
        except re.error as e:
            self._logger.warning(
                f"Pattern '{pattern}' is not a valid regular expression ({e}); "
                "no file can match"
            )
            return None

    def _search_directory(
        self,
        directory: str,
        pattern: str,
        regex: Optional[re.Pattern[str]],
        recursive: bool,
        matches: list[SearchMatch],
        is_root: bool = False,
    ) -> None:
        try:
            entries = self._file_repository.scan_directory(directory)
        except FileRepositoryError as e:
            if is_root:
                raise
            self._logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return

        for entry in entries:
            if entry.is_dir:
                if recursive and not self._exclusion_policy.is_excluded(entry.name):
                    self._search_directory(entry.path, pattern, regex, recursive, matches)
                continue
            self._search_file(entry.path, pattern, regex, matches)

    def _search_file(
        self,
        path: str,
        pattern: str,
        regex: Optional[re.Pattern[str]],
        matches: list[SearchMatch],
    ) -> None:
        if regex is None:
            self._logger.debug(f"Skipping {path}: pattern does not compile")
            return
        try:
            content = self._file_repository.read_text(path)
        except FileRepositoryError as e:
            self._logger.debug(f"Skipping unreadable file {path}: {e}")
            return

        for index, line in enumerate(LineSequence.split(content).lines):
            if pattern in line or regex.search(line):
                matches.append(SearchMatch(file=path, line=index + 1, content=line.strip()))
