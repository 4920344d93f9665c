"""
Tests for the SearchContentUseCase.
"""

import os

import pytest
from unittest.mock import MagicMock

from conftest import write_file
from file_editor.adapters.files.default_exclusion_policy import DefaultExclusionPolicy
from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.exceptions import FileRepositoryError
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.use_cases.files.search_content import SearchContentUseCase


class TestSearchContentUseCase:
    """Test cases for the SearchContentUseCase."""

    def test_execute_recursive(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        """Matches are found in subdirectories but never in excluded ones."""
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "test")

        files = sorted(os.path.relpath(m.file, temp_directory) for m in result.matches)
        assert files == [
            os.path.join("subdir", "deep", "note.txt"),
            os.path.join("subdir", "test3.md"),
            "test1.txt",
        ]
        assert result.matches_count == 3

    def test_execute_non_recursive(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "test", recursive=False)

        assert [os.path.basename(m.file) for m in result.matches] == ["test1.txt"]

    def test_execute_match_record(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        """Records carry the file path, 1-based line and trimmed text."""
        path = write_file(os.path.join(temp_directory, "pad.txt"), "x\n   needle here  \ny")
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "needle")

        assert len(result.matches) == 1
        match = result.matches[0]
        assert match.file == path
        assert match.line == 2
        assert match.content == "needle here"

    def test_execute_literal_or_regex(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        """A line matches literally or as a regular expression."""
        write_file(
            os.path.join(temp_directory, "mix.txt"),
            "value a.b here\nvalue axb here\nnothing",
        )
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)

        regex_result = use_case.execute(temp_directory, "a.b", recursive=False)
        assert [m.line for m in regex_result.matches] == [1, 2]

        literal_result = use_case.execute(temp_directory, "a-b", recursive=False)
        assert literal_result.matches_count == 0

    def test_execute_invalid_regex_matches_nothing(
        self, temp_directory, fs_adapter, exclusion_policy, mock_logger
    ):
        """A pattern that does not compile skips every file, even on literal hits."""
        write_file(os.path.join(temp_directory, "calls.py"), "foo(bar\nfoo bar")
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "foo(", recursive=False)

        assert result.matches_count == 0
        assert result.matches == []
        mock_logger.warning.assert_called_once()

    def test_execute_invalid_regex_still_checks_root(self, fs_adapter, exclusion_policy, mock_logger):
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory does not exist"):
            use_case.execute("/nonexistent/directory", "foo(")

    def test_execute_invalid_regex_reads_no_file(self, exclusion_policy, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.scan_directory.return_value = [DirectoryEntry("/dir/a.txt", is_dir=False)]
        use_case = SearchContentUseCase(mock_repository, exclusion_policy, logger=mock_logger)
        result = use_case.execute("/dir", "[")

        assert result.matches_count == 0
        mock_repository.read_text.assert_not_called()

    def test_execute_never_reports_excluded_directories(
        self, temp_directory, fs_adapter, exclusion_policy, mock_logger
    ):
        """Content inside .git or node_modules is never reported."""
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)

        for recursive in (True, False):
            result = use_case.execute(temp_directory, "inside", recursive=recursive)
            assert result.matches_count == 0

    def test_execute_caps_results(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        """Only the first 50 matches are returned; the count is the full total."""
        write_file(
            os.path.join(temp_directory, "many.txt"),
            "\n".join(f"hit {i}" for i in range(120)),
        )
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "hit")

        assert result.matches_count == 120
        assert len(result.matches) == 50
        assert result.matches[0].content == "hit 0"

    def test_execute_custom_cap(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        use_case = SearchContentUseCase(
            fs_adapter, exclusion_policy, max_results=1, logger=mock_logger
        )
        result = use_case.execute(temp_directory, "test")

        assert len(result.matches) == 1
        assert result.matches_count == 3

    def test_execute_skips_binary_files(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        """Files that do not decode as text are skipped silently."""
        with open(os.path.join(temp_directory, "blob.bin"), "wb") as f:
            f.write(b"test\xff\xfe")
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        result = use_case.execute(temp_directory, "test", recursive=False)

        assert [os.path.basename(m.file) for m in result.matches] == ["test1.txt"]

    def test_execute_skips_unreadable_subdirectory(self, exclusion_policy, mock_logger):
        """Only failures listing the root propagate."""
        mock_repository = MagicMock(spec=FileRepositoryPort)

        def scan(directory):
            if directory == "/root":
                return [
                    DirectoryEntry("/root/locked", is_dir=True),
                    DirectoryEntry("/root/a.txt", is_dir=False),
                ]
            raise FileRepositoryError("denied")

        mock_repository.scan_directory.side_effect = scan
        mock_repository.read_text.return_value = "match"
        use_case = SearchContentUseCase(mock_repository, exclusion_policy, logger=mock_logger)
        result = use_case.execute("/root", "match")

        assert [m.file for m in result.matches] == ["/root/a.txt"]

    def test_execute_root_error(self, fs_adapter, exclusion_policy, mock_logger):
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory does not exist"):
            use_case.execute("/nonexistent/directory", "x")

    def test_execute_uses_injected_policy(self, temp_directory, fs_adapter, mock_logger):
        """The exclusion policy is pluggable."""
        use_case = SearchContentUseCase(
            fs_adapter, DefaultExclusionPolicy(["subdir"]), logger=mock_logger
        )
        result = use_case.execute(temp_directory, "inside")

        names = sorted(os.path.basename(m.file) for m in result.matches)
        assert names == ["config", "pkg.js"]

    def test_execute_logging(self, temp_directory, fs_adapter, exclusion_policy, mock_logger):
        use_case = SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger)
        use_case.execute(temp_directory, "test")

        mock_logger.info.assert_any_call(
            f"Searching for pattern 'test' in directory: {temp_directory}"
        )
        mock_logger.info.assert_any_call("Found 3 matches for pattern 'test'")
