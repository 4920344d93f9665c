"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from file_editor.adapters.files.default_exclusion_policy import DefaultExclusionPolicy
from file_editor.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_editor.container import DependencyContainer
from file_editor.use_cases.files.file_info import GetFileInfoUseCase
from file_editor.use_cases.files.list_directory import ListDirectoryUseCase
from file_editor.use_cases.files.regex_replace import RegexReplaceUseCase
from file_editor.use_cases.files.search_content import SearchContentUseCase
from file_editor.use_cases.lines.delete_lines import DeleteLinesUseCase
from file_editor.use_cases.lines.edit_lines import EditLinesUseCase
from file_editor.use_cases.lines.insert_lines import InsertLinesUseCase
from file_editor.use_cases.lines.read_lines import ReadLinesUseCase
from file_editor.use_cases.tools.files_tools import FileEditorToolsHandler


def write_file(path: str, content: str) -> str:
    """Write raw content without newline translation and return the path."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path


def read_file(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing file operations.

    Layout:
        test1.txt            "This is a test file."
        test2.py             "print('Hello, world!')"
        subdir/test3.md      "# Test Markdown\\n\\nThis is a test."
        subdir/deep/note.txt "deep test"
        .git/config          "test inside git"
        node_modules/pkg.js  "test inside node_modules"

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        write_file(os.path.join(temp_dir, "test1.txt"), "This is a test file.")
        write_file(os.path.join(temp_dir, "test2.py"), "print('Hello, world!')")
        write_file(
            os.path.join(temp_dir, "subdir", "test3.md"),
            "# Test Markdown\n\nThis is a test.",
        )
        write_file(os.path.join(temp_dir, "subdir", "deep", "note.txt"), "deep test")
        write_file(os.path.join(temp_dir, ".git", "config"), "test inside git")
        write_file(
            os.path.join(temp_dir, "node_modules", "pkg.js"), "test inside node_modules"
        )

        yield temp_dir


@pytest.fixture
def five_line_file():
    """
    Create a temporary 5-line file "a\\nb\\nc\\nd\\ne".

    Returns:
        Path to the file
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield write_file(os.path.join(temp_dir, "letters.txt"), "a\nb\nc\nd\ne")


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fs_adapter(mock_logger):
    """Local file system adapter with a mocked logger."""
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def exclusion_policy():
    return DefaultExclusionPolicy()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def tools_handler(fs_adapter, exclusion_policy, mock_logger):
    """Tools handler wired to real use cases over the local file system."""
    return FileEditorToolsHandler(
        ReadLinesUseCase(fs_adapter, mock_logger),
        EditLinesUseCase(fs_adapter, mock_logger),
        InsertLinesUseCase(fs_adapter, mock_logger),
        DeleteLinesUseCase(fs_adapter, mock_logger),
        RegexReplaceUseCase(fs_adapter, mock_logger),
        SearchContentUseCase(fs_adapter, exclusion_policy, logger=mock_logger),
        ListDirectoryUseCase(fs_adapter, exclusion_policy, logger=mock_logger),
        GetFileInfoUseCase(fs_adapter, mock_logger),
        mock_logger,
    )
