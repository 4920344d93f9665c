"""
Tests for the LocalFileSystemAdapter.
"""

import os
from unittest.mock import patch

import pytest

from conftest import read_file, write_file
from file_editor.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.exceptions import FileRepositoryError


class TestLocalFileSystemAdapter:
    """Test cases for the LocalFileSystemAdapter."""

    def test_read_text_success(self, temp_directory, mock_logger):
        """Test reading a whole file."""
        adapter = LocalFileSystemAdapter(mock_logger)
        content = adapter.read_text(os.path.join(temp_directory, "test1.txt"))

        assert content == "This is a test file."

    def test_read_text_keeps_crlf(self, temp_directory, mock_logger):
        """CRLF line endings are returned untranslated."""
        path = write_file(os.path.join(temp_directory, "crlf.txt"), "a\r\nb\r\n")
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.read_text(path) == "a\r\nb\r\n"

    def test_read_text_nonexistent_file(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="File does not exist"):
            adapter.read_text("/nonexistent/file.txt")

    def test_read_text_directory(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Path is a directory"):
            adapter.read_text(temp_directory)

    def test_read_text_invalid_utf8(self, temp_directory, mock_logger):
        """Binary content is reported as not being text."""
        path = os.path.join(temp_directory, "blob.bin")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe\x00\x81")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="not valid utf-8 text"):
            adapter.read_text(path)

    def test_write_text_round_trip(self, temp_directory, mock_logger):
        """Written content is stored byte for byte."""
        path = os.path.join(temp_directory, "out.txt")
        adapter = LocalFileSystemAdapter(mock_logger)
        adapter.write_text(path, "x\r\ny\n")

        assert read_file(path) == "x\r\ny\n"

    def test_write_text_missing_directory(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to write"):
            adapter.write_text("/nonexistent/dir/out.txt", "x")

    def test_scan_directory_sorted(self, temp_directory, mock_logger):
        """Direct children are returned sorted by name with their kind."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entries = adapter.scan_directory(temp_directory)

        assert [e.name for e in entries] == [
            ".git",
            "node_modules",
            "subdir",
            "test1.txt",
            "test2.py",
        ]
        assert all(isinstance(e, DirectoryEntry) for e in entries)
        assert {e.name for e in entries if e.is_dir} == {".git", "node_modules", "subdir"}
        assert all(e.size is None for e in entries)

    def test_scan_directory_nonexistent(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory does not exist"):
            adapter.scan_directory("/nonexistent/directory")

    def test_scan_directory_with_file_path(self, temp_directory, mock_logger):
        test_file = os.path.join(temp_directory, "test1.txt")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Path is not a directory"):
            adapter.scan_directory(test_file)

    @patch("os.scandir")
    def test_scan_directory_with_os_error(self, mock_scandir, temp_directory, mock_logger):
        """Test scan_directory when os.scandir raises an exception."""
        mock_scandir.side_effect = PermissionError("denied")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to list files in .*: denied"):
            adapter.scan_directory(temp_directory)

    def test_get_size(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.get_size(os.path.join(temp_directory, "test2.py")) == len(
            "print('Hello, world!')"
        )

    def test_get_size_missing(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Cannot get file size"):
            adapter.get_size("/nonexistent/file.txt")

    def test_get_file_info_missing(self, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="File does not exist"):
            adapter.get_file_info("/nonexistent/file.txt")

    def test_custom_encoding(self, temp_directory, mock_logger):
        """The configured encoding is used for reads and writes."""
        path = os.path.join(temp_directory, "latin.txt")
        adapter = LocalFileSystemAdapter(mock_logger, encoding="latin-1")
        adapter.write_text(path, "café")

        with open(path, "rb") as f:
            assert f.read() == "café".encode("latin-1")
        assert adapter.read_text(path) == "café"
