"""
Tests for the LineSequence entity.
"""

import pytest

from file_editor.entities.LineSequence import LineSequence


class TestLineSequence:
    """Test cases for the LineSequence entity."""

    @pytest.mark.parametrize(
        "content",
        ["", "a", "a\nb", "a\nb\n", "\n\n", "a\r\nb\r\n", "mixed\r\nends\nhere\r"],
    )
    def test_split_join_round_trip(self, content):
        """Joining the split content reproduces it exactly."""
        assert LineSequence.split(content).join() == content

    def test_split_does_not_normalize_carriage_returns(self):
        """CRLF content keeps the carriage return on each line."""
        lines = LineSequence.split("one\r\ntwo\r\n")
        assert lines.lines == ["one\r", "two\r", ""]

    def test_empty_content_is_one_empty_line(self):
        """An empty file counts as a single empty line."""
        assert len(LineSequence.split("")) == 1

    def test_trailing_newline_adds_empty_line(self):
        """A trailing newline yields a trailing empty line."""
        assert LineSequence.split("a\nb\n").lines == ["a", "b", ""]

    def test_get_slice_and_records_are_one_based(self):
        """Slices and records use 1-based inclusive numbering."""
        lines = LineSequence.split("a\nb\nc\nd")

        assert lines.get_slice(2, 3) == ["b", "c"]
        assert lines.get_records(2, 3) == [
            {"number": 2, "text": "b"},
            {"number": 3, "text": "c"},
        ]

    def test_replace_line(self):
        lines = LineSequence.split("a\nb\nc")
        lines.replace_line(2, "B")
        assert lines.join() == "a\nB\nc"

    def test_insert_at_start_and_end(self):
        """Position 0 inserts before line 1, position N after line N."""
        lines = LineSequence.split("a\nb")
        lines.insert(0, ["x"])
        lines.insert(len(lines), ["z"])
        assert lines.join() == "x\na\nb\nz"

    def test_delete_returns_removed_count(self):
        lines = LineSequence.split("a\nb\nc\nd\ne")
        removed = lines.delete(2, 3)

        assert removed == 2
        assert lines.join() == "a\nd\ne"

    def test_str(self):
        assert str(LineSequence.split("a\nb")) == "LineSequence(lines=2)"
