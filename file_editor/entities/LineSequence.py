"""
Line sequence entity: the line-indexed view of a text file.
"""

from typing import Any

LINE_SEPARATOR = "\n"


class LineSequence:
    """
    Ordered lines obtained by splitting text content on the newline character.

    Line numbers exposed to callers are 1-based: index 0 holds line 1.
    Carriage returns are not normalized, so a CRLF file keeps a trailing
    "\\r" on every line and joins back to the same bytes.
    """

    def __init__(self, lines: list[str]):
        """
        Initialize the LineSequence entity.

        Args:
            lines: Lines without their separators
        """
        self.lines = list(lines)

    @classmethod
    def split(cls, content: str) -> "LineSequence":
        """
        Build a sequence from whole-file content.

        Args:
            content: Full text content

        Returns:
            LineSequence with one entry per newline-separated line
        """
        return cls(content.split(LINE_SEPARATOR))

    def join(self) -> str:
        """Re-join the lines into whole-file content."""
        return LINE_SEPARATOR.join(self.lines)

    def get_slice(self, start_line: int, end_line: int) -> list[str]:
        """Return lines start_line..end_line (1-based, inclusive)."""
        return self.lines[start_line - 1 : end_line]

    def get_records(self, start_line: int, end_line: int) -> list[dict[str, Any]]:
        """
        Return addressable records for lines start_line..end_line.

        Returns:
            List of {"number": int, "text": str} dictionaries
        """
        return [
            {"number": start_line + offset, "text": text}
            for offset, text in enumerate(self.get_slice(start_line, end_line))
        ]

    def replace_line(self, line_number: int, content: str) -> None:
        """Overwrite a single 1-based line."""
        self.lines[line_number - 1] = content

    def insert(self, position: int, new_lines: list[str]) -> None:
        """Splice new_lines in after line `position` (0 inserts before line 1)."""
        self.lines[position:position] = list(new_lines)

    def delete(self, start_line: int, end_line: int) -> int:
        """
        Remove lines start_line..end_line (1-based, inclusive).

        Returns:
            Number of removed lines
        """
        removed = end_line - start_line + 1
        del self.lines[start_line - 1 : end_line]
        return removed

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        """String representation of the LineSequence."""
        return f"LineSequence(lines={len(self.lines)})"

    def __repr__(self) -> str:
        """Detailed string representation of the LineSequence."""
        return f"LineSequence({self.lines!r})"
