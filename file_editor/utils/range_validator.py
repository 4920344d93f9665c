"""Line range checks applied before any line mutation.

Every check takes the current line count `n` of the file. Line numbers are
1-based and inclusive; insertion positions are 0-based gaps between lines.
"""

from __future__ import annotations

from typing import Iterable

from file_editor.exceptions import LineRangeError


def validate_range(n: int, start_line: int, end_line: int) -> None:
    if start_line < 1 or end_line > n or start_line > end_line:
        raise LineRangeError(
            f"Invalid line range {start_line}-{end_line}. The file has {n} lines."
        )


def validate_line_numbers(n: int, line_numbers: Iterable[int]) -> None:
    """Check a whole batch up front; the first bad number aborts the batch."""
    for line_number in line_numbers:
        if line_number < 1 or line_number > n:
            raise LineRangeError(
                f"Line {line_number} is out of range. The file has {n} lines."
            )


def validate_position(n: int, position: int) -> None:
    if position < 0 or position > n:
        raise LineRangeError(
            f"Position {position} is out of range. The file has {n} lines."
        )
