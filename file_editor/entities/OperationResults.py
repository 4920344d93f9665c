"""
Result entities returned by the line and traversal use cases.
"""

from dataclasses import dataclass, field
from typing import Any

from file_editor.entities.DirectoryEntry import DirectoryEntry


@dataclass(frozen=True)
class SearchMatch:
    """A single line-level search hit."""

    file: str
    line: int
    content: str

    def get_details(self) -> dict[str, Any]:
        return {"file": self.file, "line": self.line, "content": self.content}


@dataclass(frozen=True)
class ReadLinesResult:
    path: str
    total_lines: int
    start_line: int
    end_line: int
    content: str
    lines: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class EditLinesResult:
    path: str
    edit_count: int
    edited_lines: list[int]
    total_lines: int


@dataclass(frozen=True)
class InsertLinesResult:
    path: str
    position: int
    inserted_count: int
    total_lines: int


@dataclass(frozen=True)
class DeleteLinesResult:
    path: str
    start_line: int
    end_line: int
    deleted_count: int
    remaining_lines: int


@dataclass(frozen=True)
class RegexReplaceResult:
    path: str
    pattern: str
    match_count: int


@dataclass(frozen=True)
class SearchResult:
    """Search hits truncated to the result cap; matches_count is the full total."""

    directory: str
    pattern: str
    matches_count: int
    matches: list[SearchMatch] = field(default_factory=list)


@dataclass(frozen=True)
class DirectoryListing:
    path: str
    items: list[DirectoryEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)
