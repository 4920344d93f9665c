"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from file_editor.entities.DirectoryEntry import DirectoryEntry
from file_editor.entities.OperationResults import ReadLinesResult, SearchResult


class EntryInfo(BaseModel):
    """Schema for a directory entry."""

    name: str = Field(..., description="Entry name")
    path: str = Field(..., description="Full entry path")
    type: str = Field(..., description="'file' or 'directory'")
    size: Optional[int] = Field(None, description="File size in bytes (recursive listing)")
    extension: Optional[str] = Field(None, description="File extension with leading dot")

    @classmethod
    def from_entity(cls, entry: DirectoryEntry):
        """Create an EntryInfo schema from a DirectoryEntry entity."""
        return cls(**entry.get_details())


class DirectoryListingResponse(BaseModel):
    """Schema for directory listing response."""

    path: str = Field(..., description="Listed directory")
    count: int = Field(..., description="Number of entries")
    items: List[EntryInfo] = Field(..., description="Entries in traversal order")


class MatchInfo(BaseModel):
    """Schema for a single search hit."""

    file: str = Field(..., description="File path")
    line: int = Field(..., description="1-based line number")
    content: str = Field(..., description="Trimmed line text")


class SearchResponse(BaseModel):
    """Schema for content search response."""

    directory: str
    pattern: str
    matches_count: int = Field(..., description="Total matches before truncation")
    matches: List[MatchInfo] = Field(..., description="Matches, capped")

    @classmethod
    def from_result(cls, result: SearchResult):
        return cls(
            directory=result.directory,
            pattern=result.pattern,
            matches_count=result.matches_count,
            matches=[MatchInfo(**m.get_details()) for m in result.matches],
        )


class LineRecord(BaseModel):
    number: int
    text: str


class ReadLinesResponse(BaseModel):
    """Schema for line range read response."""

    path: str
    total_lines: int
    start_line: int
    end_line: int
    content: str = Field(..., description="Selected lines joined with newlines")
    lines: List[LineRecord] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ReadLinesResult):
        return cls(
            path=result.path,
            total_lines=result.total_lines,
            start_line=result.start_line,
            end_line=result.end_line,
            content=result.content,
            lines=[LineRecord(**r) for r in result.lines],
        )


class ToolCallRequest(BaseModel):
    """Schema for a tool invocation."""

    name: str = Field(..., description="Tool name")
    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments passed to the tool"
    )


class ToolCallResponse(BaseModel):
    """Schema for a tool invocation result."""

    content: str = Field(..., description="JSON result, or 'Error: ...' on failure")
    is_error: bool = Field(False, description="Whether the invocation failed")


class ToolInfo(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any]


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
