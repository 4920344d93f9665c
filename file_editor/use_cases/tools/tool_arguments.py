"""
Pydantic argument models for each tool.

Tool arguments use camelCase names on the wire; snake_case is accepted too,
and `filePath` is accepted wherever `path` is.
"""

from typing import List, Optional, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from file_editor.exceptions import InvalidArgumentsError

_PATH = AliasChoices("path", "filePath")


class ToolArguments(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ReadFileLinesArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    start_line: int = Field(..., validation_alias=AliasChoices("startLine", "start_line"))
    end_line: int = Field(..., validation_alias=AliasChoices("endLine", "end_line"))


class LineEditArgs(ToolArguments):
    line: int = Field(..., description="Line number to edit (1-based)")
    content: str = Field(..., description="New content of the line")


class EditFileLinesArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    edits: List[LineEditArgs] = Field(..., description="Edits to apply")


class InsertLinesArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    position: int = Field(..., description="0 = start, N = after line N")
    lines: List[str] = Field(..., description="Lines to insert")


class DeleteLinesArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    start_line: int = Field(..., validation_alias=AliasChoices("startLine", "start_line"))
    end_line: int = Field(..., validation_alias=AliasChoices("endLine", "end_line"))


class RegexReplaceArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    pattern: str
    replacement: str
    flags: Optional[str] = Field("g", description="Regex flag characters")


class SearchFilesArgs(ToolArguments):
    directory: str
    pattern: str
    recursive: Optional[bool] = Field(True, description="Search subdirectories")


class ListDirectoryArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)
    recursive: Optional[bool] = Field(False, description="List recursively")
    extensions: Optional[List[str]] = Field(None, description="e.g. ['.py', '.md']")
    max_depth: Optional[int] = Field(
        None, validation_alias=AliasChoices("maxDepth", "max_depth")
    )


class GetFileInfoArgs(ToolArguments):
    path: str = Field(..., validation_alias=_PATH)


ArgsT = TypeVar("ArgsT", bound=ToolArguments)


def parse_arguments(model: Type[ArgsT], tool: str, arguments: dict[str, object]) -> ArgsT:
    """
    Validate raw tool arguments against a model.

    Raises:
        InvalidArgumentsError: If the arguments do not match the model
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArgumentsError(f"Invalid arguments for {tool}: {problems}")
