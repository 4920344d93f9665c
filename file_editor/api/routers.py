"""
FastAPI router definitions for the API endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from file_editor.api.dependencies import (
    get_list_directory_uc,
    get_read_lines_uc,
    get_search_content_uc,
    get_tools_handler,
)
from file_editor.api.schemas import (
    DirectoryListingResponse,
    EntryInfo,
    ErrorResponse,
    ReadLinesResponse,
    SearchResponse,
    ToolCallRequest,
    ToolCallResponse,
    ToolInfo,
)
from file_editor.use_cases.tools.tool_call import call_tool

router = APIRouter()


@router.get("/tools", response_model=List[ToolInfo])
def list_tools():
    """
    List the tools that can be invoked through /tools/call.

    Returns:
        List of tool specifications
    """
    return [ToolInfo(**spec) for spec in get_tools_handler().available_tools()]


@router.post("/tools/call", response_model=ToolCallResponse)
def invoke_tool(body: ToolCallRequest):
    """
    Invoke a tool by name.

    Failures are returned in the envelope (is_error=true), not as HTTP errors.

    Args:
        body: Tool name and arguments

    Returns:
        ToolCallResponse: JSON text of the result, or the error message
    """
    result = call_tool(get_tools_handler(), body.name, body.arguments)
    return ToolCallResponse(content=result.text, is_error=result.is_error)


@router.get(
    "/files",
    response_model=DirectoryListingResponse,
    responses={400: {"model": ErrorResponse}},
)
def list_directory(
    path: str = Query(..., description="Directory path to list"),
    recursive: Optional[bool] = Query(False, description="Whether to list recursively"),
    extensions: Optional[List[str]] = Query(
        None, description="Extensions to keep when recursive (e.g. '.py')"
    ),
    max_depth: Optional[int] = Query(None, description="Maximum depth when recursive"),
):
    """
    List entries of a directory.

    Raises:
        HTTPException: If listing fails
    """
    try:
        listing = get_list_directory_uc().execute(
            path, recursive=bool(recursive), extensions=extensions, max_depth=max_depth
        )
        return DirectoryListingResponse(
            path=listing.path,
            count=listing.count,
            items=[EntryInfo.from_entity(e) for e in listing.items],
        )
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/files/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}},
)
def search_files(
    directory: str = Query(..., description="Directory path to search in"),
    pattern: str = Query(..., description="Text or regular expression"),
    recursive: Optional[bool] = Query(True, description="Whether to search recursively"),
):
    """
    Search file contents line by line.

    Raises:
        HTTPException: If searching fails
    """
    try:
        result = get_search_content_uc().execute(directory, pattern, recursive is not False)
        return SearchResponse.from_result(result)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/files/lines",
    response_model=ReadLinesResponse,
    responses={400: {"model": ErrorResponse}},
)
def read_lines(
    path: str = Query(..., description="File to read"),
    start_line: int = Query(..., description="First line (1-based)"),
    end_line: int = Query(..., description="Last line (inclusive)"),
):
    """
    Read an inclusive range of lines.

    Raises:
        HTTPException: If the range is invalid or the file cannot be read
    """
    try:
        return ReadLinesResponse.from_result(
            get_read_lines_uc().execute(path, start_line, end_line)
        )
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))
