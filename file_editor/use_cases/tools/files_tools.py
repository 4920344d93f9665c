"""
Line-editing and traversal tools mapped to the file use cases.
"""

import json
import logging
from typing import Any, Callable, Optional

from file_editor.exceptions import UnknownToolError
from file_editor.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from file_editor.use_cases.files.file_info import GetFileInfoUseCase
from file_editor.use_cases.files.list_directory import ListDirectoryUseCase
from file_editor.use_cases.files.regex_replace import RegexReplaceUseCase
from file_editor.use_cases.files.search_content import SearchContentUseCase
from file_editor.use_cases.lines.delete_lines import DeleteLinesUseCase
from file_editor.use_cases.lines.edit_lines import EditLinesUseCase, LineEdit
from file_editor.use_cases.lines.insert_lines import InsertLinesUseCase
from file_editor.use_cases.lines.read_lines import ReadLinesUseCase
from file_editor.use_cases.tools.tool_arguments import (
    DeleteLinesArgs,
    EditFileLinesArgs,
    GetFileInfoArgs,
    InsertLinesArgs,
    ListDirectoryArgs,
    ReadFileLinesArgs,
    RegexReplaceArgs,
    SearchFilesArgs,
    parse_arguments,
)
from file_editor.utils.regex_flags import DEFAULT_FLAGS

_PATH_PROPERTY = {"type": "string", "description": "Absolute path to the file"}


class FileEditorToolsHandler(ToolsHandlerPort):
    """Handler for the line-editing, search and listing tools."""

    def __init__(
        self,
        read_lines_uc: ReadLinesUseCase,
        edit_lines_uc: EditLinesUseCase,
        insert_lines_uc: InsertLinesUseCase,
        delete_lines_uc: DeleteLinesUseCase,
        regex_replace_uc: RegexReplaceUseCase,
        search_content_uc: SearchContentUseCase,
        list_directory_uc: ListDirectoryUseCase,
        file_info_uc: GetFileInfoUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the tools handler.

        Args:
            read_lines_uc: Use case for reading line ranges
            edit_lines_uc: Use case for editing lines
            insert_lines_uc: Use case for inserting lines
            delete_lines_uc: Use case for deleting line ranges
            regex_replace_uc: Use case for regex substitution
            search_content_uc: Use case for recursive content search
            list_directory_uc: Use case for directory listing
            file_info_uc: Use case for file metadata
            logger: Logger instance to use for logging
        """
        self._read_lines_uc = read_lines_uc
        self._edit_lines_uc = edit_lines_uc
        self._insert_lines_uc = insert_lines_uc
        self._delete_lines_uc = delete_lines_uc
        self._regex_replace_uc = regex_replace_uc
        self._search_content_uc = search_content_uc
        self._list_directory_uc = list_directory_uc
        self._file_info_uc = file_info_uc
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "read_file_lines": self._handle_read_file_lines,
            "edit_file_lines": self._handle_edit_file_lines,
            "insert_lines": self._handle_insert_lines,
            "delete_lines": self._handle_delete_lines,
            "regex_replace": self._handle_regex_replace,
            "search_files": self._handle_search_files,
            "list_directory": self._handle_list_directory,
            "get_file_info": self._handle_get_file_info,
        }

    # ------------------------- internal helpers -------------------------
    def _handle_read_file_lines(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(ReadFileLinesArgs, "read_file_lines", arguments)
        result = self._read_lines_uc.execute(args.path, args.start_line, args.end_line)
        return {
            "file": result.path,
            "totalLines": result.total_lines,
            "range": f"{result.start_line}-{result.end_line}",
            "content": result.content,
            "lines": result.lines,
        }

    def _handle_edit_file_lines(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(EditFileLinesArgs, "edit_file_lines", arguments)
        edits = [LineEdit(e.line, e.content) for e in args.edits]
        result = self._edit_lines_uc.execute(args.path, edits)
        return {
            "success": True,
            "message": f"Edited {result.edit_count} lines in {result.path}",
            "editedLines": result.edited_lines,
            "totalLines": result.total_lines,
        }

    def _handle_insert_lines(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(InsertLinesArgs, "insert_lines", arguments)
        result = self._insert_lines_uc.execute(args.path, args.position, args.lines)
        return {
            "success": True,
            "message": f"Inserted {result.inserted_count} lines at position {result.position}",
            "totalLines": result.total_lines,
        }

    def _handle_delete_lines(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(DeleteLinesArgs, "delete_lines", arguments)
        result = self._delete_lines_uc.execute(args.path, args.start_line, args.end_line)
        return {
            "success": True,
            "message": (
                f"Deleted {result.deleted_count} lines "
                f"({result.start_line}-{result.end_line})"
            ),
            "deletedCount": result.deleted_count,
            "remainingLines": result.remaining_lines,
        }

    def _handle_regex_replace(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(RegexReplaceArgs, "regex_replace", arguments)
        result = self._regex_replace_uc.execute(
            args.path, args.pattern, args.replacement, args.flags or DEFAULT_FLAGS
        )
        return {
            "success": True,
            "message": "Replacement completed",
            "replacements": result.match_count,
            "pattern": result.pattern,
        }

    def _handle_search_files(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(SearchFilesArgs, "search_files", arguments)
        result = self._search_content_uc.execute(
            args.directory, args.pattern, args.recursive is not False
        )
        return {
            "pattern": result.pattern,
            "directory": result.directory,
            "matchesCount": result.matches_count,
            "matches": [m.get_details() for m in result.matches],
        }

    def _handle_list_directory(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(ListDirectoryArgs, "list_directory", arguments)
        listing = self._list_directory_uc.execute(
            args.path,
            recursive=bool(args.recursive),
            extensions=args.extensions,
            max_depth=args.max_depth,
        )
        return {
            "path": listing.path,
            "count": listing.count,
            "items": [e.get_details() for e in listing.items],
        }

    def _handle_get_file_info(self, arguments: dict[str, Any]) -> dict[str, Any]:
        args = parse_arguments(GetFileInfoArgs, "get_file_info", arguments)
        return self._file_info_uc.execute(args.path).get_details()

    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available file tools.

        Returns:
            List of tool specifications for file operations
        """
        return [
            {
                "name": "read_file_lines",
                "description": "Read an inclusive range of lines from a file.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": _PATH_PROPERTY,
                        "startLine": {"type": "integer", "description": "First line (1-based)"},
                        "endLine": {"type": "integer", "description": "Last line (inclusive)"},
                    },
                    "required": ["path", "startLine", "endLine"],
                },
            },
            {
                "name": "edit_file_lines",
                "description": "Replace specific lines of a file by line number.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": _PATH_PROPERTY,
                        "edits": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "line": {
                                        "type": "integer",
                                        "description": "Line number to edit (1-based)",
                                    },
                                    "content": {
                                        "type": "string",
                                        "description": "New content of the line",
                                    },
                                },
                                "required": ["line", "content"],
                            },
                            "description": "Edits to apply",
                        },
                    },
                    "required": ["path", "edits"],
                },
            },
            {
                "name": "insert_lines",
                "description": "Insert lines at a position of a file.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": _PATH_PROPERTY,
                        "position": {
                            "type": "integer",
                            "description": "Insert position (0 = start, N = after line N)",
                        },
                        "lines": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Lines to insert",
                        },
                    },
                    "required": ["path", "position", "lines"],
                },
            },
            {
                "name": "delete_lines",
                "description": "Delete an inclusive range of lines from a file.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": _PATH_PROPERTY,
                        "startLine": {"type": "integer", "description": "First line to delete (1-based)"},
                        "endLine": {"type": "integer", "description": "Last line to delete (inclusive)"},
                    },
                    "required": ["path", "startLine", "endLine"],
                },
            },
            {
                "name": "regex_replace",
                "description": "Replace text in a file using a regular expression.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": _PATH_PROPERTY,
                        "pattern": {"type": "string", "description": "Regular expression"},
                        "replacement": {
                            "type": "string",
                            "description": "Replacement text ($&, $1, $<name>, $$)",
                        },
                        "flags": {
                            "type": "string",
                            "description": "Regex flags (g, i, m, s, x)",
                            "default": "g",
                        },
                    },
                    "required": ["path", "pattern", "replacement"],
                },
            },
            {
                "name": "search_files",
                "description": "Search text or a regular expression in the files of a directory.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "directory": {"type": "string", "description": "Directory to search in"},
                        "pattern": {
                            "type": "string",
                            "description": "Text or regular expression to search for",
                        },
                        "recursive": {
                            "type": "boolean",
                            "description": "Search subdirectories",
                            "default": True,
                        },
                    },
                    "required": ["directory", "pattern"],
                },
            },
            {
                "name": "list_directory",
                "description": "List files and directories with optional filters.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string", "description": "Directory path"},
                        "recursive": {
                            "type": "boolean",
                            "description": "List recursively",
                            "default": False,
                        },
                        "extensions": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Filter files by extension (e.g. [\".py\", \".md\"])",
                        },
                        "maxDepth": {
                            "type": "integer",
                            "description": "Maximum depth when recursive",
                            "default": 3,
                        },
                    },
                    "required": ["path"],
                },
            },
            {
                "name": "get_file_info",
                "description": "Get file metadata (size, dates, kind).",
                "parameters": {
                    "type": "object",
                    "properties": {"path": _PATH_PROPERTY},
                    "required": ["path"],
                },
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Dispatch a tool invocation to the appropriate use case.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments to pass to the tool

        Returns:
            JSON-encoded result of the tool invocation

        Raises:
            UnknownToolError: If the tool name is unknown
            BaseAppError: If the use case fails
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        self._logger.info(f"Executing {name} tool")
        result = handler(arguments or {})
        return json.dumps(result, ensure_ascii=False, indent=2)
