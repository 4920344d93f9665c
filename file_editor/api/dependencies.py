"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from file_editor.container import container
from file_editor.ports.tools.tools_port import ToolsHandlerPort
from file_editor.use_cases.files.list_directory import ListDirectoryUseCase
from file_editor.use_cases.files.search_content import SearchContentUseCase
from file_editor.use_cases.lines.read_lines import ReadLinesUseCase


def get_list_directory_uc() -> ListDirectoryUseCase:
    """
    Get the list directory use case from the container.

    Returns:
        ListDirectoryUseCase: The list directory use case instance
    """
    return container.get_list_directory_use_case()


def get_search_content_uc() -> SearchContentUseCase:
    """
    Get the search content use case from the container.

    Returns:
        SearchContentUseCase: The search content use case instance
    """
    return container.get_search_content_use_case()


def get_read_lines_uc() -> ReadLinesUseCase:
    return container.get_read_lines_use_case()


def get_tools_handler() -> ToolsHandlerPort:
    """
    Get the tools handler from the container.

    Returns:
        ToolsHandlerPort: The file editor tools handler
    """
    return container.get_files_tools_handler()
