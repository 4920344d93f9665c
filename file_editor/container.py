"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from file_editor.adapters.files.default_exclusion_policy import DefaultExclusionPolicy
from file_editor.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_editor.config.settings import Settings, settings as default_settings
from file_editor.ports.files.exclusion_policy_port import ExclusionPolicyPort
from file_editor.ports.files.file_repository_port import FileRepositoryPort
from file_editor.ports.tools.tools_port import ToolsHandlerPort
from file_editor.use_cases.files.file_info import GetFileInfoUseCase
from file_editor.use_cases.files.list_directory import ListDirectoryUseCase
from file_editor.use_cases.files.regex_replace import RegexReplaceUseCase
from file_editor.use_cases.files.search_content import SearchContentUseCase
from file_editor.use_cases.lines.delete_lines import DeleteLinesUseCase
from file_editor.use_cases.lines.edit_lines import EditLinesUseCase
from file_editor.use_cases.lines.insert_lines import InsertLinesUseCase
from file_editor.use_cases.lines.read_lines import ReadLinesUseCase
from file_editor.use_cases.tools.files_tools import FileEditorToolsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings or default_settings
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(
                self._logger, encoding=self._settings.encoding
            )
        return self._instances["file_repository"]

    def get_exclusion_policy(self) -> ExclusionPolicyPort:
        """
        Get the directory exclusion policy shared by search and listing.

        Returns:
            ExclusionPolicyPort implementation
        """
        if "exclusion_policy" not in self._instances:
            self._instances["exclusion_policy"] = DefaultExclusionPolicy()
        return self._instances["exclusion_policy"]

    def get_read_lines_use_case(self) -> ReadLinesUseCase:
        if "read_lines_use_case" not in self._instances:
            self._instances["read_lines_use_case"] = ReadLinesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["read_lines_use_case"]

    def get_edit_lines_use_case(self) -> EditLinesUseCase:
        if "edit_lines_use_case" not in self._instances:
            self._instances["edit_lines_use_case"] = EditLinesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["edit_lines_use_case"]

    def get_insert_lines_use_case(self) -> InsertLinesUseCase:
        if "insert_lines_use_case" not in self._instances:
            self._instances["insert_lines_use_case"] = InsertLinesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["insert_lines_use_case"]

    def get_delete_lines_use_case(self) -> DeleteLinesUseCase:
        if "delete_lines_use_case" not in self._instances:
            self._instances["delete_lines_use_case"] = DeleteLinesUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["delete_lines_use_case"]

    def get_regex_replace_use_case(self) -> RegexReplaceUseCase:
        if "regex_replace_use_case" not in self._instances:
            self._instances["regex_replace_use_case"] = RegexReplaceUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["regex_replace_use_case"]

    def get_search_content_use_case(self) -> SearchContentUseCase:
        """
        Get search content use case with injected dependencies.

        Returns:
            Configured SearchContentUseCase
        """
        if "search_content_use_case" not in self._instances:
            self._instances["search_content_use_case"] = SearchContentUseCase(
                self.get_file_repository(),
                self.get_exclusion_policy(),
                max_results=self._settings.search_max_results,
                logger=self._logger,
            )
        return self._instances["search_content_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_repository(),
                self.get_exclusion_policy(),
                default_max_depth=self._settings.list_max_depth,
                logger=self._logger,
            )
        return self._instances["list_directory_use_case"]

    def get_file_info_use_case(self) -> GetFileInfoUseCase:
        if "file_info_use_case" not in self._instances:
            self._instances["file_info_use_case"] = GetFileInfoUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["file_info_use_case"]

    def get_files_tools_handler(self) -> ToolsHandlerPort:
        """
        Tools registry backed by the line and file use cases.
        """
        if "files_tools_handler" not in self._instances:
            self._instances["files_tools_handler"] = FileEditorToolsHandler(
                self.get_read_lines_use_case(),
                self.get_edit_lines_use_case(),
                self.get_insert_lines_use_case(),
                self.get_delete_lines_use_case(),
                self.get_regex_replace_use_case(),
                self.get_search_content_use_case(),
                self.get_list_directory_use_case(),
                self.get_file_info_use_case(),
                self._logger,
            )
        return self._instances["files_tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
