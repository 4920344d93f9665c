"""
Port and types for remotely-invokable tools, independent of the transport.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class ToolSpec(TypedDict):
    """Specification for a tool that can be invoked by name."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema


class ToolsHandlerPort(ABC):
    """
    Port interface for handling tool invocations.

    This port exposes available tools and dispatches tool invocations to appropriate use cases.
    """

    @abstractmethod
    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available tools.

        Returns:
            List of tool specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, object]) -> str:
        """
        Dispatch a tool invocation to the appropriate use case.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments to pass to the tool

        Returns:
            JSON-encoded result of the tool invocation

        Raises:
            UnknownToolError: If the tool name is unknown
        """
        pass
