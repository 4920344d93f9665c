"""
Tool invocation boundary: turns a dispatch into a textual result envelope.
"""

import logging
from typing import NamedTuple, Optional

from file_editor.exceptions import BaseAppError
from file_editor.ports.tools.tools_port import ToolsHandlerPort


class ToolCallResult(NamedTuple):
    text: str
    is_error: bool


def call_tool(
    tools_handler: ToolsHandlerPort,
    name: str,
    arguments: Optional[dict[str, object]] = None,
    logger: Optional[logging.Logger] = None,
) -> ToolCallResult:
    """
    Invoke a tool and render the outcome as text.

    Errors are reported once, as "Error: <message>" with is_error set.
    """
    logger = logger or logging.getLogger(__name__)
    try:
        return ToolCallResult(tools_handler.dispatch(name, arguments or {}), False)
    except BaseAppError as e:
        logger.warning(f"Tool {name} failed: {e}")
        return ToolCallResult(f"Error: {e}", True)
    except Exception as e:
        logger.error(f"Unexpected error in tool {name}: {e}")
        return ToolCallResult(f"Error: {e}", True)
