"""Tools exposed by the TDX MCP server."""

from .base import Tool
from .feed_tools import FEED_TOOLS, GET_TICKET_FEED
from .operation_result import OperationResult, ToolCallError
from .ticket_tools import (
    GET_TICKET,
    GET_TICKET_FORMS,
    GET_TICKET_RESOURCES,
    SEARCH_TICKETS,
    TICKET_TOOLS,
)

TOOLS = [*TICKET_TOOLS, *FEED_TOOLS]

__all__ = [
    "Tool",
    "OperationResult",
    "ToolCallError",
    "TOOLS",
    "SEARCH_TICKETS",
    "GET_TICKET",
    "GET_TICKET_FORMS",
    "GET_TICKET_RESOURCES",
    "GET_TICKET_FEED",
]
