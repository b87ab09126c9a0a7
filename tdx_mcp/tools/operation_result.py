"""Result envelope returned by every TDX tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from mcp import types


class ToolCallError(Exception):
    """Raised inside ``call_tool`` so the SDK reports an error-flagged result."""


@dataclass
class OperationResult:
    """Outcome of a tool call: rendered text on success, a message on failure."""

    success: bool
    data: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "OperationResult":
        return cls(success=True, data=text)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, error=message)

    def to_content(self, tool_name: str) -> List[types.TextContent]:
        """Render as MCP text content.

        Failures raise :class:`ToolCallError` carrying the error text; the
        low-level server turns that into a result with ``isError`` set.
        """
        if not self.success:
            raise ToolCallError(self.error or f"{tool_name} failed")
        return [types.TextContent(type="text", text=self.data or "")]


__all__ = ["OperationResult", "ToolCallError"]
