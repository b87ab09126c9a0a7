"""Tool definition shared by the ticket and feed tool modules."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Type

from pydantic import BaseModel, ValidationError

from tdx_mcp.core.services.tdx_client import TdxClient

from .operation_result import OperationResult

logger = logging.getLogger(__name__)

Handler = Callable[[Any, TdxClient], Awaitable[OperationResult]]


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


@dataclass
class Tool:
    """A TDX operation callable through MCP."""

    name: str
    description: str
    args_model: Type[BaseModel]
    _implementation: Handler

    @property
    def inputSchema(self) -> Dict[str, Any]:
        return self.args_model.model_json_schema()

    async def run(
        self, arguments: Dict[str, Any] | None, client: TdxClient
    ) -> OperationResult:
        """Validate ``arguments`` and invoke the tool; never raises.

        Invalid arguments are reported before anything is sent to TDX.
        """
        try:
            args = self.args_model.model_validate(arguments or {})
        except ValidationError as exc:
            logger.info("Rejected arguments for %s: %s", self.name, exc)
            return OperationResult.fail(f"Invalid arguments for {self.name}: {exc}")
        try:
            return await self._implementation(args, client)
        except Exception as exc:
            logger.exception("Unhandled error in tool %s", self.name)
            return OperationResult.fail(f"Error running {self.name}: {exc}")


__all__ = ["Tool", "Handler", "to_json"]
