"""TDX MCP Server"""

__version__ = "1.0.0"

from .mcp_server import create_server, run_server
from .core.services.tdx_client import TdxClient

__all__ = ["TdxClient", "create_server", "run_server"]
