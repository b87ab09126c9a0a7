"""Services wrapping the TDX web API."""

from .tdx_client import TOKEN_LIFETIME, TdxClient

__all__ = ["TdxClient", "TOKEN_LIFETIME"]
