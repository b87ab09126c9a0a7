from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """Base class for application errors."""

    error_code: str = "APP_ERROR"

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(AppError):
    error_code = "CONFIG_ERROR"


class AuthenticationError(AppError):
    """Raised when a TDX login endpoint rejects the configured credentials."""

    error_code = "AUTH_ERROR"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"TDX authentication failed ({status_code}): {body}", details=body)


class TdxApiError(AppError):
    """Raised for any non-success response from an app-scoped endpoint."""

    error_code = "TDX_API_ERROR"

    def __init__(self, method: str, path: str, status_code: int, body: str):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"TDX API error ({status_code} {method} {path}): {body}", details=body
        )


__all__ = ["AppError", "ConfigurationError", "AuthenticationError", "TdxApiError"]
