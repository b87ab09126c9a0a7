"""Application configuration loader."""

from __future__ import annotations

import logging
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .shared.exceptions import ConfigurationError
from .shared.schemas.auth import AdminLoginParams, Credentials, LoginParams

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    TDX_BASE_URL: str
    TDX_APP_ID: str
    TDX_AUTH_METHOD: Literal["login", "loginadmin"]

    TDX_USERNAME: str | None = None
    TDX_PASSWORD: str | None = None
    TDX_BEID: str | None = None
    TDX_WEB_SERVICES_KEY: str | None = None

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("TDX_BASE_URL")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value:
            raise ValueError("TDX_BASE_URL environment variable is required")
        if not value.startswith(("http://", "https://")):
            raise ValueError("TDX_BASE_URL must start with http:// or https://")
        return value.rstrip("/")

    @field_validator("TDX_APP_ID")
    @classmethod
    def validate_app_id(cls, value: str) -> str:
        if not value:
            raise ValueError("TDX_APP_ID environment variable is required")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return level

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    def credentials(self) -> Credentials:
        """Return the login body matching ``TDX_AUTH_METHOD``.

        Raises :class:`ConfigurationError` when the secrets for the selected
        method are missing.
        """
        if self.TDX_AUTH_METHOD == "loginadmin":
            if not self.TDX_BEID or not self.TDX_WEB_SERVICES_KEY:
                raise ConfigurationError(
                    "TDX_BEID and TDX_WEB_SERVICES_KEY are required for loginadmin auth method"
                )
            return AdminLoginParams(
                BEID=self.TDX_BEID, WebServicesKey=self.TDX_WEB_SERVICES_KEY
            )

        if not self.TDX_USERNAME or not self.TDX_PASSWORD:
            raise ConfigurationError(
                "TDX_USERNAME and TDX_PASSWORD are required for login auth method"
            )
        return LoginParams(username=self.TDX_USERNAME, password=self.TDX_PASSWORD)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Load settings once, reading ``.env`` into the environment first."""
    global _settings
    if _settings is None:
        load_dotenv(find_dotenv(usecwd=True))
        _settings = Settings()
        logger.debug(
            "Loaded settings for %s (app %s, auth %s)",
            _settings.TDX_BASE_URL,
            _settings.TDX_APP_ID,
            _settings.TDX_AUTH_METHOD,
        )
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Replace (or clear) the global settings instance."""
    global _settings
    _settings = settings


__all__ = ["Settings", "get_settings", "set_settings"]
