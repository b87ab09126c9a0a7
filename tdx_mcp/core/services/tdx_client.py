"""Authenticated client for the TeamDynamix (TDX) web API."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from tdx_mcp.config import Settings
from tdx_mcp.shared.exceptions import AuthenticationError, TdxApiError

logger = logging.getLogger(__name__)

# TDX tokens live 24 hours; refresh an hour early.
TOKEN_LIFETIME = timedelta(hours=23)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TdxClient:
    """Caches a TDX bearer token and issues app-scoped API requests.

    The token is fetched lazily on the first request and again whenever it is
    missing or past :data:`TOKEN_LIFETIME`. A request rejected by the server
    (for example a 401 on a token TDX revoked early) raises
    :class:`TdxApiError` and leaves the cached token untouched.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.token: str | None = None
        self.token_expiry: datetime | None = None
        self._auth_lock: asyncio.Lock | None = None

    # Authentication ----------------------------------------------------
    def _get_auth_lock(self) -> asyncio.Lock:
        if self._auth_lock is None:
            self._auth_lock = asyncio.Lock()
        return self._auth_lock

    def has_valid_token(self) -> bool:
        return bool(self.token) and self.token_expiry is not None and _utcnow() < self.token_expiry

    async def authenticate(self) -> None:
        """Log in with the configured method and cache the returned token.

        TDX answers with the JWT as a bare string, so the body is stored
        verbatim rather than JSON-decoded.
        """
        credentials = self.settings.credentials()
        url = f"{self.settings.TDX_BASE_URL}{credentials.endpoint}"

        async with httpx.AsyncClient() as client:
            try:
                resp = await client.post(
                    url, json=credentials.model_dump(), headers=_JSON_HEADERS
                )
            except httpx.RequestError as exc:
                logger.exception("Request error authenticating with TDX: %s", exc)
                raise

        if not resp.is_success:
            logger.error("TDX authentication failed with status %s", resp.status_code)
            raise AuthenticationError(resp.status_code, resp.text)

        self.token = resp.text
        self.token_expiry = _utcnow() + TOKEN_LIFETIME
        logger.info("Authenticated with TDX using %s", self.settings.TDX_AUTH_METHOD)

    async def _ensure_authenticated(self) -> None:
        if self.has_valid_token():
            return
        # Concurrent callers wait for one login instead of each starting their own.
        async with self._get_auth_lock():
            if not self.has_valid_token():
                await self.authenticate()

    # Requests ----------------------------------------------------------
    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send an authenticated request to ``path`` under the base URL.

        Returns the decoded JSON body, or ``None`` when TDX sends no content.
        """
        await self._ensure_authenticated()

        url = f"{self.settings.TDX_BASE_URL}{path}"
        headers = {"Authorization": f"Bearer {self.token}", **_JSON_HEADERS}

        async with httpx.AsyncClient() as client:
            try:
                resp = await client.request(method, url, headers=headers, json=body)
            except httpx.RequestError as exc:
                logger.exception("Request error calling TDX %s %s: %s", method, path, exc)
                raise

        if not resp.is_success:
            logger.warning("TDX %s %s returned %s", method, path, resp.status_code)
            raise TdxApiError(method, path, resp.status_code, resp.text)

        text = resp.text
        if not text:
            return None
        return json.loads(text)

    def _app_path(self, endpoint: str) -> str:
        return f"/api/{self.settings.TDX_APP_ID}{endpoint}"

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", self._app_path(endpoint))

    async def post(self, endpoint: str, body: Any = None) -> Any:
        return await self.request("POST", self._app_path(endpoint), body)

    async def put(self, endpoint: str, body: Any = None) -> Any:
        return await self.request("PUT", self._app_path(endpoint), body)

    async def patch(self, endpoint: str, body: Any = None) -> Any:
        return await self.request("PATCH", self._app_path(endpoint), body)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", self._app_path(endpoint))


__all__ = ["TdxClient", "TOKEN_LIFETIME"]
