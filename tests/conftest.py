import json
from datetime import UTC, datetime

import httpx
import pytest
from httpx import AsyncClient, MockTransport

import tdx_mcp.core.services.tdx_client as tdx_client
from tdx_mcp.config import Settings, set_settings
from tdx_mcp.core.services.tdx_client import TdxClient

BASE_URL = "https://tdx.example.edu/TDWebApi"
APP_ID = "42"
TOKEN = "eyJhbGciOiJIUzI1NiJ9.test.token"


def make_settings(**overrides) -> Settings:
    values = {
        "TDX_BASE_URL": BASE_URL,
        "TDX_APP_ID": APP_ID,
        "TDX_AUTH_METHOD": "login",
        "TDX_USERNAME": "svc-agent",
        "TDX_PASSWORD": "s3cret",
        "TDX_BEID": None,
        "TDX_WEB_SERVICES_KEY": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeTdx:
    """In-process stand-in for the TDX web API."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, str]] = {}
        self.login_response: tuple[int, str] = (200, TOKEN)
        self.fail_with: Exception | None = None

    def route(self, method: str, path: str, status: int = 200, *, json_body=None, text=None):
        body = json.dumps(json_body) if json_body is not None else (text or "")
        self.routes[(method, f"/api/{APP_ID}{path}")] = (status, body)

    @property
    def logins(self) -> list[httpx.Request]:
        return [r for r in self.requests if "/api/auth/" in r.url.path]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if "/api/auth/" not in r.url.path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        path = request.url.path.removeprefix("/TDWebApi")
        if path.startswith("/api/auth/"):
            status, body = self.login_response
            return httpx.Response(status, text=body)
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text=f"No route for {request.method} {path}")
        status, body = route
        return httpx.Response(status, text=body)


@pytest.fixture(autouse=True)
def reset_settings():
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def fake_tdx(monkeypatch):
    fake = FakeTdx()
    transport = MockTransport(fake.handler)

    def _client(*args, **kwargs):
        kwargs.setdefault("transport", transport)
        return AsyncClient(*args, **kwargs)

    monkeypatch.setattr(tdx_client.httpx, "AsyncClient", _client)
    return fake


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings, fake_tdx):
    return TdxClient(settings)


class Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock(monkeypatch):
    frozen = Clock(datetime(2026, 3, 2, 9, 0, tzinfo=UTC))
    monkeypatch.setattr(tdx_client, "_utcnow", frozen)
    return frozen
