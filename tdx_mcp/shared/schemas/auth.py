from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict


class LoginParams(BaseModel):
    """Body for ``POST /api/auth/login``."""

    endpoint: ClassVar[str] = "/api/auth/login"

    username: str
    password: str

    model_config = ConfigDict(frozen=True)


class AdminLoginParams(BaseModel):
    """Body for ``POST /api/auth/loginadmin`` (BEID and web services key)."""

    endpoint: ClassVar[str] = "/api/auth/loginadmin"

    BEID: str
    WebServicesKey: str

    model_config = ConfigDict(frozen=True)


Credentials = Union[LoginParams, AdminLoginParams]
