"""Request options and the shared response envelope."""

from typing import Any, Literal, Mapping

import httpx
from pydantic import BaseModel, Field, field_validator

from carrier_sdk._internal.auth import AuthConfig, parse_auth_config

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

CredentialsMode = Literal["omit", "same-origin", "include"]


class RequestOptions(BaseModel):
    """Options for a single `send` call.

    Fields:
        method: HTTP method, case-insensitive (default: GET).
        url: Absolute URL or path relative to the client's base URL.
        data: JSON-serializable body; ignored for GET and HEAD.
        headers: Header overrides, applied over the defaults.
        use_token: Inject the configured bearer token (default: True).
        credentials: Cookie policy, as in the browser fetch API.
        auth: Per-request auth strategy, shadowing the client default.
    """

    method: str = "GET"
    url: str
    data: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    use_token: bool = True
    credentials: CredentialsMode = "same-origin"
    auth: AuthConfig | None = None

    model_config = {"frozen": True}

    @field_validator("method", mode="before")
    @classmethod
    def method_known(cls, v: Any) -> str:
        method = str(v or "GET").upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method {v!r}")
        return method

    @field_validator("auth", mode="before")
    @classmethod
    def auth_from_mapping(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return parse_auth_config(v)
        return v


class ResponseEnvelope(BaseModel):
    """Result of the most recently completed call.

    One instance per client, overwritten by every call. `data` holds the
    parsed JSON body, or None when the body was not JSON; `is_json` tells
    a JSON `null` body apart from a non-JSON one.
    """

    data: Any = None
    status: int = 0
    raw: httpx.Response | None = None
    is_json: bool = False

    model_config = {"arbitrary_types_allowed": True}

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
