"""Pydantic models for auth strategies.

Each variant carries a `type` discriminator so configs can be supplied as
plain mappings and validated into the right model.
"""

from typing import Annotated, Any, Literal, Mapping

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from carrier_sdk.exceptions import CarrierValidationError

ApiKeyPlacement = Literal["header", "query"]


class BearerAuth(BaseModel):
    """Authorization: Bearer <token>."""

    type: Literal["bearer"] = "bearer"
    token: str

    model_config = {"frozen": True}


class BasicAuth(BaseModel):
    """Authorization: Basic <base64(username:password)>."""

    type: Literal["basic"] = "basic"
    username: str
    password: str

    model_config = {"frozen": True}


class ApiKeyHeaderAuth(BaseModel):
    """API key sent as a header named `key`."""

    type: Literal["api_key_header"] = "api_key_header"
    key: str = Field(min_length=1)
    value: str

    model_config = {"frozen": True}


class ApiKeyQueryAuth(BaseModel):
    """API key appended to the URL query string as `key=value`."""

    type: Literal["api_key_query"] = "api_key_query"
    key: str = Field(min_length=1)
    value: str

    model_config = {"frozen": True}


AuthConfig = Annotated[
    BearerAuth | BasicAuth | ApiKeyHeaderAuth | ApiKeyQueryAuth,
    Field(discriminator="type"),
]

_auth_adapter: TypeAdapter[AuthConfig] = TypeAdapter(AuthConfig)


def parse_auth_config(auth: AuthConfig | Mapping[str, Any]) -> AuthConfig:
    """Validate an auth config given as a model or a mapping.

    Mappings may use the combined form
    `{"type": "api_key", "key": ..., "value": ..., "placement": "header" | "query"}`;
    placement defaults to "header".

    Raises:
        CarrierValidationError: The mapping does not describe a known variant.
    """
    if isinstance(auth, (BearerAuth, BasicAuth, ApiKeyHeaderAuth, ApiKeyQueryAuth)):
        return auth

    data = dict(auth)
    if data.get("type") == "api_key":
        placement = data.pop("placement", "header")
        if placement not in ("header", "query"):
            raise CarrierValidationError(f"Invalid api key placement: {placement!r}")
        data["type"] = f"api_key_{placement}"

    try:
        return _auth_adapter.validate_python(data)
    except ValidationError as e:
        raise CarrierValidationError(f"Invalid auth config: {e}") from e
