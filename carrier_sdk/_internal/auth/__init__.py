"""Auth strategies for outgoing requests."""

from carrier_sdk._internal.auth.models import (
    ApiKeyHeaderAuth,
    ApiKeyPlacement,
    ApiKeyQueryAuth,
    AuthConfig,
    BasicAuth,
    BearerAuth,
    parse_auth_config,
)
from carrier_sdk._internal.auth.strategy import append_query_param, apply_auth

__all__ = [
    "AuthConfig",
    "BearerAuth",
    "BasicAuth",
    "ApiKeyHeaderAuth",
    "ApiKeyQueryAuth",
    "ApiKeyPlacement",
    "parse_auth_config",
    "apply_auth",
    "append_query_param",
]
