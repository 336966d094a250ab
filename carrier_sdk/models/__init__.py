"""Public models for configuring and inspecting a CarrierClient.

Example:
    from carrier_sdk import CarrierClient
    from carrier_sdk.models import ApiKeyQueryAuth, ProfileConfig

    client = CarrierClient()
    client.configure_profiles(
        ProfileConfig(profiles={"dev": "http://localhost:8080", "prod": "https://api.example.com"})
    )
    client.configure_auth(ApiKeyQueryAuth(key="api_key", value="secret"))
"""

from carrier_sdk._internal.auth import (
    ApiKeyHeaderAuth,
    ApiKeyPlacement,
    ApiKeyQueryAuth,
    AuthConfig,
    BasicAuth,
    BearerAuth,
)
from carrier_sdk._internal.credentials import CredentialStore, MemoryCredentialStore
from carrier_sdk._internal.environment import Environment
from carrier_sdk._internal.envelope import CredentialsMode, RequestOptions, ResponseEnvelope
from carrier_sdk._internal.hooks import (
    HookEvent,
    OutcomeHookPayload,
    RequestHookPayload,
    ResponseHookPayload,
    VerbHookPayload,
)
from carrier_sdk._internal.profiles import ProfileConfig

__all__ = [
    "AuthConfig",
    "BearerAuth",
    "BasicAuth",
    "ApiKeyHeaderAuth",
    "ApiKeyQueryAuth",
    "ApiKeyPlacement",
    "CredentialStore",
    "MemoryCredentialStore",
    "Environment",
    "ProfileConfig",
    "RequestOptions",
    "ResponseEnvelope",
    "CredentialsMode",
    "HookEvent",
    "RequestHookPayload",
    "VerbHookPayload",
    "ResponseHookPayload",
    "OutcomeHookPayload",
]
