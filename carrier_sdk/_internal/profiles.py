"""Profile resolution: environment tag -> base URL."""

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError

from carrier_sdk._internal.environment import detect_hostname, resolve_environment
from carrier_sdk.exceptions import CarrierConfigError, CarrierValidationError


class ProfileConfig(BaseModel):
    """Base URLs per environment plus optional overrides.

    Fields:
        profiles: Mapping of environment tag to base URL.
        env: Explicit environment tag; skips hostname detection.
        token: Optional bearer token to store once the profile resolves.
    """

    profiles: dict[str, str] = Field(default_factory=dict)
    env: str | None = None
    token: str | None = None

    model_config = {"frozen": True}


def parse_profile_config(config: ProfileConfig | Mapping[str, Any]) -> ProfileConfig:
    """Coerce a mapping into a ProfileConfig."""
    if isinstance(config, ProfileConfig):
        return config
    try:
        return ProfileConfig.model_validate(dict(config))
    except ValidationError as e:
        raise CarrierValidationError(f"Invalid profile config: {e}") from e


def resolve_profile(config: ProfileConfig, hostname: str | None = None) -> str:
    """Pick the base URL for the active environment.

    Resolution order: config.env, then CARRIER_ENV, then the environment
    inferred from the hostname (detect_hostname() when not given).

    Raises:
        CarrierConfigError: The environment has no (non-empty) URL in profiles.
    """
    env = config.env or os.environ.get("CARRIER_ENV")
    if not env:
        env = resolve_environment(hostname if hostname is not None else detect_hostname())

    url = config.profiles.get(str(env))
    if not url:
        raise CarrierConfigError(
            f"No base URL configured for environment '{env}'",
            environment=str(env),
        )
    return url
