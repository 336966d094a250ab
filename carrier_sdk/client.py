"""CarrierClient: request dispatcher with profiles, auth and lifecycle hooks."""

import json
import os
import sys
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, ValidationError

from carrier_sdk._internal.auth import (
    ApiKeyHeaderAuth,
    ApiKeyQueryAuth,
    AuthConfig,
    apply_auth,
    parse_auth_config,
)
from carrier_sdk._internal.credentials import TOKEN_KEY, CredentialStore, MemoryCredentialStore
from carrier_sdk._internal.envelope import CredentialsMode, RequestOptions, ResponseEnvelope
from carrier_sdk._internal.hooks import (
    HookCallback,
    HookEvent,
    HookRegistry,
    OutcomeHookPayload,
    RequestHookPayload,
    ResponseHookPayload,
    VerbHookPayload,
)
from carrier_sdk._internal.http import create_http_client, same_origin
from carrier_sdk._internal.profiles import ProfileConfig, parse_profile_config, resolve_profile
from carrier_sdk._internal.redaction import redact_headers, redact_url_param
from carrier_sdk.exceptions import CarrierValidationError

ABSOLUTE_URL_PREFIXES = ("http://", "https://")
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


class ClientSnapshot(BaseModel):
    """Read-only view of a client's configuration."""

    base_url: str
    token: str | None
    auth: AuthConfig | None
    hooks: dict[str, int]

    model_config = {"frozen": True}


class CarrierClient:
    """Dispatches HTTP requests with shared base URL, token, auth and hooks.

    Every call overwrites the shared `container` envelope; read results from it
    (or via `ok()` / `check()`) after awaiting a call. Concurrent calls on one
    client are not coordinated: whichever call finishes last owns the envelope.

    Use `CarrierClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        token: str | None = None,
        auth: AuthConfig | Mapping[str, Any] | None = None,
        credential_store: CredentialStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Prefix for relative request paths.
            token: Bearer token; stored in the credential store when given,
                otherwise loaded from it.
            auth: Default auth strategy for every request.
            credential_store: Where the token is persisted (default: in-memory).
            transport: Optional httpx transport used for every call. It is
                closed after each call, so pass a stateless one such as
                httpx.MockTransport.
            debug: Enable debug logging to stderr.
        """
        self._base_url = base_url
        self._credentials = credential_store if credential_store is not None else MemoryCredentialStore()
        self._token: str | None = self._credentials.get(TOKEN_KEY)
        self._auth: AuthConfig | None = parse_auth_config(auth) if auth is not None else None
        self._transport = transport
        self._cookies = httpx.Cookies()
        self._debug = debug
        self._hooks = HookRegistry(debug=debug)
        self.container = ResponseEnvelope()

        if token:
            self.set_token(token)

    @classmethod
    def from_env(cls) -> "CarrierClient":
        """Create a client from environment variables.

        Optional environment variables:
            CARRIER_BASE_URL: Base URL for relative paths.
            CARRIER_TOKEN: Bearer token.
            CARRIER_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured CarrierClient.
        """
        return cls(
            base_url=os.environ.get("CARRIER_BASE_URL", ""),
            token=os.environ.get("CARRIER_TOKEN") or None,
            debug=os.environ.get("CARRIER_DEBUG", "") == "1",
        )

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[carrier-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def state(self) -> ClientSnapshot:
        """Immutable snapshot of the current configuration."""
        return ClientSnapshot(
            base_url=self._base_url,
            token=self._token,
            auth=self._auth,
            hooks=self._hooks.counts(),
        )

    def configure_profiles(
        self,
        config: ProfileConfig | Mapping[str, Any],
        *,
        hostname: str | None = None,
    ) -> None:
        """Select the base URL for the current environment.

        Args:
            config: Profiles mapping with optional `env` and `token`.
            hostname: Hostname hint for environment detection
                (default: detect_hostname()).

        Raises:
            CarrierConfigError: The resolved environment has no profile.
            CarrierValidationError: The config is malformed.
        """
        profile_config = parse_profile_config(config)
        self._base_url = resolve_profile(profile_config, hostname)
        self._log_debug(f"Base URL resolved from profiles: {self._base_url}")
        if profile_config.token:
            self.set_token(profile_config.token)

    def configure_base_url(self, url: str) -> None:
        """Set the base URL directly."""
        self._base_url = url

    def configure_token(self, token: str) -> None:
        """Set the bearer token directly."""
        self.set_token(token)

    def configure_auth(self, auth: AuthConfig | Mapping[str, Any] | None) -> None:
        """Replace the default auth strategy; None clears it.

        Raises:
            CarrierValidationError: The auth config is malformed.
        """
        self._auth = parse_auth_config(auth) if auth is not None else None

    def configure(self, *, base_url: str | None = None, token: str | None = None) -> None:
        """Set base URL and/or token; empty values are ignored."""
        if base_url:
            self._base_url = base_url
        if token:
            self.set_token(token)

    def set_token(self, token: str) -> None:
        """Set the bearer token and persist it in the credential store."""
        self._token = token
        self._credentials.set(TOKEN_KEY, token)

    def on(self, event: HookEvent | str, callback: HookCallback) -> HookCallback:
        """Register a lifecycle hook callback.

        Returns the callback unchanged.

        Raises:
            CarrierValidationError: Unknown event name.
        """
        self._hooks.on(event, callback)
        return callback

    # =========================================================================
    # Dispatch
    # =========================================================================

    def resolve_url(self, path: str) -> str:
        """Return absolute URLs unchanged, otherwise prefix the base URL."""
        if path.startswith(ABSOLUTE_URL_PREFIXES):
            return path
        return self._base_url + path

    def _sends_cookies(self, mode: CredentialsMode, url: str) -> bool:
        if mode == "include":
            return True
        if mode == "same-origin":
            return same_origin(url, self._base_url)
        return False

    async def send(self, options: RequestOptions | None = None, **kwargs: Any) -> "CarrierClient":
        """Dispatch one request and record the result in `container`.

        Accepts a RequestOptions instance or its fields as keyword arguments.

        Returns:
            This client, for chaining.

        Raises:
            CarrierValidationError: The request options are malformed.
            httpx.HTTPError: The transport failed (connection refused, ...).
        """
        if options is None:
            try:
                options = RequestOptions(**kwargs)
            except ValidationError as e:
                raise CarrierValidationError(f"Invalid request options: {e}") from e

        method = options.method

        headers = httpx.Headers()
        if method != "GET":
            headers["Content-Type"] = "application/json"
        headers.update(options.headers)
        caller_authorization = "Authorization" in headers

        if options.use_token and self._token and not caller_authorization:
            headers["Authorization"] = f"Bearer {self._token}"

        self._hooks.trigger(HookEvent.REQUEST, RequestHookPayload(options=options, headers=headers))
        self._hooks.trigger(
            HookEvent(method.lower()),
            VerbHookPayload(method=method, url=options.url, data=options.data),
        )

        url = self.resolve_url(options.url)
        auth = options.auth if options.auth is not None else self._auth
        url = apply_auth(headers, auth, url, preserve_authorization=caller_authorization)

        content = None
        if method not in BODYLESS_METHODS:
            content = json.dumps(options.data if options.data is not None else {})

        if self._debug:
            self._log_debug(f"{method} {self._redact_url(url, auth)} {self._redact(headers, auth)}")

        send_cookies = self._sends_cookies(options.credentials, url)
        async with create_http_client(
            transport=self._transport,
            cookies=self._cookies if send_cookies else None,
        ) as client:
            response = await client.request(method, url, headers=headers, content=content)

        if send_cookies:
            self._cookies.extract_cookies(response)

        self.container.status = response.status_code
        self.container.raw = response
        try:
            self.container.data = response.json()
            self.container.is_json = True
        except ValueError:
            self.container.data = None
            self.container.is_json = False

        self._log_debug(f"{method} {response.status_code} (json={self.container.is_json})")

        self._hooks.trigger(HookEvent.RESPONSE, ResponseHookPayload(response=response))
        outcome = OutcomeHookPayload(
            response=response,
            status=response.status_code,
            data=self.container.data,
        )
        self._hooks.trigger(HookEvent.OK if self.ok() else HookEvent.ERROR, outcome)

        return self

    def _redact(self, headers: httpx.Headers, auth: AuthConfig | None) -> dict[str, str]:
        extra = [auth.key] if isinstance(auth, ApiKeyHeaderAuth) else []
        return redact_headers(dict(headers), extra_keys=extra)

    def _redact_url(self, url: str, auth: AuthConfig | None) -> str:
        if isinstance(auth, ApiKeyQueryAuth):
            return redact_url_param(url, auth.key)
        return url

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    async def get(self, url: str, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="GET", url=url, **kwargs)

    async def post(self, url: str, data: Any = None, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="POST", url=url, data=data, **kwargs)

    async def put(self, url: str, data: Any = None, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="PUT", url=url, data=data, **kwargs)

    async def patch(self, url: str, data: Any = None, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="PATCH", url=url, data=data, **kwargs)

    async def delete(self, url: str, data: Any = None, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="DELETE", url=url, data=data, **kwargs)

    async def head(self, url: str, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="HEAD", url=url, **kwargs)

    async def options(self, url: str, **kwargs: Any) -> "CarrierClient":
        return await self.send(method="OPTIONS", url=url, **kwargs)

    def ok(self) -> bool:
        """True if the last recorded status is 2xx."""
        return self.container.ok

    def check(self) -> bool:
        """True if the last call succeeded and returned a non-null JSON body."""
        return self.ok() and self.container.data is not None


_default_client: CarrierClient | None = None


def get_client() -> CarrierClient:
    """Get the shared default client, creating it from the environment once.

    Returns:
        The process-wide CarrierClient instance.
    """
    global _default_client
    if _default_client is None:
        _default_client = CarrierClient.from_env()
    return _default_client


def reset_client() -> None:
    """Drop the shared default client so the next get_client() rebuilds it."""
    global _default_client
    _default_client = None
