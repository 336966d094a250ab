"""Apply an auth strategy to outgoing headers or URL."""

import base64
from typing import MutableMapping
from urllib.parse import quote

from carrier_sdk._internal.auth.models import (
    ApiKeyHeaderAuth,
    ApiKeyQueryAuth,
    AuthConfig,
    BasicAuth,
    BearerAuth,
)

# Matches encodeURIComponent: only unreserved characters stay as-is
_QUERY_SAFE = "!~*'()"


def basic_credentials(username: str, password: str) -> str:
    """Encode username:password for a Basic Authorization header."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def append_query_param(url: str, key: str, value: str) -> str:
    """Append key=value to url, percent-encoding the value."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{key}={quote(value, safe=_QUERY_SAFE)}"


def apply_auth(
    headers: MutableMapping[str, str],
    auth: AuthConfig | None,
    url: str,
    *,
    preserve_authorization: bool = False,
) -> str:
    """Attach credentials for one request.

    Header variants mutate `headers` in place; the query variant returns a
    rewritten URL.

    Args:
        headers: Outgoing request headers.
        auth: Strategy to apply, or None for no-op.
        url: Fully resolved request URL.
        preserve_authorization: Leave an existing Authorization header alone.
            Set when the caller supplied it explicitly.

    Returns:
        The URL to request (unchanged unless the query variant applies).
    """
    match auth:
        case None:
            return url
        case BearerAuth(token=token):
            if not preserve_authorization:
                headers["Authorization"] = f"Bearer {token}"
            return url
        case BasicAuth(username=username, password=password):
            if not preserve_authorization:
                headers["Authorization"] = f"Basic {basic_credentials(username, password)}"
            return url
        case ApiKeyHeaderAuth(key=key, value=value):
            if not (preserve_authorization and key.lower() == "authorization"):
                headers[key] = value
            return url
        case ApiKeyQueryAuth(key=key, value=value):
            return append_query_param(url, key, value)
    raise TypeError(f"Unsupported auth config: {type(auth).__name__}")
