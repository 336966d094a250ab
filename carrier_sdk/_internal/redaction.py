"""Redaction of credentials in debug output."""

from typing import Iterable, Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(
    headers: Mapping[str, str], *, extra_keys: Iterable[str] = ()
) -> dict[str, str]:
    """Copy headers with sensitive values replaced by "[REDACTED]".

    The original mapping is never mutated.

    Args:
        headers: Headers to redact.
        extra_keys: Additional header names to redact (e.g. api-key headers).

    Returns:
        A new dict with sensitive values redacted.
    """
    sensitive = REDACT_HEADERS | {key.lower() for key in extra_keys}
    return {
        key: REDACTED_VALUE if key.lower() in sensitive else value
        for key, value in headers.items()
    }


def redact_url_param(url: str, key: str) -> str:
    """Replace the value of query parameter `key` in url."""
    base, sep, query = url.partition("?")
    if not sep:
        return url
    parts = []
    for pair in query.split("&"):
        name, eq, _ = pair.partition("=")
        parts.append(f"{name}={REDACTED_VALUE}" if eq and name == key else pair)
    return f"{base}?{'&'.join(parts)}"
