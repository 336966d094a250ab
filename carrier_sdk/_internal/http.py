"""Network primitive: short-lived async HTTP clients."""

import httpx

from carrier_sdk._version import __version__


def create_http_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    cookies: httpx.Cookies | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client for a single call.

    No timeout is applied; callers wrap calls in their own timeout if needed.

    Args:
        transport: Optional transport (e.g. httpx.MockTransport in tests).
        cookies: Cookies to send with the request, if any.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=None,
        transport=transport,
        cookies=cookies,
        headers={"User-Agent": f"carrier-sdk/{__version__}"},
    )


def same_origin(url: str, other: str) -> bool:
    """Check whether two absolute URLs share scheme, host and port."""
    if not other:
        return False
    try:
        a, b = httpx.URL(url), httpx.URL(other)
    except httpx.InvalidURL:
        return False
    return (a.scheme, a.host, a.port) == (b.scheme, b.host, b.port) and bool(a.host)
