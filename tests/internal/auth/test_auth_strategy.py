"""Tests for applying auth strategies."""

import base64

import httpx

from carrier_sdk._internal.auth import (
    ApiKeyHeaderAuth,
    ApiKeyQueryAuth,
    BasicAuth,
    BearerAuth,
    append_query_param,
    apply_auth,
)


class TestApplyAuth:
    """Tests for apply_auth()."""

    def test_none_is_noop(self):
        """No strategy should leave headers and URL untouched."""
        headers = httpx.Headers({"Accept": "application/json"})
        url = apply_auth(headers, None, "https://api.test/x")
        assert url == "https://api.test/x"
        assert dict(headers) == {"accept": "application/json"}

    def test_bearer(self):
        """Should set a Bearer Authorization header."""
        headers = httpx.Headers()
        apply_auth(headers, BearerAuth(token="abc"), "https://api.test")
        assert headers["Authorization"] == "Bearer abc"

    def test_basic(self):
        """Should set a Basic Authorization header with base64 credentials."""
        headers = httpx.Headers()
        apply_auth(headers, BasicAuth(username="user", password="p@ss:word"), "https://api.test")
        expected = base64.b64encode(b"user:p@ss:word").decode()
        assert headers["Authorization"] == f"Basic {expected}"

    def test_api_key_header(self):
        """Should set the header named by the key."""
        headers = httpx.Headers()
        url = apply_auth(headers, ApiKeyHeaderAuth(key="X-Api-Key", value="k1"), "https://api.test")
        assert headers["x-api-key"] == "k1"
        assert url == "https://api.test"

    def test_api_key_query_without_existing_query(self):
        """Should append with '?' when the URL has no query string."""
        headers = httpx.Headers()
        url = apply_auth(headers, ApiKeyQueryAuth(key="key", value="v"), "https://api.test/items")
        assert url == "https://api.test/items?key=v"
        assert "authorization" not in headers

    def test_api_key_query_with_existing_query(self):
        """Should append with '&' when the URL already has a query string."""
        url = apply_auth(httpx.Headers(), ApiKeyQueryAuth(key="key", value="v"), "https://api.test/items?page=2")
        assert url == "https://api.test/items?page=2&key=v"

    def test_api_key_query_percent_encodes_value(self):
        """Should percent-encode the value."""
        url = apply_auth(httpx.Headers(), ApiKeyQueryAuth(key="key", value="a b&c/d"), "https://api.test")
        assert url == "https://api.test?key=a%20b%26c%2Fd"

    def test_preserve_authorization_bearer(self):
        """Should not overwrite a caller-supplied Authorization header."""
        headers = httpx.Headers({"Authorization": "Custom xyz"})
        apply_auth(headers, BearerAuth(token="abc"), "https://api.test", preserve_authorization=True)
        assert headers["Authorization"] == "Custom xyz"

    def test_preserve_authorization_basic(self):
        """Basic auth should also respect a caller-supplied header."""
        headers = httpx.Headers({"Authorization": "Custom xyz"})
        apply_auth(headers, BasicAuth(username="u", password="p"), "https://api.test", preserve_authorization=True)
        assert headers["Authorization"] == "Custom xyz"

    def test_preserve_authorization_api_key_header_named_authorization(self):
        """An api-key header named Authorization should not overwrite either."""
        headers = httpx.Headers({"Authorization": "Custom xyz"})
        apply_auth(
            headers,
            ApiKeyHeaderAuth(key="Authorization", value="key"),
            "https://api.test",
            preserve_authorization=True,
        )
        assert headers["Authorization"] == "Custom xyz"

    def test_replaces_implicit_authorization(self):
        """Without preservation, Bearer should replace an existing header."""
        headers = httpx.Headers({"Authorization": "Bearer implicit"})
        apply_auth(headers, BearerAuth(token="explicit"), "https://api.test")
        assert headers["Authorization"] == "Bearer explicit"

    def test_works_with_plain_dict(self):
        """Should accept any mutable mapping."""
        headers: dict[str, str] = {}
        apply_auth(headers, BearerAuth(token="abc"), "https://api.test")
        assert headers == {"Authorization": "Bearer abc"}


class TestAppendQueryParam:
    """Tests for append_query_param()."""

    def test_space_is_percent_20(self):
        """Spaces should become %20, not '+'."""
        assert append_query_param("/x", "q", "a b") == "/x?q=a%20b"

    def test_unreserved_characters_kept(self):
        """Unreserved characters should not be encoded."""
        assert append_query_param("/x", "q", "a-b_c.d~e") == "/x?q=a-b_c.d~e"
