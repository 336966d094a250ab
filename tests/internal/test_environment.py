"""Tests for environment detection."""

import os
from unittest.mock import patch

import pytest

from carrier_sdk._internal.environment import Environment, detect_hostname, resolve_environment


class TestResolveEnvironment:
    """Tests for resolve_environment()."""

    def test_localhost_is_dev(self):
        """Exact "localhost" should map to dev."""
        assert resolve_environment("localhost") is Environment.DEV

    def test_localhost_must_match_exactly(self):
        """A hostname merely containing "localhost" is not dev."""
        assert resolve_environment("localhost.example.com") is Environment.PROD

    @pytest.mark.parametrize("hostname", ["qa.example.com", "app-qa", "myqahost"])
    def test_qa_substring_is_qa(self, hostname):
        """Any hostname containing "qa" should map to qa."""
        assert resolve_environment(hostname) is Environment.QA

    @pytest.mark.parametrize("hostname", ["example.com", "api.prod.internal", "", None])
    def test_everything_else_is_prod(self, hostname):
        """Unmatched hostnames should fall back to prod."""
        assert resolve_environment(hostname) is Environment.PROD

    def test_environment_values(self):
        """Environment tags should compare equal to their string values."""
        assert Environment.DEV == "dev"
        assert Environment.QA == "qa"
        assert Environment.PROD == "prod"


class TestDetectHostname:
    """Tests for detect_hostname()."""

    def test_env_override(self):
        """Should prefer CARRIER_HOSTNAME when set."""
        with patch.dict(os.environ, {"CARRIER_HOSTNAME": "qa-box"}, clear=True):
            assert detect_hostname() == "qa-box"

    def test_falls_back_to_socket(self):
        """Should use the machine hostname otherwise."""
        with patch.dict(os.environ, {}, clear=True), patch(
            "carrier_sdk._internal.environment.socket.gethostname", return_value="build-01"
        ):
            assert detect_hostname() == "build-01"
