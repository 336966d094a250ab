"""Tests for public exceptions."""

import pytest

from carrier_sdk.exceptions import (
    CarrierConfigError,
    CarrierError,
    CarrierValidationError,
)


class TestCarrierError:
    """Tests for base CarrierError."""

    def test_is_exception(self):
        """CarrierError should be an Exception."""
        assert issubclass(CarrierError, Exception)

    def test_can_be_raised(self):
        """CarrierError should be raisable with message."""
        with pytest.raises(CarrierError) as exc_info:
            raise CarrierError("test error")
        assert str(exc_info.value) == "test error"


class TestCarrierConfigError:
    """Tests for CarrierConfigError."""

    def test_inherits_from_carrier_error(self):
        """CarrierConfigError should inherit from CarrierError."""
        assert issubclass(CarrierConfigError, CarrierError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = CarrierConfigError("Missing base URL")
        assert str(error) == "Missing base URL"
        assert error.environment is None

    def test_with_environment(self):
        """Should store the environment that failed to resolve."""
        error = CarrierConfigError("No profile", environment="staging")
        assert error.environment == "staging"

    def test_can_be_caught_as_carrier_error(self):
        """Should be catchable as CarrierError."""
        with pytest.raises(CarrierError):
            raise CarrierConfigError("bad config", environment="qa")


class TestCarrierValidationError:
    """Tests for CarrierValidationError."""

    def test_inherits_from_carrier_error(self):
        """CarrierValidationError should inherit from CarrierError."""
        assert issubclass(CarrierValidationError, CarrierError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(CarrierValidationError) as exc_info:
            raise CarrierValidationError("Unknown hook event")
        assert str(exc_info.value) == "Unknown hook event"
