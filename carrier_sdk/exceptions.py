"""Public exceptions for the Carrier SDK."""


class CarrierError(Exception):
    """Base exception for all Carrier SDK errors."""


class CarrierConfigError(CarrierError):
    """Configuration error (unknown environment, missing base URL)."""

    def __init__(self, message: str, environment: str | None = None) -> None:
        super().__init__(message)
        self.environment = environment


class CarrierValidationError(CarrierError):
    """Validation error for auth configs, request options and hook events."""
