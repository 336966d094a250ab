"""Carrier SDK for Python.

A single reusable HTTP request dispatcher: per-environment base URLs,
auth injection, lifecycle hooks, and a last-response envelope.

Public API:
    CarrierClient - Request dispatcher
    get_client - Shared default client, configured from environment variables
"""

from carrier_sdk._version import __version__
from carrier_sdk.client import CarrierClient, ClientSnapshot, get_client, reset_client
from carrier_sdk.exceptions import CarrierConfigError, CarrierError, CarrierValidationError

__all__ = [
    "__version__",
    "CarrierClient",
    "ClientSnapshot",
    "get_client",
    "reset_client",
    "CarrierError",
    "CarrierConfigError",
    "CarrierValidationError",
]
