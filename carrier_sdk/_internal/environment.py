"""Environment detection from a runtime hostname."""

import os
import socket
from enum import StrEnum

LOCAL_MARKER = "localhost"
QA_MARKER = "qa"


class Environment(StrEnum):
    """Logical deployment targets used to pick a base URL."""

    DEV = "dev"
    QA = "qa"
    PROD = "prod"


def detect_hostname() -> str:
    """Return the runtime hostname hint.

    Uses CARRIER_HOSTNAME when set, otherwise the machine hostname.
    """
    return os.environ.get("CARRIER_HOSTNAME") or socket.gethostname()


def resolve_environment(hostname: str | None) -> Environment:
    """Map a hostname-like string to an environment tag.

    Checks in order:
    1. Exact match on "localhost" -> dev
    2. "qa" anywhere in the hostname -> qa
    3. Anything else (including None) -> prod

    Args:
        hostname: Hostname hint, e.g. "localhost" or "app.qa.example.com".

    Returns:
        The matching Environment.
    """
    if hostname == LOCAL_MARKER:
        return Environment.DEV
    if hostname and QA_MARKER in hostname:
        return Environment.QA
    return Environment.PROD
