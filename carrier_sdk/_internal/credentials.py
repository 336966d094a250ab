"""Credential storage used for the bearer token."""

from typing import Protocol, runtime_checkable

TOKEN_KEY = "token"


@runtime_checkable
class CredentialStore(Protocol):
    """Opaque key-value store for credentials."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryCredentialStore:
    """Process-local credential store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
