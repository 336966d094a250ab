"""Ordered callback registry for request lifecycle events."""

import sys

from carrier_sdk._internal.hooks.models import HookCallback, HookEvent, HookPayload
from carrier_sdk.exceptions import CarrierValidationError


def parse_event(event: HookEvent | str) -> HookEvent:
    """Normalize an event name, rejecting unknown ones."""
    try:
        return HookEvent(event)
    except ValueError as e:
        raise CarrierValidationError(f"Unknown hook event: {event!r}") from e


class HookRegistry:
    """Maps lifecycle events to callbacks, fired in registration order.

    Callbacks run synchronously and their return values are ignored. A callback
    that raises is reported in debug output and skipped; the remaining
    callbacks still run and the request is unaffected.
    """

    def __init__(self, *, debug: bool = False) -> None:
        self._callbacks: dict[HookEvent, list[HookCallback]] = {}
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[carrier-sdk:hooks] {message}", file=sys.stderr)

    def on(self, event: HookEvent | str, callback: HookCallback) -> None:
        """Register a callback for an event.

        Raises:
            CarrierValidationError: Unknown event name or non-callable callback.
        """
        if not callable(callback):
            raise CarrierValidationError(f"Hook callback for {event!r} is not callable")
        self._callbacks.setdefault(parse_event(event), []).append(callback)

    def trigger(self, event: HookEvent, payload: HookPayload) -> None:
        """Invoke every callback registered for `event` with `payload`."""
        for callback in self._callbacks.get(event, ()):
            try:
                callback(payload)
            except Exception as e:
                self._log_debug(f"Hook {event} callback {callback!r} failed: {e!r}")

    def counts(self) -> dict[str, int]:
        """Number of callbacks per registered event."""
        return {str(event): len(callbacks) for event, callbacks in self._callbacks.items()}
