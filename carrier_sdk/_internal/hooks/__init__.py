"""Lifecycle hooks fired around each request."""

from carrier_sdk._internal.hooks.models import (
    VERB_EVENTS,
    HookCallback,
    HookEvent,
    HookPayload,
    OutcomeHookPayload,
    RequestHookPayload,
    ResponseHookPayload,
    VerbHookPayload,
)
from carrier_sdk._internal.hooks.registry import HookRegistry, parse_event

__all__ = [
    "HookRegistry",
    "HookEvent",
    "HookCallback",
    "HookPayload",
    "RequestHookPayload",
    "VerbHookPayload",
    "ResponseHookPayload",
    "OutcomeHookPayload",
    "VERB_EVENTS",
    "parse_event",
]
