"""Lifecycle events and their callback payloads."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable

import httpx

from carrier_sdk._internal.envelope import RequestOptions


class HookEvent(StrEnum):
    """Points in the request lifecycle that fire callbacks."""

    REQUEST = "request"
    RESPONSE = "response"
    OK = "ok"
    ERROR = "error"
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"
    HEAD = "head"
    OPTIONS = "options"


VERB_EVENTS: frozenset[HookEvent] = frozenset({
    HookEvent.GET,
    HookEvent.POST,
    HookEvent.PUT,
    HookEvent.DELETE,
    HookEvent.PATCH,
    HookEvent.HEAD,
    HookEvent.OPTIONS,
})


@dataclass(frozen=True)
class RequestHookPayload:
    """Fired with `request`, before the network call."""

    options: RequestOptions
    headers: httpx.Headers


@dataclass(frozen=True)
class VerbHookPayload:
    """Fired with the verb-specific event (`get`, `post`, ...)."""

    method: str
    url: str
    data: Any


@dataclass(frozen=True)
class ResponseHookPayload:
    """Fired with `response`, after the body has been parsed."""

    response: httpx.Response


@dataclass(frozen=True)
class OutcomeHookPayload:
    """Fired with `ok` or `error`."""

    response: httpx.Response
    status: int
    data: Any


HookPayload = RequestHookPayload | VerbHookPayload | ResponseHookPayload | OutcomeHookPayload
HookCallback = Callable[[Any], object]
