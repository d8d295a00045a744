"""Execution contexts produced by API calls and thunk runs.

The effect runtime that builds these lives elsewhere; here they are only
recognized so their embedded result can be unwrapped. Foreign contexts
arrive as mappings (camelCase keys), Python ones as objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .result import Result

_MISSING = object()

_API_KEYS = ("key", "name", "json")
_API_JSON_KEYS = ("ok", "data")
_THUNK_KEYS = ("action", "actionFn", "key", "name", "result")

# Mapping key -> attribute name where they differ
_ATTR_NAMES = {"actionFn": "action_fn"}


@dataclass(frozen=True, slots=True)
class Action:
    """Dispatched action: type tag plus optional payload."""

    type: str
    payload: Any = None


@dataclass(slots=True)
class ApiCtx:
    """Context of an API call. `json` holds the response envelope {ok, data}."""

    key: str
    name: str
    json: dict[str, Any] | None = None
    payload: Any = None


@dataclass(slots=True)
class ThunkCtx:
    """Context of a thunk run. `result` is the Result the thunk produced."""

    action: Action
    action_fn: Any
    key: str
    name: str
    result: Any = None
    payload: Any = None
    json: Any = None
    actions: list[Action] = field(default_factory=list)


@runtime_checkable
class Thunk(Protocol):
    """A thunk creator: calling it builds an action, run() executes one."""

    def __call__(self, payload: Any = None) -> Any: ...
    def run(self, action: Any) -> Any: ...


def lookup(obj: object, key: str, default: Any = _MISSING) -> Any:
    """Read `key` from a mapping or attribute from an object."""
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, _ATTR_NAMES.get(key, key), default)


def has_keys(obj: object, keys: tuple[str, ...]) -> bool:
    """True if every key is present on a mapping, or as an attribute on an object."""
    if obj is None or isinstance(obj, (str, bytes, int, float, bool)):
        return False
    if isinstance(obj, Mapping):
        return all(k in obj for k in keys)
    if isinstance(obj, Result):
        return keys == ("ok",)
    return all(hasattr(obj, _ATTR_NAMES.get(k, k)) for k in keys)


def is_api_ctx(obj: object) -> bool:
    """Object exposes key/name/json with json holding {ok, data}."""
    return has_keys(obj, _API_KEYS) and has_keys(lookup(obj, "json"), _API_JSON_KEYS)


def is_thunk_ctx(obj: object) -> bool:
    """Object exposes action/actionFn/key/name/result with a Result-shaped result."""
    return has_keys(obj, _THUNK_KEYS) and has_keys(lookup(obj, "result"), ("ok",))


def api_envelope(ctx: object) -> dict[str, Any]:
    """The embedded response of an ApiCtx as a Result-shaped mapping.

    A failed response carries its data as the error payload.
    """
    body = lookup(ctx, "json")
    ok, data = lookup(body, "ok", None), lookup(body, "data", None)
    return {"ok": False, "error": data} if ok is False else {"ok": ok, "value": data}
