"""Predicates over canonical and foreign-shaped results.

Two tiers:
- is_result: loose filter - anything carrying an `ok` tag (JSON null included)
- is_ok / is_err / is_result_like_*: strict shape checks requiring the
  complementary `value` / `error` field

Canonical Result instances and plain mappings (decoded JSON, foreign
runtime objects) are both accepted; the is_result_like_* family only
accepts mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from .codec import is_json_encoded
from .result import Result


class Shape(NamedTuple):
    """Structural view of a Result-shaped value."""

    ok: Any
    has_value: bool
    value: Any
    has_error: bool
    error: Any


def shape_of(obj: object) -> Shape | None:
    """Structural view of `obj`, or None when it carries no `ok` field."""
    if isinstance(obj, Result):
        is_ok = obj._is_ok
        return Shape(is_ok, is_ok, obj._value if is_ok else None, not is_ok, None if is_ok else obj._value)
    if isinstance(obj, Mapping) and "ok" in obj:
        return Shape(obj["ok"], "value" in obj, obj.get("value"), "error" in obj, obj.get("error"))
    return None


def is_result(obj: object) -> bool:
    """Loose check: an `ok` field is present, whatever its value (None counts,
    as a decoded JSON null is still a tag). Use before deeper inspection only.
    """
    return shape_of(obj) is not None


def is_ok(obj: object) -> bool:
    """Tagged success with a `value` field."""
    shape = shape_of(obj)
    return shape is not None and shape.ok is True and shape.has_value


def is_err(obj: object) -> bool:
    """Tagged failure with an `error` field."""
    shape = shape_of(obj)
    return shape is not None and shape.ok is False and shape.has_error


def is_result_like(obj: object) -> bool:
    return isinstance(obj, Mapping) and (is_ok(obj) or is_err(obj))


def is_result_like_ok(obj: object) -> bool:
    return isinstance(obj, Mapping) and is_ok(obj)


def is_result_like_err(obj: object) -> bool:
    return isinstance(obj, Mapping) and is_err(obj)


def is_result_like_ok_with_encoded_value(obj: object) -> bool:
    """ResultLike success whose value is itself JSON text of an object."""
    return is_result_like_ok(obj) and is_json_encoded(obj["value"])  # type: ignore[index]


def is_result_like_err_with_encoded_value(obj: object) -> bool:
    """ResultLike failure whose error is itself JSON text of an object."""
    return is_result_like_err(obj) and is_json_encoded(obj["error"])  # type: ignore[index]
