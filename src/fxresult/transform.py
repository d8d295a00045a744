"""Mapping and folding operators over canonical and Result-shaped values.

All operators accept a canonical Result or a Result-shaped mapping and
return canonical Results. Exceptions raised by caller-supplied functions
propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .classify import is_err, is_ok, is_result, shape_of
from .config import get_settings
from .construct import error_from_payload
from .errors import DepthLimitError, MalformedResultError
from .result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


def _failure(result: object) -> Result[Any, Any]:
    """Err carrying the failure payload of `result`."""
    if isinstance(result, Result):
        return result
    return Err(error_from_payload(shape_of(result).error))  # type: ignore[union-attr]


def map_result(result: Result[T, Any] | Any, fn: Callable[[T], U]) -> Result[U, Any]:
    """Ok -> Ok(fn(value)); Err passes through unchanged.

    Raises:
        MalformedResultError: If `result` is neither Ok nor Err
    """
    if is_ok(result):
        return Ok(fn(shape_of(result).value))  # type: ignore[union-attr]
    if is_err(result):
        return _failure(result)
    raise MalformedResultError(detail=repr(result))


def map_flatten(result: Result[T, Any] | Any, fn: Callable[[Any], Any], *, max_depth: int | None = None) -> Result[Any, Any]:
    """Like map_result, but a Result-shaped output of `fn` is mapped again instead of nested.

    The Ok value of the returned Result is never Result-shaped.

    Raises:
        MalformedResultError: If a layer is neither Ok nor Err
        DepthLimitError: If `fn` keeps producing Results past `max_depth`
    """
    limit = max_depth if max_depth is not None else get_settings().max_depth
    current: Any = result
    for _ in range(limit):
        if is_err(current):
            return _failure(current)
        if not is_ok(current):
            raise MalformedResultError(detail=repr(current))
        out = fn(shape_of(current).value)  # type: ignore[union-attr]
        if not is_result(out):
            return Ok(out)
        current = out
    raise DepthLimitError(f"map_flatten exceeded {limit} nested results")


def bimap(
    result: Result[T, Any] | Any,
    map_error: Callable[[Any], Any],
    map_value: Callable[[T], U],
) -> Result[U, Any]:
    """Apply map_value on Ok or map_error on Err, keeping the variant.

    Raises:
        MalformedResultError: If `result` is neither Ok nor Err
    """
    shape = shape_of(result)
    if is_ok(result):
        return Ok(map_value(shape.value))  # type: ignore[union-attr]
    if is_err(result):
        return Err(map_error(shape.error))  # type: ignore[union-attr]
    raise MalformedResultError(detail=repr(result))


def coalesce(
    result: Result[T, Any] | Any,
    error_to_value: Callable[[Any], B],
    value_to_value: Callable[[T], U],
) -> Result[U | B, Any]:
    """Fold both variants into Ok: errors are recovered via error_to_value.

    Raises:
        MalformedResultError: If `result` is neither Ok nor Err
    """
    shape = shape_of(result)
    if is_ok(result):
        return Ok(value_to_value(shape.value))  # type: ignore[union-attr]
    if is_err(result):
        return Ok(error_to_value(shape.error))  # type: ignore[union-attr]
    raise MalformedResultError(detail=repr(result))


def value_or(result: Result[T, Any] | Any, default: B | Callable[[Any], B]) -> T | B:
    """Ok value, or the fallback on Err.

    A callable fallback is always invoked with the error, so a literal
    function cannot be returned as the fallback; wrap it in a lambda.

    Raises:
        MalformedResultError: If `result` is neither Ok nor Err
    """
    shape = shape_of(result)
    if is_ok(result):
        return shape.value  # type: ignore[union-attr]
    if is_err(result):
        return default(shape.error) if callable(default) else default  # type: ignore[union-attr]
    raise MalformedResultError(detail=repr(result))


def unwrap_or_throw(result: Result[T, Any] | Any) -> T:
    """Ok value, or raise the contained error.

    Raises:
        The contained exception (other payloads as FxError with their message)
        MalformedResultError: If `result` is neither Ok nor Err
    """
    if is_ok(result):
        return shape_of(result).value  # type: ignore[union-attr]
    if is_err(result):
        raise error_from_payload(shape_of(result).error)  # type: ignore[union-attr]
    raise MalformedResultError(detail=repr(result))


pass_through = unwrap_or_throw
