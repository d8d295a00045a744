"""Builders producing canonical Results from raw values, errors and foreign shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import orjson

from .classify import is_err, is_result_like_err, shape_of
from .codec import decode_object, encode_str
from .config import get_settings
from .errors import ConstructionError, FxError, UnknownEncodingError, error_message
from .result import Err, Ok, Result, ResultLikeErr, ResultLikeOk

T = TypeVar("T")

UNDEFINED_ERROR = "undefined error"
UNKNOWN_ERROR = "unknown error"


def ok(value: T) -> Result[T, FxError]:
    """Success Result. Exceptions are rejected.

    Raises:
        ConstructionError: If value is an exception
    """
    if isinstance(value, BaseException):
        raise ConstructionError("success values cannot be errors", detail=error_message(value))
    return Ok(value)


def _coerce_error(error: object) -> BaseException:
    if isinstance(error, BaseException):
        return error
    if error is None:
        return FxError(UNDEFINED_ERROR)
    # bool is an int subclass but is not a supported payload
    if isinstance(error, str) or (isinstance(error, (int, float)) and not isinstance(error, bool)):
        return FxError(str(error))
    if isinstance(error, (Mapping, list, tuple)):
        try:
            return FxError(encode_str(error))
        except orjson.JSONEncodeError as e:
            raise ConstructionError("error payload is not JSON serializable", detail=str(e)) from e
    raise ConstructionError(f"unsupported error payload type: {type(error).__name__}")


def err(error: object = None) -> Result[Any, BaseException]:
    """Failure Result carrying an exception.

    - exception: wrapped unchanged
    - str / int / float: FxError with the stringified value
    - mapping / list / tuple: FxError with its compact JSON text
    - None: FxError("undefined error")

    Raises:
        ConstructionError: For any other payload type
    """
    return Err(_coerce_error(error))


def from_value(value: T) -> Result[T, BaseException]:
    """Lift a maybe-exception value: exceptions become Err, anything else Ok."""
    return err(value) if isinstance(value, BaseException) else Ok(value)


create_result = from_value


def identity_result(result: Result[T, Any]) -> Result[T, Any]:
    return result


def _dump(payload: object) -> str:
    try:
        return encode_str(payload)
    except orjson.JSONEncodeError:
        return str(payload)


def normalize_error(payload: object, *, max_depth: int | None = None) -> str:
    """Message for a failure payload. Never raises.

    exception                  -> its message
    mapping with `message`     -> message of that field
    other mapping / list       -> compact JSON
    JSON object text           -> message of the decoded object
    plain string               -> itself
    anything else              -> compact JSON (str() if not serializable)
    """
    limit = max_depth if max_depth is not None else get_settings().max_depth
    current = payload
    for _ in range(limit):
        match current:
            case BaseException():
                return error_message(current) or UNKNOWN_ERROR
            case Mapping() if "message" in current:
                current = current["message"]
            case str():
                decoded = decode_object(current)
                if decoded is None:
                    return current or UNKNOWN_ERROR
                current = decoded
            case _:
                return _dump(current)
    return _dump(current)


def error_from_payload(payload: object) -> BaseException:
    """Error for a foreign failure payload. Exceptions are kept, anything else becomes FxError."""
    return payload if isinstance(payload, BaseException) else FxError(normalize_error(payload))


def normalize(value: object) -> Result[Any, BaseException]:
    """Most permissive constructor; any failure payload is accepted. Checked in order:

    1. `ok is True` -> Ok(value field)
    2. `ok is False` with an error field -> Err from that field
    3. exception -> Err
    4. mapping with `error` -> Err from it
    5. mapping with `value` -> Ok from it
    6. anything else -> Ok(value) unchanged
    """
    if isinstance(value, Result):
        return value
    shape = shape_of(value)
    if shape is not None:
        if shape.ok is True:
            return Ok(shape.value)
        if shape.ok is False and is_err(value):
            return Err(error_from_payload(shape.error))
    if isinstance(value, BaseException):
        return Err(value)
    if isinstance(value, Mapping):
        if "error" in value:
            return Err(error_from_payload(value["error"]))
        if "value" in value:
            return Ok(value["value"])
    return Ok(value)


def from_result_like(value: object) -> Result[Any, BaseException]:
    """Canonical Result from a ResultLike. Unknown shapes give Err(UnknownEncodingError)."""
    shape = shape_of(value)
    if shape is not None and shape.ok is True:
        return Ok(shape.value)
    if is_result_like_err(value):
        return Err(error_from_payload(shape.error))  # type: ignore[union-attr]
    return Err(UnknownEncodingError(f"unknown result-like shape: {value!r}"))


# ═══════════════════════════════════════════════════════════════════════════════
# ResultLike / encoded builders
# ═══════════════════════════════════════════════════════════════════════════════


def result_like_ok(value: T) -> ResultLikeOk:
    return {"ok": True, "value": value}


def result_like_err(message: str) -> ResultLikeErr:
    return {"ok": False, "error": message}


def encode_ok(value: object) -> str:
    """JSON text of a ResultLike success."""
    return encode_str(result_like_ok(value))


def encode_err(message: str) -> str:
    """JSON text of a ResultLike failure."""
    return encode_str(result_like_err(message))


def encode_result(result: Result[Any, Any]) -> str:
    """JSON text of a Result's ResultLike view. Errors keep only their message.

    Raises:
        UnknownEncodingError: If the Ok value is not JSON serializable
    """
    try:
        return encode_str(result.to_dict())
    except orjson.JSONEncodeError as e:
        raise UnknownEncodingError(f"cannot encode {result!r}", detail=str(e)) from e
