"""Normalization and unpacking of nested, stringified and foreign results.

resolve() peels envelopes until a terminal (error, value) pair remains.
The envelopes form a closed set, each handled by one branch of a loop:

    None              -> terminal value None
    JSON object text  -> decoded (peeled only when it decodes to a Result)
    Result-shaped     -> Err: terminal error message
                         Ok:  ApiCtx / ThunkCtx values yield their embedded
                              result, JSON text of a Result is decoded, any
                              other value is terminal and kept verbatim
    exception         -> terminal error message
    anything else     -> terminal value

Every iteration removes one layer, so the loop ends after at most as many
steps as the input is deep; `max_depth` bounds adversarial input. These
paths never raise on bad shapes: they degrade to a descriptive message.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .classify import (
    is_err,
    is_ok,
    is_result,
    is_result_like_err,
    is_result_like_err_with_encoded_value,
    is_result_like_ok,
    is_result_like_ok_with_encoded_value,
    shape_of,
)
from .codec import decode, decode_object
from .config import get_settings
from .construct import UNKNOWN_ERROR, normalize_error, result_like_err, result_like_ok
from .context import api_envelope, is_api_ctx, is_thunk_ctx, lookup
from .errors import FxError, UnknownEncodingError, error_message
from .result import Err, Ok, Result, ResultLike

logger = logging.getLogger("fxresult.unpack")

MALFORMED_MESSAGE = "Malformed Result object"


class Resolution(NamedTuple):
    """Terminal outcome: exactly one side is meaningful."""

    error: str | None
    value: Any

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_result(self) -> Result[Any, FxError]:
        return Err(FxError(self.error)) if self.error is not None else Ok(self.value)


def _encoded_result(value: object) -> dict[str, Any] | None:
    """Decoded form of `value` when it is JSON text of a Result, else None."""
    decoded = decode_object(value)
    return decoded if decoded is not None and is_result(decoded) else None


def resolve(value: object, *, max_depth: int | None = None) -> Resolution:
    """Peel every envelope from `value`, yielding one terminal (error, value) pair.

    A success payload that is not a context or encoded Result is returned
    verbatim, even when it is Result-shaped itself.
    """
    limit = max_depth if max_depth is not None else get_settings().max_depth
    current = value
    for _ in range(limit):
        if current is None:
            return Resolution(None, None)

        if isinstance(current, str):
            decoded = decode_object(current)
            if decoded is None:
                return Resolution(None, current)
            if not is_result(decoded):
                return Resolution(None, decoded)
            current = decoded
            continue

        if is_result(current):
            shape = shape_of(current)
            if shape.ok is True:  # type: ignore[union-attr]
                inner = shape.value  # type: ignore[union-attr]
                if is_api_ctx(inner):
                    current = api_envelope(inner)
                elif is_thunk_ctx(inner):
                    current = lookup(inner, "result")
                elif (encoded := _encoded_result(inner)) is not None:
                    current = encoded
                else:
                    return Resolution(None, inner)
                continue
            if is_err(current):
                return Resolution(normalize_error(shape.error, max_depth=limit), None)  # type: ignore[union-attr]
            logger.debug("malformed result during resolve: %r", current)
            return Resolution(MALFORMED_MESSAGE, None)

        if isinstance(current, BaseException):
            return Resolution(error_message(current) or UNKNOWN_ERROR, None)

        return Resolution(None, current)

    logger.debug("resolve gave up after %d envelopes", limit)
    return Resolution(f"resolve exceeded {limit} nested envelopes", None)


# ═══════════════════════════════════════════════════════════════════════════════
# Encoded ResultLike unpacking
# ═══════════════════════════════════════════════════════════════════════════════


def unpack(text: str) -> ResultLike:
    """Decode an encoded ResultLike, peeling one extra JSON layer from its payload.

    Unknown encodings give a ResultLike failure describing the input.
    """
    obj = decode_object(text)
    if obj is None:
        return result_like_err(f"unpack: unknown encoding: {text}")
    if is_result_like_ok_with_encoded_value(obj):
        return result_like_ok(decode(obj["value"]))
    if is_result_like_err_with_encoded_value(obj):
        return result_like_err(normalize_error(obj["error"]))
    if is_result_like_ok(obj):
        return result_like_ok(obj["value"])
    if is_result_like_err(obj):
        return result_like_err(normalize_error(obj["error"]))
    return result_like_err(f"unpack: unknown error: {text}")


def unpack_to_string(text: str) -> Any:
    """Terminal value of an encoded ResultLike, or a returned (not raised) error."""
    obj = decode_object(text)
    if obj is None:
        return UnknownEncodingError(f"unpack_to_string: not a JSON string: {text}")
    if is_result_like_ok_with_encoded_value(obj):
        return decode(obj["value"])
    if is_result_like_err_with_encoded_value(obj) or is_result_like_err(obj):
        return FxError(normalize_error(obj["error"]))
    if is_result_like_ok(obj):
        return obj["value"]
    return UnknownEncodingError(f"unpack: unknown error: {text}")


def unpack_result(result: Result[Any, Any] | Any) -> Any:
    """Ok value or error payload, without further unwrapping."""
    shape = shape_of(result)
    if shape is None:
        return UnknownEncodingError(f"not a result: {result!r}")
    return shape.value if is_ok(result) else shape.error


def unpack_json_result(text: str) -> Any:
    """Value of an encoded ResultLike, or FxError carrying its message."""
    res = unpack(text)
    return res["value"] if res["ok"] else FxError(res["error"])  # type: ignore[typeddict-item]
