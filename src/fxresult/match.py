"""Resolve a result and either return its value or surface its error."""

from __future__ import annotations

import logging
from typing import Any

from .channels import report
from .classify import is_result
from .codec import decode_object
from .config import get_settings
from .errors import FxError
from .types import OutputsArg, parse_outputs
from .unpack import Resolution, resolve

logger = logging.getLogger("fxresult.match")


def _is_envelope(value: object) -> bool:
    """Result-shaped, or JSON text of a Result."""
    if isinstance(value, str):
        decoded = decode_object(value)
        return decoded is not None and is_result(decoded)
    return is_result(value)


def _unfold(result: object, limit: int) -> Resolution:
    """Resolve repeatedly while the terminal value is itself a Result."""
    current = result
    for _ in range(limit):
        resolution = resolve(current, max_depth=limit)
        if resolution.is_error or not _is_envelope(resolution.value):
            return resolution
        current = resolution.value
    return Resolution(f"match_call exceeded {limit} nested results", None)


def match_call(
    result: object,
    custom_error_message: str | None = None,
    outputs: OutputsArg = None,
    throws: bool = True,
) -> Any:
    """Resolve `result` to its terminal value, or surface its error.

    A resolved value that is itself a Result is resolved again, so nested
    Results are flattened. Values are returned as-is; None is returned
    without resolving. An error becomes an FxError (custom_error_message
    replaces the message, which is kept as `detail`), is reported to
    `outputs`, then raised when `throws` is true or returned otherwise.

    Example:
        >>> match_call({"ok": True, "value": '{"ok":true,"value":42}'}, None, ["terminal"])
        42
        >>> match_call({"ok": False, "error": "boom"}, None, ["terminal"], throws=False)
        FxError('boom')
    """
    if result is None:
        return None
    settings = get_settings()
    channels = parse_outputs(settings.default_outputs if outputs is None else outputs)
    message, value = _unfold(result, settings.max_depth)
    if message is None:
        return value
    error = FxError(custom_error_message, detail=message) if custom_error_message else FxError(message)
    report(error, channels)
    if throws:
        logger.debug("raising resolved error: %s", error.message)
        raise error
    return error
