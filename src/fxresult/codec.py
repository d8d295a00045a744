"""JSON codec for encoded results.

orjson is a core dependency - no fallback to stdlib json. Output is compact
(no whitespace), matching what foreign runtimes emit for encoded results.

Usage:
    >>> from fxresult.codec import encode_str, is_json_encoded
    >>> encode_str({"ok": True, "value": 42})
    '{"ok":true,"value":42}'
    >>> is_json_encoded('{"ok":true}')
    True
"""

from __future__ import annotations

from typing import Any, Union

import orjson

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]

_ENCODE_OPTIONS = orjson.OPT_NON_STR_KEYS | orjson.OPT_UTC_Z


def encode_str(data: Any) -> str:
    """Encode to compact JSON text."""
    return orjson.dumps(data, option=_ENCODE_OPTIONS).decode()


def decode(data: bytes | str) -> JsonValue:
    """Decode JSON bytes/str. Raises orjson.JSONDecodeError."""
    return orjson.loads(data)


def try_decode(data: object) -> tuple[bool, JsonValue]:
    """Decode if `data` is valid JSON text. Returns (decoded, value)."""
    if not isinstance(data, (str, bytes)):
        return False, None
    try:
        return True, orjson.loads(data)
    except orjson.JSONDecodeError:
        return False, None


def decode_object(data: object) -> JsonDict | None:
    """Decode `data` when it is JSON text of an object, else None."""
    decoded, value = try_decode(data)
    return value if decoded and isinstance(value, dict) else None


def is_json_encoded(data: object) -> bool:
    """True iff `data` is a string holding a JSON object (not a primitive or array)."""
    return isinstance(data, str) and decode_object(data) is not None
