"""Error types for the Result algebra.

- FxError: the canonical error object carried by Err results
- FxResultError and subclasses: failures raised by the algebra itself
- ErrorCode / classify_exception: codes attached to channel reports
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache


class ErrorCode(StrEnum):
    """Error codes for failures surfaced through the algebra."""
    CONSTRUCTION = "CONSTRUCTION"
    MALFORMED_RESULT = "MALFORMED_RESULT"
    UNKNOWN_ENCODING = "UNKNOWN_ENCODING"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
    DISPATCH = "DISPATCH"
    UNKNOWN = "UNKNOWN"


class FxError(Exception):
    """Error object carried in the failure slot of a Result.

    `message` is what crosses boundaries; `detail` optionally keeps the
    original message when a caller replaced it with a custom one.
    """

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FxError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.detail))


class FxResultError(FxError):
    """Base for errors raised by the algebra. Carries an ErrorCode."""

    code: ErrorCode = ErrorCode.UNKNOWN


class ConstructionError(FxResultError, TypeError):
    """Invalid Ok payload or unsupported Err payload."""

    code = ErrorCode.CONSTRUCTION


class MalformedResultError(FxResultError, ValueError):
    """Input claims to be a Result but lacks its complementary field."""

    code = ErrorCode.MALFORMED_RESULT

    def __init__(self, message: str = "Malformed Result object", *, detail: str | None = None) -> None:
        super().__init__(message, detail=detail)


class UnknownEncodingError(FxResultError, ValueError):
    """String input that is neither JSON nor a recognized Result encoding."""

    code = ErrorCode.UNKNOWN_ENCODING


class DepthLimitError(FxResultError, RecursionError):
    """Nesting deeper than the configured maximum."""

    code = ErrorCode.DEPTH_EXCEEDED


class DispatchError(FxResultError):
    """The dispatched operation itself failed before producing a Result."""

    code = ErrorCode.DISPATCH


# Pattern -> code mapping, checked in order
_PATTERN_CODES: dict[str, ErrorCode] = {
    "malformed": ErrorCode.MALFORMED_RESULT,
    "json": ErrorCode.UNKNOWN_ENCODING,
    "decode": ErrorCode.UNKNOWN_ENCODING,
    "encoding": ErrorCode.UNKNOWN_ENCODING,
    "recursion": ErrorCode.DEPTH_EXCEEDED,
    "depth": ErrorCode.DEPTH_EXCEEDED,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code. Algebra errors report their own code."""
    if isinstance(exc, FxResultError):
        return exc.code
    return _classify_cached(f"{type(exc).__name__} {exc}")


def error_message(exc: BaseException) -> str:
    """Message of an exception, falling back to its type name."""
    if isinstance(exc, FxError):
        return exc.message
    return str(exc) or type(exc).__name__ or "unknown error"
