"""fxresult - Result algebra for success/failure values crossing runtime boundaries.

Builds, classifies, transforms and unpacks Results that may arrive nested,
JSON-encoded, or in foreign shapes with string errors, and threads them
through an external effect runtime via small dispatcher helpers.

Example:
    >>> from fxresult import ok, err, map_result, resolve, match_call
    >>>
    >>> map_result(ok(21), lambda x: x * 2)
    Ok(42)
    >>> err("boom").unwrap_err()
    FxError('boom')
    >>> resolve({"ok": True, "value": '{"ok":true,"value":42}'})
    Resolution(error=None, value=42)
    >>> match_call({"ok": False, "error": {"message": "x failed"}}, None, ["terminal"], throws=False)
    FxError('x failed')
"""

from __future__ import annotations

__version__ = "0.1.0"

from .channels import ErrorReport, get_sink, register_sink, report, reset_sinks
from .classify import (
    is_err,
    is_ok,
    is_result,
    is_result_like,
    is_result_like_err,
    is_result_like_err_with_encoded_value,
    is_result_like_ok,
    is_result_like_ok_with_encoded_value,
    shape_of,
)
from .codec import is_json_encoded
from .config import FxResultSettings, clear_settings_cache, get_settings
from .construct import (
    create_result,
    encode_err,
    encode_ok,
    encode_result,
    err,
    from_result_like,
    from_value,
    identity_result,
    normalize,
    normalize_error,
    ok,
    result_like_err,
    result_like_ok,
)
from .context import Action, ApiCtx, Thunk, ThunkCtx, is_api_ctx, is_thunk_ctx
from .dispatch import (
    call_exec,
    call_exec_async,
    call_return,
    call_return_async,
    exec_thunk,
    noop,
    return_thunk,
    run_thunk,
    safe,
    safe_api,
    safe_async,
    safe_last,
    safe_last_async,
    safe_thunk,
)
from .errors import (
    ConstructionError,
    DepthLimitError,
    DispatchError,
    ErrorCode,
    FxError,
    FxResultError,
    MalformedResultError,
    UnknownEncodingError,
    classify_exception,
)
from .match import match_call
from .result import Err, FxResult, Ok, Result, ResultLike, ResultLikeErr, ResultLikeOk, to_fx_result, to_result
from .transform import bimap, coalesce, map_flatten, map_result, pass_through, unwrap_or_throw, value_or
from .types import Output
from .unpack import (
    Resolution,
    resolve,
    unpack,
    unpack_json_result,
    unpack_result,
    unpack_to_string,
)

__all__ = [
    # Core types
    "Result", "Ok", "Err", "FxResult", "ResultLike", "ResultLikeOk", "ResultLikeErr",
    "to_fx_result", "to_result",
    # Construction
    "ok", "err", "from_value", "create_result", "normalize", "from_result_like", "identity_result",
    "result_like_ok", "result_like_err", "encode_ok", "encode_err", "encode_result",
    # Classification
    "is_result", "is_ok", "is_err", "is_json_encoded", "is_result_like", "is_result_like_ok",
    "is_result_like_err", "is_result_like_ok_with_encoded_value", "is_result_like_err_with_encoded_value",
    "shape_of",
    # Transformation
    "map_result", "map_flatten", "bimap", "coalesce", "value_or", "unwrap_or_throw", "pass_through",
    # Unpacking
    "Resolution", "resolve", "normalize_error", "unpack", "unpack_to_string", "unpack_result",
    "unpack_json_result",
    # Dispatch
    "match_call", "safe", "safe_async", "call_exec", "call_return", "safe_last",
    "call_exec_async", "call_return_async", "safe_last_async",
    "run_thunk", "return_thunk", "exec_thunk", "safe_thunk", "safe_api", "noop",
    # Contexts
    "Action", "ApiCtx", "ThunkCtx", "Thunk", "is_api_ctx", "is_thunk_ctx",
    # Channels
    "Output", "ErrorReport", "report", "register_sink", "get_sink", "reset_sinks",
    # Errors
    "ErrorCode", "FxError", "FxResultError", "ConstructionError", "MalformedResultError",
    "UnknownEncodingError", "DepthLimitError", "DispatchError", "classify_exception",
    # Config
    "FxResultSettings", "get_settings", "clear_settings_cache",
]
