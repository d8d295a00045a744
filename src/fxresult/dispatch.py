"""Runners threading operations and thunks through match_call.

The effect runtime that schedules and supervises operations lives
elsewhere; it calls these runners once control reaches them. An operation
is a zero-argument callable (a coroutine function for the async forms).

Call runners:
    call_exec   - value, or raises the resolved error
    call_return - value or returned error; raises only if the call itself failed
    safe_last   - non-nested FxResult, never raises

Thunk runners:
    run_thunk    - Result of running, not unfolded
    return_thunk - call_return on the thunk
    exec_thunk   - call_exec on the thunk, reporting to console and terminal
    safe_thunk   - safe_last on the thunk
    safe_api     - safe_last on an API thunk
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from .construct import create_result
from .context import Thunk
from .errors import DispatchError, error_message
from .logging import log_context
from .match import match_call
from .result import Err, FxResult, Ok, Result, to_fx_result
from .types import Output, OutputsArg

T = TypeVar("T")

logger = logging.getLogger("fxresult.dispatch")

_EXEC_THUNK_OUTPUTS = (Output.CONSOLE, Output.TERMINAL)


# ═══════════════════════════════════════════════════════════════════════════════
# Safe execution
# ═══════════════════════════════════════════════════════════════════════════════


def safe(fn: Callable[[], T]) -> Result[T, Exception]:
    """Run fn, capturing an exception as Err."""
    try:
        return Ok(fn())
    except Exception as e:
        logger.debug("operation %s failed: %s", getattr(fn, "__name__", fn), e)
        return Err(e)


async def safe_async(fn: Callable[[], Awaitable[T]] | Callable[[], T]) -> Result[T, Exception]:
    """Async safe: awaits coroutine functions, runs sync callables in a thread."""
    try:
        if inspect.iscoroutinefunction(fn):
            return Ok(await fn())
        value = await asyncio.to_thread(fn)
        return Ok(await value if inspect.isawaitable(value) else value)
    except Exception as e:
        logger.debug("operation %s failed: %s", getattr(fn, "__name__", fn), e)
        return Err(e)


def _raise_if_failed(result: Result[Any, Exception], custom_error_message: str | None) -> None:
    if result.is_err():
        cause = result.unwrap_err()
        message = error_message(cause)
        raise DispatchError(custom_error_message or message, detail=message) from cause


def _fx(value: Any) -> FxResult[Any, Any]:
    return to_fx_result(create_result(value))


# ═══════════════════════════════════════════════════════════════════════════════
# Call runners
# ═══════════════════════════════════════════════════════════════════════════════


def _op_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def call_exec(fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None) -> Any:
    """Run fn and return its resolved value; raises the resolved error."""
    with log_context(operation=_op_name(fn)):
        return match_call(safe(fn), custom_error_message, outputs, throws=True)


def call_return(fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None) -> Any:
    """Run fn and return its resolved value or error.

    Raises:
        DispatchError: If the call itself raised (not if it returned an error)
    """
    with log_context(operation=_op_name(fn)):
        result = safe(fn)
        _raise_if_failed(result, custom_error_message)
        return match_call(result, custom_error_message, outputs, throws=False)


def safe_last(
    fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None,
) -> FxResult[Any, Any]:
    """Run fn and return a non-nested FxResult. Never raises for failures of fn."""
    with log_context(operation=_op_name(fn)):
        return _fx(match_call(safe(fn), custom_error_message, outputs, throws=False))


async def call_exec_async(
    fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None,
) -> Any:
    with log_context(operation=_op_name(fn)):
        return match_call(await safe_async(fn), custom_error_message, outputs, throws=True)


async def call_return_async(
    fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None,
) -> Any:
    with log_context(operation=_op_name(fn)):
        result = await safe_async(fn)
        _raise_if_failed(result, custom_error_message)
        return match_call(result, custom_error_message, outputs, throws=False)


async def safe_last_async(
    fn: Callable[[], Any], custom_error_message: str | None = None, outputs: OutputsArg = None,
) -> FxResult[Any, Any]:
    with log_context(operation=_op_name(fn)):
        return _fx(match_call(await safe_async(fn), custom_error_message, outputs, throws=False))


# ═══════════════════════════════════════════════════════════════════════════════
# Thunk runners
# ═══════════════════════════════════════════════════════════════════════════════


def _runner(thunk: Thunk, args: Any) -> Callable[[], Any]:
    def run() -> Any:
        return thunk.run(thunk(args))
    run.__name__ = f"run:{_op_name(thunk)}"
    return run


def run_thunk(thunk: Thunk, args: Any = None) -> Result[Any, Exception]:
    """Run a thunk from within a thunk. Returns the raw Result; nothing is unfolded."""
    return safe(_runner(thunk, args))


def return_thunk(thunk: Thunk, args: Any = None) -> Any:
    """Run a thunk, returning its resolved value or error. Raises if the run itself failed."""
    return call_return(_runner(thunk, args))


def exec_thunk(thunk: Thunk, args: Any = None) -> Any:
    """Run a thunk, returning its resolved value. Raises the resolved error."""
    return call_exec(_runner(thunk, args), None, _EXEC_THUNK_OUTPUTS)


def safe_thunk(thunk: Thunk, args: Any = None) -> FxResult[Any, Any]:
    """Run a thunk, returning a non-nested FxResult."""
    return safe_last(_runner(thunk, args))


def safe_api(api: Thunk, args: Any = None) -> FxResult[Any, Any]:
    """Run an API thunk, returning a non-nested FxResult of its response data."""
    return safe_last(_runner(api, args))


def noop() -> None:
    """Operation that does nothing."""
