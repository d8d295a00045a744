"""Result/Either type for success-or-failure values.

Implements a discriminated union for success/failure:
- Functor: map, map_err
- Monad: flat_map (bind)
- Bifunctor: bimap
- Case analysis: match, and cata on FxResult

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, Literal, NoReturn, TypedDict, TypeVar, Union

from .errors import FxError, error_message

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class ResultLikeOk(TypedDict):
    ok: Literal[True]
    value: object


class ResultLikeErr(TypedDict):
    ok: Literal[False]
    error: str


# Cross-boundary shape: failure payload is a message string, not an exception
ResultLike = Union[ResultLikeOk, ResultLikeErr]


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Immutable: every operation returns a new Result and attribute assignment
    raises AttributeError.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err(FxError("fail")).map(lambda x: x * 2).unwrap_err()
        FxError('fail')
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises the contained error on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        if isinstance(self._value, BaseException):
            raise self._value
        raise FxError(str(self._value))

    def unwrap_err(self) -> E:
        """Extract Err value. Raises RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on Ok: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Bifunctor Operations ──────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err. Signature: Result[T,E] → (T→U, E→F) → Result[U,F]"""
        return Result(ok_fn(self._value), _OK) if self._is_ok else Result(err_fn(self._value), _ERR)  # type: ignore[arg-type]

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    and_then = flat_map

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Conversion ────────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        return (self._value, None) if self._is_ok else (None, self._value)  # type: ignore[return-value]

    def to_dict(self) -> ResultLike:
        """ResultLike view. The error side keeps only the message."""
        if self._is_ok:
            return {"ok": True, "value": self._value}
        err = self._value
        return {"ok": False, "error": error_message(err) if isinstance(err, BaseException) else str(err)}

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten one nested layer. Result[Result[T,E],E] → Result[T,E]"""
        return self._value if self._is_ok else self  # type: ignore[return-value]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


class FxResult(Result[T, E]):
    """Result with catamorphism. A read-only view, never stored separately.

    Example:
        >>> to_fx_result(Ok("hello")).cata(ok=str.upper, err=lambda e: "failed")
        'HELLO'
    """

    __slots__ = ()

    def cata(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Dispatch to ok or err handler depending on the tag."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success). No validation - see construct.ok."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure). No coercion - see construct.err."""
    return Result(error, _ERR)


def to_fx_result(result: Result[T, E]) -> FxResult[T, E]:
    """Attach cata to a Result."""
    return result if isinstance(result, FxResult) else FxResult(result._value, result._is_ok)


def to_result(result: Result[T, E]) -> Result[T, E]:
    """Strip an FxResult back to a plain Result."""
    return Result(result._value, result._is_ok) if isinstance(result, FxResult) else result
