"""Tests for mapping and folding operators."""

from __future__ import annotations

import pytest

from fxresult import (
    DepthLimitError,
    Err,
    FxError,
    MalformedResultError,
    Ok,
    bimap,
    coalesce,
    map_flatten,
    map_result,
    pass_through,
    unwrap_or_throw,
    value_or,
)


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


class TestMapResult:
    def test_maps_ok_values(self) -> None:
        assert map_result(Ok(1), inc) == Ok(2)
        assert map_result({"ok": True, "value": 1}, inc) == Ok(2)

    def test_failures_pass_through_unchanged(self) -> None:
        failure = Err(FxError("fail"))
        assert map_result(failure, inc) is failure
        assert map_result({"ok": False, "error": "fail"}, inc) == failure

    def test_identity(self) -> None:
        for result in (Ok(5), Err(FxError("fail"))):
            assert map_result(result, lambda x: x) == result

    def test_composition(self) -> None:
        for result in (Ok(5), Err(FxError("fail"))):
            assert map_result(result, lambda x: inc(double(x))) == map_result(map_result(result, double), inc)

    def test_does_not_flatten(self) -> None:
        assert map_result(Ok(1), lambda x: Ok(x)) == Ok(Ok(1))

    def test_structured_failures_keep_their_message(self) -> None:
        mapped = map_result({"ok": False, "error": {"message": "x failed"}}, inc)
        assert mapped == Err(FxError("x failed"))
        assert map_result({"ok": False, "error": {"code": 7}}, inc) == Err(FxError('{"code":7}'))
        assert map_flatten({"ok": False, "error": '{"message":"encoded"}'}, inc) == Err(FxError("encoded"))

    def test_callback_exceptions_propagate(self) -> None:
        def explode(_: int) -> int:
            raise KeyError("boom")

        with pytest.raises(KeyError):
            map_result(Ok(1), explode)

    @pytest.mark.parametrize("bad", [{"ok": True}, {"ok": False}, {"value": 1}, 5, None])
    def test_rejects_malformed_input(self, bad: object) -> None:
        with pytest.raises(MalformedResultError, match="Malformed Result object"):
            map_result(bad, inc)


class TestMapFlatten:
    def test_plain_output_is_wrapped_once(self) -> None:
        assert map_flatten(Ok(1), inc) == Ok(2)

    def test_result_outputs_are_mapped_again(self) -> None:
        step = lambda x: Ok(x + 1) if x < 3 else x * 10  # noqa: E731
        assert map_flatten(Ok(0), step) == Ok(30)

    def test_result_like_outputs_are_mapped_again(self) -> None:
        step = lambda x: {"ok": True, "value": x + 1} if x < 2 else f"done:{x}"  # noqa: E731
        assert map_flatten({"ok": True, "value": 0}, step) == Ok("done:2")

    def test_failure_from_fn_short_circuits(self) -> None:
        assert map_flatten(Ok(1), lambda _: Err(FxError("stop"))) == Err(FxError("stop"))
        assert map_flatten(Ok(1), lambda _: {"ok": False, "error": "stop"}) == Err(FxError("stop"))

    def test_failure_input_passes_through(self) -> None:
        failure = Err(FxError("fail"))
        assert map_flatten(failure, inc) is failure

    def test_ok_value_never_result_shaped(self) -> None:
        for start in range(5):
            out = map_flatten(Ok(start), lambda x: Ok(x - 1) if x > 0 else "bottom")
            assert out == Ok("bottom")

    def test_depth_limit(self) -> None:
        with pytest.raises(DepthLimitError, match="exceeded 5"):
            map_flatten(Ok(1), lambda x: Ok(x), max_depth=5)

    def test_zero_depth_is_not_the_default(self) -> None:
        with pytest.raises(DepthLimitError, match="exceeded 0"):
            map_flatten(Ok(1), inc, max_depth=0)

    def test_malformed_layer(self) -> None:
        with pytest.raises(MalformedResultError):
            map_flatten(Ok(1), lambda _: {"ok": True})


class TestFolds:
    def test_bimap(self) -> None:
        wrap = lambda e: FxError(f"wrapped: {e}")  # noqa: E731
        assert bimap(Ok(2), wrap, double) == Ok(4)
        assert bimap(Err(FxError("e")), wrap, double) == Err(FxError("wrapped: e"))
        assert bimap({"ok": False, "error": "raw"}, lambda e: e.upper(), double) == Err("RAW")

    def test_coalesce_recovers_errors(self) -> None:
        assert coalesce(Ok(2), lambda _: -1, double) == Ok(4)
        assert coalesce(Err(FxError("e")), lambda _: -1, double) == Ok(-1)
        assert coalesce({"ok": False, "error": "e"}, lambda e: f"recovered {e}", double) == Ok("recovered e")

    def test_value_or(self) -> None:
        assert value_or(Ok(2), 0) == 2
        assert value_or(Err(FxError("e")), 0) == 0
        assert value_or({"ok": False, "error": "e"}, "fallback") == "fallback"

    def test_value_or_invokes_callable_fallback(self) -> None:
        assert value_or(Err(FxError("missing")), lambda e: f"default for {e}") == "default for missing"
        assert value_or(Ok(2), lambda e: 0) == 2

    def test_folds_reject_malformed_input(self) -> None:
        for op in (lambda r: bimap(r, str, str), lambda r: coalesce(r, str, str), lambda r: value_or(r, 0)):
            with pytest.raises(MalformedResultError):
                op({"ok": True})


class TestUnwrapOrThrow:
    def test_returns_value(self) -> None:
        assert unwrap_or_throw(Ok(3)) == 3
        assert unwrap_or_throw({"ok": True, "value": None}) is None

    def test_raises_contained_exception(self) -> None:
        error = KeyError("k")
        with pytest.raises(KeyError) as info:
            unwrap_or_throw(Err(error))
        assert info.value is error

    def test_string_payload_raises_fx_error(self) -> None:
        with pytest.raises(FxError, match="plain"):
            unwrap_or_throw({"ok": False, "error": "plain"})
        with pytest.raises(FxError, match="^x failed$"):
            unwrap_or_throw({"ok": False, "error": {"message": "x failed"}})

    def test_pass_through_alias(self) -> None:
        assert pass_through is unwrap_or_throw

    def test_malformed(self) -> None:
        with pytest.raises(MalformedResultError):
            unwrap_or_throw("nope")
