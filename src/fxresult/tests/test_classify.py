"""Tests for classification predicates and execution-context detection."""

from __future__ import annotations

import pytest

from fxresult import (
    Action,
    ApiCtx,
    Err,
    FxError,
    Ok,
    ThunkCtx,
    is_api_ctx,
    is_err,
    is_json_encoded,
    is_ok,
    is_result,
    is_result_like,
    is_result_like_err,
    is_result_like_err_with_encoded_value,
    is_result_like_ok,
    is_result_like_ok_with_encoded_value,
    is_thunk_ctx,
)


# ─────────────────────────────────────────────────────────────────────────────
# Loose and strict result checks
# ─────────────────────────────────────────────────────────────────────────────


def test_is_result_is_loose() -> None:
    assert is_result(Ok(1))
    assert is_result(Err(FxError("x")))
    assert is_result({"ok": True})
    assert is_result({"ok": "maybe"})
    assert is_result({"ok": None, "value": 1})
    assert not is_result({"value": 1})
    assert not is_result("ok")
    assert not is_result(None)


def test_is_ok_requires_value_field() -> None:
    assert is_ok(Ok(None))
    assert is_ok({"ok": True, "value": None})
    assert not is_ok({"ok": True})
    assert not is_ok({"ok": 1, "value": 1})
    assert not is_ok(Err(FxError("x")))


def test_is_err_requires_error_field() -> None:
    assert is_err(Err(FxError("x")))
    assert is_err({"ok": False, "error": "x"})
    assert not is_err({"ok": False})
    assert not is_err(Ok(1))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"a":1}', True),
        ("{}", True),
        ("[1,2]", False),
        ("42", False),
        ('"str"', False),
        ("not json", False),
        ("{broken", False),
        (42, False),
        (None, False),
    ],
)
def test_is_json_encoded(text: object, expected: bool) -> None:
    assert is_json_encoded(text) is expected


def test_result_like_only_accepts_mappings() -> None:
    assert is_result_like({"ok": True, "value": 1})
    assert is_result_like({"ok": False, "error": "e"})
    assert not is_result_like(Ok(1))
    assert is_result_like_ok({"ok": True, "value": 1})
    assert not is_result_like_ok({"ok": False, "error": "e"})
    assert is_result_like_err({"ok": False, "error": "e"})
    assert not is_result_like_err({"ok": True, "value": 1})


def test_result_like_with_encoded_payload() -> None:
    assert is_result_like_ok_with_encoded_value({"ok": True, "value": '{"ok":true,"value":1}'})
    assert not is_result_like_ok_with_encoded_value({"ok": True, "value": "plain"})
    assert not is_result_like_ok_with_encoded_value({"ok": True, "value": {"a": 1}})
    assert is_result_like_err_with_encoded_value({"ok": False, "error": '{"message":"m"}'})
    assert not is_result_like_err_with_encoded_value({"ok": False, "error": "m"})


# ─────────────────────────────────────────────────────────────────────────────
# Execution contexts
# ─────────────────────────────────────────────────────────────────────────────


def test_api_ctx_detection() -> None:
    assert is_api_ctx({"key": "k", "name": "users", "json": {"ok": True, "data": [1]}})
    assert is_api_ctx(ApiCtx(key="k", name="users", json={"ok": False, "data": "denied"}))
    assert not is_api_ctx({"key": "k", "name": "users", "json": {"ok": True}})
    assert not is_api_ctx(ApiCtx(key="k", name="users"))
    assert not is_api_ctx({"key": "k", "name": "users"})


def test_thunk_ctx_detection() -> None:
    foreign = {"action": {}, "actionFn": None, "key": "k", "name": "load", "result": {"ok": True, "value": 1}}
    assert is_thunk_ctx(foreign)
    assert is_thunk_ctx(ThunkCtx(action=Action("load"), action_fn=None, key="k", name="load", result=Ok(1)))
    assert not is_thunk_ctx(ThunkCtx(action=Action("load"), action_fn=None, key="k", name="load"))
    assert not is_thunk_ctx({**foreign, "result": "done"})
    assert not is_thunk_ctx({k: v for k, v in foreign.items() if k != "actionFn"})
