"""Tests for error reports and output channel sinks."""

from __future__ import annotations

import io
import logging

import orjson
import pytest
from pydantic import ValidationError

from fxresult import (
    DepthLimitError,
    ErrorCode,
    ErrorReport,
    FxError,
    Output,
    get_sink,
    register_sink,
    report,
    reset_sinks,
)
from fxresult.logging import configure_logging
from fxresult.types import parse_outputs


class TestErrorReport:
    def test_from_exception(self) -> None:
        rep = ErrorReport.from_exception(FxError("Save failed", detail="disk full"), [Output.NOTIFY])

        assert rep.message == "Save failed"
        assert rep.detail == "disk full"
        assert rep.code is ErrorCode.UNKNOWN
        assert rep.outputs == (Output.NOTIFY,)
        assert str(rep) == "[UNKNOWN] Save failed (disk full)"

    def test_algebra_errors_keep_their_code(self) -> None:
        rep = ErrorReport.from_exception(DepthLimitError("too deep"))
        assert rep.code is ErrorCode.DEPTH_EXCEEDED
        assert rep.render() == "[DEPTH_EXCEEDED] too deep"

    def test_foreign_exception_message(self) -> None:
        assert ErrorReport.from_exception(KeyError("k")).message == "'k'"
        assert ErrorReport.from_exception(ValueError()).message == "ValueError"

    def test_is_frozen_and_strict(self) -> None:
        rep = ErrorReport(message="m")
        with pytest.raises(ValidationError):
            rep.message = "other"  # type: ignore[misc]
        with pytest.raises(ValidationError):
            ErrorReport(message="")
        with pytest.raises(ValidationError):
            ErrorReport(message="m", extra_field=1)  # type: ignore[call-arg]


class TestOutputs:
    def test_parse_outputs_dedupes_in_order(self) -> None:
        assert parse_outputs(["terminal", Output.NOTIFY, "terminal"]) == (Output.TERMINAL, Output.NOTIFY)
        assert parse_outputs([]) == ()

    def test_parse_outputs_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="unknown output channel 'pager'"):
            parse_outputs(["pager"])


class TestSinks:
    def test_report_delivers_once_per_channel(self, reports) -> None:
        rep = report(FxError("boom"), ["notify", "terminal", "notify"])

        assert reports[Output.NOTIFY] == [rep]
        assert reports[Output.TERMINAL] == [rep]
        assert reports[Output.CONSOLE] == []

    def test_register_and_reset(self) -> None:
        seen: list[str] = []
        register_sink("notify", lambda rep: seen.append(rep.message))
        report(FxError("toast"), [Output.NOTIFY])
        assert seen == ["toast"]

        reset_sinks()
        assert get_sink(Output.NOTIFY) is not get_sink(Output.TERMINAL)
        report(FxError("after reset"), [Output.NOTIFY])
        assert seen == ["toast"]

    def test_register_unknown_channel(self) -> None:
        with pytest.raises(ValueError):
            register_sink("pager", lambda rep: None)

    def test_default_terminal_sink_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="fxresult.terminal"):
            report(FxError("disk full"), [Output.TERMINAL])
        assert "[UNKNOWN] disk full" in caplog.text

    def test_default_notify_sink_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="fxresult.notify"):
            report(FxError("heads up"), [Output.NOTIFY])
        assert "heads up" in caplog.text

    def test_default_console_sink_renders_structured_entry(self) -> None:
        buf = io.StringIO()
        configure_logging(format="json", level="DEBUG", output=buf)
        try:
            report(FxError("Save failed", detail="disk full"), [Output.CONSOLE])
        finally:
            configure_logging(format="none")

        entry = orjson.loads(buf.getvalue().splitlines()[-1])
        assert entry["event"] == "Save failed"
        assert entry["level"] == "error"
        assert entry["channel"] == "console"
        assert entry["detail"] == "disk full"
        assert entry["code"] == "UNKNOWN"
