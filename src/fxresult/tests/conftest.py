"""Shared fixtures: isolated settings and capturing sinks."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fxresult import ErrorReport, Output, clear_settings_cache, register_sink, reset_sinks


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings and default sinks for every test."""
    for name in ("FXRESULT_DEFAULT_OUTPUTS", "FXRESULT_MAX_DEPTH", "FXRESULT_LOG_LEVEL", "FXRESULT_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    reset_sinks()
    yield
    reset_sinks()
    clear_settings_cache()


@pytest.fixture
def reports() -> dict[Output, list[ErrorReport]]:
    """Replace every sink with one that records delivered reports per channel."""
    captured: dict[Output, list[ErrorReport]] = {output: [] for output in Output}
    for output in Output:
        register_sink(output, captured[output].append)
    return captured
