"""Output channels for resolved errors.

Dispatchers pick which channels receive an error; delivery is delegated to
a sink per channel. Defaults route to logging and can be replaced, e.g. to
push `notify` reports into a UI toast queue:

    >>> from fxresult.channels import Output, register_sink
    >>> register_sink(Output.NOTIFY, lambda report: toasts.append(report.message))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorCode, classify_exception, error_message
from .logging import get_logger
from .types import Output, parse_outputs

terminal_logger = logging.getLogger("fxresult.terminal")
notify_logger = logging.getLogger("fxresult.notify")


class ErrorReport(BaseModel):
    """Error delivered to output channels."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = Field(min_length=1)
    detail: str | None = None
    code: ErrorCode = ErrorCode.UNKNOWN
    outputs: tuple[Output, ...] = ()

    @classmethod
    def from_exception(cls, exc: BaseException, outputs: Iterable[Output] = ()) -> ErrorReport:
        return cls(
            message=error_message(exc) or "unknown error",
            detail=getattr(exc, "detail", None),
            code=classify_exception(exc),
            outputs=tuple(outputs),
        )

    def render(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.detail and self.detail != self.message:
            parts.append(f" ({self.detail})")
        return "".join(parts)

    __str__ = render


Sink: TypeAlias = Callable[[ErrorReport], None]


def _terminal_sink(report: ErrorReport) -> None:
    terminal_logger.error(report.render())


def _console_sink(report: ErrorReport) -> None:
    log = get_logger("fxresult").bind(channel=Output.CONSOLE.value, code=report.code.value)
    log.error(report.message, **({"detail": report.detail} if report.detail else {}))


def _notify_sink(report: ErrorReport) -> None:
    notify_logger.warning(report.message)


_DEFAULT_SINKS: dict[Output, Sink] = {
    Output.TERMINAL: _terminal_sink,
    Output.CONSOLE: _console_sink,
    Output.NOTIFY: _notify_sink,
}
_SINKS: dict[Output, Sink] = dict(_DEFAULT_SINKS)


def register_sink(output: Output | str, sink: Sink) -> None:
    """Replace the sink for a channel."""
    (channel,) = parse_outputs([output])
    _SINKS[channel] = sink


def get_sink(output: Output | str) -> Sink:
    (channel,) = parse_outputs([output])
    return _SINKS[channel]


def reset_sinks() -> None:
    """Restore default sinks (useful for testing)."""
    _SINKS.clear()
    _SINKS.update(_DEFAULT_SINKS)


def report(error: BaseException, outputs: Iterable[Output | str]) -> ErrorReport:
    """Deliver `error` to each requested channel. Returns the delivered report."""
    channels = parse_outputs(outputs)
    rep = ErrorReport.from_exception(error, channels)
    for channel in channels:
        _SINKS[channel](rep)
    return rep
