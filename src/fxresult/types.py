"""Shared type aliases and enumerations."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import TypeAlias


class Output(StrEnum):
    """Channels a resolved error can be reported to."""
    NOTIFY = "notify"  # user-facing notification
    CONSOLE = "console"  # development console
    TERMINAL = "terminal"  # operational log sink


OutputsArg: TypeAlias = "Iterable[Output | str] | None"


def parse_outputs(outputs: Iterable[Output | str]) -> tuple[Output, ...]:
    """Validate output tags, dropping duplicates while keeping order.

    Raises:
        ValueError: On an unrecognized tag
    """
    seen: dict[Output, None] = {}
    for tag in outputs:
        try:
            seen[Output(tag)] = None
        except ValueError:
            raise ValueError(f"unknown output channel {tag!r}; expected one of {[o.value for o in Output]}") from None
    return tuple(seen)
