"""
Typed models used by split timers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# Returns a monotonic reading in milliseconds.
Clock = Callable[[], int]
# Receives one rendered report line per call.
ReportSink = Callable[[str], None]
# Decides whether a timing session records anything.
GatingPolicy = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class SplitDelta:
    delta_ms: int
    label: str | None = None

    @property
    def display_label(self) -> str:
        return "" if self.label is None else self.label
