"""
Split timer for logging elapsed time between points of a single operation.

Typical usage::

    timings = SplitTimer("TAG", "methodA")
    # ... do some work A ...
    timings.add_split("work A")
    # ... do some work B ...
    timings.add_split("work B")
    # ... do some work C ...
    timings.add_split("work C")
    timings.dump_report()

which emits::

    TAG, methodA: begin
    TAG, methodA:       9 ms, work A
    TAG, methodA:       1 ms, work B
    TAG, methodA:       6 ms, work C
    TAG, methodA: end, 16 ms

When the gating policy reports timing as disabled at construction or
``reset()`` time, ``add_split`` and ``dump_report`` do nothing until the next
reset.  Reports go to stdout unless another sink is given, e.g.
``logger_sink(tag)`` to route them through logging.  Instances are not
thread-safe; keep one timer per logical operation.
"""

from __future__ import annotations

import logging
import time

from split_timer import config

from .models import Clock, GatingPolicy, ReportSink, SplitDelta

logger = logging.getLogger("split_timer.timer")


def monotonic_ms() -> int:
    """Current monotonic clock reading in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def stdout_sink(line: str) -> None:
    print(line, flush=True)


def logger_sink(tag: str, level: int = logging.INFO) -> ReportSink:
    """Sink that routes report lines to the ``split_timer.<tag>`` logger."""
    tag_logger = logging.getLogger(f"split_timer.{tag}")

    def emit(line: str) -> None:
        tag_logger.log(level, line)

    return emit


class SplitTimer:
    """Record labelled splits for one operation and report the deltas."""

    def __init__(
        self,
        tag: str,
        label: str,
        *,
        clock: Clock | None = None,
        sink: ReportSink | None = None,
        gating_policy: GatingPolicy | None = None,
    ) -> None:
        self._clock: Clock = clock or monotonic_ms
        self._sink = sink
        self._gating_policy = gating_policy
        self._splits: list[int] = []
        self._split_labels: list[str | None] = []
        self.enabled = False
        self.init(tag, label)

    def init(self, tag: str, label: str) -> None:
        """Switch to a new tag and label, then start a fresh session."""
        self._tag = tag
        self._label = label
        self.reset()

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def label(self) -> str:
        return self._label

    @property
    def splits(self) -> tuple[int, ...]:
        return tuple(self._splits)

    @property
    def split_labels(self) -> tuple[str | None, ...]:
        return tuple(self._split_labels)

    def reset(self) -> None:
        """
        Start a new session with the current tag and label.

        The gating policy is evaluated here.  A disabled session leaves the
        previous session's data untouched.
        """
        policy = self._gating_policy or config.get_gating_policy()
        self.enabled = bool(policy())
        if not self.enabled:
            logger.debug("Timing disabled for %s, %s", self._tag, self._label)
            return
        self._splits.clear()
        self._split_labels.clear()
        self.add_split(None)

    def add_split(self, split_label: str | None = None) -> None:
        """Record the current time, labelled with ``split_label``."""
        if not self.enabled:
            return
        self._splits.append(self._clock())
        self._split_labels.append(split_label)

    def deltas(self) -> list[SplitDelta]:
        """Elapsed time between consecutive splits, excluding the begin entry."""
        if not self.enabled:
            return []
        return [
            SplitDelta(self._splits[i] - self._splits[i - 1], self._split_labels[i])
            for i in range(1, len(self._splits))
        ]

    @property
    def total_ms(self) -> int:
        if not self.enabled or not self._splits:
            return 0
        return self._splits[-1] - self._splits[0]

    def report_lines(self) -> list[str]:
        """Render the report without emitting it."""
        if not self.enabled:
            return []
        prefix = f"{self._tag}, {self._label}:"
        lines = [f"{prefix} begin"]
        lines.extend(f"{prefix}       {entry.delta_ms} ms, {entry.display_label}" for entry in self.deltas())
        lines.append(f"{prefix} end, {self.total_ms} ms")
        return lines

    def dump_report(self) -> None:
        """Emit the report through the sink, one line per call."""
        if not self.enabled:
            return
        sink = self._sink or stdout_sink
        for line in self.report_lines():
            sink(line)

    def __repr__(self) -> str:
        return (
            f"SplitTimer(tag={self._tag!r}, label={self._label!r}, "
            f"enabled={self.enabled}, splits={len(self._splits)})"
        )
