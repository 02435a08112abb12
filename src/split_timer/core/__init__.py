"""Core timing APIs."""

from .models import Clock, GatingPolicy, ReportSink, SplitDelta
from .timer import SplitTimer, logger_sink, monotonic_ms, stdout_sink

__all__ = [
    "Clock",
    "GatingPolicy",
    "ReportSink",
    "SplitDelta",
    "SplitTimer",
    "logger_sink",
    "monotonic_ms",
    "stdout_sink",
]
