"""
High-level package exports for Split Timer.
"""

from __future__ import annotations

from importlib import metadata
from typing import Final

try:
    __version__: Final[str] = metadata.version("split-timer")
except metadata.PackageNotFoundError:  # pragma: no cover - local execution
    __version__ = "0.0.0"

# Convenience re-exports
from . import config  # noqa: E402
from .config import is_timing_enabled, set_gating_policy  # noqa: E402
from .core.models import SplitDelta  # noqa: E402
from .core.timer import SplitTimer, logger_sink  # noqa: E402
from .logging import configure_logging, get_logger  # noqa: E402

__all__ = [
    "__version__",
    "SplitDelta",
    "SplitTimer",
    "config",
    "configure_logging",
    "get_logger",
    "is_timing_enabled",
    "logger_sink",
    "set_gating_policy",
]
