"""
Shared configuration helpers and defaults.

The gating policy decides whether timers record anything at all. It is read
once per timing session (construction or ``reset``) and defaults to "enabled
unless running in release mode".
"""

from __future__ import annotations

import getpass
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.models import GatingPolicy

logger = logging.getLogger("split_timer.config")

APP_NAME = "Split Timer"
ENV_DISABLE = "SPLIT_TIMER_DISABLED"
LOG_FILE_NAME = "split_timer.log"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


def app_log_dir() -> Path:
    """Per-user log directory under the system temp dir."""
    try:
        user = getpass.getuser()
    except (OSError, KeyError):
        # No username in the environment or passwd database
        logger.debug("Could not determine user name; using shared log directory")
        return Path(tempfile.gettempdir()) / "split_timer"
    return Path(tempfile.gettempdir()) / f"split_timer_{user}"


def default_log_file() -> Path:
    return app_log_dir() / LOG_FILE_NAME


def ensure_app_directories() -> Path:
    """Create common application directories when missing and return the log directory."""
    log_dir = app_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _env_flag(name: str) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value not in _FALSY:
        logger.debug("Ignoring unrecognised value %r for %s", raw, name)
    return False


def is_release_mode() -> bool:
    """Return True for optimized interpreters (``python -O``) or when disabled via the environment."""
    return sys.flags.optimize > 0 or _env_flag(ENV_DISABLE)


def default_gating_policy() -> bool:
    return not is_release_mode()


_gating_policy: GatingPolicy = default_gating_policy


def set_gating_policy(policy: GatingPolicy | None) -> None:
    """Install a process-wide gating policy; ``None`` restores the default."""
    global _gating_policy
    _gating_policy = policy if policy is not None else default_gating_policy


def get_gating_policy() -> GatingPolicy:
    return _gating_policy


def is_timing_enabled() -> bool:
    """Evaluate the active gating policy."""
    return bool(_gating_policy())
