"""
Logging helpers shared by the library and the CLI.

Nothing is installed at import time; call :func:`configure_logging` to opt in
to a rotating log file plus console output for every ``split_timer`` logger.
"""

from __future__ import annotations

import logging
import stat
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import config

ROOT_LOGGER_NAME = "split_timer"

_FILE_HANDLER: RotatingFileHandler | None = None
_STREAM_HANDLER: logging.StreamHandler | None = None
_LOG_PATH: Path | None = None


def _install_handlers(log_path: Path | None = None) -> Path:
    """Configure rotating file and console handlers."""
    global _FILE_HANDLER, _STREAM_HANDLER, _LOG_PATH

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if log_path is not None:
        _LOG_PATH = Path(log_path).expanduser()
    elif _LOG_PATH is None:
        _LOG_PATH = config.ensure_app_directories() / config.LOG_FILE_NAME

    log_target = _LOG_PATH
    log_target.parent.mkdir(parents=True, exist_ok=True)
    if not log_target.exists():
        log_target.touch()
        # Owner read/write only
        log_target.chmod(stat.S_IRUSR | stat.S_IWUSR)

    if _FILE_HANDLER is not None:
        root.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
    _FILE_HANDLER = RotatingFileHandler(
        log_target,
        maxBytes=1_048_576,
        backupCount=3,
        encoding="utf-8",
    )
    _FILE_HANDLER.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(_FILE_HANDLER)

    if _STREAM_HANDLER is None:
        _STREAM_HANDLER = logging.StreamHandler()
        _STREAM_HANDLER.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
        root.addHandler(_STREAM_HANDLER)

    root.propagate = False
    return log_target


def configure_logging(log_file: str | Path | None = None, level: int | None = None) -> Path:
    """
    Configure handlers for the ``split_timer`` logger hierarchy.

    Args:
        log_file: Optional path for the rotating log file.
        level: Optional logging level override (defaults to INFO).

    Returns:
        Path to the active log file.
    """
    path = _install_handlers(Path(log_file) if log_file else None)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level if level is not None else logging.INFO)
    get_logger("split_timer.logging").info("Logging configured. Writing to %s", path)
    return path


def reset_logging() -> None:
    """Remove handlers installed by :func:`configure_logging`."""
    global _FILE_HANDLER, _STREAM_HANDLER, _LOG_PATH

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in (_FILE_HANDLER, _STREAM_HANDLER):
        if handler is not None:
            root.removeHandler(handler)
            handler.close()
    _FILE_HANDLER = None
    _STREAM_HANDLER = None
    _LOG_PATH = None
    root.propagate = True
    root.setLevel(logging.NOTSET)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a namespaced logger."""
    return logging.getLogger(name)
