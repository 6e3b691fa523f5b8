"""Logging for sync runs and the API server.

Sync runs usually happen unattended (cron), so besides the console every run
is appended to ``prayer-timetables.log``. Skipped rows only show up at DEBUG.
"""

from __future__ import annotations

from copy import deepcopy
import logging
import os
from pathlib import Path
from typing import Any, Final

from uvicorn.config import LOGGING_CONFIG

LOG_HANDLER_NAME: Final = "prayer-timetables-file"
CONSOLE_HANDLER_NAME: Final = "prayer-timetables-console"
LOG_FORMAT: Final = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_log_file: Path | None = None


def resolve_log_level(default: int = logging.INFO) -> int:
    """``PRAYER_TIMES_LOG_LEVEL`` as a level name or number, else ``default``."""

    value = (os.getenv("PRAYER_TIMES_LOG_LEVEL") or "").strip()
    if value.isdecimal():
        return int(value)
    level = logging.getLevelName(value.upper()) if value else default
    return level if isinstance(level, int) else default


def _named_handler(name: str) -> logging.Handler | None:
    return next((h for h in logging.getLogger().handlers if h.get_name() == name), None)


def configure_logging(*, log_file: Path | None = None, console: bool = True) -> Path | None:
    """Attach the console and file handlers to the root logger (once).

    Returns the log file in use, or ``None`` when it could not be opened; the
    run continues with console logging only in that case.
    """

    global _log_file

    level = resolve_log_level()
    root = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)

    if console and _named_handler(CONSOLE_HANDLER_NAME) is None:
        stream = logging.StreamHandler()
        stream.set_name(CONSOLE_HANDLER_NAME)
        stream.setFormatter(formatter)
        root.addHandler(stream)

    if _named_handler(LOG_HANDLER_NAME) is None:
        path = log_file or Path(os.getenv("PRAYER_TIMES_LOG_FILE") or "prayer-timetables.log")
        path = path.expanduser()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            logging.getLogger(__name__).warning("Kon logbestand niet openen: %s", exc)
            _log_file = None
        else:
            file_handler.set_name(LOG_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            _log_file = path

    for name in (CONSOLE_HANDLER_NAME, LOG_HANDLER_NAME):
        handler = _named_handler(name)
        if handler is not None:
            handler.setLevel(level)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
    return _log_file


def get_uvicorn_log_config() -> dict[str, Any]:
    """Uvicorn's config without ANSI colors, also writing to the sync log file."""

    config: dict[str, Any] = deepcopy(LOGGING_CONFIG)
    for formatter in config["formatters"].values():
        formatter["use_colors"] = False

    if _log_file is not None:
        config["handlers"]["logfile"] = {
            "class": "logging.FileHandler",
            "filename": str(_log_file),
            "encoding": "utf-8",
            "formatter": "default",
        }
        config["loggers"]["uvicorn"]["handlers"].append("logfile")
        config["loggers"]["uvicorn.access"]["handlers"].append("logfile")
    return config


__all__ = ["LOG_HANDLER_NAME", "configure_logging", "get_uvicorn_log_config", "resolve_log_level"]
