"""Console logging setup for the xdotdraw scripts.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
entrypoints call ``setup_logging`` once to attach a handler.

Format examples:
    Human: 2026-10-19T13:45:12.345+00:00 | DEBUG | xdotdraw.xdot.parser | Parsed 4 xdot operations
    JSON: {"t": "2026-10-19T13:45:12.345+00:00", "lvl": "DEBUG", "name": "...", "msg": "..."}

Idempotent: repeated setup_logging() calls replace the handler instead of
adding another one.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_HANDLER_NAME = "xdotdraw-console"


class ConsoleFormatter(logging.Formatter):
    """Formats records as a human-readable line or a JSON line."""

    def __init__(self, json_mode: bool = False) -> None:
        super().__init__()
        self.json_mode = json_mode

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        stamp = ts.isoformat(timespec="milliseconds")
        if self.json_mode:
            log_dict = {
                "t": stamp,
                "lvl": record.levelname,
                "name": record.name,
                "msg": record.getMessage(),
            }
            if record.exc_info:
                log_dict["exc"] = self.formatException(record.exc_info)
            return json.dumps(log_dict)

        line = f"{stamp} | {record.levelname} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str | int = "INFO", json_mode: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``xdotdraw`` logger.

    Parameters
    ----------
    level:
        Level name (``"DEBUG"``, ``"INFO"``, ...) or numeric level.
    json_mode:
        Emit one JSON object per line instead of the human format.

    Returns
    -------
    The configured ``xdotdraw`` package logger.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric

    root = logging.getLogger("xdotdraw")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(ConsoleFormatter(json_mode=json_mode))
    root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``xdotdraw`` namespace."""
    if name == "xdotdraw" or name.startswith("xdotdraw."):
        return logging.getLogger(name)
    return logging.getLogger(f"xdotdraw.{name}")
