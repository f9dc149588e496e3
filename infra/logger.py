"""
Logging setup shared by the server, the CLI and the store adapters.

Call ``configure_logging`` once at startup; modules obtain their logger with
``get_logger(__name__)`` at import time.
"""

from __future__ import annotations

import json as jsonlib
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import LOG_STORAGE_DIR

__all__ = ["JsonFormatter", "configure_logging", "get_logger"]

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return jsonlib.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    level: str = "INFO",
    json: bool = False,
    log_file: Optional[str | Path] = None,
) -> None:
    """
    Configure the root logger (console + optional file).

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
        json: Emit JSON lines instead of plain text
        log_file: Optional file path; relative paths land under storage/logs
    """
    formatter: logging.Formatter = JsonFormatter() if json else logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        if not path.is_absolute():
            path = LOG_STORAGE_DIR / path
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)
