"""Structured local logging setup."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_dir

_LOGGER_NAME = "panefetch"


def log_dir() -> Path:
    path = config_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


_KEEP_DAYS = 7


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``area`` is the logger name below ``panefetch``."""

    def format(self, record: logging.LogRecord) -> str:
        area = record.name.removeprefix(_LOGGER_NAME).lstrip(".") or "app"
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "area": area,
            "event": getattr(record, "event", None),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(console: bool = True, debug: bool = False, directory: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str((directory or log_dir()) / "panefetch.log"),
        when="midnight",
        backupCount=_KEEP_DAYS,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        # stdout carries the fetch output, diagnostics go to stderr
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
