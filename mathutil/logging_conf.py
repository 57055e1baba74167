"""JSON-line logging for mathutil.

The library itself only calls get_logger(); applications (and the test suite)
opt in to output by calling setup_logging(). Calling it more than once won't
duplicate handlers.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import Any

__all__ = ["JsonFormatter", "setup_logging", "get_logger"]

_ROOT_LOGGER = "mathutil"

# LogRecord attributes that are never copied into the payload as extras.
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


def _default_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Core keys are ts, level, logger and message. Fields passed through
    `logger.debug("gcd.fold", extra={...})` are merged in without overwriting
    the core keys.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }

        msg = record.msg
        if isinstance(msg, dict):
            payload.update(msg)
        else:
            payload["message"] = record.getMessage()

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in payload:
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_stream_handler(level: int) -> Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    return handler


def setup_logging(level: str | int | None = None) -> None:
    """Attach a JSON stdout handler to the `mathutil` logger.

    The level defaults to LOG_LEVEL from the environment (INFO if unset).
    Idempotent: does nothing if the logger already has handlers.
    """
    logger = logging.getLogger(_ROOT_LOGGER)

    if level is None:
        level = _default_level()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if logger.handlers:
        return

    logger.setLevel(level)
    logger.addHandler(_make_stream_handler(level))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the `mathutil` namespace.

    Usage: logger = get_logger("mathutil.gcd")
    """
    return logging.getLogger(name if name else _ROOT_LOGGER)
