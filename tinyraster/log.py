"""Logging setup for tinyraster."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

__all__ = ["JsonFormatter", "configure_logging", "get_logger"]

_LOGGER_NAME = "tinyraster"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, message and the optional
    `event` tag passed through `extra`.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
        return json.dumps(payload)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Attach a stderr handler to the package logger, plus a JSON file
    handler when `log_file` is given. Calling it again only updates the
    level and adds a file handler for a new `log_file`.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        if json_format:
            stream_handler.setFormatter(JsonFormatter())
        else:
            stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(stream_handler)

    if log_file is not None:
        path = str(Path(log_file).resolve())
        if not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path for h in logger.handlers
        ):
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            logger.addHandler(file_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
