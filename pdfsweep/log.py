"""Logging setup for the command line."""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from pdfsweep.config.models import PdfSweepConfig

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: PdfSweepConfig, stream: TextIO | None = None) -> logging.Logger:
    """Send pdfsweep log records to stdout as bare lines (or JSON)."""
    handler = logging.StreamHandler(stream or sys.stdout)
    if config.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("pdfsweep")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[config.log_level])
    return logger
