# utils/logging.py
"""
Logging for the API, the Streamlit app and the engines.

Usage:
    from utils.logging import get_logger
    logger = get_logger("analyzer")
    logger.debug("Analyzed text", extra={"pattern": "binary_search"})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from utils.config import settings

ROOT_LOGGER = "pattern_lab"

# extra= fields copied into JSON lines when present
_EXTRA_FIELDS = ("pattern", "variant", "steps", "confidence")


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """Configure the pattern_lab logger. Safe to call more than once."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or settings.LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
