"""Logging setup for applications embedding the pricing engine."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

_BOOLEAN_TRUE = {"1", "true", "yes", "on"}


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "project_id"):
            log_entry["project_id"] = record.project_id
        return json.dumps(log_entry)


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure the root logger; unset arguments fall back to the environment."""

    if level is None:
        level = os.getenv("GOVPRICE_LOG_LEVEL", "INFO")
    if json_output is None:
        json_output = os.getenv("GOVPRICE_LOG_JSON", "").strip().lower() in _BOOLEAN_TRUE

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))

    root.handlers = [handler]
