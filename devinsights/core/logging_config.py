"""
Logging setup for the dashboard core

Modules log through logging.getLogger(__name__) and pass structured fields
as extra={"extra_fields": {...}}; error_handling adds a "context" dict.
JSONFormatter flattens both into one JSON object per line, which is what
LOG_JSON and LOG_FILE output use. Plain console output keeps a single
readable line per record.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from devinsights.secure_config import DashboardConfig

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, carrying chart and parsing fields alongside the message."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", log_file: Path | None = None, json_output: bool = False) -> None:
    """
    Replace the root logger's handlers.

    Args:
        level: Log level name
        log_file: Optional file that receives JSON records
        json_output: JSON records on stdout instead of the plain format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)


def setup_logging_from_config(config: DashboardConfig) -> None:
    """Apply LOG_LEVEL, LOG_JSON and LOG_FILE from a validated config."""
    setup_logging(level=config.log_level, log_file=config.log_file, json_output=config.log_json)
