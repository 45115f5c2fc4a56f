"""
Logging setup for the workbook service.

Production writes one JSON object per line; development and tests get a
short coloured line that ends with the workbook / bundle / request the
record belongs to. LOG_LEVEL overrides the level.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Request keys set by the timing middleware
REQUEST_KEYS = ("request_id", "method", "path", "status", "duration_ms", "remote_addr")
# Record keys set by the services
RECORD_KEYS = ("user_id", "company_id", "workbook_id", "workbook_type", "submission_id", "step", "event_type")

# Shown as a suffix by ReadableFormatter, in this order
_SUFFIX = (("workbook_id", "wb"), ("submission_id", "sub"), ("step", "step"), ("request_id", "req"))


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REQUEST_KEYS + RECORD_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ReadableFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        tags = [
            f"{label}={getattr(record, key)}"
            for key, label in _SUFFIX
            if getattr(record, key, None) is not None
        ]
        suffix = f" [{' '.join(tags)}]" if tags else ""
        line = f"{color}{ts} {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}{suffix}"
        if record.exc_info and record.exc_info[0] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(app):
    """Install one stderr handler on the root logger.

    Default level: INFO in production, DEBUG otherwise.
    """
    is_testing = app.config.get("TESTING", False)
    is_prod = not app.config.get("DEBUG", False) and not is_testing

    level_name = os.getenv("LOG_LEVEL", "INFO" if is_prod else "DEBUG").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if is_prod else ReadableFormatter())

    # create_app runs once per test session and once per worker; never stack handlers
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in ("werkzeug", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(logging.WARNING)

    app.logger.setLevel(level)
    if not is_testing:
        app.logger.info("Logging configured: level=%s json=%s", level_name, is_prod)
