"""
Logging setup for the Pet Store API.

Plain text by default, JSON lines for structured log collectors when
PETSTORE_JSON_LOGS is enabled. Token values are never written to logs;
use token_presence() to describe them.
"""

import json
import logging
from datetime import UTC, datetime

from .errors import SERVICE_NAME

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes copied from `extra=` when a call site sets them
EXTRA_FIELDS = ("request_id", "upstream_status", "path")


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line, tagged with the service name.

    Records may override the service tag and attach any of EXTRA_FIELDS
    through `extra=`.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "service": getattr(record, "service", SERVICE_NAME),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        for name in EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure the root logger with a single stream handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Replace existing handlers to avoid duplicates (e.g. from uvicorn default config)
    if root_logger.handlers:
        root_logger.handlers = []

    root_logger.addHandler(handler)


def token_presence(label: str, token: str | None) -> str:
    """Describe whether a token was present without logging its value."""
    if not token:
        return f"{label}=absent"
    return f"{label}=present"
