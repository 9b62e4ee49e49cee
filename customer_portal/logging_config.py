"""
Logging setup for the customer portal.

Guard failures are logged with their check name and caption as structured
fields. The hosting web application calls ``setup_logging`` once at startup
and tags each page request with ``set_request_id`` so records can be
correlated with the request that produced them.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional
from uuid import uuid4

from .config import settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET_COLOR = "\033[0m"

request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Structured fields passed as ``extra={"extra_fields": {...}}``."""
    return getattr(record, "extra_fields", None) or {}


class StructuredFormatter(logging.Formatter):
    """Formats each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        request_id = request_id_context.get()
        if request_id:
            payload["request_id"] = request_id

        payload.update(_extra_fields(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Colored single-line format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, RESET_COLOR)
        line = f"{color}{record.levelname:8}{RESET_COLOR} [{record.name}]"

        request_id = request_id_context.get()
        if request_id:
            line += f" [req:{request_id[:8]}]"

        line += f" {record.getMessage()}"

        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


def setup_logging(
    log_level: Optional[str] = None,
    service_name: Optional[str] = None,
    use_json: Optional[bool] = None,
) -> logging.Logger:
    """
    Install a single stdout handler on the root logger.

    Arguments left as None are taken from settings.

    Returns:
        The service logger
    """
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    if use_json is None:
        use_json = settings.LOG_JSON

    formatter_class = StructuredFormatter if use_json else HumanReadableFormatter
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter_class(datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs every request at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger = get_logger(service_name)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or settings.SERVICE_NAME)


def set_request_id(request_id: Optional[str] = None) -> str:
    """Tag the current context with a request ID, generating one if needed."""
    request_id = request_id or str(uuid4())
    request_id_context.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return request_id_context.get()


def clear_request_id() -> None:
    request_id_context.set(None)
