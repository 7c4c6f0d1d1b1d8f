"""JSON logging for the TaskAssist service."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import get_request_id, get_user_id

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
_CONTEXT_ATTRS = frozenset({"request_id", "user_id"})

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


class RequestContextFilter(logging.Filter):
    """Stamp records with the current request id and authenticated user id."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        if getattr(record, "user_id", None) is None:
            record.user_id = get_user_id()
        return True


class JsonLogFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
            "environment": self._environment,
            "request_id": getattr(record, "request_id", get_request_id()),
        }
        user_id = getattr(record, "user_id", None)
        if user_id is not None:
            payload["user_id"] = user_id
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and key not in _CONTEXT_ATTRS:
                payload.setdefault(key, value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: Settings) -> None:
    """Send every log line to stdout as JSON at ``settings.log_level``."""

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = {"handlers": ["stdout"], "level": level, "propagate": False}
    loggers: dict[str, Any] = {name: dict(handler) for name in _SERVER_LOGGERS}
    # Requests are already logged by RequestContextMiddleware.
    loggers["uvicorn.access"] = {"handlers": ["stdout"], "level": logging.WARNING, "propagate": False}
    loggers["sqlalchemy.engine"] = {
        "handlers": ["stdout"],
        "level": logging.INFO if settings.db_echo else logging.WARNING,
        "propagate": False,
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "service": settings.project_name,
                    "environment": settings.environment,
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "filters": ["request_context"],
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": loggers,
        }
    )
    logging.captureWarnings(True)


__all__ = ["JsonLogFormatter", "RequestContextFilter", "configure_logging"]
