"""Structured JSON logging for the stylist service.

Engine and weather events go through :func:`log_event` and carry the id of
the request they belong to, bound by :func:`request_scope`. Owner ids, image
links and user supplied locations are masked before a record is written;
wardrobes are logged as per-category counts, never item by item.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, Optional

RECOMMENDATIONS_GENERATED = "recommendations_generated"
RECOMMENDATION_REQUEST_INVALID = "recommendation_request_invalid"
WEATHER_LOOKUP_STARTED = "weather_lookup_started"
WEATHER_LOOKUP_COMPLETED = "weather_lookup_completed"
WEATHER_LOOKUP_FAILED = "weather_lookup_failed"

MASK = "[redacted]"
MASKED_FIELDS = frozenset({"user_id", "userId", "image_url", "imageUrl", "location", "email"})

_REQUEST_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)
# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")


def scrub(value: Any) -> Any:
    """Return a JSON-safe copy of ``value`` with masked fields and links removed."""

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if value.lower().startswith("http"):
            return "[redacted-url]"
        return _EMAIL.sub("[redacted-email]", value)
    if isinstance(value, dict):
        return {key: MASK if key in MASKED_FIELDS else scrub(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [scrub(item) for item in value]
    return str(value)


def describe_wardrobe(items: Iterable[Any]) -> Dict[str, int]:
    """Count wardrobe items per category for logging."""

    return dict(Counter(getattr(item, "category", "unknown") for item in items))


class StylistLogFormatter(logging.Formatter):
    """One JSON object per record: level, logger, event, request id and extras."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "request_id": getattr(record, "request_id", None) or _REQUEST_ID.get(),
        }
        for key, value in vars(record).items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = MASK if key in MASKED_FIELDS else scrub(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Send all records to stderr as JSON at ``level`` (default ``$LOG_LEVEL`` or INFO)."""

    level = level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    handler = logging.StreamHandler()
    handler.setFormatter(StylistLogFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


@contextlib.contextmanager
def request_scope(operation: str) -> Iterator[str]:
    """Bind a request id for ``operation``; nested scopes keep the outer id."""

    request_id = _REQUEST_ID.get() or uuid.uuid4().hex
    token = _REQUEST_ID.set(request_id)
    logging.getLogger(__name__).debug("entering %s", operation, extra={"operation": operation})
    try:
        yield request_id
    finally:
        _REQUEST_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with scrubbed ``fields``; pass ``exc_info=True`` to attach a traceback."""

    exc_info = fields.pop("exc_info", None)
    extra = {key: MASK if key in MASKED_FIELDS else scrub(value) for key, value in fields.items()}
    extra.update(event=event, request_id=_REQUEST_ID.get())
    logger.log(level, event, exc_info=exc_info, extra=extra)


__all__ = [
    "RECOMMENDATIONS_GENERATED",
    "RECOMMENDATION_REQUEST_INVALID",
    "WEATHER_LOOKUP_STARTED",
    "WEATHER_LOOKUP_COMPLETED",
    "WEATHER_LOOKUP_FAILED",
    "StylistLogFormatter",
    "configure_logging",
    "describe_wardrobe",
    "get_logger",
    "log_event",
    "request_scope",
    "scrub",
]
