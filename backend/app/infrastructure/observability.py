"""Structured Logging — JSON log lines and per-request access logging.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Only whitelisted extras are emitted; request bodies, passwords and
      hashes never reach a log line
    - setup_logging is idempotent: calling it again replaces the handler it
      installed instead of stacking a second one

Design Decisions:
    - Hand-written JSONFormatter on stdlib logging, no logging dependency
    - Access logging is a plain HTTP middleware function registered in
      main.py; it logs method, path, status and duration only
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_FIELDS = (
    "error_code", "path", "method", "status_code", "duration_ms",
    "user_id", "product_id", "category_id", "identifier_type",
)
_HANDLER_NAME = "catalog-api"

access_logger = logging.getLogger("app.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the catalog handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # SQL echo goes through its own flag, not the app level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


async def log_requests(request: Request, call_next):
    """HTTP middleware: one access line per request."""
    started = time.perf_counter()
    response = await call_next(request)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response
