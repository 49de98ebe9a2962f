# Copyright (c)
# SPDX-License-Identifier: MIT
"""JSON logging for the Stripe bindings.

Every record is rendered as one JSON object with the keys ``ts``, ``level``,
``logger`` and ``message``. Two optional enrichments apply:

* ``request_id``: the caller's correlation id. It comes from the record itself
  (``extra={"request_id": ...}``) or from :func:`set_request_context`. The same
  id is forwarded to Stripe as ``X-Request-ID`` by the client.
* ``extra={"extra": {...}}``: a dict merged into the payload, used by the
  client for ``stripe.response`` / ``stripe.retry`` fields.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "set_request_context",
]

_REQUEST_ID: ContextVar[str | None] = ContextVar("stripe_bindings_request_id", default=None)


def set_request_context(*, request_id: str | None = None) -> None:
    """Bind (or clear, with ``None``) the correlation id for this context."""
    _REQUEST_ID.set(request_id)


def get_request_id() -> str | None:
    return _REQUEST_ID.get()


class _JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "request_id", None) or _REQUEST_ID.get()
        if request_id:
            payload["request_id"] = request_id

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exc_message"] = str(record.exc_info[1])

        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            payload.update(fields)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Install the JSON handler on the root logger.

    Calling it again only updates the level; no second handler is added.

    Args:
        level: Level or level name; defaults to ``$LOG_LEVEL``, then ``INFO``.
    """
    root = logging.getLogger()
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    root.setLevel(level)

    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``; output goes through the root handler."""
    return logging.getLogger(name)
