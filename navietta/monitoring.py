"""Logging setup.

Modules log through ``logging.getLogger(__name__)`` and pass context as
``extra={...}``. ``configure_logging`` installs a single root handler,
either plain text or one JSON object per line with the extra fields
merged in.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_navietta", False):
            root.removeHandler(existing)
    handler._navietta = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(config.level.upper())
