"""Logging setup for gridcells command-line and embedding use."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from gridcells.config import get_config

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_logging(level_name: str = "WARNING", fmt: str = "text") -> None:
    """Install a single console handler on the root logger."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def setup_logging() -> None:
    """Configure logging from the active config unless handlers already exist."""
    root = logging.getLogger()
    if root.handlers:
        return
    config = get_config()
    configure_logging(config.log_level, config.log_format)


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``gridcells``."""
    if name == "gridcells" or name.startswith("gridcells."):
        return logging.getLogger(name)
    return logging.getLogger(f"gridcells.{name}")


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
