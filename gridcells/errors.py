"""Grid layout exception types."""

from __future__ import annotations

import logging


class GridError(Exception):
    """Base class for grid layout errors."""


class GridSpecError(GridError, ValueError):
    """Raised when a grid specification cannot describe a layout."""


class InvalidArgumentError(GridError, TypeError):
    """Raised when an argument matches none of the accepted shapes."""


class EmptySelectionError(GridError, ValueError):
    """Raised when a bounding box is requested for no cells."""


def log_rejected(logger: logging.Logger, message: str, **fields: object) -> None:
    """Emit a debug record for an input rejected at the boundary.

    The fields are appended to the message as ``key=value`` pairs and also
    attached to the record as ``rejected`` for structured formatters.
    """
    details = " ".join(f"{key}={value!r}" for key, value in fields.items())
    text = f"{message} {details}" if details else message
    logger.debug("%s", text, extra={"rejected": dict(fields)})
