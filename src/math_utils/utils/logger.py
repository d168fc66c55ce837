"""Logging configuration for Math Utils.

Records from every ``math_utils`` logger are routed through handlers built from
``LoggingSettings``: a rich console handler, JSON lines, or plain text, with an
optional log file alongside.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler

from math_utils.utils.settings import get_settings

if TYPE_CHECKING:
    from math_utils.utils.settings import LoggingSettings

ROOT_LOGGER_NAME = "math_utils"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)),
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialise the record and its structured fields."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _build_stream_handler(log_format: str) -> logging.Handler:
    if log_format == "console":
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure the ``math_utils`` logger hierarchy from settings.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        settings: Logging settings to apply. Defaults to the global settings.

    """
    settings = settings or get_settings()
    root = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.addHandler(_build_stream_handler(settings.log_format))

    if settings.log_file_path:
        file_handler = logging.FileHandler(settings.log_file_path, encoding="utf-8")
        formatter = (
            logging.Formatter(PLAIN_FORMAT)
            if settings.log_format == "plain"
            else JSONFormatter()
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(settings.log_level)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``math_utils`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
