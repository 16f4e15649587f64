"""
Logging configuration and the structured logging sink.

configure_logging() is called once at process start and renders every record
as one JSON object. Handlers never reach for a global logger: they receive a
StructuredLogger through a dependency.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
RENAME_FIELDS = {"asctime": "timestamp", "levelname": "level", "name": "logger"}


def build_formatter() -> JsonFormatter:
    """JSON formatter; a dict message is merged into the top-level object."""
    return JsonFormatter(LOG_FORMAT, rename_fields=RENAME_FIELDS)


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide JSON logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)


class StructuredLogger:
    """Single-entry logging capability for structured objects.

    The payload is handed to logging as a dict message and encoded by the
    JSON formatter. log() never raises: formatting failures are routed
    through logging's own handleError.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def log(self, level: int, payload: Mapping[str, Any]) -> None:
        self._logger.log(level, dict(payload))

    def info(self, payload: Mapping[str, Any]) -> None:
        self.log(logging.INFO, payload)

    def error(self, payload: Mapping[str, Any]) -> None:
        self.log(logging.ERROR, payload)
