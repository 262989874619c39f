"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

One JSON object per log line, carried by Python's logging module under
the `autogis.<component>` logger names.

Example:
    >>> logger = StructuredLogger(component="catalog")
    >>> logger.info(
    ...     event=LogEvent.CATALOG_BUILT,
    ...     message="Built 3 geometries",
    ...     metadata={'geometry_count': 3}
    ... )

Output:
    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "INFO",
     "component": "catalog", "event": "catalog.built",
     "message": "Built 3 geometries", "metadata": {"geometry_count": 3}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON logger bound to one component.

    Loggers for the same component share one `logging.Logger`, so the
    level set last wins for all of them.

    Attributes:
        component: Component name ("geometry", "catalog", "cli")
        logger: Underlying `autogis.<component>` logger
    """

    def __init__(self, component: str, level: int = logging.INFO):
        self.component = component
        self.logger = logging.getLogger(f"autogis.{component}")
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        # Geometry constructors log at DEBUG on every call
        if not self.logger.isEnabledFor(level):
            return

        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(level, json.dumps(entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log(logging.DEBUG, event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log(logging.INFO, event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self._log(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        The exception, if given, is recorded as {"type", "message"} under
        the "exception" key rather than as a traceback.
        """
        self._log(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through: StructuredLogger messages are already JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Create a StructuredLogger for a component.

    Example:
        >>> logger = create_logger("catalog", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
