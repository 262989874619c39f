"""
Structured Logging for AutoGIS
==============================

Bounded Context: Observability

JSON-structured logging shared by the geometry core, the catalog and the CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    geometry_logger: Shared logger of the geometry primitives (WARNING)

Example:
    >>> from autogis_geometry.logging import create_logger, LogEvent
    >>> logger = create_logger("catalog")
    >>> logger.info(
    ...     event=LogEvent.CATALOG_LOADED,
    ...     message="Loaded catalog",
    ...     metadata={'path': 'catalog.yaml', 'geometry_count': 2}
    ... )
"""

import logging

from .events import LogEvent
from .structured import StructuredLogger, create_logger


# Built once; callers raise it with geometry_logger.set_level(logging.DEBUG)
geometry_logger = create_logger("geometry", level=logging.WARNING)

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'geometry_logger',
]
