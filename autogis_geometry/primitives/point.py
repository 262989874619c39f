"""
Point Module
============

Immutable 2-D point built from any pair of numeric values.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from autogis_geometry.errors import NumericCastError
from autogis_geometry.logging import LogEvent, geometry_logger as logger
from autogis_geometry.primitives.numeric import to_float


@dataclass(frozen=True)
class Point:
    """
    Immutable 2-D coordinate.

    Both components are coerced to float on construction, so Point(0, 1)
    and Point(0.0, 1.0) are equal. Equality is exact float equality.

    Attributes:
        x: X coordinate (float64)
        y: Y coordinate (float64)

    Raises:
        NumericCastError: If x or y cannot be cast to float

    Example:
        >>> Point(0, 1) == Point(0.0, 1.0)
        True
    """

    x: Any
    y: Any

    def __post_init__(self):
        """Coerce components to float."""
        try:
            x_float = to_float(self.x)
            y_float = to_float(self.y)
        except NumericCastError as e:
            logger.debug(
                event=LogEvent.NUMERIC_CAST_ERROR,
                message="Point coordinate cast failed",
                metadata={'kind': 'point', 'reason': e.reason}
            )
            raise

        object.__setattr__(self, 'x', x_float)
        object.__setattr__(self, 'y', y_float)

    @property
    def coords(self) -> Tuple[float, float]:
        """(x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'kind': 'point', 'coordinates': [self.x, self.y]}
