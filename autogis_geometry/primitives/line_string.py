"""
LineString Module
=================

Immutable ordered path of two or more coordinates.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from autogis_geometry.logging import LogEvent, geometry_logger as logger
from autogis_geometry.primitives.curve import Curve, coerce_coordinates
from autogis_geometry.primitives.numeric import freeze


@dataclass(frozen=True, eq=False, repr=False)
class LineString(Curve):
    """
    Immutable line string (ordered path).

    No closure or self-intersection checks; order is significant.

    Attributes:
        coordinates: Nx2 read-only float64 array, N >= 2

    Raises:
        TooFewCoordsError: If fewer than 2 coordinates are given
        InvalidGeometryInputError: If coordinates is not a sequence
        InvalidCoordinateError: If an element is not an (x, y) pair
        NumericCastError: If a component cannot be cast to float

    Example:
        >>> LineString([[0, 0], [1, 1]]).coords
        ((0.0, 0.0), (1.0, 1.0))
    """

    KIND: ClassVar[str] = "line_string"
    MIN_COORDS: ClassVar[int] = 2

    coordinates: Any

    def __post_init__(self):
        """Validate cardinality and coerce to float."""
        array = coerce_coordinates(self.coordinates, self.KIND, self.MIN_COORDS)
        object.__setattr__(self, 'coordinates', freeze(array))

        logger.debug(
            event=LogEvent.GEOMETRY_CREATED,
            message="LineString created",
            metadata={'kind': self.KIND, 'num_points': self.num_points()}
        )
