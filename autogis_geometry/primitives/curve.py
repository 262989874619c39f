"""
Curve Module
============

Shared behaviour for coordinate-sequence primitives (LineString,
PolygonRing).

Design:
- Coordinates held as a read-only Nx2 float64 array
- Validation order: count, then coerce
- Exact float equality (no tolerance)
"""

import numpy as np
from typing import Any, ClassVar, Dict, Iterator, Tuple

from autogis_geometry.errors import (
    GeometryError,
    InvalidGeometryInputError,
    NumericCastError,
    TooFewCoordsError,
)
from autogis_geometry.logging import LogEvent, geometry_logger as logger
from autogis_geometry.primitives.numeric import to_float_coordinates
from autogis_geometry.primitives.point import Point


def as_sequence(values: Any) -> Any:
    """Materialize one-shot iterables so they can be counted."""
    if isinstance(values, Curve):
        return values.coordinates
    if isinstance(values, np.ndarray) and values.ndim == 0:
        raise InvalidGeometryInputError(values)
    if hasattr(values, '__len__'):
        return values
    try:
        return list(values)
    except TypeError as e:
        raise InvalidGeometryInputError(values) from e


def coerce_coordinates(coordinates: Any, kind: str, minimum: int) -> np.ndarray:
    """
    Count, then coerce, a coordinate sequence.

    Args:
        coordinates: Sequence of (x, y) pairs
        kind: Geometry kind for log metadata
        minimum: Minimum number of input coordinates

    Returns:
        Nx2 float64 array in input order

    Raises:
        TooFewCoordsError: If fewer than minimum coordinates
        InvalidCoordinateError: If an element is not an (x, y) pair
        NumericCastError: If a component cannot be cast to float
    """
    coordinates = as_sequence(coordinates)
    count = len(coordinates)

    if count < minimum:
        logger.debug(
            event=LogEvent.VALIDATION_ERROR,
            message=f"{kind} needs {minimum} coordinates",
            metadata={'kind': kind, 'count': count, 'minimum': minimum}
        )
        raise TooFewCoordsError(count, minimum=minimum)

    try:
        return to_float_coordinates(coordinates)
    except GeometryError as e:
        event = (
            LogEvent.NUMERIC_CAST_ERROR
            if isinstance(e, NumericCastError)
            else LogEvent.VALIDATION_ERROR
        )
        logger.debug(
            event=event,
            message=f"{kind} coordinates rejected",
            metadata={'kind': kind, 'error': str(e)}
        )
        raise


class Curve:
    """
    Read-only accessors over an Nx2 coordinate array.

    Subclasses set `coordinates` to a frozen array in __post_init__ and
    declare KIND.
    """

    KIND: ClassVar[str] = "curve"

    coordinates: np.ndarray

    def num_points(self) -> int:
        """Number of stored coordinates."""
        return len(self.coordinates)

    def point_n(self, n: int) -> Point:
        """
        Get the n-th coordinate as a Point.

        Raises:
            IndexError: If n is outside [0, num_points())
        """
        if not 0 <= n < self.num_points():
            raise IndexError(
                f"point index {n} out of range for {self.num_points()} points"
            )
        x, y = self.coordinates[n]
        return Point(x, y)

    def start_point(self) -> Point:
        return self.point_n(0)

    def end_point(self) -> Point:
        return self.point_n(self.num_points() - 1)

    def is_closed(self) -> bool:
        """True if first and last coordinates are exactly equal."""
        return bool(np.array_equal(self.coordinates[0], self.coordinates[-1]))

    @property
    def coords(self) -> Tuple[Tuple[float, float], ...]:
        """Coordinates as a tuple of (x, y) float tuples."""
        return tuple(tuple(row) for row in self.coordinates.tolist())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'kind': self.KIND, 'coordinates': self.coordinates.tolist()}

    def __len__(self) -> int:
        return self.num_points()

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.coordinates:
            yield Point(x, y)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.coordinates, other.coordinates))

    def __hash__(self) -> int:
        return hash((self.KIND, self.coords))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coordinates.tolist()})"
