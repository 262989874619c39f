"""
Polygon Module
==============

Closed rings and polygons built from them.

Design:
- PolygonRing always closed on return (first == last, exact equality)
- Polygon = exterior ring + zero or more holes
- No winding-order, simplicity, or hole containment checks
- First failing ring aborts Polygon construction
"""

import numpy as np
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, Tuple

from autogis_geometry.errors import GeometryError, TooFewRingsError
from autogis_geometry.logging import LogEvent, geometry_logger as logger
from autogis_geometry.primitives.curve import Curve, as_sequence, coerce_coordinates
from autogis_geometry.primitives.numeric import freeze


@dataclass(frozen=True, eq=False, repr=False)
class PolygonRing(Curve):
    """
    Immutable closed ring.

    Needs at least 3 input coordinates. An open ring is closed by
    appending a copy of its first coordinate; an already-closed ring is
    stored as given. Orientation is not checked or normalized, so callers
    supply counter-clockwise exteriors themselves.

    Attributes:
        coordinates: Nx2 read-only float64 array, first row == last row

    Raises:
        TooFewCoordsError: If fewer than 3 coordinates are given
        InvalidGeometryInputError: If coordinates is not a sequence
        InvalidCoordinateError: If an element is not an (x, y) pair
        NumericCastError: If a component cannot be cast to float

    Example:
        >>> PolygonRing([[0, 0], [0, 1], [1, 1]]).coords
        ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))
    """

    KIND: ClassVar[str] = "polygon_ring"
    MIN_COORDS: ClassVar[int] = 3

    coordinates: Any

    def __post_init__(self):
        """Validate cardinality, coerce, and close the ring."""
        array = coerce_coordinates(self.coordinates, self.KIND, self.MIN_COORDS)

        # Exact comparison; NaN components never compare equal
        if not np.array_equal(array[0], array[-1]):
            array = np.vstack([array, array[:1]])
            logger.debug(
                event=LogEvent.RING_CLOSED,
                message="Open ring closed",
                metadata={'input_points': len(array) - 1}
            )

        object.__setattr__(self, 'coordinates', freeze(array))

        logger.debug(
            event=LogEvent.GEOMETRY_CREATED,
            message="PolygonRing created",
            metadata={'kind': self.KIND, 'num_points': self.num_points()}
        )


@dataclass(frozen=True)
class Polygon:
    """
    Immutable polygon: exterior ring followed by holes.

    Each element of `rings` is passed to PolygonRing (existing rings are
    kept as-is). The first ring that fails aborts construction and its
    error propagates unchanged. Holes are not checked against the
    exterior.

    Attributes:
        rings: Tuple of PolygonRing, at least one

    Raises:
        TooFewRingsError: If rings is empty
        InvalidGeometryInputError: If rings is not a sequence
        GeometryError: First ring construction failure

    Example:
        >>> polygon = Polygon([[[0, 0], [0, 1], [1, 1]]])
        >>> polygon.exterior.coords
        ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))
    """

    KIND: ClassVar[str] = "polygon"

    rings: Any

    def __post_init__(self):
        """Build every ring in order, stopping at the first failure."""
        rings = as_sequence(self.rings)
        if len(rings) == 0:
            logger.debug(
                event=LogEvent.VALIDATION_ERROR,
                message="Polygon has no rings",
                metadata={'kind': self.KIND, 'count': 0}
            )
            raise TooFewRingsError(0)

        built = []
        for index, ring in enumerate(rings):
            if isinstance(ring, PolygonRing):
                built.append(ring)
                continue
            try:
                built.append(PolygonRing(ring))
            except GeometryError as e:
                logger.debug(
                    event=LogEvent.VALIDATION_ERROR,
                    message="Polygon ring rejected",
                    metadata={'kind': self.KIND, 'ring_index': index, 'error': str(e)}
                )
                raise

        object.__setattr__(self, 'rings', tuple(built))

        logger.debug(
            event=LogEvent.GEOMETRY_CREATED,
            message="Polygon created",
            metadata={'kind': self.KIND, 'num_rings': len(built)}
        )

    @property
    def exterior(self) -> PolygonRing:
        """Exterior (first) ring."""
        return self.rings[0]

    @property
    def interiors(self) -> Tuple[PolygonRing, ...]:
        """Hole rings, in input order."""
        return self.rings[1:]

    def num_rings(self) -> int:
        return len(self.rings)

    def ring_n(self, n: int) -> PolygonRing:
        """
        Get the n-th ring (0 = exterior).

        Raises:
            IndexError: If n is outside [0, num_rings())
        """
        if not 0 <= n < self.num_rings():
            raise IndexError(
                f"ring index {n} out of range for {self.num_rings()} rings"
            )
        return self.rings[n]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'kind': self.KIND,
            'coordinates': [ring.coordinates.tolist() for ring in self.rings],
        }

    def __len__(self) -> int:
        return self.num_rings()

    def __iter__(self) -> Iterator[PolygonRing]:
        return iter(self.rings)
