"""
AutoGIS Geometry v0.1
=====================

Bounded Context: In-memory geometry primitives.

Architecture:

    autogis_geometry/
    ├── primitives/        # Immutable values (pure, stateless)
    │   ├── numeric.py     # to_float, to_float_coordinates
    │   ├── point.py       # Point
    │   ├── curve.py       # Curve accessors shared by lines and rings
    │   ├── line_string.py # LineString
    │   └── polygon.py     # PolygonRing, Polygon
    │
    ├── logging/           # JSON structured logging
    └── errors.py          # GeometryError hierarchy

Usage:

    from autogis_geometry import Point, LineString, PolygonRing, Polygon

    point = Point(0, 1)
    line = LineString([[0, 0], [1, 1]])
    ring = PolygonRing([[0, 0], [0, 1], [1, 1]])      # closed on return
    polygon = Polygon([
        [[0, 0], [10, 0], [10, 10], [0, 10]],         # exterior
        [[2, 2], [4, 2], [4, 4]],                     # hole
    ])

    try:
        LineString([[0, 0]])
    except TooFewCoordsError as e:
        e.count  # 1
"""

from autogis_geometry.errors import (
    GeometryError,
    TooFewCoordsError,
    TooFewRingsError,
    InvalidCoordinateError,
    InvalidGeometryInputError,
    NumericCastError,
)
from autogis_geometry.primitives import (
    to_float,
    to_float_coordinate,
    to_float_coordinates,
    Point,
    Curve,
    LineString,
    PolygonRing,
    Polygon,
)

__all__ = [
    # Errors
    "GeometryError",
    "TooFewCoordsError",
    "TooFewRingsError",
    "InvalidCoordinateError",
    "InvalidGeometryInputError",
    "NumericCastError",
    # Coercion
    "to_float",
    "to_float_coordinate",
    "to_float_coordinates",
    # Primitives
    "Point",
    "Curve",
    "LineString",
    "PolygonRing",
    "Polygon",
]

__version__ = "0.1.0"
