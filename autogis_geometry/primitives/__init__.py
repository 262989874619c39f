"""
Primitives Layer
================

Bounded Context: Immutable geometry values.

Responsibilities:
- Numeric coercion to float64
- Point, LineString, PolygonRing, Polygon construction
- Cardinality validation and ring closure
- NO spatial predicates, NO reference systems, NO external formats
"""

from autogis_geometry.primitives.numeric import (
    to_float,
    to_float_coordinate,
    to_float_coordinates,
)
from autogis_geometry.primitives.point import Point
from autogis_geometry.primitives.curve import Curve
from autogis_geometry.primitives.line_string import LineString
from autogis_geometry.primitives.polygon import PolygonRing, Polygon

__all__ = [
    "to_float",
    "to_float_coordinate",
    "to_float_coordinates",
    "Point",
    "Curve",
    "LineString",
    "PolygonRing",
    "Polygon",
]
