"""
Geometry Errors
===============

Bounded Context: Construction failures

Every constructor in autogis_geometry raises one of these. All of them
derive from GeometryError, which is a ValueError, so callers that only
care about "bad input" can catch ValueError.

Hierarchy:
    GeometryError
    ├── TooFewCoordsError       # sequence shorter than the minimum
    ├── TooFewRingsError        # polygon without rings
    ├── InvalidCoordinateError  # coordinate is not an (x, y) pair
    ├── InvalidGeometryInputError  # input is not a sequence at all
    └── NumericCastError        # value not representable as float64
"""

from typing import Any


class GeometryError(ValueError):
    """Base exception for geometry construction."""

    pass


class TooFewCoordsError(GeometryError):
    """
    Coordinate sequence shorter than the geometry minimum.

    Attributes:
        count: Number of coordinates actually supplied
        minimum: Minimum required (2 for lines, 3 for rings)
    """

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"too few coordinates, expected {minimum} or more, found {count}"
        )


class TooFewRingsError(GeometryError):
    """Polygon built from an empty ring sequence."""

    def __init__(self, count: int = 0):
        self.count = count
        super().__init__(f"polygon needs at least 1 ring, found {count}")


class InvalidCoordinateError(GeometryError):
    """A coordinate is not a 2-element (x, y) pair."""

    def __init__(self, coordinate: Any):
        self.coordinate = coordinate
        super().__init__(
            f"coordinate must be an (x, y) pair, got {coordinate!r}"
        )


class InvalidGeometryInputError(GeometryError):
    """Geometry input is not a sequence (None, a bare number, ...)."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"geometry input must be a sequence, got {type(value).__name__}: {value!r}"
        )


class NumericCastError(GeometryError):
    """
    Value cannot be represented as a double-precision float.

    Attributes:
        value: The offending input value
        reason: Why the cast failed (unsupported type, overflow)
    """

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(
            f"cannot cast {value!r} ({type(value).__name__}) to float: {reason}"
        )
