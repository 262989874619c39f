"""
Numeric Coercion Module
=======================

Converts numeric-like input into the canonical float64 coordinate
representation used by every primitive.

Design:
- Duck-typed on the float conversion capability (__float__), not on a
  closed list of types
- Typed failure (NumericCastError) instead of silent truncation
- Pure functions, no side effects

Accepted:
    int, float, Fraction, Decimal, numpy integer/floating scalars,
    any object implementing __float__

Rejected:
    bool, str/bytes, complex, out-of-range magnitudes
"""

import numpy as np
from typing import Any, Iterable, Tuple

from autogis_geometry.errors import InvalidCoordinateError, NumericCastError


# numpy dtypes that always fit float64 without overflow
_SAFE_ARRAY_KINDS = {"i", "u"}
_SAFE_FLOAT_DTYPES = {np.dtype(np.float16), np.dtype(np.float32), np.dtype(np.float64)}


def to_float(value: Any) -> float:
    """
    Cast a numeric value to a Python float (float64).

    Args:
        value: Any value supporting float conversion

    Returns:
        float equivalent of value

    Raises:
        NumericCastError: If value has no float conversion, is boolean,
            textual or complex, or lies outside the float64 range

    Example:
        >>> to_float(3)
        3.0
        >>> to_float(np.int32(-2))
        -2.0
    """
    if isinstance(value, (bool, np.bool_)):
        raise NumericCastError(value, "booleans are not coordinates")
    if isinstance(value, (str, bytes, bytearray)):
        raise NumericCastError(value, "text must be parsed before construction")
    if isinstance(value, (complex, np.complexfloating)):
        raise NumericCastError(value, "complex values have no float equivalent")

    try:
        result = float(value)
    except OverflowError as e:
        raise NumericCastError(value, "magnitude exceeds float64 range") from e
    except (TypeError, ValueError) as e:
        raise NumericCastError(value, "type does not support float conversion") from e

    # Decimal/longdouble overflow to inf without raising
    if np.isinf(result) and result != value:
        raise NumericCastError(value, "magnitude exceeds float64 range")

    return result


def to_float_coordinate(pair: Any) -> Tuple[float, float]:
    """
    Cast one (x, y) pair to a float tuple.

    Args:
        pair: 2-element sequence of numeric values

    Returns:
        (x, y) as floats

    Raises:
        InvalidCoordinateError: If pair is not a 2-element sequence
        NumericCastError: If either component fails to cast
    """
    if isinstance(pair, (str, bytes, bytearray)):
        raise InvalidCoordinateError(pair)
    try:
        size = len(pair)
    except TypeError as e:
        raise InvalidCoordinateError(pair) from e
    if size != 2:
        raise InvalidCoordinateError(pair)

    x, y = pair
    return to_float(x), to_float(y)


def to_float_coordinates(coordinates: Iterable[Any]) -> np.ndarray:
    """
    Cast an ordered sequence of (x, y) pairs to a fresh Nx2 float64 array.

    Input order is preserved. The result never shares memory with the
    input, so callers may mutate their buffers afterwards.

    Args:
        coordinates: Sequence of pairs or an Nx2 numeric numpy array

    Returns:
        Nx2 float64 array (writeable; primitives freeze it)

    Example:
        >>> to_float_coordinates([[0, 0], [0, 1], [1, 1]])
        array([[0., 0.],
               [0., 1.],
               [1., 1.]])
    """
    if isinstance(coordinates, np.ndarray) and _is_safe_array(coordinates):
        return coordinates.astype(np.float64, copy=True)

    rows = [to_float_coordinate(pair) for pair in coordinates]
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark array read-only and return it."""
    array.flags.writeable = False
    return array


def _is_safe_array(array: np.ndarray) -> bool:
    """True for Nx2 integer or standard float arrays (vectorized cast path)."""
    if array.ndim != 2 or array.shape[1] != 2:
        return False
    return array.dtype.kind in _SAFE_ARRAY_KINDS or array.dtype in _SAFE_FLOAT_DTYPES
