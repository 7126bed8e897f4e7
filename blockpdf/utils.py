"""Utilities Module

Helper functions shared by the layout and rendering components.
"""
import math
import os
from typing import Any, Tuple

from .exceptions import InvalidParameterError


def validate_positive(parameter: str, value: Any) -> float:
    """
    Validate that a size parameter is a positive, finite number.

    Args:
        parameter: Parameter name used in the error message (e.g. "dpi")
        value: Value supplied by the caller

    Returns:
        The value as a float

    Raises:
        InvalidParameterError: If value is not a number, is not finite, or is <= 0
    """
    if isinstance(value, bool):
        raise InvalidParameterError(parameter, value, "must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(parameter, value, "must be a number")

    if not math.isfinite(number) or number <= 0:
        raise InvalidParameterError(parameter, value)

    return number


def validate_point(parameter: str, value: Any) -> Tuple[float, float]:
    """
    Validate that a position is a pair of finite numbers.

    Args:
        parameter: Parameter name used in the error message (e.g. "pos")
        value: Value supplied by the caller

    Returns:
        The position as an (x, y) tuple of floats

    Raises:
        InvalidParameterError: If value is not two finite numbers
    """
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidParameterError(parameter, value, "must be an (x, y) pair")

    point = []
    for coordinate in (x, y):
        if isinstance(coordinate, bool) or not isinstance(coordinate, (int, float)):
            raise InvalidParameterError(parameter, value, "coordinates must be numbers")
        if not math.isfinite(coordinate):
            raise InvalidParameterError(parameter, value, "coordinates must be finite")
        point.append(float(coordinate))
    return point[0], point[1]


def describe_source(source: Any) -> str:
    """
    Build a short human-readable label for an image source.

    Args:
        source: File path, path-like object, raw bytes, or data URI

    Returns:
        Label suitable for error messages and logs

    Examples:
        >>> describe_source("images/logo.png")
        'images/logo.png'
        >>> describe_source(b"\\x89PNG...")
        '<7 bytes>'
    """
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    if isinstance(source, str) and source.startswith("data:"):
        header = source.split(",", 1)[0]
        return f"<{header}>"
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return repr(source)


def describe_destination(destination: Any) -> str:
    """
    Build a short label for an output destination (path or writable stream).

    Args:
        destination: File path, path-like object, or binary stream

    Returns:
        Label suitable for error messages and logs
    """
    if isinstance(destination, (str, os.PathLike)):
        return os.fspath(destination)
    name = getattr(destination, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(destination).__name__}>"
