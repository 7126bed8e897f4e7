"""Coordinate Conversion Utilities

This module provides pure utility functions for converting between the
coordinate systems used when laying out a page:

- Authored coordinates: origin at top-left, y increasing downward
- PDF output coordinates: origin at bottom-left, y increasing upward
- Pixel to physical size conversion from DPI
- Document unit (millimetre) to point conversion

The y flip lives in to_output_y() and nowhere else, so a position is never
flipped twice. All functions are pure and total over finite floats.
"""

from typing import Tuple

from ..config import MM_PER_INCH, POINTS_PER_INCH


def to_output_y(authored_y: float, page_height: float) -> float:
    """
    Flip Y coordinate from the top-left authored system to the bottom-left
    output system.

    Args:
        authored_y: Y coordinate measured downward from the top of the page
        page_height: Height of the page (in same units as authored_y)

    Returns:
        Y coordinate measured upward from the bottom of the page

    Examples:
        >>> to_output_y(0, 279.4)  # Top edge
        279.4
        >>> to_output_y(40, 279.4)
        239.39999999999998

    Notes:
        This function is its own inverse:
        to_output_y(to_output_y(y, h), h) == y
    """
    return page_height - authored_y


def to_output_x(authored_x: float) -> float:
    """X is not flipped: both systems grow rightward from the left edge."""
    return authored_x


def to_output_point(point: Tuple[float, float], page_height: float) -> Tuple[float, float]:
    """
    Convert an authored (x, y) position to output coordinates.

    Args:
        point: (x, y) in authored coordinates
        page_height: Height of the page

    Returns:
        (x, y) in output coordinates
    """
    x, y = point
    return to_output_x(x), to_output_y(y, page_height)


def pixels_to_units(pixels: float, dpi: float, units_per_inch: float = POINTS_PER_INCH) -> float:
    """
    Convert a pixel measurement to a physical length.

    Args:
        pixels: Measurement in pixels
        dpi: Dots per inch the pixels are printed at
        units_per_inch: Target units per inch (72 for points, 25.4 for mm)

    Returns:
        Physical length in the target units

    Examples:
        >>> pixels_to_units(600, 300)  # Two inches in points
        144.0
        >>> pixels_to_units(600, 300, MM_PER_INCH)  # Two inches in mm
        50.8
    """
    return pixels * units_per_inch / dpi


def units_to_points(value: float, units_per_inch: float) -> float:
    """
    Convert a length in document units to PDF points.

    Args:
        value: Length in document units
        units_per_inch: Document units per inch

    Returns:
        Length in points (1 point = 1/72 inch)
    """
    return value * POINTS_PER_INCH / units_per_inch


def mm_to_points(mm: float) -> float:
    """
    Convert millimetres to points.

    Examples:
        >>> mm_to_points(25.4)
        72.0
    """
    return units_to_points(mm, MM_PER_INCH)
