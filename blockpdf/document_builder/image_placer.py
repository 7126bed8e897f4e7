"""Image Placement Module

Computes the physical footprint of a raster image from its pixel size and
DPI, and where to draw it so the anchor is the image's top-right corner.
"""
import logging
from dataclasses import dataclass
from typing import Tuple

from ..config import POINTS_PER_INCH
from ..utils import validate_positive
from . import coordinate_utils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePlacement:
    """Footprint and draw origin of an image in output coordinates.

    Attributes:
        width, height: Physical size of the image
        x, y: Bottom-left draw origin (bottom-left page origin)
    """

    width: float
    height: float
    x: float
    y: float


def place_image(
    pixel_width: float,
    pixel_height: float,
    dpi: float,
    anchor: Tuple[float, float],
    page_height: float,
    units_per_inch: float = POINTS_PER_INCH,
) -> ImagePlacement:
    """
    Size an image from its pixels and DPI and anchor it by its top-right corner.

    The anchor denotes the image's top-right corner in authored space, while
    a text section's anchor is the top-left of its first line.

    Args:
        pixel_width: Image width in pixels
        pixel_height: Image height in pixels
        dpi: Resolution the image is printed at
        anchor: (x, y) in authored coordinates
        page_height: Height of the page, for the y flip
        units_per_inch: Units of the result (72 for points, 25.4 for mm)

    Returns:
        ImagePlacement with size and bottom-left draw origin

    Raises:
        InvalidParameterError: If dpi or a pixel dimension is not positive

    Examples:
        >>> p = place_image(600, 300, 300, (200, 20), 279.4)
        >>> p.width, p.height, p.x, round(p.y, 1)
        (144.0, 72.0, 56.0, 187.4)
    """
    dpi = validate_positive("dpi", dpi)
    pixel_width = validate_positive("pixel_width", pixel_width)
    pixel_height = validate_positive("pixel_height", pixel_height)

    width = coordinate_utils.pixels_to_units(pixel_width, dpi, units_per_inch)
    height = coordinate_utils.pixels_to_units(pixel_height, dpi, units_per_inch)

    ax, ay = anchor
    x = coordinate_utils.to_output_x(ax) - width
    y = coordinate_utils.to_output_y(ay, page_height) - height

    logger.debug(
        "Placed %gx%gpx image at %g DPI: size %.2fx%.2f, origin (%.2f, %.2f)",
        pixel_width, pixel_height, dpi, width, height, x, y,
    )
    return ImagePlacement(width=width, height=height, x=x, y=y)
