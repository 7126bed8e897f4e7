"""Image Decoder Module

Decodes image sources into pixel data the PDF writer can embed.

Handles multiple source kinds:
- File paths (str or os.PathLike)
- Raw encoded bytes
- Base64 data URIs ("data:image/png;base64,...")
"""
import base64
import binascii
import io
import logging
import os
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Union, runtime_checkable

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from ..config import EMBEDDABLE_IMAGE_MODES
from ..exceptions import DecodeError, ImageSourceError, UnsupportedImageFormatError
from ..utils import describe_source

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, bytes, bytearray]


@dataclass(frozen=True)
class DecodedImage:
    """Decoded pixel content of an image source.

    Attributes:
        pixel_width: Width in pixels
        pixel_height: Height in pixels
        image: Fully loaded Pillow image, independent of any open file
        format: Format Pillow identified (e.g. "JPEG"), if known
    """

    pixel_width: int
    pixel_height: int
    image: PILImage.Image
    format: Optional[str] = None


@runtime_checkable
class ImageDecoder(Protocol):
    """Anything that turns an image source into a DecodedImage."""

    def decode(self, source: ImageSource) -> DecodedImage:
        ...


class PillowImageDecoder:
    """Decodes image sources with Pillow.

    Attributes:
        formats: Pillow format names to accept (e.g. ("JPEG",)), or None
            to accept anything Pillow can identify
    """

    def __init__(self, formats: Optional[Sequence[str]] = None):
        """
        Initialize the decoder.

        Args:
            formats: Optional list of accepted Pillow format names
        """
        self.formats = tuple(f.upper() for f in formats) if formats else None

    def decode(self, source: ImageSource) -> DecodedImage:
        """
        Decode an image source.

        The source is fully read and its pixels loaded before any file
        handle is released, so the returned image stays valid afterwards.

        Args:
            source: File path, path-like object, raw bytes, or data URI

        Returns:
            DecodedImage with pixel size and loaded image

        Raises:
            ImageSourceError: If the source cannot be opened or read
            UnsupportedImageFormatError: If the data is not an accepted image format
            DecodeError: If the image data is corrupt
        """
        label = describe_source(source)

        if isinstance(source, (bytes, bytearray)):
            return self._decode_stream(io.BytesIO(source), label)

        if isinstance(source, str) and source.startswith("data:"):
            return self._decode_stream(io.BytesIO(self._read_data_uri(source, label)), label)

        if not isinstance(source, (str, os.PathLike)):
            raise ImageSourceError(label, f"unsupported source type {type(source).__name__}")

        try:
            with open(source, "rb") as fh:
                return self._decode_stream(fh, label)
        except OSError as e:
            raise ImageSourceError(label, e.strerror or str(e)) from e

    def _read_data_uri(self, uri: str, label: str) -> bytes:
        """Extract the payload of a base64 data URI."""
        header, sep, data = uri.partition(",")
        if not sep or not header.endswith(";base64"):
            raise ImageSourceError(label, "only base64 data URIs are supported")
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageSourceError(label, f"invalid base64 payload: {e}") from e

    def _decode_stream(self, stream, label: str) -> DecodedImage:
        """Open, verify format, and fully load an image from a binary stream."""
        try:
            with PILImage.open(stream, formats=self.formats) as img:
                img.load()
                image_format = img.format
                image = self._to_embeddable(img)
        except UnidentifiedImageError as e:
            if self.formats:
                reason = f"not a supported image format (accepted: {', '.join(self.formats)})"
            else:
                reason = "not a recognised image format"
            raise UnsupportedImageFormatError(label, reason) from e
        except (OSError, ValueError, SyntaxError, PILImage.DecompressionBombError) as e:
            raise DecodeError(label, str(e)) from e

        width, height = image.size
        if width <= 0 or height <= 0:
            raise DecodeError(label, f"image has no pixels ({width}x{height})")

        logger.debug("Decoded %s: %s %dx%dpx mode=%s", label, image_format, width, height, image.mode)
        return DecodedImage(pixel_width=width, pixel_height=height, image=image, format=image_format)

    @staticmethod
    def _to_embeddable(img: PILImage.Image) -> PILImage.Image:
        """Return an in-memory copy in a mode reportlab can embed."""
        if img.mode in EMBEDDABLE_IMAGE_MODES:
            return img.copy()
        if img.mode in ("LA", "PA") or "transparency" in img.info:
            return img.convert("RGBA")
        return img.convert("RGB")
