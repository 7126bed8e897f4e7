"""Font Manager Module

Resolves the document font handle: a built-in PDF font or a TrueType font
registered with ReportLab.
"""
import logging
import os
from typing import Optional, Sequence

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..config import DEFAULT_FONT_NAME
from ..exceptions import FontError

logger = logging.getLogger(__name__)


class FontManager:
    """Resolves and registers the font shared by all blocks of a document.

    This class handles:
    - Built-in PDF fonts (Helvetica, Times-Roman, Courier, ...)
    - Fonts already registered with ReportLab under a name
    - TrueType font lookup across candidate paths and registration

    Attributes:
        font_name: Name the font is (or will be) registered under
        font_paths: Candidate TrueType files, tried in order
    """

    def __init__(self, font_name: str = DEFAULT_FONT_NAME, font_paths: Optional[Sequence[str]] = None):
        """
        Initialize FontManager.

        Args:
            font_name: Built-in font name, or the name to register a TrueType font under
            font_paths: Optional TrueType file paths in order of preference
        """
        self.font_name = font_name
        self.font_paths = list(font_paths or [])
        self._resolved: Optional[str] = None

    def resolve(self) -> str:
        """
        Resolve the font handle, registering a TrueType font if needed.

        Returns:
            Font name suitable for ReportLab's setFont()

        Raises:
            FontError: If no candidate path can be registered, or the name is
                neither a built-in nor a registered font
        """
        if self._resolved is None:
            if self.font_paths:
                self._resolved = self._register_truetype()
            else:
                self._resolved = self._lookup_registered()
        return self._resolved

    def _register_truetype(self) -> str:
        """Register the first usable TrueType candidate under font_name."""
        failures = []
        for font_path in self.font_paths:
            logger.debug("Checking font path: %s", font_path)
            if not os.path.exists(font_path):
                failures.append(f"{font_path}: not found")
                continue
            try:
                pdfmetrics.registerFont(TTFont(self.font_name, font_path))
            except Exception as e:
                logger.debug("Failed to register font %s: %s", font_path, e)
                failures.append(f"{font_path}: {e}")
                continue
            logger.debug("Registered font '%s' from: %s", self.font_name, font_path)
            return self.font_name

        raise FontError(self.font_name, "; ".join(failures) or "no font paths given")

    def _lookup_registered(self) -> str:
        """Check that font_name is a built-in or already registered font."""
        if not self.font_name:
            raise FontError(self.font_name, "font name is empty")
        try:
            pdfmetrics.getFont(self.font_name)
        except KeyError as e:
            raise FontError(self.font_name, "not a built-in or registered font") from e
        logger.debug("Using font '%s'", self.font_name)
        return self.font_name
