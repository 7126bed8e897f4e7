"""Document Context

Read-only page and font information shared by every block during one
document render.
"""
import math
from dataclasses import dataclass, field

from ..config import DEFAULT_DOCUMENT_TITLE, MM_PER_INCH
from ..exceptions import ConstructionError
from .image_decoder import ImageDecoder, PillowImageDecoder


@dataclass(frozen=True)
class DocumentContext:
    """Page dimensions and shared handles for a document.

    Attributes:
        page_width: Page width in document units (millimetres by default)
        page_height: Page height in document units
        font: Font handle resolved by FontManager
        units_per_inch: Document units per inch (25.4 for millimetres)
        title: PDF title metadata
        decoder: Image decoder used by image blocks
    """

    page_width: float
    page_height: float
    font: str
    units_per_inch: float = MM_PER_INCH
    title: str = DEFAULT_DOCUMENT_TITLE
    decoder: ImageDecoder = field(default_factory=PillowImageDecoder, compare=False)

    def __post_init__(self):
        """Validate dimensions and font after initialization."""
        for name in ("page_width", "page_height", "units_per_inch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConstructionError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ConstructionError(f"{name} must be a positive finite number, got {value!r}")
            object.__setattr__(self, name, float(value))

        if not isinstance(self.font, str) or not self.font:
            raise ConstructionError(f"font must be a resolved font name, got {self.font!r}")

    @property
    def page_size(self):
        """(width, height) in document units."""
        return self.page_width, self.page_height
