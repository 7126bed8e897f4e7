"""Configuration Constants

Constants for block layout and PDF generation.
"""

# Page Defaults (US Letter, millimetres)
DEFAULT_PAGE_WIDTH_MM = 215.9
DEFAULT_PAGE_HEIGHT_MM = 279.4

# Font Defaults
DEFAULT_FONT_NAME = "Helvetica"  # Built into every PDF viewer, no embedding needed

# Document Metadata
DEFAULT_DOCUMENT_TITLE = "Pdf"
LAYER_NAME_PREFIX = "L"  # Layers are named L1, L2, ... in render order

# Unit Conversion
POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4

# Text Flow
LINE_BREAK = "\n"

# Image Defaults
DEFAULT_IMAGE_DPI = 300.0

# Pillow modes reportlab can embed without conversion
EMBEDDABLE_IMAGE_MODES = ("RGB", "RGBA", "L", "CMYK")
