"""Document Builder Package

This package provides components for laying out content blocks on a page
and writing the result as a PDF:

Core Classes:
- DocumentBuilder: Main orchestrator class (from builder.py)
- DocumentContext: Page size and shared font/decoder handles
- TextSection, ImageBlock: Block variants
- TextNode: A run of text with font size and line height
- Layer: Per-block drawing surface
- FontManager: Font resolution and TrueType registration
- ImageDecoder, DocumentWriter: Capabilities the builder depends on
- PillowImageDecoder: Image decoding
- ReportLabWriter: PDF serialization

Utilities:
- coordinate_utils: Coordinate conversion functions
- flow_text, place_image: Text flow and image placement

Helper Functions:
- generate_document: Render blocks and write the document
- create_pdf: Create a PDF in one call
"""

# Import core classes
from .builder import DocumentBuilder, generate_document, create_pdf
from .context import DocumentContext
from .blocks import Block, TextSection, ImageBlock, BLOCK_TYPES
from .text_flow import TextNode, TextLine, flow_text, split_lines, cursor_after
from .image_placer import ImagePlacement, place_image
from .image_decoder import DecodedImage, ImageDecoder, PillowImageDecoder
from .font_manager import FontManager
from .layer import Layer
from .writer import DocumentWriter, ReportLabWriter
from . import coordinate_utils

# Expose public API
__all__ = [
    # Main builder class
    'DocumentBuilder',

    # Helper functions
    'generate_document',
    'create_pdf',
    'flow_text',
    'split_lines',
    'cursor_after',
    'place_image',

    # Data model
    'DocumentContext',
    'Block',
    'TextSection',
    'ImageBlock',
    'BLOCK_TYPES',
    'TextNode',
    'TextLine',
    'ImagePlacement',
    'DecodedImage',
    'Layer',

    # Collaborators
    'FontManager',
    'ImageDecoder',
    'PillowImageDecoder',
    'DocumentWriter',
    'ReportLabWriter',

    # Utilities module
    'coordinate_utils',
]
