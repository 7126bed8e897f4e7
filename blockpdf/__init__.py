"""blockpdf - lay out text sections and images on a page and write a PDF."""

from .build_result import BuildResult
from .document_builder import (
    DocumentBuilder,
    DocumentContext,
    DocumentWriter,
    FontManager,
    ImageBlock,
    ImageDecoder,
    PillowImageDecoder,
    ReportLabWriter,
    TextNode,
    TextSection,
    create_pdf,
    generate_document,
)
from .exceptions import (
    BlockPdfError,
    BlockRenderError,
    ConstructionError,
    DecodeError,
    DocumentError,
    DocumentWriteError,
    FontError,
    ImageSourceError,
    InvalidParameterError,
    RenderError,
    UnsupportedImageFormatError,
)

__version__ = "0.1.0"

__all__ = [
    'BuildResult',
    'DocumentBuilder',
    'DocumentContext',
    'DocumentWriter',
    'FontManager',
    'ImageBlock',
    'ImageDecoder',
    'PillowImageDecoder',
    'ReportLabWriter',
    'TextNode',
    'TextSection',
    'create_pdf',
    'generate_document',
    'BlockPdfError',
    'BlockRenderError',
    'ConstructionError',
    'DecodeError',
    'DocumentError',
    'DocumentWriteError',
    'FontError',
    'ImageSourceError',
    'InvalidParameterError',
    'RenderError',
    'UnsupportedImageFormatError',
]
