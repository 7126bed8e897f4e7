"""Document Builder Module

Orchestrates PDF generation by coordinating specialized components:
- FontManager: Resolves the document font at construction time
- PillowImageDecoder: Decodes image sources for image blocks
- Blocks (TextSection, ImageBlock): Emit draw operations onto their own layer
- ReportLabWriter: Serializes all layers once every block has rendered

Blocks are rendered strictly in the caller's order. The first failure stops
the run, and nothing is written unless every block rendered.
"""
import logging
from typing import Iterable, List, Optional

from ..build_result import BuildResult
from ..config import (
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_PAGE_HEIGHT_MM,
    DEFAULT_PAGE_WIDTH_MM,
    LAYER_NAME_PREFIX,
    MM_PER_INCH,
)
from ..exceptions import (
    BlockPdfError,
    BlockRenderError,
    DocumentWriteError,
    InvalidParameterError,
    RenderError,
)
from ..utils import describe_destination
from .blocks import BLOCK_TYPES, Block
from .context import DocumentContext
from .font_manager import FontManager
from .image_decoder import ImageDecoder, PillowImageDecoder
from .layer import Layer
from .writer import Destination, DocumentWriter, ReportLabWriter

logger = logging.getLogger(__name__)


def generate_document(
    context: DocumentContext,
    blocks: Iterable[Block],
    destination: Destination,
    writer: Optional[DocumentWriter] = None,
) -> List[Layer]:
    """
    Render blocks onto one layer each, then write the document once.

    Args:
        context: Shared document context
        blocks: Blocks in render (z) order
        destination: File path or binary stream for the PDF
        writer: Document writer (ReportLabWriter by default)

    Returns:
        The rendered layers, in order

    Raises:
        BlockRenderError: If a block fails; later blocks are not rendered
            and nothing is written
        DocumentWriteError: If writing the finished document fails
    """
    writer = writer or ReportLabWriter()
    layers = []

    for index, block in enumerate(blocks):
        layer = Layer(f"{LAYER_NAME_PREFIX}{index + 1}")
        try:
            if not isinstance(block, BLOCK_TYPES):
                raise InvalidParameterError("block", block, "not a TextSection or ImageBlock")
            block.render(layer, context)
        except RenderError as e:
            logger.debug("Block %d failed: %s", index, e)
            raise BlockRenderError(index, e) from e
        layers.append(layer)

    try:
        writer.write(context, layers, destination)
    except Exception as e:
        raise DocumentWriteError(describe_destination(destination), e) from e

    return layers


class DocumentBuilder:
    """Build a single-page PDF from content blocks.

    The font is resolved when the builder is created, so an unusable font
    fails before any block is rendered.

    Attributes:
        context: Document context shared by all blocks
        writer: Document writer
    """

    def __init__(
        self,
        page_width: float = DEFAULT_PAGE_WIDTH_MM,
        page_height: float = DEFAULT_PAGE_HEIGHT_MM,
        font_manager: Optional[FontManager] = None,
        decoder: Optional[ImageDecoder] = None,
        writer: Optional[DocumentWriter] = None,
        units_per_inch: float = MM_PER_INCH,
        title: str = DEFAULT_DOCUMENT_TITLE,
    ):
        """
        Initialize document builder.

        Args:
            page_width: Page width in document units (millimetres by default)
            page_height: Page height in document units
            font_manager: Font provider (built-in Helvetica by default)
            decoder: Image decoder (accepts any Pillow format by default)
            writer: Document writer (ReportLabWriter by default)
            units_per_inch: Document units per inch
            title: PDF title metadata

        Raises:
            FontError: If the font cannot be resolved
            ConstructionError: If the page size is invalid
        """
        self.font_manager = font_manager or FontManager()
        self.context = DocumentContext(
            page_width=page_width,
            page_height=page_height,
            font=self.font_manager.resolve(),
            units_per_inch=units_per_inch,
            title=title,
            decoder=decoder or PillowImageDecoder(),
        )
        self.writer = writer or ReportLabWriter()

    def generate(self, blocks: Iterable[Block], destination: Destination) -> List[Layer]:
        """Render and write blocks, raising on failure. See generate_document()."""
        return generate_document(self.context, blocks, destination, self.writer)

    def build(self, blocks: Iterable[Block], destination: Destination) -> BuildResult:
        """
        Render and write blocks, reporting the outcome instead of raising.

        Args:
            blocks: Blocks in render order
            destination: File path or binary stream for the PDF

        Returns:
            BuildResult with status, output path and error details
        """
        label = describe_destination(destination)
        try:
            layers = self.generate(blocks, destination)
        except BlockRenderError as e:
            logger.warning("Document not written: %s", e)
            return BuildResult(
                status="failed",
                status_message=f"Block {e.index} failed: {e.original_exception}",
                failed_block_index=e.index,
                error=str(e),
            )
        except BlockPdfError as e:
            logger.warning("Document not written: %s", e)
            return BuildResult(
                status="failed",
                status_message=f"Writing failed: {e}",
                error=str(e),
            )

        return BuildResult(
            status="completed",
            status_message=f"Rendered {len(layers)} blocks to {label}",
            output_path=label,
            layers_rendered=len(layers),
        )


def create_pdf(
    output_path: Destination,
    blocks: Iterable[Block],
    page_width: float = DEFAULT_PAGE_WIDTH_MM,
    page_height: float = DEFAULT_PAGE_HEIGHT_MM,
    font_manager: Optional[FontManager] = None,
    decoder: Optional[ImageDecoder] = None,
) -> List[Layer]:
    """
    Convenience function to create a PDF from blocks.

    Args:
        output_path: Where to save the PDF (path or binary stream)
        blocks: Blocks in render order
        page_width: Page width in millimetres
        page_height: Page height in millimetres
        font_manager: Optional font provider
        decoder: Optional image decoder

    Returns:
        The rendered layers, in order
    """
    builder = DocumentBuilder(
        page_width=page_width,
        page_height=page_height,
        font_manager=font_manager,
        decoder=decoder,
    )
    return builder.generate(blocks, output_path)
