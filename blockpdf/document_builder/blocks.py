"""Content Blocks

The two block variants a document is composed of:
- TextSection: text nodes flowed line by line from an anchor
- ImageBlock: a raster image sized from its DPI, anchored by its top-right corner

Each block draws only on the layer it is given and reads the shared
DocumentContext without modifying it.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Tuple

from ..exceptions import InvalidParameterError
from ..utils import describe_source, validate_point, validate_positive
from . import coordinate_utils
from .context import DocumentContext
from .image_decoder import ImageSource
from .image_placer import place_image
from .layer import Layer
from .text_flow import TextNode, flow_text

logger = logging.getLogger(__name__)


class Block(ABC):
    """A unit of page content rendered onto its own layer."""

    @abstractmethod
    def render(self, layer: Layer, context: DocumentContext) -> None:
        """
        Emit this block's draw operations onto layer.

        Args:
            layer: Fresh drawing layer owned by this block
            context: Shared, read-only document context

        Raises:
            RenderError: If the block cannot be rendered
        """


class TextSection(Block):
    """Text nodes stacked downward from an anchor.

    Attributes:
        nodes: Text nodes in stacking order (may be empty)
        pos: Anchor (x, y) in authored coordinates, top-left of the first line
    """

    def __init__(self, nodes: Iterable[TextNode], pos: Tuple[float, float]):
        self.nodes = tuple(nodes)
        self.pos = pos

    def render(self, layer: Layer, context: DocumentContext) -> None:
        pos = validate_point("pos", self.pos)
        for node in self.nodes:
            if not isinstance(node, TextNode):
                raise InvalidParameterError("nodes", node, "not a TextNode")

        layer.begin_text_section()
        x, y = coordinate_utils.to_output_point(pos, context.page_height)
        layer.set_text_cursor(x, y)

        for line in flow_text(self.nodes, pos):
            if line.starts_node:
                layer.set_line_height(line.line_height)
            layer.set_font(context.font, line.font_size)
            layer.write_text(line.content)
            layer.add_line_break()

        layer.end_text_section()
        logger.debug(
            "Rendered text section at %s: %d nodes, %d lines",
            pos, len(self.nodes), len(layer.written_text()),
        )

    def __repr__(self):
        return f"TextSection(nodes={len(self.nodes)}, pos={self.pos})"


class ImageBlock(Block):
    """A raster image whose anchor is its top-right corner.

    Attributes:
        source: File path, raw bytes, or base64 data URI
        dpi: Resolution the image is printed at
        pos: Anchor (x, y) in authored coordinates
    """

    def __init__(self, source: ImageSource, dpi: float, pos: Tuple[float, float]):
        self.source = source
        self.dpi = dpi
        self.pos = pos

    def render(self, layer: Layer, context: DocumentContext) -> None:
        # Checked before the source is opened
        dpi = validate_positive("dpi", self.dpi)
        pos = validate_point("pos", self.pos)
        decoded = context.decoder.decode(self.source)

        placement = place_image(
            decoded.pixel_width,
            decoded.pixel_height,
            dpi,
            pos,
            context.page_height,
            units_per_inch=context.units_per_inch,
        )
        layer.draw_image(decoded.image, placement.x, placement.y, placement.width, placement.height)
        logger.debug("Rendered image %s at (%.2f, %.2f)", describe_source(self.source), placement.x, placement.y)

    def __repr__(self):
        return f"ImageBlock(source={describe_source(self.source)!r}, dpi={self.dpi}, pos={self.pos})"


# The closed set of block variants the orchestrator accepts
BLOCK_TYPES = (TextSection, ImageBlock)
