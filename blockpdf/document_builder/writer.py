"""PDF Writer Module

Replays recorded layers onto a ReportLab canvas and flushes the finished
single-page PDF to a file path or a writable binary stream.
"""
import io
import logging
import os
import tempfile
from typing import BinaryIO, Protocol, Sequence, Union, runtime_checkable

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdfcanvas

from ..config import MM_PER_INCH
from ..utils import describe_destination
from . import coordinate_utils
from .context import DocumentContext
from .layer import (
    BeginText,
    DrawImage,
    EndText,
    Layer,
    LineBreak,
    SetFont,
    SetLineHeight,
    SetTextCursor,
    WriteText,
)

logger = logging.getLogger(__name__)

Destination = Union[str, os.PathLike, BinaryIO]


@runtime_checkable
class DocumentWriter(Protocol):
    """Anything that can serialize a document's layers to a destination."""

    def write(self, context: DocumentContext, layers: Sequence[Layer], destination: Destination) -> None:
        ...


class ReportLabWriter:
    """Serializes layers to PDF with ReportLab.

    Layers are drawn in order, each inside saveState()/restoreState(), so
    later layers paint over earlier ones without inheriting their state.
    """

    def write(self, context: DocumentContext, layers: Sequence[Layer], destination: Destination) -> None:
        """
        Render all layers and write the PDF once.

        Args:
            context: Document context (page size, units, title)
            layers: Layers in z-order
            destination: File path or binary stream

        Raises:
            OSError: If the destination cannot be written
        """
        pdf_bytes = self.render_bytes(context, layers)

        if hasattr(destination, "write"):
            destination.write(pdf_bytes)
        else:
            self._write_file(os.fspath(destination), pdf_bytes)

        logger.info(
            "Wrote %d layers (%d bytes) to %s",
            len(layers), len(pdf_bytes), describe_destination(destination),
        )

    def render_bytes(self, context: DocumentContext, layers: Sequence[Layer]) -> bytes:
        """
        Render all layers to PDF bytes in memory.

        Args:
            context: Document context (page size, units, title)
            layers: Layers in z-order

        Returns:
            Complete PDF document
        """
        if context.units_per_inch == MM_PER_INCH:
            to_pt = coordinate_utils.mm_to_points
        else:
            def to_pt(value):
                return coordinate_utils.units_to_points(value, context.units_per_inch)

        buffer = io.BytesIO()
        canvas = pdfcanvas.Canvas(buffer, pagesize=(to_pt(context.page_width), to_pt(context.page_height)))
        canvas.setTitle(context.title)

        for layer in layers:
            canvas.saveState()
            self._draw_layer(canvas, layer, to_pt)
            canvas.restoreState()

        canvas.showPage()
        canvas.save()
        return buffer.getvalue()

    def _draw_layer(self, canvas, layer: Layer, to_pt):
        """Replay one layer's operations onto the canvas."""
        text = None
        leading = 0.0

        for op in layer.operations:
            if isinstance(op, BeginText):
                text = canvas.beginText()
            elif isinstance(op, SetTextCursor):
                text.setTextOrigin(to_pt(op.x), to_pt(op.y))
            elif isinstance(op, SetLineHeight):
                leading = op.line_height
                text.setLeading(leading)
            elif isinstance(op, SetFont):
                # setFont resets leading to 1.2 * size unless it is passed in
                text.setFont(op.font, op.size, leading)
            elif isinstance(op, WriteText):
                text.textOut(op.text)
            elif isinstance(op, LineBreak):
                text.textLine()
            elif isinstance(op, EndText):
                canvas.drawText(text)
                text = None
            elif isinstance(op, DrawImage):
                canvas.drawImage(
                    ImageReader(op.image),
                    to_pt(op.x),
                    to_pt(op.y),
                    width=to_pt(op.width),
                    height=to_pt(op.height),
                    mask="auto",
                )
            else:
                raise TypeError(f"Unknown draw operation {op!r} in layer {layer.name!r}")

        logger.debug("Drew layer %s (%d operations)", layer.name, len(layer.operations))

    def _write_file(self, path: str, data: bytes):
        """Write data to path through a temporary file so no partial PDF is left behind."""
        directory = os.path.dirname(os.path.abspath(path))
        fd, tmp_path = tempfile.mkstemp(suffix=".pdf.tmp", dir=directory)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            # mkstemp creates 0600; give the PDF the mode a plain open() would
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_path, 0o666 & ~umask)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
