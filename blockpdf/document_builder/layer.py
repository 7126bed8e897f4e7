"""Drawing Layer Module

A Layer is the in-memory drawing surface handed to one block. It records
draw operations in order; nothing reaches the output file until the
writer replays every layer after all blocks have rendered.

Positions are in output coordinates (bottom-left origin, document units).
Font sizes and line heights are in points.
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class BeginText:
    """Opens a text section."""


@dataclass(frozen=True)
class SetTextCursor:
    x: float
    y: float


@dataclass(frozen=True)
class SetLineHeight:
    line_height: float


@dataclass(frozen=True)
class SetFont:
    font: str
    size: float


@dataclass(frozen=True)
class WriteText:
    """Draws text at the cursor. x and y record where the cursor was."""

    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LineBreak:
    """Moves the cursor down by the active line height."""


@dataclass(frozen=True)
class EndText:
    """Closes a text section."""


@dataclass(frozen=True)
class DrawImage:
    """Draws a decoded image with its bottom-left corner at (x, y)."""

    image: Any
    x: float
    y: float
    width: float
    height: float


class Layer:
    """Records the draw operations of a single block.

    Attributes:
        name: Layer name (L1, L2, ... in render order)
        operations: Recorded draw operations, in order
        cursor: Current text cursor, or None outside a text section
        line_height: Active line height
    """

    def __init__(self, name: str = ""):
        self.name = name
        self.operations: List[Any] = []
        self.cursor: Optional[Tuple[float, float]] = None
        self.line_height = 0.0
        self._in_text_section = False

    def begin_text_section(self):
        if self._in_text_section:
            raise RuntimeError(f"Layer {self.name!r}: text section already open")
        self._in_text_section = True
        self.operations.append(BeginText())

    def set_text_cursor(self, x: float, y: float):
        self._require_text_section("set_text_cursor")
        self.cursor = (x, y)
        self.operations.append(SetTextCursor(x, y))

    def set_line_height(self, line_height: float):
        self._require_text_section("set_line_height")
        self.line_height = line_height
        self.operations.append(SetLineHeight(line_height))

    def set_font(self, font: str, size: float):
        self._require_text_section("set_font")
        self.operations.append(SetFont(font, size))

    def write_text(self, text: str):
        self._require_text_section("write_text")
        x, y = self.cursor or (0.0, 0.0)
        self.operations.append(WriteText(text, x, y))

    def add_line_break(self):
        """Move the cursor down one line height; x returns to the line start."""
        self._require_text_section("add_line_break")
        x, y = self.cursor or (0.0, 0.0)
        self.cursor = (x, y - self.line_height)
        self.operations.append(LineBreak())

    def end_text_section(self):
        self._require_text_section("end_text_section")
        self._in_text_section = False
        self.operations.append(EndText())

    def draw_image(self, image, x: float, y: float, width: float, height: float):
        if self._in_text_section:
            raise RuntimeError(f"Layer {self.name!r}: cannot draw an image inside a text section")
        self.operations.append(DrawImage(image, x, y, width, height))

    def written_text(self) -> List[WriteText]:
        """Return the text operations recorded so far."""
        return [op for op in self.operations if isinstance(op, WriteText)]

    def _require_text_section(self, operation: str):
        if not self._in_text_section:
            raise RuntimeError(f"Layer {self.name!r}: {operation} outside a text section")

    def __repr__(self):
        return f"Layer(name={self.name!r}, operations={len(self.operations)})"
