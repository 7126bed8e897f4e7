"""Text Flow Module

Line-oriented text flow for text sections:
- Splitting node content on explicit line breaks (no width-based wrapping)
- Applying per-node font size and line height
- Advancing the cursor downward one line height per emitted line
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from ..config import LINE_BREAK
from ..utils import validate_positive


@dataclass(frozen=True)
class TextNode:
    """A run of text sharing one font size and line height.

    Attributes:
        content: Text to draw; LINE_BREAK characters start new lines
        font_size: Font size in points
        line_height: Vertical advance per emitted line
    """

    content: str
    font_size: float
    line_height: float

    def __post_init__(self):
        """Validate sizes after initialization."""
        object.__setattr__(self, "font_size", validate_positive("font_size", self.font_size))
        object.__setattr__(self, "line_height", validate_positive("line_height", self.line_height))


@dataclass(frozen=True)
class TextLine:
    """A single line ready to be drawn.

    Attributes:
        content: Line text (may be empty)
        font_size: Font size in points
        line_height: Line height active when the line was emitted
        x, y: Authored cursor position the line is emitted at
        starts_node: True for the first line of a node
    """

    content: str
    font_size: float
    line_height: float
    x: float
    y: float
    starts_node: bool = False


def split_lines(content: str) -> List[str]:
    """
    Split text on explicit line breaks.

    Args:
        content: Text that may contain LINE_BREAK markers

    Returns:
        List of lines; k markers give k + 1 lines and "" gives [""]

    Example:
        >>> split_lines("Body\\nLine2")
        ['Body', 'Line2']
        >>> split_lines("")
        ['']
    """
    return content.split(LINE_BREAK)


def flow_text(nodes: Iterable[TextNode], cursor: Tuple[float, float]) -> Iterator[TextLine]:
    """
    Flow text nodes from a starting cursor, one line at a time.

    For each node the active line height becomes the node's line height.
    Each line is emitted at the current cursor and the cursor then moves
    down (authored y grows) by the active line height. The horizontal
    position never changes. An empty node still emits one empty line.

    Args:
        nodes: Text nodes in stacking order
        cursor: Starting (x, y) in authored coordinates

    Yields:
        TextLine for every line of every node, in order
    """
    x, y = cursor
    for node in nodes:
        line_height = node.line_height
        for i, line in enumerate(split_lines(node.content)):
            yield TextLine(
                content=line,
                font_size=node.font_size,
                line_height=line_height,
                x=x,
                y=y,
                starts_node=(i == 0),
            )
            y += line_height


def cursor_after(nodes: Iterable[TextNode], cursor: Tuple[float, float]) -> Tuple[float, float]:
    """
    Compute where the cursor ends up after flowing all nodes.

    Args:
        nodes: Text nodes in stacking order
        cursor: Starting (x, y) in authored coordinates

    Returns:
        (x, y) after the last line break; x is unchanged
    """
    x, y = cursor
    for node in nodes:
        y += len(split_lines(node.content)) * node.line_height
    return x, y
