"""Custom Exception Hierarchy

Exception hierarchy for blockpdf separating construction-time failures,
per-block rendering failures and document-level failures.
"""


class BlockPdfError(Exception):
    """Base exception for all blockpdf errors.

    Catching this exception will catch every error raised by the library.
    """
    pass


# Construction Errors
class ConstructionError(BlockPdfError):
    """Raised when a document cannot be set up (invalid page size, font, etc.).

    Construction errors abort before any block is rendered.
    """
    pass


class FontError(ConstructionError):
    """Raised when the document font cannot be resolved or registered."""

    def __init__(self, font_name: str, reason: str):
        self.font_name = font_name
        super().__init__(f"Could not resolve font '{font_name}': {reason}")


# Rendering Errors
class RenderError(BlockPdfError):
    """Base class for errors raised while rendering a single block."""
    pass


class InvalidParameterError(RenderError):
    """Raised when a block parameter is out of range (DPI, font size, ...)."""

    def __init__(self, parameter: str, value, reason: str = "must be a positive number"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter} {value!r}: {reason}")


class DecodeError(RenderError):
    """Raised when an image source cannot be decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to decode image '{source}': {reason}")


class ImageSourceError(DecodeError):
    """Raised when an image source cannot be opened or read."""
    pass


class UnsupportedImageFormatError(DecodeError):
    """Raised when an image source is not in an accepted format."""
    pass


# Document Errors
class DocumentError(BlockPdfError):
    """Base class for errors that fail the whole document."""
    pass


class BlockRenderError(DocumentError):
    """Raised when a block fails to render.

    Wraps the underlying exception while preserving the block's position
    in the caller's block list.
    """

    def __init__(self, index: int, original_exception: Exception):
        self.index = index
        self.original_exception = original_exception
        super().__init__(
            f"Block {index} failed to render: {str(original_exception)}"
        )


class DocumentWriteError(DocumentError):
    """Raised when the finished document cannot be written to its destination."""

    def __init__(self, destination: str, original_exception: Exception):
        self.destination = destination
        self.original_exception = original_exception
        super().__init__(
            f"Failed to write document to '{destination}': {str(original_exception)}"
        )
