"""Build Result Dataclass

Outcome of building a document with DocumentBuilder.build().
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class BuildResult:
    """Result from building a document.

    Attributes:
        status: Build status ("completed" or "failed")
        status_message: Human-readable status message

        # Output
        output_path: Where the PDF was written (None if the build failed)
        layers_rendered: Number of blocks rendered and written

        # Error Handling
        failed_block_index: Index of the block that failed, if a block failed
        error: Error message if the build failed (None otherwise)
    """

    # Status
    status: str  # "completed", "failed"
    status_message: str

    # Output
    output_path: Optional[str] = None
    layers_rendered: int = 0

    # Error Handling
    failed_block_index: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if the document was written."""
        return self.status == "completed" and self.output_path is not None

    @property
    def is_failed(self) -> bool:
        """True if the build failed with an error."""
        return self.status == "failed"
