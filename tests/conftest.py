import base64
import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add the repository root to sys.path so blockpdf imports without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from blockpdf.document_builder import DocumentContext, Layer  # noqa: E402

LETTER = (215.9, 279.4)


class RecordingWriter:
    """Document writer that keeps the layers instead of serializing them."""

    def __init__(self):
        self.calls = []

    def write(self, context, layers, destination):
        self.calls.append((context, list(layers), destination))


class FailingWriter:
    """Document writer whose destination is always unwritable."""

    def write(self, context, layers, destination):
        raise OSError(28, "No space left on device")


# Common test fixtures
@pytest.fixture
def context():
    """Return a US Letter context using the built-in Helvetica font."""
    return DocumentContext(page_width=LETTER[0], page_height=LETTER[1], font="Helvetica")


@pytest.fixture
def layer():
    return Layer("L1")


@pytest.fixture
def recording_writer():
    return RecordingWriter()


@pytest.fixture
def sample_jpeg(tmp_path: Path):
    """Create a 600x300 JPEG."""
    img = Image.new("RGB", (600, 300), color="white")
    img_path = tmp_path / "sample.jpeg"
    img.save(img_path, format="JPEG")
    return img_path


@pytest.fixture
def sample_png(tmp_path: Path):
    """Create a 200x100 PNG with transparency."""
    img = Image.new("RGBA", (200, 100), color=(255, 0, 0, 128))
    img_path = tmp_path / "sample.png"
    img.save(img_path, format="PNG")
    return img_path


@pytest.fixture
def png_bytes():
    """Return an encoded 40x20 PNG."""
    buf = io.BytesIO()
    Image.new("L", (40, 20), color=128).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_data_uri(png_bytes):
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
