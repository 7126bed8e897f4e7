from unittest.mock import MagicMock

import pytest

from blockpdf.document_builder import DocumentContext, ImageBlock, TextNode, TextSection
from blockpdf.document_builder.image_decoder import DecodedImage
from blockpdf.document_builder.layer import (
    BeginText,
    DrawImage,
    EndText,
    LineBreak,
    SetFont,
    SetLineHeight,
    SetTextCursor,
)
from blockpdf.exceptions import ImageSourceError, InvalidParameterError


def sample_section():
    return TextSection(
        nodes=[TextNode("Title", 24, 24), TextNode("Body\nLine2", 12, 14)],
        pos=(20, 40),
    )


def test_text_section_lines_land_at_cumulative_advances(layer, context):
    sample_section().render(layer, context)

    written = layer.written_text()
    assert [w.text for w in written] == ["Title", "Body", "Line2"]
    assert [w.x for w in written] == [20, 20, 20]
    assert [w.y for w in written] == pytest.approx([239.4, 215.4, 201.4])
    assert layer.cursor[1] == pytest.approx(279.4 - 40 - 24 - 14 - 14)


def test_text_section_operation_sequence(layer, context):
    sample_section().render(layer, context)

    kinds = [type(op) for op in layer.operations if not hasattr(op, "text")]
    assert kinds == [
        BeginText, SetTextCursor,
        SetLineHeight, SetFont, LineBreak,
        SetLineHeight, SetFont, LineBreak, SetFont, LineBreak,
        EndText,
    ]
    fonts = [op for op in layer.operations if isinstance(op, SetFont)]
    assert [(f.font, f.size) for f in fonts] == [("Helvetica", 24.0), ("Helvetica", 12.0), ("Helvetica", 12.0)]
    heights = [op.line_height for op in layer.operations if isinstance(op, SetLineHeight)]
    assert heights == [24.0, 14.0]


def test_empty_text_section_opens_and_closes(layer, context):
    TextSection(nodes=[], pos=(20, 40)).render(layer, context)

    assert [type(op) for op in layer.operations] == [BeginText, SetTextCursor, EndText]
    x, y = layer.cursor
    assert x == 20
    assert y == pytest.approx(239.4)


def test_empty_node_writes_one_blank_line(layer, context):
    TextSection(nodes=[TextNode("", 12, 14)], pos=(0, 0)).render(layer, context)

    assert [w.text for w in layer.written_text()] == [""]
    assert layer.cursor[1] == pytest.approx(279.4 - 14)


def fake_decoder(width=600, height=300):
    decoder = MagicMock()
    decoder.decode.return_value = DecodedImage(width, height, image="pixels", format="JPEG")
    return decoder


def test_image_block_places_top_right_in_document_units(layer):
    decoder = fake_decoder()
    ctx = DocumentContext(215.9, 279.4, "Helvetica", decoder=decoder)

    ImageBlock("photo.jpeg", dpi=300, pos=(200, 20)).render(layer, ctx)

    decoder.decode.assert_called_once_with("photo.jpeg")
    (op,) = layer.operations
    assert isinstance(op, DrawImage)
    assert op.image == "pixels"
    assert op.width == pytest.approx(50.8)
    assert op.height == pytest.approx(25.4)
    assert op.x == pytest.approx(200 - 50.8)
    assert op.y == pytest.approx(279.4 - 20 - 25.4)


def test_image_block_in_point_units_matches_placer(layer):
    ctx = DocumentContext(612, 279.4, "Helvetica", units_per_inch=72, decoder=fake_decoder())

    ImageBlock("photo.jpeg", dpi=300, pos=(200, 20)).render(layer, ctx)

    (op,) = layer.operations
    assert (op.width, op.height) == (pytest.approx(144.0), pytest.approx(72.0))
    assert (op.x, op.y) == (pytest.approx(56.0), pytest.approx(187.4))


@pytest.mark.parametrize("dpi", [0, -72])
def test_invalid_dpi_fails_before_decoding(layer, dpi):
    decoder = fake_decoder()
    ctx = DocumentContext(215.9, 279.4, "Helvetica", decoder=decoder)

    with pytest.raises(InvalidParameterError):
        ImageBlock("photo.jpeg", dpi=dpi, pos=(200, 20)).render(layer, ctx)

    decoder.decode.assert_not_called()
    assert layer.operations == []


def test_image_block_with_real_file(layer, context, sample_jpeg):
    ImageBlock(sample_jpeg, dpi=300, pos=(200, 20)).render(layer, context)

    (op,) = layer.operations
    assert op.image.size == (600, 300)
    assert op.width == pytest.approx(50.8)


def test_image_block_from_data_uri(layer, context, png_data_uri):
    ImageBlock(png_data_uri, dpi=72, pos=(100, 10)).render(layer, context)

    (op,) = layer.operations
    assert op.width == pytest.approx(40 * 25.4 / 72)


def test_missing_image_propagates_decode_error(layer, context, tmp_path):
    with pytest.raises(ImageSourceError):
        ImageBlock(tmp_path / "missing.jpeg", dpi=300, pos=(200, 20)).render(layer, context)
    assert layer.operations == []
