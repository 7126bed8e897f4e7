from dataclasses import fields

import pytest

from blockpdf.document_builder.layer import (
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


def test_records_operations_in_order(layer):
    layer.begin_text_section()
    layer.set_text_cursor(20.0, 239.4)
    layer.set_line_height(14.0)
    layer.set_font("Helvetica", 12.0)
    layer.write_text("hello")
    layer.add_line_break()
    layer.end_text_section()

    assert layer.operations == [
        BeginText(),
        SetTextCursor(20.0, 239.4),
        SetLineHeight(14.0),
        SetFont("Helvetica", 12.0),
        WriteText("hello", 20.0, 239.4),
        LineBreak(),
        EndText(),
    ]


def test_line_break_moves_cursor_down_keeping_x(layer):
    layer.begin_text_section()
    layer.set_text_cursor(20.0, 200.0)
    layer.set_line_height(14.0)
    layer.add_line_break()
    layer.add_line_break()

    x, y = layer.cursor
    assert x == 20.0
    assert y == pytest.approx(172.0)


def test_text_outside_section_is_rejected(layer):
    with pytest.raises(RuntimeError):
        layer.write_text("loose")


def test_nested_text_sections_are_rejected(layer):
    layer.begin_text_section()
    with pytest.raises(RuntimeError):
        layer.begin_text_section()


def test_image_inside_text_section_is_rejected(layer):
    layer.begin_text_section()
    with pytest.raises(RuntimeError):
        layer.draw_image(object(), 0, 0, 10, 10)


def test_draw_image_records_placement(layer):
    image = object()
    layer.draw_image(image, 149.2, 208.0, 50.8, 25.4)
    assert layer.operations == [DrawImage(image, 149.2, 208.0, 50.8, 25.4)]


def test_draw_image_carries_only_what_the_writer_draws():
    assert [f.name for f in fields(DrawImage)] == ["image", "x", "y", "width", "height"]
