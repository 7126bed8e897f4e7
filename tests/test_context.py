import dataclasses
import math

import pytest

from blockpdf.document_builder import DocumentContext, PillowImageDecoder
from blockpdf.exceptions import ConstructionError


def test_defaults():
    ctx = DocumentContext(215.9, 279.4, "Helvetica")

    assert ctx.page_size == (215.9, 279.4)
    assert ctx.units_per_inch == 25.4
    assert ctx.title == "Pdf"
    assert isinstance(ctx.decoder, PillowImageDecoder)


def test_is_immutable():
    ctx = DocumentContext(215.9, 279.4, "Helvetica")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.page_height = 100


@pytest.mark.parametrize("width, height", [
    (0, 279.4), (215.9, -1), (math.inf, 279.4), (215.9, math.nan), ("wide", 279.4), (True, 279.4),
])
def test_rejects_invalid_page_size(width, height):
    with pytest.raises(ConstructionError):
        DocumentContext(width, height, "Helvetica")


@pytest.mark.parametrize("font", ["", None])
def test_rejects_missing_font(font):
    with pytest.raises(ConstructionError):
        DocumentContext(215.9, 279.4, font)
