from pathlib import Path

import pytest

from blockpdf.document_builder import FontManager
from blockpdf.exceptions import ConstructionError, FontError


def test_default_is_builtin_helvetica():
    assert FontManager().resolve() == "Helvetica"


@pytest.mark.parametrize("name", ["Times-Roman", "Courier-Bold"])
def test_other_builtin_fonts(name):
    assert FontManager(name).resolve() == name


def test_unknown_font_name_is_construction_error():
    with pytest.raises(FontError) as excinfo:
        FontManager("NoSuchFont-Regular").resolve()
    assert excinfo.value.font_name == "NoSuchFont-Regular"
    assert isinstance(excinfo.value, ConstructionError)


def test_empty_font_name_fails():
    with pytest.raises(FontError):
        FontManager("").resolve()


def test_missing_truetype_paths_fail(tmp_path: Path):
    manager = FontManager("Body", font_paths=[str(tmp_path / "a.ttf"), str(tmp_path / "b.ttf")])

    with pytest.raises(FontError) as excinfo:
        manager.resolve()
    assert "a.ttf" in str(excinfo.value)
    assert "b.ttf" in str(excinfo.value)


def test_corrupt_truetype_file_fails(tmp_path: Path):
    bogus = tmp_path / "bogus.ttf"
    bogus.write_bytes(b"not a font")

    with pytest.raises(FontError):
        FontManager("Bogus", font_paths=[str(bogus)]).resolve()


def test_resolve_is_cached():
    manager = FontManager()
    assert manager.resolve() is manager.resolve()
