import pytest
from pytest_check import check

from xls_wrapper import RGB, Document, FontFamily, RecordLimitError, Style
from xls_wrapper.constants import COLOR_NORMAL, FONT_WEIGHT_BOLD, UNDERLINE_SINGLE


def test_resolve_font(doc):
    fonts = doc._context.fonts
    font = fonts.resolve(True, True, True, RGB(255, 0, 0), 14, FontFamily.Courier)
    with check:
        assert font.weight == FONT_WEIGHT_BOLD
        assert font.italic
        assert font.underline == UNDERLINE_SINGLE
        assert font.color == doc.palette.find_color(RGB(255, 0, 0))
        assert font.height == 280
        assert font.name == "Courier"
        assert font.index == len(doc.fonts) - 1


def test_font_reused(doc):
    fonts = doc._context.fonts
    num_fonts = len(doc.fonts)
    font_1 = fonts.resolve(True, False, False, None, 12, "Arial")
    font_2 = fonts.resolve(True, False, False, None, 12, FontFamily.Arial)
    with check:
        assert font_1 is font_2
        assert len(doc.fonts) == num_fonts + 1
        assert font_1.color == COLOR_NORMAL


def test_default_font_found(doc):
    fonts = doc._context.fonts
    font = fonts.resolve(False, False, False, None, 10, "Arial")
    with check:
        assert font is doc.fonts[0]
        assert len(doc.fonts) == 1


def test_height_matches_between_lookup_and_create(doc):
    fonts = doc._context.fonts
    created = fonts.resolve(False, False, False, None, 9, "Tahoma")
    fonts._fonts.clear()
    found = fonts.resolve(False, False, False, None, 9, "Tahoma")
    with check:
        assert found is created
        assert found.height == 180
        assert len([x for x in doc.fonts if x.name == "Tahoma"]) == 1


def test_similar_colors_share_font(doc):
    sheet = doc.sheets[0]
    sheet.set_cell_style(0, 0, Style(font_color=RGB(250, 2, 3)))
    sheet.set_cell_style(0, 1, Style(font_color=RGB(255, 0, 0)))
    assert sheet.cell(0, 0).style.font is sheet.cell(0, 1).style.font


def test_font_limit(doc):
    fonts = doc._context.fonts
    doc._model.max_fonts = len(doc.fonts) + 1
    fonts.resolve(True, False, False, None, 10, "Arial")
    with pytest.raises(RecordLimitError) as e:
        fonts.resolve(False, True, False, None, 10, "Arial")
    assert "fonts" in str(e.value)
    assert len(doc.fonts) == doc._model.max_fonts


def test_resolve_record_between_documents(doc):
    other_font = doc._context.fonts.resolve(True, False, False, None, 20, "Georgia")
    other = Document()
    font = other._context.fonts.resolve_record(other_font)
    with check:
        assert font is not other_font
        assert font.key == other_font.key
        assert other._context.fonts.resolve_record(None) is other.fonts[0]
