import pytest
from pytest_check import check

from xls_wrapper import (
    RGB,
    BorderType,
    Document,
    FillPattern,
    RecordLimitError,
    Style,
    UnsupportedError,
)
from xls_wrapper.style_cache import border_line, fingerprint


def test_new_document_records(doc):
    # Default cell style plus the scratch and default seed records
    with check:
        assert len(doc.styles) == 3
        assert len(doc.fonts) == 1
        assert doc.fonts[0].height == 200
        assert doc.fonts[0].name == "Arial"


def test_same_style_shares_record(doc):
    sheet = doc.sheets[0]
    num_styles = len(doc.styles)
    num_fonts = len(doc.fonts)

    style = Style(bold=True, font_size=12, font_name="Arial")
    sheet.set_cell_style(0, 0, style)
    sheet.set_cell_style(1, 0, style)

    with check:
        assert len(doc.styles) == num_styles + 1
        assert len(doc.fonts) == num_fonts + 1
        assert sheet.cell(0, 0).style is sheet.cell(1, 0).style
        assert sheet.cell(0, 0).style.font.height == 240
        assert sheet.cell(0, 0).style.font.bold


def test_equal_styles_share_record(doc):
    sheet = doc.sheets[0]
    sheet.set_cell_style(0, 0, Style(italic=True, alignment="center"))
    sheet.set_cell_style(0, 1, Style(italic=True, alignment="CENTER"))
    assert sheet.cell(0, 0).style is sheet.cell(0, 1).style


def test_background_shares_font(doc):
    sheet = doc.sheets[0]
    num_styles = len(doc.styles)
    num_fonts = len(doc.fonts)

    plain = Style(bold=True, font_size=12)
    filled = Style(bold=True, font_size=12, bg_color=RGB(255, 0, 0))
    sheet.set_cell_style(0, 0, plain)
    sheet.set_cell_style(1, 0, plain)
    sheet.set_cell_style(2, 0, filled)

    plain_record = sheet.cell(0, 0).style
    filled_record = sheet.cell(2, 0).style
    with check:
        assert len(doc.styles) == num_styles + 2
        assert len(doc.fonts) == num_fonts + 1
        assert plain_record is not filled_record
        assert plain_record.font is filled_record.font
        assert filled_record.fill_pattern == FillPattern.SOLID
        assert filled_record.fill_foreground_color == doc.palette.find_color(RGB(255, 0, 0))
        assert plain_record.fill_pattern == FillPattern.NONE


def test_percentage(doc):
    sheet = doc.sheets[0]
    sheet.write_percentage(0, 0, 50)
    cell = sheet.cell(0, 0)
    with check:
        assert cell.value == 0.5
        assert cell.style.format_code == 9
        assert doc.custom_formats == {}


PLAIN = Style()
THIN = Style(border_type=BorderType.THIN)


@pytest.mark.parametrize(
    "base,other",
    [
        (PLAIN, Style(border_bottom=True)),
        (THIN, Style(border_type=BorderType.THIN, border_bottom=True)),
        (THIN, Style(border_type=BorderType.THIN, border_top=True)),
        (
            Style(border_type=BorderType.THIN, border_left=True),
            Style(border_type=BorderType.THICK, border_left=True),
        ),
        (PLAIN, Style(bold=True)),
        (PLAIN, Style(italic=True)),
        (PLAIN, Style(underline=True)),
        (PLAIN, Style(font_name="Courier")),
        (PLAIN, Style(font_size=11)),
        (PLAIN, Style(font_color=RGB(0, 0, 255))),
        (PLAIN, Style(bg_color=RGB(0, 255, 0))),
        (PLAIN, Style(wrap_text=True)),
        (PLAIN, Style(alignment="right")),
        (PLAIN, Style(custom_format="0.000")),
    ],
)
def test_one_attribute_changes_record(doc, base, other):
    sheet = doc.sheets[0]
    sheet.set_cell_style(0, 0, base)
    sheet.set_cell_style(0, 1, other)
    assert sheet.cell(0, 0).style is not sheet.cell(0, 1).style


def test_border_flags(doc):
    sheet = doc.sheets[0]
    record = sheet.set_cell_style(
        0, 0, Style(border_bottom=True, border_left=True, border_type="dashed")
    )
    with check:
        assert record.border_bottom == BorderType.DASHED
        assert record.border_left == BorderType.DASHED
        assert record.border_top == BorderType.NONE
        assert record.border_right == BorderType.NONE


def test_border_line():
    with check:
        assert border_line(False, BorderType.THICK) == BorderType.NONE
        assert border_line(True, BorderType.NONE) == BorderType.THIN
        assert border_line(True, BorderType.DOUBLE) == BorderType.DOUBLE


def test_registered_records_are_frozen(doc):
    sheet = doc.sheets[0]
    record = sheet.set_cell_style(0, 0, Style(bold=True, bg_color=RGB(255, 255, 0)))
    before = (record.attrs(), record.font)

    sheet.set_cell_style(1, 0, Style(bold=True, bg_color=RGB(0, 0, 255)))
    sheet.set_cell_style(2, 0, Style(border_bottom=True, custom_format="0.0"))
    sheet.set_cell_style(0, 0, Style(italic=True))

    with check:
        assert record.frozen
        assert (record.attrs(), record.font) == before
    with pytest.raises(UnsupportedError) as e:
        record.alignment = 3
    assert "cannot be modified" in str(e.value)


def test_restyle_replaces_record(doc):
    sheet = doc.sheets[0]
    first = sheet.set_cell_style(0, 0, Style(bold=True))
    second = sheet.set_cell_style(0, 0, Style(italic=True))
    with check:
        assert sheet.cell(0, 0).style is second
        assert first is not second
        assert not second.font.bold


def test_fingerprint_order(doc):
    sheet = doc.sheets[0]
    record = sheet.set_cell_style(0, 0, Style(bold=True, custom_format="0.00"))
    key = fingerprint(record)
    with check:
        assert len(key) == 18
        assert key[-2] == 2
        assert key[-1] == record.font.key
        assert key in doc._context.styles


def test_scratch_record_never_attached(doc):
    sheet = doc.sheets[0]
    for row in range(10):
        sheet.set_cell_style(row, 0, Style(font_size=8 + row))
    scratch = doc._context.styles.scratch_style()
    for row in range(10):
        check.is_not(sheet.cell(row, 0).style, scratch)
    assert not scratch.frozen


def test_style_limit(doc):
    sheet = doc.sheets[0]
    doc._model.max_styles = len(doc.styles) + 1
    sheet.set_cell_style(0, 0, Style(bold=True))
    sheet.set_cell_style(1, 0, Style(bold=True))
    with pytest.raises(RecordLimitError) as e:
        sheet.set_cell_style(2, 0, Style(italic=True))
    assert "styles" in str(e.value)

    with pytest.raises(RecordLimitError):
        sheet.set_cell_style(2, 0, Style(italic=True))
    assert len(doc._context.styles) == 1


def test_documents_do_not_share_records():
    doc_1 = Document()
    doc_2 = Document()
    style = Style(bold=True)
    record_1 = doc_1.sheets[0].set_cell_style(0, 0, style)
    record_2 = doc_2.sheets[0].set_cell_style(0, 0, style)
    with check:
        assert record_1 is not record_2
        assert record_1.font is not record_2.font
        assert any(font is record_1.font for font in doc_1.fonts)
        assert any(font is record_2.font for font in doc_2.fonts)
