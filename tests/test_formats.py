import pytest
from pytest_check import check

from xls_wrapper import FormatError, Style
from xls_wrapper.formats import FormatTable, validate_format


def test_builtin_formats():
    formats = FormatTable()
    with check:
        assert formats.builtin_format("General") == 0
        assert formats.builtin_format("0%") == 9
        assert formats.builtin_format("0.00") == 2
        assert formats.builtin_format("0.000") is None
        assert formats.format_code("0%") == 9
        assert formats.custom_formats == {}
        assert formats.pattern(9) == "0%"


def test_custom_formats():
    formats = FormatTable()
    code_1 = formats.format_code("0.000")
    code_2 = formats.format_code("#,##0.0 \"kg\"")
    with check:
        assert code_1 == 164
        assert code_2 == 165
        assert formats.format_code("0.000") == 164
        assert formats.custom_formats == {164: "0.000", 165: '#,##0.0 "kg"'}
        assert 165 in formats
        assert 166 not in formats
    with pytest.raises(IndexError):
        formats.pattern(166)


def test_loaded_custom_formats():
    formats = FormatTable({170: "0.0000"})
    with check:
        assert formats.format_code("0.0000") == 170
        assert formats.format_code("0.00000") == 171


@pytest.mark.parametrize(
    "pattern",
    ["0.00", '"cost: "0.00', "[Red]0.00;[Blue]-0.00", "0;-0;0;@", "\\$0.00", "[h]:mm:ss"],
)
def test_valid_formats(pattern):
    validate_format(pattern)


@pytest.mark.parametrize(
    "pattern,message",
    [
        ("", "number format must be a non-empty string"),
        ('"abc', "unterminated string in number format"),
        ("[Red0.00", "unbalanced '[' in number format"),
        ("0.00]", "unbalanced ']' in number format"),
        ("[Re[d]0", "nested '[' in number format"),
        ("0.00\\", "trailing escape in number format"),
        ("0;0;0;@;0", "has more than 4 sections"),
    ],
)
def test_invalid_formats(pattern, message):
    with pytest.raises(FormatError) as e:
        validate_format(pattern)
    assert message in str(e.value)


def test_invalid_format_in_style(doc):
    sheet = doc.sheets[0]
    num_styles = len(doc.styles)
    with pytest.raises(FormatError):
        sheet.set_cell_style(0, 0, Style(custom_format="[Red"))
    with check:
        assert len(doc.styles) == num_styles
        assert doc.custom_formats == {}
    with pytest.raises(ValueError):
        sheet.set_cell_style(0, 0, Style(custom_format='"'))
