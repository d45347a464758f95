import pytest
from pytest_check import check

from xls_wrapper import CellType, Document, xl_col_to_name, xl_rowcol_to_cell


def test_cell_references():
    with check:
        assert xl_col_to_name(0) == "A"
        assert xl_col_to_name(27) == "AB"
        assert xl_col_to_name(255, col_abs=True) == "$IV"
        assert xl_rowcol_to_cell(0, 0) == "A1"
        assert xl_rowcol_to_cell(9, 2, row_abs=True) == "C$10"
    with pytest.raises(IndexError):
        xl_col_to_name(-1)


def test_missing_cells(doc):
    sheet = doc.sheets[0]
    cell = sheet.cell(10, 10)
    with check:
        assert cell.is_empty
        assert cell.value is None
        assert cell.style is doc._model.default_style
        assert sheet.num_rows == 0
        assert sheet.num_cols == 0
        assert repr(cell) == "<Cell K11 type=EMPTY value=None>"


def test_cell_limits(doc):
    sheet = doc.sheets[0]
    sheet.write(65535, 255, "last")
    check.equal(sheet.read(65535, 255), "last")
    with pytest.raises(IndexError) as e:
        sheet.write(65536, 0, "x")
    assert "exceeds maximum row 65535" in str(e.value)
    with pytest.raises(IndexError) as e:
        sheet.write(0, 256, "x")
    assert "exceeds maximum column 255" in str(e.value)
    with pytest.raises(IndexError):
        sheet.cell(-1, 0)


def test_write_types(doc):
    sheet = doc.sheets[0]
    sheet.write(0, 0, 1)
    sheet.write(0, 1, "a")
    sheet.write(0, 2, False)
    sheet.write(0, 3, None)
    with check:
        assert sheet.cell(0, 0).type == CellType.NUMBER
        assert sheet.read(0, 0) == 1.0
        assert sheet.cell(0, 1).type == CellType.TEXT
        assert sheet.cell(0, 2).type == CellType.BOOL
        assert sheet.cell(0, 3).type == CellType.EMPTY
        assert sheet.num_rows == 1
        assert sheet.num_cols == 4
    with pytest.raises(ValueError) as e:
        sheet.write(0, 0, object())
    assert "cannot determine cell type from type object" in str(e.value)


def test_sheet_list():
    doc = Document(sheet_name="Main")
    doc.add_sheet()
    doc.add_sheet()
    with check:
        assert [x.name for x in doc.sheets] == ["Main", "Sheet1", "Sheet2"]
        assert doc.sheets[-1].name == "Sheet2"
        assert "main" in doc.sheets
    doc.sheets[0].name = "Renamed"
    check.equal(doc.sheets["renamed"].name, "Renamed")
    with pytest.raises(IndexError):
        doc.sheets[3]
    with pytest.raises(LookupError):
        doc.sheets[1.0]
