from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from pendulum import DateTime
from pendulum import instance as pendulum_instance
from xlrd.xldate import XLDateError, xldate_as_datetime, xldate_from_datetime_tuple

from xls_wrapper.cell import Cell, validate_cell_coords
from xls_wrapper.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_SHEET_NAME,
    PERCENT_FORMAT,
    CellType,
)
from xls_wrapper.model import _XlsModel
from xls_wrapper.palette import Palette
from xls_wrapper.records import FontRecord, StyleRecord
from xls_wrapper.style import Style
from xls_wrapper.style_cache import StyleContext

__all__ = ["Document", "Sheet"]


class Sheet:
    pass


class SheetList:
    def __init__(self, model, context, refs):
        self._items = [Sheet(model, context, id) for id in refs]

    def __getitem__(self, key: Union[int, str]):
        if isinstance(key, int):
            if key < 0:
                key += len(self._items)
            if key < 0 or key >= len(self._items):
                raise IndexError(f"index {key} out of range")
            return self._items[key]
        elif isinstance(key, str):
            for item in self._items:
                if item.name.lower() == key.lower():
                    return item
            raise KeyError(f"no sheet named '{key}'")
        else:
            t = type(key).__name__
            raise LookupError(f"invalid index type {t}")

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return key.lower() in [x.name.lower() for x in self._items]

    def append(self, item):
        self._items.append(item)


class Document:
    """
    Create an instance of a new XLS document or open an existing one.

    If ``filename`` is ``None``, an empty document is created with a single
    sheet. Each document owns the caches that deduplicate its font and style
    records, so formatting many cells the same way adds one record only.

    Parameters
    ----------
    filename: str, optional
        XLS document to read.
    sheet_name: *str*, *optional*, *default*: ``Sheet1``
        Name of the first sheet in a new document

    Raises
    ------
    FileError:
        If the document cannot be read.
    FileFormatError:
        If the file is not an XLS workbook.
    """

    def __init__(
        self,
        filename: Optional[Union[str, Path]] = None,
        sheet_name: Optional[str] = DEFAULT_SHEET_NAME,
    ):
        self._model = _XlsModel(filename)
        if filename is None:
            self._model.add_sheet(sheet_name)
        self._context = StyleContext(self._model)
        self._sheets = SheetList(self._model, self._context, self._model.sheet_ids())

    @property
    def sheets(self) -> List[Sheet]:
        """List[:class:`Sheet`]: A list of sheets in the document."""
        return self._sheets

    @property
    def fonts(self) -> List[FontRecord]:
        """List[:class:`FontRecord`]: The font records stored in the document."""
        return self._model.fonts

    @property
    def styles(self) -> List[StyleRecord]:
        """List[:class:`StyleRecord`]: The style records stored in the document."""
        return self._model.styles

    @property
    def custom_formats(self) -> Dict[int, str]:
        """Dict[int, str]: Custom number format codes mapped to their patterns."""
        return self._model.formats.custom_formats

    @property
    def palette(self) -> Palette:
        """:class:`Palette`: The colour palette of the document."""
        return self._model.palette

    def save(self, filename: Union[str, Path]) -> None:
        """
        Save the document in the specified filename.

        Parameters
        ----------
        filename: str
            The path to save the document to. If the file already exists,
            it will be overwritten.
        """
        self._model.save(filename)

    def add_sheet(self, sheet_name: Optional[str] = None) -> Sheet:
        """
        Add a new sheet to the current document.

        If no sheet name is provided, the next available numbered sheet
        will be generated in the series ``Sheet1``, ``Sheet2``, etc.

        Raises
        ------
        IndexError:
            If the sheet name already exists in the document.
        """
        if sheet_name is not None:
            if sheet_name in self._sheets:
                raise IndexError(f"sheet '{sheet_name}' already exists")
        else:
            sheet_num = 1
            while f"sheet{sheet_num}" in self._sheets:
                sheet_num += 1
            sheet_name = f"Sheet{sheet_num}"

        sheet = Sheet(self._model, self._context, self._model.add_sheet(sheet_name))
        self._sheets.append(sheet)
        return sheet


class Sheet:  # noqa: F811
    """A sheet of cells addressed by zero-based row and column."""

    def __init__(self, model, context, sheet_id):
        self._model = model
        self._context = context
        self._sheet_id = sheet_id

    @property
    def name(self) -> str:
        """str: The sheet's name."""
        return self._model.sheet_name(self._sheet_id)

    @name.setter
    def name(self, value: str):
        self._model.sheet_name(self._sheet_id, value)

    @property
    def num_rows(self) -> int:
        """int: The number of rows up to the last row containing a cell."""
        return self._model.num_rows(self._sheet_id)

    @property
    def num_cols(self) -> int:
        """int: The number of columns up to the last column containing a cell."""
        cols = [cell.col for cell in self._model.iter_cells(self._sheet_id)]
        return max(cols) + 1 if cols else 0

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col); missing cells are returned as empty cells."""
        validate_cell_coords(row, col)
        cell = self._model.cell(self._sheet_id, row, col)
        if cell is None:
            return Cell(row, col, style=self._model.default_style)
        return cell

    def rows(self, values_only: bool = False) -> Union[List[List[Cell]], List[List]]:
        """Return all the cells of the sheet as a list of rows."""
        num_cols = self.num_cols
        rows = []
        for row in range(self.num_rows):
            cells = [self.cell(row, col) for col in range(num_cols)]
            rows.append([x.value for x in cells] if values_only else cells)
        return rows

    def read(self, row: int, col: int):
        """Return the value of a cell, or ``None`` if the cell has no value."""
        return self.cell(row, col).value

    def read_date(self, row: int, col: int) -> Optional[DateTime]:
        """Return the value of a numeric cell as a date, or ``None`` if the
        cell does not hold a valid date serial number.
        """
        cell = self.cell(row, col)
        if cell.type not in [CellType.NUMBER, CellType.DATE]:
            return None
        try:
            return pendulum_instance(xldate_as_datetime(cell.value, self._model.datemode))
        except (XLDateError, ValueError, OverflowError):
            return None

    def write(self, row: int, col: int, value, style: Optional[Style] = None) -> Cell:
        """Write a value to a cell, replacing any previous value and style.

        ``str``, ``int``, ``float``, ``bool``, ``datetime`` and ``date``
        values are supported; ``None`` writes an empty cell. Dates are stored
        as serial numbers with a date number format.

        Raises
        ------
        IndexError:
            If the cell reference is outside the sheet.
        ValueError:
            If the type of the value is not supported.
        """
        if value is None:
            cell_type = CellType.EMPTY
        elif isinstance(value, bool):
            cell_type = CellType.BOOL
        elif isinstance(value, (int, float)):
            value = float(value)
            cell_type = CellType.NUMBER
        elif isinstance(value, str):
            cell_type = CellType.TEXT
        elif isinstance(value, (datetime, date)):
            value = self._date_to_serial(value)
            cell_type = CellType.DATE
            if style is None:
                style = Style(custom_format=DEFAULT_DATE_FORMAT)
            elif style.custom_format is None:
                style = replace(style, custom_format=DEFAULT_DATE_FORMAT)
        else:
            raise ValueError(f"cannot determine cell type from type {type(value).__name__}")

        cell = self._model.set_cell_value(self._sheet_id, row, col, value, cell_type)
        if style is not None:
            self._context.apply(cell, style)
        return cell

    def write_percentage(self, row: int, col: int, value: float) -> Cell:
        """Write a percentage, stored as a fraction and formatted as ``0%``.

        ``write_percentage(0, 0, 50)`` stores ``0.5``.
        """
        return self.write(row, col, value / 100, style=Style(custom_format=PERCENT_FORMAT))

    def set_cell_style(self, row: int, col: int, style: Style) -> StyleRecord:
        """Apply a style to a cell, replacing its previous style.

        Raises
        ------
        RecordLimitError:
            If the document cannot hold another font or style record.
        FormatError:
            If the style's custom format is malformed.
        """
        cell = self._model.cell_or_blank(self._sheet_id, row, col)
        return self._context.apply(cell, style)

    def group_rows(self, first_row: int, last_row: int) -> None:
        """Group a range of rows and hide them."""
        for row in range(first_row, last_row + 1):
            validate_cell_coords(row, 0)
            self._model.row_outline(self._sheet_id, row, (1, True))

    def group_cols(self, first_col: int, last_col: int) -> None:
        """Group a range of columns and hide them."""
        for col in range(first_col, last_col + 1):
            validate_cell_coords(0, col)
            self._model.col_outline(self._sheet_id, col, (1, True))

    def row_outline(self, row: int):
        """Return the (level, hidden) outline state of a row."""
        return self._model.row_outline(self._sheet_id, row)

    def col_outline(self, col: int):
        """Return the (level, hidden) outline state of a column."""
        return self._model.col_outline(self._sheet_id, col)

    def _date_to_serial(self, value: Union[datetime, date]) -> float:
        if isinstance(value, datetime):
            datetime_tuple = (
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
            )
        else:
            datetime_tuple = (value.year, value.month, value.day, 0, 0, 0)
        try:
            return xldate_from_datetime_tuple(datetime_tuple, self._model.datemode)
        except XLDateError as e:
            raise ValueError(f"cannot store date {value}: {e}") from None
