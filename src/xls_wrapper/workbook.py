from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from pendulum import DateTime
from pendulum import parse as pendulum_parse

from xls_wrapper.constants import MAX_ROW_COUNT, CellType
from xls_wrapper.document import Document, Sheet
from xls_wrapper.exceptions import UnsupportedError
from xls_wrapper.style import Style

__all__ = ["Workbook"]


class Workbook:
    """
    Read and write XLS workbooks using Excel coordinates.

    All the column and row coordinates use a 1-based index like in Excel,
    so A1 is ``(1, 1)``. When a method takes both coordinates, the column is
    always the first parameter.

    There are two ways to access cell data. The first uses :meth:`next_row`
    and :meth:`select_row` to move to a row and then reads and writes
    cells on that row by column:

    .. code-block:: python

        workbook.select_row(2)
        workbook.write_text(1, "50")  # writes 50 to A2
        workbook.read_text(1, default="empty")

    The second passes both column and row to the read methods:

    .. code-block:: python

        workbook.read_text(1, 2)  # reads A2

    Writes always apply to the selected row.
    """

    def __init__(self):
        self._document = None
        self._sheet = None
        self._row = 0
        self.xls_file_path = None

    @property
    def document(self) -> Document:
        """:class:`Document`: The workbook's document."""
        if self._document is None:
            raise UnsupportedError("no workbook has been created or opened")
        return self._document

    @property
    def sheet(self) -> Sheet:
        """:class:`Sheet`: The selected sheet."""
        if self._sheet is None:
            raise UnsupportedError("no workbook has been created or opened")
        return self._sheet

    def create(self, xls_file_path: Union[str, Path]) -> None:
        """Create a new workbook at ``xls_file_path``, overwriting any existing
        file. The workbook has one sheet named ``Sheet1`` and the first row is
        selected.
        """
        self.xls_file_path = xls_file_path
        self._document = Document()
        self._sheet = self._document.sheets[0]
        self._document.save(xls_file_path)
        self.select_row(1)

    def open(self, xls_file_path: Union[str, Path]) -> None:
        """Open an XLS workbook. The first sheet and first row are selected."""
        self.xls_file_path = xls_file_path
        self._document = Document(xls_file_path)
        self._sheet = self._document.sheets[0]
        self.select_row(1)

    def save(self) -> None:
        """Save the workbook to the path given to :meth:`create` or :meth:`open`."""
        self.save_as(self.xls_file_path)

    def save_as(self, xls_file_path: Union[str, Path]) -> None:
        """Save the workbook to ``xls_file_path``."""
        self.document.save(xls_file_path)

    def create_sheet(self, sheet_name: str) -> None:
        """Add a sheet and select it. The first row is selected."""
        self._sheet = self.document.add_sheet(sheet_name)
        self.select_row(1)

    def select_sheet(self, sheet_name: str) -> None:
        """Select an existing sheet. The first row is selected.

        Raises
        ------
        KeyError:
            If there is no sheet with that name.
        """
        self._sheet = self.document.sheets[sheet_name]
        self.select_row(1)

    def sheet_exists(self, sheet_name: str) -> bool:
        return sheet_name in self.document.sheets

    @property
    def current_row(self) -> int:
        """int: The selected row."""
        return self._row + 1

    def next_row(self) -> None:
        """Select the next row."""
        self.select_row(self.current_row + 1)

    def select_row(self, row: int) -> None:
        """Select a row so its cells can be read and written by column."""
        if row < 1 or row > MAX_ROW_COUNT:
            raise IndexError(f"row {row} is outside the sheet")
        self._row = row - 1

    def has_more_rows(self, max_rows: Optional[int] = None) -> bool:
        """Return ``True`` if another row follows the current row in the sheet.

        When ``max_rows`` is given, the zero-based index of the current row
        must also be no greater than ``max_rows``.
        """
        if self.current_row >= MAX_ROW_COUNT:
            return False
        return max_rows is None or self._row <= max_rows

    def group_rows(self, first_row: int, last_row: int) -> None:
        """Group a range of rows and hide them."""
        self.sheet.group_rows(first_row - 1, last_row - 1)

    def group_cols(self, first_col: int, last_col: int) -> None:
        """Group a range of columns and hide them."""
        self.sheet.group_cols(first_col - 1, last_col - 1)

    def write_text(self, col: int, value: str) -> None:
        """Write text into the cell at ``col`` on the selected row.

        The previous value and formatting are replaced.
        """
        self.sheet.write(self._row, col - 1, str(value))

    def write_number(self, col: int, value: float) -> None:
        """Write a number into the cell at ``col`` on the selected row.

        The previous value and formatting are replaced.
        """
        self.sheet.write(self._row, col - 1, float(value))

    def write_percentage(self, col: int, value: float) -> None:
        """Write a percentage into the cell at ``col`` on the selected row.

        The value is divided by 100 and the cell is formatted as ``0%``.
        """
        self.sheet.write_percentage(self._row, col - 1, value)

    def write_date(self, col: int, value: Union[datetime, date]) -> None:
        """Write a date into the cell at ``col`` on the selected row."""
        self.sheet.write(self._row, col - 1, value)

    def apply_formatting(self, col: int, style: Style) -> None:
        """Apply a style to the cell at ``col`` on the selected row."""
        self.sheet.set_cell_style(self._row, col - 1, style)

    def read_text(self, col: int, row: Optional[int] = None, default: str = "") -> str:
        """Read a cell as text, or return ``default`` if the cell is empty."""
        value = self._read(col, row)
        if value is None:
            return default
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def read_number(
        self, col: int, row: Optional[int] = None, default: float = -1.0
    ) -> float:
        """Read a cell as a number. Text is converted to a number where possible.

        Returns ``default`` if the cell does not contain a number.
        """
        value = self._read(col, row)
        if value is None or isinstance(value, bool):
            return default
        if isinstance(value, float):
            return value
        try:
            return float(str(value).strip())
        except ValueError:
            return default

    def read_date(
        self, col: int, row: Optional[int] = None, default: Optional[DateTime] = None
    ) -> Optional[DateTime]:
        """Read a cell as a date. Text is parsed as an ISO 8601 date.

        Returns ``default`` if the cell does not contain a date.
        """
        row = self._row if row is None else row - 1
        cell = self.sheet.cell(row, col - 1)
        if cell.type in [CellType.NUMBER, CellType.DATE]:
            value = self.sheet.read_date(row, col - 1)
            return default if value is None else value
        if cell.type == CellType.TEXT:
            try:
                value = pendulum_parse(cell.value, strict=True)
            except ValueError:
                return default
            return value if isinstance(value, DateTime) else default
        return default

    def _read(self, col: int, row: Optional[int]):
        row = self._row if row is None else row - 1
        return self.sheet.read(row, col - 1)
