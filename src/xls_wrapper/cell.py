from typing import Union

from xls_wrapper.constants import MAX_COL_COUNT, MAX_ROW_COUNT, CellType
from xls_wrapper.records import StyleRecord

__all__ = ["Cell", "xl_col_to_name", "xl_rowcol_to_cell"]


class Cell:
    """A cell in a sheet.

    ``value`` is a ``str``, ``float`` or ``bool``, or ``None`` for a blank
    cell. Dates are stored as serial numbers and have type ``CellType.DATE``.
    ``style`` is the style record the cell uses, or ``None`` for the
    document's default style.
    """

    def __init__(
        self,
        row: int,
        col: int,
        value: Union[str, float, bool, None] = None,
        cell_type: CellType = CellType.EMPTY,
        style: StyleRecord = None,
    ):
        self.row = row
        self.col = col
        self.value = value
        self.type = cell_type
        self.style = style

    @property
    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY

    def __repr__(self) -> str:
        ref = xl_rowcol_to_cell(self.row, self.col)
        return f"<Cell {ref} type={self.type.name} value={self.value!r}>"


def validate_cell_coords(row: int, col: int) -> None:
    if row < 0 or col < 0:
        raise IndexError(f"invalid cell reference ({row}, {col})")
    if row >= MAX_ROW_COUNT:
        raise IndexError(f"{row} exceeds maximum row {MAX_ROW_COUNT - 1}")
    if col >= MAX_COL_COUNT:
        raise IndexError(f"{col} exceeds maximum column {MAX_COL_COUNT - 1}")


def xl_col_to_name(col: int, col_abs: bool = False) -> str:
    """Convert a zero indexed column cell reference to a string.

    Args:
       col:     The cell column.
       col_abs: If true will make the column absolute.

    Returns:
        Column style string.
    """
    col_num = col
    if col_num < 0:
        raise IndexError(f"column reference {col_num} below zero")

    col_num += 1  # Change to 1-index.
    col_str = ""
    col_abs = "$" if col_abs else ""

    while col_num:
        # Set remainder from 1 .. 26
        remainder = col_num % 26

        if remainder == 0:
            remainder = 26

        # Convert the remainder to a character.
        col_letter = chr(ord("A") + remainder - 1)

        # Accumulate the column letters, right to left.
        col_str = col_letter + col_str

        # Get the next order of magnitude.
        col_num = int((col_num - 1) / 26)

    return col_abs + col_str


def xl_rowcol_to_cell(row: int, col: int, row_abs: bool = False, col_abs: bool = False) -> str:
    """Convert a zero indexed row and column cell reference to an A1 string."""
    if row < 0:
        raise IndexError(f"row reference {row} below zero")

    row += 1  # Change to 1-index.
    row_abs = "$" if row_abs else ""
    col_str = xl_col_to_name(col, col_abs)
    return col_str + row_abs + str(row)
