from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from xls_wrapper.cell import Cell, validate_cell_coords
from xls_wrapper.constants import (
    DATEMODE,
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    FONT_WEIGHT_NORMAL,
    MAX_FONT_RECORDS,
    MAX_STYLE_RECORDS,
    CellType,
)
from xls_wrapper.exceptions import RecordLimitError
from xls_wrapper.file import read_xls_file, write_xls_file
from xls_wrapper.formats import FormatTable
from xls_wrapper.palette import Palette
from xls_wrapper.records import FontRecord, StyleRecord


class SheetData:
    """Cells and outline levels of one sheet."""

    def __init__(self, name: str):
        self.name = name
        self.rows = {}
        self.row_outlines = {}
        self.col_outlines = {}


class _XlsModel:
    """In-memory workbook holding the font, style and format records and
    the cell data of each sheet. Provides the record lookup and creation
    methods used by the style caches.

    Not to be used in application code.
    """

    def __init__(self, filepath: Optional[Path] = None):
        self._fonts = []
        self._font_keys = {}
        self._styles = []
        self._sheets = []
        self._default_style_index = 0
        self.max_fonts = MAX_FONT_RECORDS
        self.max_styles = MAX_STYLE_RECORDS
        self.datemode = DATEMODE

        if filepath is None:
            self.formats = FormatTable()
            self.palette = Palette()
            self.create_font(
                FONT_WEIGHT_NORMAL,
                self.palette.color_index(None),
                DEFAULT_FONT_SIZE * 20,
                DEFAULT_FONT.name,
            )
            self.create_style()
        else:
            read_xls_file(Path(filepath), self)

    def save(self, filepath: Path) -> None:
        write_xls_file(Path(filepath), self)

    @property
    def fonts(self) -> List[FontRecord]:
        return self._fonts

    @property
    def styles(self) -> List[StyleRecord]:
        return self._styles

    @property
    def default_style(self) -> StyleRecord:
        return self._styles[self._default_style_index]

    def set_default_style(self, index: int) -> None:
        self._default_style_index = index

    def find_font(  # noqa: PLR0913
        self,
        weight: int,
        color: int,
        height: int,
        name: str,
        italic: bool = False,
        struck_out: bool = False,
        escapement: int = 0,
        underline: int = 0,
    ) -> Optional[FontRecord]:
        """Return the first font record with exactly these attributes."""
        key = (weight, color, height, name, italic, struck_out, escapement, underline)
        return self._font_keys.get(key)

    def create_font(  # noqa: PLR0913
        self,
        weight: int,
        color: int,
        height: int,
        name: str,
        italic: bool = False,
        struck_out: bool = False,
        escapement: int = 0,
        underline: int = 0,
    ) -> FontRecord:
        """Create a new font record.

        Raises
        ------
        RecordLimitError:
            If the document already holds the maximum number of fonts.
        """
        if len(self._fonts) >= self.max_fonts:
            raise RecordLimitError(f"document cannot hold more than {self.max_fonts} fonts")
        font = FontRecord(
            weight=weight,
            color=color,
            height=height,
            name=name,
            italic=italic,
            struck_out=struck_out,
            escapement=escapement,
            underline=underline,
            index=len(self._fonts),
        )
        self.add_font_record(font)
        return font

    def add_font_record(self, font: FontRecord) -> None:
        """Append a font record read from a document."""
        self._fonts.append(font)
        if font.key not in self._font_keys:
            self._font_keys[font.key] = font

    def create_style(self) -> StyleRecord:
        """Create a new style record using the document's first font.

        Raises
        ------
        RecordLimitError:
            If the document already holds the maximum number of styles.
        """
        if len(self._styles) >= self.max_styles:
            raise RecordLimitError(f"document cannot hold more than {self.max_styles} styles")
        style = StyleRecord(font=self._fonts[0], index=len(self._styles))
        self._styles.append(style)
        return style

    def add_style_record(self, style: StyleRecord) -> None:
        """Append a style record read from a document."""
        style.index = len(self._styles)
        self._styles.append(style)

    def sheet_ids(self) -> List[int]:
        return list(range(len(self._sheets)))

    def sheet_name(self, sheet_id: int, value: str = None) -> str:
        if value is None:
            return self._sheets[sheet_id].name
        self._sheets[sheet_id].name = value

    def add_sheet(self, sheet_name: str) -> int:
        self._sheets.append(SheetData(sheet_name))
        return len(self._sheets) - 1

    def cell(self, sheet_id: int, row: int, col: int) -> Optional[Cell]:
        return self._sheets[sheet_id].rows.get(row, {}).get(col)

    def create_cell(self, sheet_id: int, row: int, col: int) -> Cell:
        """Replace any cell at (row, col) with an empty cell using the default style."""
        validate_cell_coords(row, col)
        cell = Cell(row, col, style=self.default_style)
        self._sheets[sheet_id].rows.setdefault(row, {})[col] = cell
        return cell

    def cell_or_blank(self, sheet_id: int, row: int, col: int) -> Cell:
        """Return the cell at (row, col), creating an empty cell if missing."""
        cell = self.cell(sheet_id, row, col)
        if cell is None:
            cell = self.create_cell(sheet_id, row, col)
        return cell

    def set_cell_value(
        self, sheet_id: int, row: int, col: int, value, cell_type: CellType
    ) -> Cell:
        cell = self.create_cell(sheet_id, row, col)
        cell.value = value
        cell.type = cell_type
        return cell

    def iter_cells(self, sheet_id: int) -> Iterator[Cell]:
        rows = self._sheets[sheet_id].rows
        for row in sorted(rows.keys()):
            for col in sorted(rows[row].keys()):
                yield rows[row][col]

    def num_rows(self, sheet_id: int) -> int:
        rows = self._sheets[sheet_id].rows
        populated = [row for row, cells in rows.items() if len(cells) > 0]
        return max(populated) + 1 if populated else 0

    def row_outline(self, sheet_id: int, row: int, value: Tuple[int, bool] = None):
        """Get or set the (level, hidden) outline state of a row."""
        if value is None:
            return self._sheets[sheet_id].row_outlines.get(row, (0, False))
        self._sheets[sheet_id].row_outlines[row] = value

    def col_outline(self, sheet_id: int, col: int, value: Tuple[int, bool] = None):
        """Get or set the (level, hidden) outline state of a column."""
        if value is None:
            return self._sheets[sheet_id].col_outlines.get(col, (0, False))
        self._sheets[sheet_id].col_outlines[col] = value

    def row_outlines(self, sheet_id: int) -> Dict[int, Tuple[int, bool]]:
        return self._sheets[sheet_id].row_outlines

    def col_outlines(self, sheet_id: int) -> Dict[int, Tuple[int, bool]]:
        return self._sheets[sheet_id].col_outlines
