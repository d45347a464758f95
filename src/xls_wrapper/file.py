import logging
from pathlib import Path

import xlrd
import xlwt
from xlrd.compdoc import CompDocError

from xls_wrapper import __name__ as xls_wrapper_name
from xls_wrapper.constants import BUILTIN_FORMATS, COLOR_BORDER_AUTOMATIC, CellType
from xls_wrapper.exceptions import FileError, FileFormatError
from xls_wrapper.formats import FormatTable
from xls_wrapper.palette import Palette
from xls_wrapper.records import FontRecord, StyleRecord

logger = logging.getLogger(xls_wrapper_name)
debug = logger.debug

XLRD_CELL_TYPES = {
    xlrd.XL_CELL_TEXT: CellType.TEXT,
    xlrd.XL_CELL_NUMBER: CellType.NUMBER,
    xlrd.XL_CELL_DATE: CellType.DATE,
    xlrd.XL_CELL_BOOLEAN: CellType.BOOL,
    xlrd.XL_CELL_ERROR: CellType.ERROR,
    xlrd.XL_CELL_BLANK: CellType.EMPTY,
}

# xlwt selects built-in format codes by its own spelling of each pattern
XLWT_BUILTIN_FORMATS = dict(
    zip(
        list(range(0, 23)) + list(range(37, 50)),
        xlwt.Style.StyleCollection._std_num_fmt_list,
    )
)


def read_xls_file(filepath: Path, model: object) -> None:
    """Read an XLS workbook and store its records and cells in ``model``."""
    debug("read_xls_file: path=%s", filepath)
    try:
        book = xlrd.open_workbook(str(filepath), formatting_info=True)
    except OSError as e:
        raise FileError(f"{filepath}: {(e.strerror or str(e)).lower()}") from None
    except (xlrd.XLRDError, CompDocError) as e:
        raise FileFormatError(f"invalid XLS document ({e})") from None

    model.datemode = book.datemode
    model.palette = Palette(book.colour_map)
    model.formats = FormatTable(
        {
            k: v.format_str
            for k, v in book.format_map.items()
            if k not in BUILTIN_FORMATS and v.format_str is not None
        }
    )

    for font in book.font_list:
        model.add_font_record(
            FontRecord(
                weight=font.weight,
                color=font.colour_index,
                height=font.height,
                name=font.name,
                italic=bool(font.italic),
                struck_out=bool(font.struck_out),
                escapement=font.escapement,
                underline=font.underline_type,
                index=font.font_index,
            )
        )

    default_style_index = None
    for xf in book.xf_list:
        style = style_from_xf(xf, model.fonts)
        model.add_style_record(style)
        style.freeze()
        if default_style_index is None and not xf.is_style:
            default_style_index = style.index
    model.set_default_style(default_style_index or 0)

    for sheet in book.sheets():
        sheet_id = model.add_sheet(sheet.name)
        for row in range(sheet.nrows):
            for col in range(sheet.ncols):
                xl_cell = sheet.cell(row, col)
                if xl_cell.ctype == xlrd.XL_CELL_EMPTY:
                    continue
                cell_type = XLRD_CELL_TYPES[xl_cell.ctype]
                if cell_type == CellType.EMPTY:
                    value = None
                elif cell_type == CellType.BOOL:
                    value = bool(xl_cell.value)
                elif cell_type == CellType.ERROR:
                    value = xlrd.error_text_from_code.get(xl_cell.value, "#ERR")
                else:
                    value = xl_cell.value
                cell = model.set_cell_value(sheet_id, row, col, value, cell_type)
                if xl_cell.xf_index is not None:
                    cell.style = model.styles[xl_cell.xf_index]
        for row, info in sheet.rowinfo_map.items():
            if info.outline_level > 0 or info.hidden:
                model.row_outline(sheet_id, row, (info.outline_level, bool(info.hidden)))
        for col, info in sheet.colinfo_map.items():
            if info.outline_level > 0 or info.hidden:
                model.col_outline(sheet_id, col, (info.outline_level, bool(info.hidden)))


def style_from_xf(xf: object, fonts: list) -> StyleRecord:
    border = xf.border
    return StyleRecord(
        font=fonts[xf.font_index],
        alignment=xf.alignment.hor_align,
        vertical_alignment=xf.alignment.vert_align,
        wrap=bool(xf.alignment.text_wrapped),
        rotation=xf.alignment.rotation,
        indent=xf.alignment.indent_level,
        border_top=border.top_line_style,
        border_left=border.left_line_style,
        border_right=border.right_line_style,
        border_bottom=border.bottom_line_style,
        top_border_color=border_color(border.top_line_style, border.top_colour_index),
        left_border_color=border_color(border.left_line_style, border.left_colour_index),
        right_border_color=border_color(border.right_line_style, border.right_colour_index),
        bottom_border_color=border_color(
            border.bottom_line_style, border.bottom_colour_index
        ),
        fill_pattern=xf.background.fill_pattern,
        fill_foreground_color=xf.background.pattern_colour_index,
        fill_background_color=xf.background.background_colour_index,
        format_code=xf.format_key,
        is_style=bool(xf.is_style),
    )


def border_color(line_style: int, color: int) -> int:
    # xlrd reports colour 0 for sides with no line
    return color if line_style else COLOR_BORDER_AUTOMATIC


def xf_style(style: StyleRecord, formats: FormatTable) -> xlwt.XFStyle:
    """Convert a style record into the equivalent ``xlwt`` style."""
    xf = xlwt.XFStyle()
    if style.format_code in XLWT_BUILTIN_FORMATS:
        xf.num_format_str = XLWT_BUILTIN_FORMATS[style.format_code]
    else:
        xf.num_format_str = formats.pattern(style.format_code)

    font = xlwt.Font()
    font.name = style.font.name
    font.height = style.font.height
    font.bold = style.font.bold
    font.italic = style.font.italic
    font.struck_out = style.font.struck_out
    font.underline = style.font.underline
    font.escapement = style.font.escapement
    font.colour_index = style.font.color
    xf.font = font

    alignment = xlwt.Alignment()
    alignment.horz = style.alignment
    alignment.vert = style.vertical_alignment
    alignment.wrap = 1 if style.wrap else 0
    alignment.rota = style.rotation
    alignment.inde = style.indent
    xf.alignment = alignment

    borders = xlwt.Borders()
    borders.top = style.border_top
    borders.left = style.border_left
    borders.right = style.border_right
    borders.bottom = style.border_bottom
    borders.top_colour = style.top_border_color
    borders.left_colour = style.left_border_color
    borders.right_colour = style.right_border_color
    borders.bottom_colour = style.bottom_border_color
    xf.borders = borders

    pattern = xlwt.Pattern()
    pattern.pattern = style.fill_pattern
    pattern.pattern_fore_colour = style.fill_foreground_color
    pattern.pattern_back_colour = style.fill_background_color
    xf.pattern = pattern

    return xf


def write_xls_file(filepath: Path, model: object) -> None:
    """Write the sheets and records in ``model`` to an XLS workbook."""
    debug("write_xls_file: path=%s", filepath)
    workbook = xlwt.Workbook(encoding="utf-8", style_compression=2)
    for index, rgb in model.palette.changed_colors().items():
        workbook.set_colour_RGB(index, *rgb)

    xf_styles = {}
    for sheet_id in model.sheet_ids():
        worksheet = workbook.add_sheet(model.sheet_name(sheet_id), cell_overwrite_ok=True)
        for cell in model.iter_cells(sheet_id):
            style = cell.style if cell.style is not None else model.default_style
            if style.index not in xf_styles:
                xf_styles[style.index] = xf_style(style, model.formats)
            worksheet.write(cell.row, cell.col, cell.value, xf_styles[style.index])

        for row, (level, hidden) in model.row_outlines(sheet_id).items():
            worksheet.row(row).level = level
            worksheet.row(row).hidden = hidden
        for col, (level, hidden) in model.col_outlines(sheet_id).items():
            worksheet.col(col).level = level
            worksheet.col(col).hidden = hidden

    try:
        workbook.save(str(filepath))
    except OSError as e:
        raise FileError(f"{filepath}: {(e.strerror or str(e)).lower()}") from None
