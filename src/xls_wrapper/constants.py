from enum import IntEnum

import enum_tools.documentation

__all__ = [
    "Alignment",
    "BorderType",
    "CellType",
    "FillPattern",
    "FontFamily",
    "VerticalAlignment",
]

# New document defaults
DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_FONT_SIZE = 10
DEFAULT_DATE_FORMAT = "m/d/yy h:mm"
PERCENT_FORMAT = "0%"
DATEMODE = 0  # 1900 date system

# BIFF8 limits
MAX_ROW_COUNT = 65536
MAX_COL_COUNT = 256
MAX_FONT_SIZE = 409
MAX_FONT_RECORDS = 512
MAX_STYLE_RECORDS = 4000
MAX_FORMAT_SECTIONS = 4

# Font record values
FONT_WEIGHT_NORMAL = 400
FONT_WEIGHT_BOLD = 700
UNDERLINE_NONE = 0
UNDERLINE_SINGLE = 1
ESCAPEMENT_NONE = 0

# Colour indexes
COLOR_NORMAL = 0x7FFF
COLOR_BORDER_AUTOMATIC = 0x40
COLOR_PATTERN_AUTOMATIC = 0x41
PALETTE_OFFSET = 8
PALETTE_SIZE = 56

# Number formats
FIRST_CUSTOM_FORMAT_CODE = 164
GENERAL_FORMAT_CODE = 0

BUILTIN_FORMATS = {
    0x00: "General",
    0x01: "0",
    0x02: "0.00",
    0x03: "#,##0",
    0x04: "#,##0.00",
    0x05: '"$"#,##0_);("$"#,##0)',
    0x06: '"$"#,##0_);[Red]("$"#,##0)',
    0x07: '"$"#,##0.00_);("$"#,##0.00)',
    0x08: '"$"#,##0.00_);[Red]("$"#,##0.00)',
    0x09: "0%",
    0x0A: "0.00%",
    0x0B: "0.00E+00",
    0x0C: "# ?/?",
    0x0D: "# ??/??",
    0x0E: "m/d/yy",
    0x0F: "d-mmm-yy",
    0x10: "d-mmm",
    0x11: "mmm-yy",
    0x12: "h:mm AM/PM",
    0x13: "h:mm:ss AM/PM",
    0x14: "h:mm",
    0x15: "h:mm:ss",
    0x16: "m/d/yy h:mm",
    0x25: "#,##0_);(#,##0)",
    0x26: "#,##0_);[Red](#,##0)",
    0x27: "#,##0.00_);(#,##0.00)",
    0x28: "#,##0.00_);[Red](#,##0.00)",
    0x29: '_(* #,##0_);_(* (#,##0);_(* "-"_);_(@_)',
    0x2A: '_("$"* #,##0_);_("$"* (#,##0);_("$"* "-"_);_(@_)',
    0x2B: '_(* #,##0.00_);_(* (#,##0.00);_(* "-"??_);_(@_)',
    0x2C: '_("$"* #,##0.00_);_("$"* (#,##0.00);_("$"* "-"??_);_(@_)',
    0x2D: "mm:ss",
    0x2E: "[h]:mm:ss",
    0x2F: "mm:ss.0",
    0x30: "##0.0E+0",
    0x31: "@",
}


@enum_tools.documentation.document_enum
class Alignment(IntEnum):
    """
    Horizontal alignment of a cell.

    Values are the BIFF horizontal alignment codes stored in style records.
    """

    LEFT = 1
    """Text is left aligned."""
    CENTER = 2
    """Text is centered."""
    RIGHT = 3
    """Text is right aligned."""
    JUSTIFY = 5
    """Text is justified."""


class VerticalAlignment(IntEnum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    JUSTIFY = 3


@enum_tools.documentation.document_enum
class BorderType(IntEnum):
    """
    Line style of cell borders.

    Values are the BIFF line style codes stored in style records.
    """

    NONE = 0
    """No border line."""
    THIN = 1
    """A thin solid line."""
    MEDIUM = 2
    """A medium solid line."""
    DASHED = 3
    """A thin dashed line."""
    DOTTED = 4
    """A thin dotted line."""
    THICK = 5
    """A thick solid line."""
    DOUBLE = 6
    """A double line."""
    HAIR = 7
    """A hairline."""


@enum_tools.documentation.document_enum
class FontFamily(IntEnum):
    """
    Font families available to cell styles.

    The member name is the font name written to the document.
    """

    Arial = 0
    Times = 1
    Courier = 2
    Tahoma = 3
    Calibri = 4
    Batang = 5
    Broadway = 6
    Cambria = 7
    Castellar = 8
    Century = 9
    Fixedsys = 10
    Garamond = 11
    Georgia = 12
    Harrington = 13
    Terminal = 14
    Wingdings = 15


DEFAULT_FONT = FontFamily.Arial


class FillPattern(IntEnum):
    NONE = 0
    SOLID = 1


class CellType(IntEnum):
    EMPTY = 1
    TEXT = 2
    NUMBER = 3
    DATE = 4
    BOOL = 5
    ERROR = 6
