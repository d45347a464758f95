from dataclasses import dataclass, field, fields
from typing import Any, Tuple

from xls_wrapper.constants import (
    COLOR_BORDER_AUTOMATIC,
    COLOR_NORMAL,
    COLOR_PATTERN_AUTOMATIC,
    ESCAPEMENT_NONE,
    FONT_WEIGHT_BOLD,
    FONT_WEIGHT_NORMAL,
    GENERAL_FORMAT_CODE,
    UNDERLINE_NONE,
    FillPattern,
    VerticalAlignment,
)
from xls_wrapper.exceptions import UnsupportedError

__all__ = ["FontRecord", "StyleRecord"]


@dataclass(frozen=True)
class FontRecord:
    """A font record owned by a document.

    Font records are identified by their attributes; ``index`` is the
    position of the record in the document's font table.
    """

    weight: int = FONT_WEIGHT_NORMAL
    color: int = COLOR_NORMAL
    height: int = 200
    name: str = "Arial"
    italic: bool = False
    struck_out: bool = False
    escapement: int = ESCAPEMENT_NONE
    underline: int = UNDERLINE_NONE
    index: int = field(default=None, compare=False)

    @property
    def key(self) -> Tuple:
        """Tuple: the attributes that identify the font."""
        return (
            self.weight,
            self.color,
            self.height,
            self.name,
            self.italic,
            self.struck_out,
            self.escapement,
            self.underline,
        )

    @property
    def bold(self) -> bool:
        return self.weight >= FONT_WEIGHT_BOLD


# Attributes transferred by copy_style; the font is handled separately
STYLE_ATTRS = [
    "alignment",
    "vertical_alignment",
    "wrap",
    "rotation",
    "indent",
    "border_top",
    "border_left",
    "border_right",
    "border_bottom",
    "top_border_color",
    "left_border_color",
    "right_border_color",
    "bottom_border_color",
    "fill_pattern",
    "fill_foreground_color",
    "fill_background_color",
    "format_code",
]


@dataclass(eq=False)
class StyleRecord:
    """A cell style (XF) record owned by a document.

    Records compare by identity. Once a record has been registered with a
    style cache it is frozen and cannot be changed, since every cell using
    it would change with it.
    """

    font: FontRecord = None
    alignment: int = 0
    vertical_alignment: int = VerticalAlignment.BOTTOM
    wrap: bool = False
    rotation: int = 0
    indent: int = 0
    border_top: int = 0
    border_left: int = 0
    border_right: int = 0
    border_bottom: int = 0
    top_border_color: int = COLOR_BORDER_AUTOMATIC
    left_border_color: int = COLOR_BORDER_AUTOMATIC
    right_border_color: int = COLOR_BORDER_AUTOMATIC
    bottom_border_color: int = COLOR_BORDER_AUTOMATIC
    fill_pattern: int = FillPattern.NONE
    fill_foreground_color: int = COLOR_PATTERN_AUTOMATIC
    fill_background_color: int = COLOR_PATTERN_AUTOMATIC
    format_code: int = GENERAL_FORMAT_CODE
    index: int = None
    is_style: bool = False
    _frozen: bool = field(default=False, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen", False):
            msg = f"style record {self.index} is registered and cannot be modified"
            raise UnsupportedError(msg)
        self.__dict__[name] = value

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def attrs(self) -> dict:
        """Dict: every formatting attribute of the record except the font."""
        return {x.name: getattr(self, x.name) for x in fields(self) if x.name in STYLE_ATTRS}


def copy_style(src: StyleRecord, dst: StyleRecord, fonts: object) -> None:
    """Copy every formatting attribute of ``src`` into ``dst``.

    The font is resolved through ``fonts``, the font cache of the document
    that owns ``dst``, so records can be copied between documents.
    """
    for attr in STYLE_ATTRS:
        setattr(dst, attr, getattr(src, attr))
    dst.font = fonts.resolve_record(src.font)
