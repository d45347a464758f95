from collections import namedtuple
from dataclasses import dataclass
from typing import Optional, Union

from xls_wrapper.constants import (
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    MAX_FONT_SIZE,
    Alignment,
    BorderType,
    FontFamily,
)

__all__ = ["RGB", "Style"]

RGB = namedtuple("RGB", ["r", "g", "b"])


@dataclass(frozen=True)
class Style:
    """Formatting to apply to a cell.

    Styles are plain values: two styles with the same attributes are equal
    and are always stored as the same style record in a document.

    .. code-block:: python

        heading = Style(bold=True, font_size=12, bg_color=RGB(255, 255, 0))
        workbook.apply_formatting(1, heading)

    Parameters
    ----------
    bold: bool, optional, default: False
        ``True`` if the cell font is bold
    italic: bool, optional, default: False
        ``True`` if the cell font is italic
    underline: bool, optional, default: False
        ``True`` if the cell font is underlined
    font_name: FontFamily | str, optional, default: FontFamily.Arial
        Font family
    font_size: int, optional, default: 10
        Font size in points; sizes above 409 are reduced to 409
    font_color: RGB, optional
        Font color, or ``None`` for the automatic color
    bg_color: RGB, optional
        Solid background color, or ``None`` for no fill
    wrap_text: bool, optional, default: False
        ``True`` if text wrapping is enabled
    alignment: Alignment | str, optional, default: Alignment.LEFT
        Horizontal alignment
    border_top, border_left, border_right, border_bottom: bool, optional
        ``True`` to draw a border on that side of the cell
    border_type: BorderType | str, optional, default: BorderType.NONE
        Line style used for every enabled border
    custom_format: str, optional
        Number format pattern such as ``"0.00%"``

    Raises
    ------
    TypeError:
        If arguments do not match the specified type.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    font_name: FontFamily = DEFAULT_FONT
    font_size: int = DEFAULT_FONT_SIZE
    font_color: Optional[RGB] = None
    bg_color: Optional[RGB] = None
    wrap_text: bool = False
    alignment: Alignment = Alignment.LEFT
    border_top: bool = False
    border_left: bool = False
    border_right: bool = False
    border_bottom: bool = False
    border_type: BorderType = BorderType.NONE
    custom_format: Optional[str] = None

    def __post_init__(self):
        for attr in [
            "bold",
            "italic",
            "underline",
            "wrap_text",
            "border_top",
            "border_left",
            "border_right",
            "border_bottom",
        ]:
            if not isinstance(getattr(self, attr), bool):
                msg = f"{attr} argument must be boolean"
                raise TypeError(msg)

        if isinstance(self.font_size, bool) or not isinstance(self.font_size, int):
            msg = "size must be an integer number of points"
            raise TypeError(msg)
        if self.font_size < 1:
            msg = "size must be at least 1 point"
            raise TypeError(msg)
        if self.custom_format is not None and not isinstance(self.custom_format, str):
            msg = "custom format must be a string"
            raise TypeError(msg)

        # Frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "font_size", min(self.font_size, MAX_FONT_SIZE))
        object.__setattr__(self, "font_name", enum_value(FontFamily, self.font_name, "font"))
        object.__setattr__(self, "alignment", enum_value(Alignment, self.alignment, "alignment"))
        object.__setattr__(
            self, "border_type", enum_value(BorderType, self.border_type, "border type")
        )
        object.__setattr__(self, "font_color", rgb_color(self.font_color))
        object.__setattr__(self, "bg_color", rgb_color(self.bg_color))

    def defines_font(self) -> bool:
        """bool: ``True`` if the style uses anything other than the default font."""
        return (
            self.bold
            or self.italic
            or self.underline
            or self.font_name != DEFAULT_FONT
            or self.font_size != DEFAULT_FONT_SIZE
        )


def enum_value(enum_class, value: Union[int, str], description: str):
    """Convert a name or integer into a member of ``enum_class``."""
    if isinstance(value, enum_class):
        return value
    if isinstance(value, str):
        for member in enum_class:
            if member.name.lower() == value.lower():
                return member
        msg = f"invalid {description} '{value}'"
        raise TypeError(msg)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_class(value)
        except ValueError:
            msg = f"invalid {description} '{value}'"
            raise TypeError(msg) from None
    msg = f"invalid {description} '{value}'"
    raise TypeError(msg)


def rgb_color(color) -> RGB:
    """Raise a TypeError if a color is not a valid RGB value."""
    if color is None:
        return None
    if isinstance(color, tuple):
        if not (
            len(color) == 3
            and all(isinstance(x, int) and not isinstance(x, bool) for x in color)
            and all(0 <= x <= 255 for x in color)
        ):
            msg = "RGB color must be an RGB or a tuple of 3 integers"
            raise TypeError(msg)
        return color if isinstance(color, RGB) else RGB(*color)
    msg = "RGB color must be an RGB or a tuple of 3 integers"
    raise TypeError(msg)
