import logging
from typing import Optional, Union

from xls_wrapper import __name__ as xls_wrapper_name
from xls_wrapper.constants import (
    ESCAPEMENT_NONE,
    FONT_WEIGHT_BOLD,
    FONT_WEIGHT_NORMAL,
    UNDERLINE_NONE,
    UNDERLINE_SINGLE,
    FontFamily,
)
from xls_wrapper.records import FontRecord
from xls_wrapper.style import RGB, Style

logger = logging.getLogger(xls_wrapper_name)
debug = logger.debug

__all__ = ["FontCache"]


class FontCache:
    """Find-or-create table of the font records in one document.

    Requests for the same font attributes always return the same record,
    so each distinct font is stored in the document exactly once.
    """

    def __init__(self, model: object):
        self._model = model
        self._fonts = {}

    def __len__(self) -> int:
        return len(self._fonts)

    def resolve(  # noqa: PLR0913
        self,
        bold: bool,
        italic: bool,
        underline: bool,
        color: Optional[RGB],
        size: int,
        family: Union[FontFamily, str],
    ) -> FontRecord:
        """Return the document font with these attributes, creating it if needed.

        Parameters
        ----------
        size: int
            Font size in points. Fonts are stored and matched by height in
            twentieths of a point.

        Raises
        ------
        RecordLimitError:
            If a new font is needed and the document has no room for it.
        """
        name = family.name if isinstance(family, FontFamily) else family
        return self.resolve_attrs(
            FONT_WEIGHT_BOLD if bold else FONT_WEIGHT_NORMAL,
            self._model.palette.color_index(color),
            size * 20,
            name,
            italic,
            False,
            ESCAPEMENT_NONE,
            UNDERLINE_SINGLE if underline else UNDERLINE_NONE,
        )

    def resolve_style(self, style: Style) -> FontRecord:
        """Return the document font for a cell style."""
        return self.resolve(
            style.bold,
            style.italic,
            style.underline,
            style.font_color,
            style.font_size,
            style.font_name,
        )

    def resolve_record(self, font: FontRecord) -> FontRecord:
        """Return the font in this document with the same attributes as
        ``font``, which may belong to another document.
        """
        if font is None:
            return self._model.fonts[0]
        return self.resolve_attrs(*font.key)

    def resolve_attrs(self, *key) -> FontRecord:
        if key in self._fonts:
            return self._fonts[key]

        font = self._model.find_font(*key)
        if font is None:
            font = self._model.create_font(*key)
            debug(
                "Creating font nr %d: %s",
                len(self._model.fonts),
                ", ".join(str(x) for x in key),
            )
        self._fonts[key] = font
        return font
