import logging
from typing import Callable, Tuple

from xls_wrapper import __name__ as xls_wrapper_name
from xls_wrapper.cell import Cell
from xls_wrapper.constants import BorderType, FillPattern
from xls_wrapper.font_cache import FontCache
from xls_wrapper.records import StyleRecord, copy_style
from xls_wrapper.style import Style

logger = logging.getLogger(xls_wrapper_name)
debug = logger.debug

__all__ = ["StyleApplier", "StyleCache", "StyleContext", "fingerprint"]


def fingerprint(record: StyleRecord) -> Tuple:
    """Return the key identifying the formatting of a style record.

    Every cell attribute is stored as an integer in a fixed position, so
    two records have the same key exactly when they format cells the same way.
    The font is identified by its attributes, since a document can hold
    several identical font records.
    """
    return (
        int(record.alignment),
        int(record.vertical_alignment),
        int(record.wrap),
        int(record.rotation),
        int(record.indent),
        int(record.border_top),
        int(record.border_left),
        int(record.border_right),
        int(record.border_bottom),
        int(record.top_border_color),
        int(record.left_border_color),
        int(record.right_border_color),
        int(record.bottom_border_color),
        int(record.fill_pattern),
        int(record.fill_foreground_color),
        int(record.fill_background_color),
        int(record.format_code),
        record.font.key,
    )


class StyleCache:
    """Find-or-create table of the style records in one document.

    Formatting is staged in a scratch record which is never attached to a
    cell. Finished formatting is copied into a new record that is frozen and
    shared by every cell with the same fingerprint.
    """

    def __init__(self, model: object, fonts: FontCache):
        self._model = model
        self._fonts = fonts
        self._styles = {}

        # Reuse cell styles already stored in an opened document
        for record in model.styles:
            if record.frozen and not record.is_style:
                self._styles.setdefault(fingerprint(record), record)

        self._scratch = model.create_style()
        self._default = model.create_style()

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, key: Tuple) -> bool:
        return key in self._styles

    def scratch_style(self) -> StyleRecord:
        """Return the scratch record reset to the default formatting."""
        copy_style(self._default, self._scratch, self._fonts)
        return self._scratch

    def intern(self, key: Tuple, build: Callable[[], StyleRecord]) -> StyleRecord:
        """Return the record registered for ``key``, calling ``build`` to
        create it the first time the key is seen.

        Raises
        ------
        RecordLimitError:
            If a new record is needed and the document has no room for it.
        """
        if key in self._styles:
            return self._styles[key]

        record = build()
        record.freeze()
        self._styles[key] = record
        debug("Creating style %d %s", record.index, key)
        return record


class StyleApplier:
    """Applies cell styles to cells using the font and style caches of
    one document.
    """

    def __init__(self, model: object, fonts: FontCache, styles: StyleCache):
        self._model = model
        self._fonts = fonts
        self._styles = styles

    def apply(self, cell: Cell, style: Style) -> StyleRecord:
        """Set the style record of ``cell`` to one matching ``style``.

        Any style the cell already had is replaced.

        Raises
        ------
        RecordLimitError:
            If the document cannot hold another font or style record.
        FormatError:
            If ``style.custom_format`` is malformed.
        """
        font = self._fonts.resolve_style(style)

        format_code = None
        if style.custom_format is not None:
            format_code = self._model.formats.format_code(style.custom_format)

        scratch = self._styles.scratch_style()
        if format_code is not None:
            scratch.format_code = format_code
        if style.bg_color is not None:
            scratch.fill_foreground_color = self._model.palette.color_index(style.bg_color)
            scratch.fill_pattern = FillPattern.SOLID
        scratch.alignment = style.alignment
        scratch.wrap = style.wrap_text
        scratch.border_top = border_line(style.border_top, style.border_type)
        scratch.border_left = border_line(style.border_left, style.border_type)
        scratch.border_right = border_line(style.border_right, style.border_type)
        scratch.border_bottom = border_line(style.border_bottom, style.border_type)
        scratch.font = font

        def build() -> StyleRecord:
            record = self._model.create_style()
            copy_style(scratch, record, self._fonts)
            return record

        record = self._styles.intern(fingerprint(scratch), build)
        cell.style = record
        return record


def border_line(enabled: bool, border_type: BorderType) -> int:
    """Line style of one side of a cell; enabled sides default to thin lines."""
    if not enabled:
        return int(BorderType.NONE)
    if border_type == BorderType.NONE:
        return int(BorderType.THIN)
    return int(border_type)


class StyleContext:
    """The font cache, style cache and style applier of one document.

    Each document owns its own context, so documents open at the same time
    never share records.
    """

    def __init__(self, model: object):
        self.fonts = FontCache(model)
        self.styles = StyleCache(model, self.fonts)
        self.applier = StyleApplier(model, self.fonts, self.styles)

    def apply(self, cell: Cell, style: Style) -> StyleRecord:
        return self.applier.apply(cell, style)
