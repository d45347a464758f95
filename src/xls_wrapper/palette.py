from typing import Dict, Optional

from xlrd.formatting import excel_default_palette_b8

from xls_wrapper.constants import COLOR_NORMAL, PALETTE_OFFSET, PALETTE_SIZE
from xls_wrapper.style import RGB, rgb_color

__all__ = ["Palette"]


class Palette:
    """The fixed-size colour palette of a document.

    Cells refer to colours by palette index. Arbitrary RGB colours are
    mapped to the palette entry with the same value or, failing that, the
    nearest entry.
    """

    def __init__(self, colors: Optional[Dict[int, RGB]] = None):
        self._colors = {
            PALETTE_OFFSET + i: RGB(*rgb) for i, rgb in enumerate(excel_default_palette_b8)
        }
        if colors is not None:
            for index, rgb in colors.items():
                if PALETTE_OFFSET <= index < PALETTE_OFFSET + PALETTE_SIZE and rgb is not None:
                    self._colors[index] = RGB(*rgb)

    def __getitem__(self, index: int) -> RGB:
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def find_color(self, color: RGB) -> Optional[int]:
        """Return the index of a palette entry exactly matching ``color``."""
        for index, rgb in self._colors.items():
            if rgb == color:
                return index
        return None

    def find_similar_color(self, color: RGB) -> int:
        """Return the index of the palette entry closest to ``color``."""
        best_index = None
        best_distance = None
        for index, rgb in self._colors.items():
            distance = abs(rgb.r - color.r) + abs(rgb.g - color.g) + abs(rgb.b - color.b)
            if best_distance is None or distance < best_distance:
                best_index = index
                best_distance = distance
        return best_index

    def color_index(self, color: Optional[RGB]) -> int:
        """Return the palette index to store for ``color``.

        ``None`` maps to the automatic colour.
        """
        if color is None:
            return COLOR_NORMAL
        color = rgb_color(color)
        index = self.find_color(color)
        if index is None:
            index = self.find_similar_color(color)
        return index

    def set_color(self, index: int, color: RGB) -> None:
        if not PALETTE_OFFSET <= index < PALETTE_OFFSET + PALETTE_SIZE:
            raise IndexError(f"palette index {index} out of range")
        self._colors[index] = rgb_color(color)

    def changed_colors(self) -> Dict[int, RGB]:
        """Return the entries that differ from the default palette."""
        return {
            index: rgb
            for index, rgb in self._colors.items()
            if tuple(rgb) != tuple(excel_default_palette_b8[index - PALETTE_OFFSET])
        }
