import pytest
from pytest_check import check

from xls_wrapper import RGB
from xls_wrapper.constants import COLOR_NORMAL
from xls_wrapper.palette import Palette


def test_default_palette():
    palette = Palette()
    with check:
        assert len(palette) == 56
        assert palette[8] == RGB(0, 0, 0)
        assert palette[9] == RGB(255, 255, 255)
        assert palette[10] == RGB(255, 0, 0)
        assert palette.changed_colors() == {}


def test_color_index():
    palette = Palette()
    with check:
        assert palette.color_index(None) == COLOR_NORMAL
        assert palette.color_index(RGB(255, 0, 0)) == 10
        assert palette.color_index((0, 0, 0)) == 8
        assert palette.color_index(RGB(254, 1, 1)) == 10
        assert palette.find_color(RGB(1, 2, 3)) is None
        assert palette.find_similar_color(RGB(1, 2, 3)) == 8


def test_set_color():
    palette = Palette()
    palette.set_color(63, RGB(1, 2, 3))
    with check:
        assert palette.find_color(RGB(1, 2, 3)) == 63
        assert palette.changed_colors() == {63: RGB(1, 2, 3)}
    with pytest.raises(IndexError):
        palette.set_color(64, RGB(0, 0, 0))
    with pytest.raises(TypeError):
        palette.set_color(20, "red")


def test_loaded_palette():
    palette = Palette({8: (10, 20, 30), 0: (1, 1, 1), 64: None})
    with check:
        assert palette[8] == RGB(10, 20, 30)
        assert 0 not in palette.changed_colors()
        assert palette.changed_colors() == {8: RGB(10, 20, 30)}
