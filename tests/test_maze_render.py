from colorama import Back, Style

from mazegen.maze import FullMap, mirror, render_color, render_text
from mazegen.maze.tiles import FLOOR_GLYPH, WALL_GLYPH


def small_map():
    return mirror([[True, False], [False, False]])


def test_mirror_concatenates_reversed_rows():
    full = small_map()
    assert full.walls == ((True, False, False, True), (False, False, False, False))
    assert (full.width, full.height) == (4, 2)
    assert full.cell(3, 0) is True


def test_mirror_returns_copy():
    half = [[True, False]]
    full = mirror(half)
    half[0][1] = True
    assert full.walls == ((True, False, False, True),)


def test_full_map_wall_count():
    assert small_map().wall_count() == 2
    assert FullMap(()).width == 0


def test_render_text_default_glyphs():
    out = render_text(small_map())
    assert out == (
        WALL_GLYPH + FLOOR_GLYPH * 2 + WALL_GLYPH + "\n" + FLOOR_GLYPH * 4 + "\n"
    )


def test_render_text_custom_glyphs():
    assert render_text(small_map(), wall="#", floor=".") == "#..#\n....\n"


def test_render_color_paints_cells():
    out = render_color(small_map())
    lines = out.splitlines()
    assert len(lines) == 2
    assert lines[0].count(Back.YELLOW) == 2
    assert lines[0].count(Back.BLUE) == 2
    assert lines[1].count(Style.RESET_ALL) == 4
