"""Text rendering of finished boards.

``render_text`` prints one glyph per tile. ``render_color`` paints each tile
as a two-space colored cell, which lines up on terminals without emoji fonts.
"""

from __future__ import annotations

from colorama import Back, Style

from .mirror import FullMap
from .tiles import FLOOR_GLYPH, WALL_GLYPH


def render_text(full_map: FullMap, wall: str = WALL_GLYPH, floor: str = FLOOR_GLYPH) -> str:
    return "".join("".join(wall if c else floor for c in row) + "\n" for row in full_map.rows())


def render_color(full_map: FullMap, wall_color: str = Back.YELLOW, floor_color: str = Back.BLUE) -> str:
    wall = f"{wall_color}  {Style.RESET_ALL}"
    floor = f"{floor_color}  {Style.RESET_ALL}"
    return render_text(full_map, wall=wall, floor=floor)


__all__ = ["render_text", "render_color"]
