"""Board templates: ``|`` is a wall, ``.`` is floor, anything else is ignored."""

from __future__ import annotations

from typing import List

from .tiles import FLOOR_CHAR, WALL_CHAR

DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 31

# Left half of the classic board: border on three sides plus the ghost-house obstacle.
DEFAULT_TEMPLATE = """
||||||||||||||||
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|.........||||||
|.........||||||
|.........||||||
|.........||||||
|.........||||||
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
|...............
||||||||||||||||
"""


class TemplateError(ValueError):
    """Raised when a template does not describe a ``width x height`` board."""


def parse_template(text: str, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> List[List[bool]]:
    """Pack the ``|``/``.`` characters of ``text`` row-major into ``walls[y][x]``.

    Raises:
        TemplateError: non-positive dimensions, or the number of board
            characters differs from ``width * height``.
    """
    if width <= 0 or height <= 0:
        raise TemplateError(f"template dimensions must be positive (got {width}x{height})")
    cells = [ch == WALL_CHAR for ch in text if ch in (WALL_CHAR, FLOOR_CHAR)]
    expected = width * height
    if len(cells) != expected:
        raise TemplateError(
            f"template has {len(cells)} board characters, expected {expected} for {width}x{height}"
        )
    return [cells[y * width:(y + 1) * width] for y in range(height)]


__all__ = ["DEFAULT_TEMPLATE", "DEFAULT_WIDTH", "DEFAULT_HEIGHT", "TemplateError", "parse_template"]
