from typing import NamedTuple, Tuple


class Position(NamedTuple):
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


# Template characters
WALL_CHAR = "|"
FLOOR_CHAR = "."

# Default render glyphs (wall / floor) for the plain-text board dump
WALL_GLYPH = "\U0001F7E8"
FLOOR_GLYPH = "\U0001F7E6"

# Initial run directions, indexed by a random value mod 4
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))

# Box side length of a candidate block and the inner carved offsets
BLOCK_SPAN = 4
INNER_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 1), (2, 1), (1, 2), (2, 2))

__all__ = [
    "Position",
    "WALL_CHAR",
    "FLOOR_CHAR",
    "WALL_GLYPH",
    "FLOOR_GLYPH",
    "DIRECTIONS",
    "BLOCK_SPAN",
    "INNER_OFFSETS",
]
