from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


@dataclass(frozen=True)
class FullMap:
    """Finished, left-right symmetric board. ``walls[y][x]``, ``True`` = wall."""

    walls: Tuple[Tuple[bool, ...], ...]

    @property
    def width(self) -> int:
        return len(self.walls[0]) if self.walls else 0

    @property
    def height(self) -> int:
        return len(self.walls)

    def cell(self, x: int, y: int) -> bool:
        return self.walls[y][x]

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        return iter(self.walls)

    def wall_count(self) -> int:
        return sum(sum(1 for c in row if c) for row in self.walls)


def mirror(walls: Sequence[Sequence[bool]]) -> FullMap:
    """Concatenate each half row with its reverse: column ``c >= w`` is half column ``2w - 1 - c``."""
    return FullMap(tuple(tuple(row) + tuple(reversed(row)) for row in walls))


__all__ = ["FullMap", "mirror"]
