"""Half-width working grid for the maze generator.

The grid owns the wall bitmap (``walls[y][x]``, ``True`` = wall) plus the
scratch state rebuilt before every placement run:

    * ``free_positions``: anchors where a new 4x4 block still fits.
    * ``connections``: destination anchor -> anchors that get filled with it.

Walls are only ever added. The generator is driven by ``generate_walls`` which
calls ``add_wall`` until no anchor is left; the result is mirrored into a
``FullMap`` by :func:`mazegen.maze.mirror.mirror`.
"""

from __future__ import annotations

import time
from typing import Dict, List, Sequence

from . import connections as connections_mod
from . import placer
from .metrics import init_metrics
from .rng import RandomSource, make_source
from .template import DEFAULT_HEIGHT, DEFAULT_TEMPLATE, DEFAULT_WIDTH, TemplateError, parse_template
from .tiles import BLOCK_SPAN, INNER_OFFSETS, Position


class HalfGrid:
    def __init__(
        self,
        walls: Sequence[Sequence[bool]],
        rng: RandomSource | None = None,
        *,
        enable_metrics: bool = True,
    ):
        if not walls or not walls[0]:
            raise TemplateError("wall matrix must have at least one row and one column")
        width = len(walls[0])
        if any(len(row) != width for row in walls):
            raise TemplateError(f"wall matrix rows must all have width {width}")
        self.width = width
        self.height = len(walls)
        # Own copy; callers keep their matrix
        self.walls: List[List[bool]] = [[bool(c) for c in row] for row in walls]
        self.rng = rng if rng is not None else make_source()
        self.free_positions: List[Position] = []
        self._free_set: frozenset = frozenset()
        self.connections: Dict[Position, List[Position]] = {}
        self.last_anchor: Position | None = None
        self.metrics: Dict[str, int | float] = init_metrics() if enable_metrics else {}
        if self.metrics:
            self.metrics['wall_tiles_initial'] = self.wall_count()

    @classmethod
    def from_template(
        cls,
        template: str = DEFAULT_TEMPLATE,
        rng: RandomSource | None = None,
        *,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        enable_metrics: bool = True,
    ) -> "HalfGrid":
        return cls(parse_template(template, width, height), rng, enable_metrics=enable_metrics)

    def get_random(self) -> int:
        return self.rng.next()

    # ------------------------------------------------------------------
    # Geometry predicates
    # ------------------------------------------------------------------
    def is_valid(self, p: Position) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def is_empty(self, p: Position) -> bool:
        return self.is_valid(p) and not self.walls[p.y][p.x]

    def is_wall(self, p: Position) -> bool:
        return self.is_valid(p) and self.walls[p.y][p.x]

    def can_fit_new_block(self, p: Position) -> bool:
        last = BLOCK_SPAN - 1
        if not self.is_valid(p) or not self.is_valid(p.offset(last, last)):
            return False
        return all(
            not self.walls[y][x]
            for y in range(p.y, p.y + BLOCK_SPAN)
            for x in range(p.x, p.x + BLOCK_SPAN)
        )

    def is_wall_block_filled(self, p: Position) -> bool:
        return all(self.is_wall(p.offset(dx, dy)) for dx, dy in INNER_OFFSETS)

    def has_free_position(self, p: Position) -> bool:
        return p in self._free_set

    def wall_count(self) -> int:
        return sum(sum(1 for c in row if c) for row in self.walls)

    # ------------------------------------------------------------------
    # Per-run derived state
    # ------------------------------------------------------------------
    def collect_valid_starting_positions(self) -> None:
        self.free_positions = connections_mod.collect_valid_starting_positions(self)
        self._free_set = frozenset(self.free_positions)

    def add_connection(self, pos: Position, dx: int, dy: int) -> None:
        connections_mod.add_connection(self.connections, self._free_set, pos, dx, dy)

    def collect_connections(self) -> None:
        self.connections = connections_mod.collect_connections(self, self.free_positions)

    # ------------------------------------------------------------------
    # Carving
    # ------------------------------------------------------------------
    def add_wall_tile(self, p: Position) -> None:
        if self.is_valid(p):
            self.walls[p.y][p.x] = True

    def add_wall_block(self, p: Position) -> None:
        for dx, dy in INNER_OFFSETS:
            self.add_wall_tile(p.offset(dx, dy))

    def expand_wall(self, p: Position) -> int:
        return placer.expand_wall(self, p)

    def add_wall(self) -> bool:
        return placer.add_wall(self)

    def generate_walls(self) -> int:
        """Run ``add_wall`` until the grid is saturated; returns the number of runs."""
        start = time.perf_counter()
        runs = 0
        while self.add_wall():
            runs += 1
        if self.metrics:
            self.metrics['wall_tiles_final'] = self.wall_count()
            self.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000.0, 3)
        return runs

    def snapshot(self) -> List[List[bool]]:
        return [list(row) for row in self.walls]


__all__ = ["HalfGrid"]
