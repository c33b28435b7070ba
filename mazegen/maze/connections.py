"""Connection graph derivations for the wall placer.

Both functions are pure with respect to the grid: they read the current wall
bitmap and return fresh structures. The grid rebuilds them before every run
instead of patching them after each carve.

A connection ``dest -> [src, ...]`` reads "once a block is carved at ``dest``,
the anchors ``src`` should be filled as well". Sources are anchors that sit
between ``dest`` and an existing wall, so filling them keeps the walls from
leaving one- or two-tile slivers of floor behind.
"""
from __future__ import annotations

from typing import Dict, List, Set, TYPE_CHECKING

from .tiles import BLOCK_SPAN, Position

if TYPE_CHECKING:  # pragma: no cover
    from .grid import HalfGrid

Connections = Dict[Position, List[Position]]


def collect_valid_starting_positions(grid: "HalfGrid") -> List[Position]:
    """Every anchor whose 4x4 box is in bounds and empty, row-major with x fastest."""
    return [
        Position(x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if grid.can_fit_new_block(Position(x, y))
    ]


def add_connection(connections: Connections, free: Set[Position], pos: Position, dx: int, dy: int) -> None:
    """Append ``pos`` to the adjacency list of each free anchor reachable from it along ``(dx, dy)``.

    Straight neighbours one and two steps away are always tried. The diagonal
    neighbours are only tried when the orthogonal anchor beside ``pos`` is not
    free, and the two-step diagonals only when the one-step diagonal is not
    free, so a free run of anchors is not wired twice.
    """
    if pos not in free:
        return

    def connect(dest: Position) -> None:
        if dest in free:
            connections.setdefault(dest, []).append(pos)

    x, y = pos
    diag_minus = Position(x + dx - dy, y + dy - dx)
    diag_plus = Position(x + dx + dy, y + dy + dx)

    connect(Position(x + dx, y + dy))
    connect(Position(x + 2 * dx, y + 2 * dy))
    if Position(x - dy, y - dx) not in free:
        connect(diag_minus)
    if Position(x + dy, y + dx) not in free:
        connect(diag_plus)
    if diag_minus not in free:
        connect(Position(x + 2 * dx - dy, y + 2 * dy - dx))
    if diag_plus not in free:
        connect(Position(x + 2 * dx + dy, y + 2 * dy + dx))


def collect_connections(grid: "HalfGrid", free_positions: List[Position]) -> Connections:
    """Wire each free anchor away from any wall touching the opposite side of its box.

        |  c  |  c |  c |  c |
      a | x,y |    |    |    | b |
      a |     |    |    |    | b |
      a |     |    |    |    | b |
      a |     |    |    |    | b |
        |  d  |  d |  d |  d |

    A wall in column ``a`` wires ``(1, 0)``, ``b`` wires ``(-1, 0)``, row ``c``
    wires ``(0, 1)`` and row ``d`` wires ``(0, -1)``.
    """
    free = set(free_positions)
    connections: Connections = {}
    edge = range(BLOCK_SPAN)
    for pos in free_positions:
        x, y = pos
        if any(grid.is_wall(Position(x - 1, y + i)) for i in edge):
            add_connection(connections, free, pos, 1, 0)
        if any(grid.is_wall(Position(x + BLOCK_SPAN, y + i)) for i in edge):
            add_connection(connections, free, pos, -1, 0)
        if any(grid.is_wall(Position(x + i, y - 1)) for i in edge):
            add_connection(connections, free, pos, 0, 1)
        if any(grid.is_wall(Position(x + i, y + BLOCK_SPAN)) for i in edge):
            add_connection(connections, free, pos, 0, -1)
    return connections


__all__ = ["Connections", "collect_valid_starting_positions", "add_connection", "collect_connections"]
