"""Wall placement runs.

A run picks a random free anchor, carves its inner block, floods the
connection graph from it, then walks outward along a random axis carving more
blocks until the run reaches its block budget or runs out of room. About a
third of runs get a doubled budget and are forced to turn half-way, which is
what produces the L and T shaped walls of the classic board.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging_utils import get_logger
from .tiles import DIRECTIONS, Position

if TYPE_CHECKING:  # pragma: no cover
    from .grid import HalfGrid

log = get_logger("maze.placer")

BASE_BLOCKS = 4
TURN_BLOCKS = 4
EXTEND_PERCENT = 35  # value % 100 <= 35, i.e. 36 in 100 runs


def _bump(grid: "HalfGrid", key: str, amount: int = 1) -> None:
    if grid.metrics:
        grid.metrics[key] += amount


def expand_wall(grid: "HalfGrid", start: Position) -> int:
    """Fill every anchor reachable from ``start`` through ``grid.connections``.

    Depth-first, each anchor expanded once. Returns the number of blocks that
    were not already filled and got carved here.
    """
    count = 0
    visited = {start}
    stack = [iter(grid.connections.get(start, ()))]
    while stack:
        pos = next(stack[-1], None)
        if pos is None:
            stack.pop()
            continue
        if not grid.is_wall_block_filled(pos):
            grid.add_wall_block(pos)
            count += 1
        if pos not in visited:
            visited.add(pos)
            stack.append(iter(grid.connections.get(pos, ())))
    _bump(grid, 'flood_blocks', count)
    return count


def add_wall(grid: "HalfGrid") -> bool:
    """Place one run of blocks. Returns False once no anchor is left."""
    grid.collect_valid_starting_positions()
    grid.collect_connections()
    if not grid.free_positions:
        return False

    p = grid.free_positions[grid.get_random() % len(grid.free_positions)]
    grid.last_anchor = p
    grid.add_wall_block(p)
    count = expand_wall(grid, p)

    max_blocks = BASE_BLOCKS
    turn_blocks = max_blocks
    extended = (grid.get_random() % 100) <= EXTEND_PERCENT
    if extended:
        turn_blocks = TURN_BLOCKS
        max_blocks += turn_blocks

    orig = DIRECTIONS[grid.get_random() % len(DIRECTIONS)]
    dx, dy = orig
    turned = False
    turns = 0
    i = 0
    while count < max_blocks:
        p0 = p.offset(dx * i, dy * i)
        if (not turned and count >= turn_blocks) or not grid.has_free_position(p0):
            turned = True
            dx, dy = -dy, dx
            turns += 1
            i = 1
            if (dx, dy) == orig:
                break
            continue
        if not grid.is_wall_block_filled(p0):
            grid.add_wall_block(p0)
            count += 1 + expand_wall(grid, p0)
        i += 1

    _bump(grid, 'runs')
    _bump(grid, 'blocks_carved', 1 + count)
    _bump(grid, 'turns', turns)
    if extended:
        _bump(grid, 'extended_runs')
    log.debug(
        event="wall_run",
        anchor=f"{p.x},{p.y}",
        free=len(grid.free_positions),
        blocks=1 + count,
        extended=extended,
        turns=turns,
    )
    return True


__all__ = ["expand_wall", "add_wall"]
