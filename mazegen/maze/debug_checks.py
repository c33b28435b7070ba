"""Structural checks over a finished board, shared by diagnostics and tests."""
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .grid import HalfGrid
from .mirror import FullMap, mirror
from .rng import PcgSource
from .template import DEFAULT_TEMPLATE, parse_template


def asymmetric_cells(full: FullMap) -> List[Tuple[int, int]]:
    w = full.width
    return [
        (x, y)
        for y in range(full.height)
        for x in range(w // 2)
        if full.cell(x, y) != full.cell(w - 1 - x, y)
    ]


def lost_seed_walls(seed_walls: Sequence[Sequence[bool]], full: FullMap) -> List[Tuple[int, int]]:
    """Template walls (left half) that are floor in the finished board."""
    return [
        (x, y)
        for y, row in enumerate(seed_walls)
        for x, is_wall in enumerate(row)
        if is_wall and not full.cell(x, y)
    ]


def remaining_anchors(full: FullMap) -> int:
    """Anchors still free in the left half; zero for a finished board."""
    half = [list(row[: full.width // 2]) for row in full.rows()]
    grid = HalfGrid(half, enable_metrics=False)
    grid.collect_valid_starting_positions()
    return len(grid.free_positions)


def analyze(seed_walls: Sequence[Sequence[bool]], full: FullMap) -> Dict[str, Any]:
    return {
        "asymmetric_cells": asymmetric_cells(full),
        "lost_seed_walls": lost_seed_walls(seed_walls, full),
        "remaining_anchors": remaining_anchors(full),
        "wall_tiles": full.wall_count(),
    }


def check_seed(seed: int) -> Dict[str, Any]:
    """Generate the default board for ``seed`` and summarise its issue counts.

    Module-level so process pools can pickle it by reference.
    """
    seed_walls = parse_template(DEFAULT_TEMPLATE)
    grid = HalfGrid(seed_walls, PcgSource(seed), enable_metrics=False)
    grid.generate_walls()
    res = analyze(seed_walls, mirror(grid.walls))
    issues = {
        "asymmetric_cells": len(res["asymmetric_cells"]),
        "lost_seed_walls": len(res["lost_seed_walls"]),
        "remaining_anchors": res["remaining_anchors"],
    }
    return {"seed": seed, "wall_tiles": res["wall_tiles"], "issues": issues, "ok": all(v == 0 for v in issues.values())}


__all__ = ["analyze", "check_seed", "asymmetric_cells", "lost_seed_walls", "remaining_anchors"]
