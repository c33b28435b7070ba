"""Finished-board invariant tests.

Invariants covered:
1. Left-right symmetry: cell(x, y) == cell(2w - 1 - x, y).
2. Template walls survive generation (walls are only ever added).
3. First and last rows are solid wall in both halves.
4. The left half of the finished board has no anchor left.
"""

from __future__ import annotations

import pytest

from mazegen.maze import DEFAULT_TEMPLATE, FullMap, PcgSource, generate, mirror
from mazegen.maze.debug_checks import analyze, asymmetric_cells, lost_seed_walls, remaining_anchors
from tests.maze_test_utils import is_palindrome

SEEDS = [7, 99, 12345, 292372, 730727]


@pytest.fixture(scope="module", params=SEEDS)
def board(request):
    return generate(DEFAULT_TEMPLATE, PcgSource(request.param))


def test_board_dimensions(board):
    assert board.width == 32
    assert board.height == 31


def test_symmetry(board):
    w = board.width
    for y in range(board.height):
        for x in range(w):
            assert board.cell(x, y) == board.cell(w - 1 - x, y), f"Asymmetry at {(x, y)}"
    assert asymmetric_cells(board) == []


def test_rows_are_palindromes(board):
    for y, row in enumerate(board.rows()):
        assert is_palindrome(row), f"Row {y} is not mirrored"


def test_border_rows_are_solid(board):
    assert all(board.walls[0])
    assert all(board.walls[-1])


def test_template_walls_preserved(board, seed_walls):
    for y, row in enumerate(seed_walls):
        for x, is_wall in enumerate(row):
            if is_wall:
                assert board.cell(x, y), f"Template wall lost at {(x, y)}"
    assert lost_seed_walls(seed_walls, board) == []


def test_generation_adds_walls(board, seed_walls):
    template_walls = sum(sum(row) for row in seed_walls) * 2
    assert board.wall_count() > template_walls


def test_no_anchor_left(board):
    assert remaining_anchors(board) == 0


def test_analyze_reports_clean_board(board, seed_walls):
    res = analyze(seed_walls, board)
    assert res["asymmetric_cells"] == []
    assert res["lost_seed_walls"] == []
    assert res["remaining_anchors"] == 0
    assert res["wall_tiles"] == board.wall_count()


def test_analyze_flags_broken_board(seed_walls):
    rows = [list(row) for row in mirror(seed_walls).rows()]
    rows[0][0] = False  # punch the border on the left only
    broken = FullMap(tuple(tuple(r) for r in rows))
    assert (0, 0) in asymmetric_cells(broken)
    assert lost_seed_walls(seed_walls, broken) == [(0, 0)]
    # untouched template still has room for blocks
    assert remaining_anchors(broken) > 0
