import pytest

from mazegen.maze import HalfGrid, TemplateError, parse_template
from mazegen.maze.template import DEFAULT_HEIGHT, DEFAULT_TEMPLATE, DEFAULT_WIDTH


def test_default_template_shape(seed_walls):
    assert len(seed_walls) == DEFAULT_HEIGHT == 31
    assert all(len(row) == DEFAULT_WIDTH == 16 for row in seed_walls)


def test_default_template_border_and_obstacle(seed_walls):
    assert all(seed_walls[0]) and all(seed_walls[-1])
    assert all(row[0] for row in seed_walls)
    # Right edge of the half board is open (it meets its mirror image)
    assert not any(row[-1] for row in seed_walls[1:12])
    for y in range(12, 17):
        assert seed_walls[y] == [True] + [False] * 9 + [True] * 6


def test_parse_ignores_other_characters():
    walls = parse_template(" | x.\n\t. |  ", width=2, height=2)
    assert walls == [[True, False], [False, True]]


@pytest.mark.parametrize("text", ["|||", "|||||", ""])
def test_parse_rejects_wrong_count(text):
    with pytest.raises(TemplateError) as exc:
        parse_template(text, width=2, height=2)
    assert "expected 4" in str(exc.value)
    assert "2x2" in str(exc.value)


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 3)])
def test_parse_rejects_non_positive_dimensions(width, height):
    with pytest.raises(TemplateError):
        parse_template("||||", width=width, height=height)


def test_template_error_is_value_error():
    assert issubclass(TemplateError, ValueError)


def test_from_template_rejects_mismatched_dimensions():
    with pytest.raises(TemplateError):
        HalfGrid.from_template(DEFAULT_TEMPLATE, width=15, height=31)


@pytest.mark.parametrize("walls", [[], [[]], [[True, False], [True]]])
def test_half_grid_rejects_malformed_matrix(walls):
    with pytest.raises(TemplateError):
        HalfGrid(walls)


def test_half_grid_copies_input_matrix():
    walls = [[False] * 4 for _ in range(4)]
    grid = HalfGrid(walls)
    grid.walls[0][0] = True
    assert walls[0][0] is False
