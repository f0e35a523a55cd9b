# tests/unit/test_defs.py

import pytest

from level_analysis.defs import (
    DIRECTIONS,
    EAST,
    NORTH,
    NULL_POSITION,
    SOUTH,
    WEST,
    Color,
    Grid,
    Item,
    Position,
    direction_name,
)


def test_position_arithmetic() -> None:
    assert Position(1, 3) + Position(3, 4) == Position(4, 7)
    assert Position(3, 4) - Position(3, 4) == Position(0, 0)
    assert -Position(2, -5) == Position(-2, 5)
    assert (Position(3, 3) - Position(2, 1)).manhattan() == 3


def test_position_range() -> None:
    Position(-128, 127)
    with pytest.raises(OverflowError):
        Position(128, 0)
    with pytest.raises(OverflowError):
        Position(127, 0) + SOUTH


def test_null_position_and_str() -> None:
    assert NULL_POSITION == Position(-1, -1)
    assert str(Position(2, 7)) == "(2,7)"


def test_directions() -> None:
    assert DIRECTIONS == (NORTH, EAST, SOUTH, WEST)
    assert sum(DIRECTIONS, Position(0, 0)) == Position(0, 0)
    assert direction_name(WEST) == "West"
    assert direction_name(Position(1, 1)) == "?Dir?"


def test_grid_indexing() -> None:
    grid = Grid.filled(3, 3, 0)
    grid[(1, 2)] = 3
    assert grid[Position(1, 2)] == 3
    assert grid.size() == (3, 3)
    assert len(grid) == 9


def test_grid_size_not_square() -> None:
    grid = Grid.from_fn(3, 4, lambda: "x")
    assert grid.size() == (3, 4)
    assert list(grid.positions())[4] == Position(1, 0)


@pytest.mark.parametrize("key", [(3, 0), (0, 3), (-1, 0), Position(0, -1)])
def test_grid_out_of_bounds(key) -> None:
    grid = Grid.filled(3, 3, 0)
    assert not grid.contains(key)
    with pytest.raises(IndexError):
        grid[key]
    with pytest.raises(IndexError):
        grid[key] = 1


def test_grid_data_length_invariant() -> None:
    with pytest.raises(ValueError):
        Grid(2, 2, [0, 0, 0])


def test_grid_fill_and_copy() -> None:
    grid = Grid.filled(2, 2, 1)
    clone = grid.copy()
    grid.fill(5)
    assert list(grid) == [5, 5, 5, 5]
    assert list(clone) == [1, 1, 1, 1]
    assert grid != clone


def test_item_from_char() -> None:
    assert Item.from_char(" ").is_empty()
    assert Item.from_char("+").is_wall()
    agent = Item.from_char("3", Color.RED)
    assert agent.is_agent() and agent.id == 3 and agent.color is Color.RED
    box = Item.from_char("C")
    assert box.is_box() and box.id == 2
    goal = Item.from_char("c")
    assert goal.is_goal() and goal.id == 2
    assert [str(Item.from_char(c)) for c in " +7Bb"] == [" ", "+", "7", "B", "b"]


def test_item_invalid_char() -> None:
    with pytest.raises(ValueError):
        Item.from_char("#")


def test_item_compatible() -> None:
    red_agent = Item.from_char("0", Color.RED)
    assert Item.compatible(red_agent, Item.from_char("5", Color.RED))
    assert not Item.compatible(red_agent, Item.from_char("5", Color.BLUE))
    assert Item.compatible(Item.from_char("A", Color.RED), Item.from_char("a", Color.RED))
    assert not Item.compatible(Item.from_char("A", Color.RED), Item.from_char("b", Color.RED))
    assert not Item.compatible(Item.from_char("A", Color.RED), Item.from_char("a", Color.GREEN))
    assert not Item.compatible(Item.wall(), Item.wall())
    assert not Item.compatible(Item.empty(), Item.empty())


def test_color_from_name() -> None:
    assert Color.from_name("Magenta") is Color.MAGENTA
    assert Color.from_name("purple") is None
    assert Color.YELLOW.rgb == (255, 255, 0)
