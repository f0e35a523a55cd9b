"""Cardinal direction vectors."""

from typing import Dict, Tuple

from level_analysis.defs.position import Position

Direction = Position

NORTH: Direction = Direction(-1, 0)
EAST: Direction = Direction(0, 1)
SOUTH: Direction = Direction(1, 0)
WEST: Direction = Direction(0, -1)

DIRECTIONS: Tuple[Direction, ...] = (NORTH, EAST, SOUTH, WEST)

_DIRECTION_NAMES: Dict[Direction, str] = {
    NORTH: "North",
    EAST: "East",
    SOUTH: "South",
    WEST: "West",
}


def direction_name(direction: Direction) -> str:
    """Human-readable name of a cardinal direction, ``"?Dir?"`` otherwise."""
    return _DIRECTION_NAMES.get(direction, "?Dir?")
