"""level_analysis.defs
=======================

Aggregate import surface for the basic grid value types:

    from level_analysis.defs import Position, Grid, Item, DIRECTIONS

``Position`` doubles as a direction vector, ``Grid`` is the dense 2D store
every other module builds on, and ``Item`` describes cell contents.
"""

from .position import NULL_POSITION, Position
from .direction import DIRECTIONS, EAST, NORTH, SOUTH, WEST, Direction, direction_name
from .grid import Grid, GridKey
from .item import Color, Item

__all__ = [
    "NULL_POSITION",
    "Position",
    "DIRECTIONS",
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "Direction",
    "direction_name",
    "Grid",
    "GridKey",
    "Color",
    "Item",
]
