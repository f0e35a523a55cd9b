from typing import Dict, List, Optional

from level_analysis.defs import Color, Grid, Item, Position
from level_analysis.levels.level import Level


# Two goal rooms and one goal-less room, separated by walls.
TWO_ROOMS: List[str] = [
    "++++++++++",
    "+a0+  + B+",
    "+ A+b +  +",
    "++++++++++",
]

# Straight 4-cell corridor: its cell graph is a path.
CORRIDOR: List[str] = [
    "++++++",
    "+a   +",
    "++++++",
]

# 3x3 room surrounded by walls.
ROOM: List[str] = [
    "+++++",
    "+   +",
    "+ a +",
    "+   +",
    "+++++",
]

# No walls at all: free cells touch the grid border.
OPEN: List[str] = [
    "a  ",
    "   ",
]

SINGLE_CELL: List[str] = [
    "+++",
    "+a+",
    "+++",
]

# Documented 10-point hull example (area 5.0).
HULL_POINTS_NOTCH: List[Position] = [
    Position(0, 0), Position(0, 1),
    Position(1, 0), Position(1, 1),
    Position(2, 0), Position(2, 1), Position(2, 2),
    Position(3, 0), Position(3, 1), Position(3, 2),
]

# Documented 8-point hull example (area 3.5).
HULL_POINTS_CUT_CORNER: List[Position] = [
    Position(0, 1), Position(0, 2),
    Position(1, 0), Position(1, 1), Position(1, 2),
    Position(2, 0), Position(2, 1), Position(2, 2),
]

HULL_POINTS_STEP: List[Position] = [
    Position(0, 0), Position(0, 1), Position(0, 2), Position(0, 3),
    Position(1, 0), Position(1, 1), Position(1, 2), Position(1, 3),
    Position(2, 2), Position(2, 3),
]


def make_level(lines: List[str], colors: Optional[Dict[str, Color]] = None) -> Level:
    """Build a Level from glyph rows; short rows are padded with empty cells."""
    colors = colors or {}
    rows = len(lines)
    cols = max((len(line) for line in lines), default=0)
    level = Level(Grid.filled(rows, cols, Item.empty()))
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            color = colors.get(char.lower(), Color.BLUE)
            level.set((row, col), Item.from_char(char, color))
    return level
