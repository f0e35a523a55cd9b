"""Position value object.

Immutable ``(row, col)`` grid coordinates restricted to the signed 8-bit
range. Positions double as direction vectors: ``p + NORTH`` is the cell above
``p`` and ``(p - q).manhattan()`` is the Manhattan distance between two cells.
"""

from dataclasses import dataclass

POSITION_MIN = -128
POSITION_MAX = 127


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (
            POSITION_MIN <= self.row <= POSITION_MAX
            and POSITION_MIN <= self.col <= POSITION_MAX
        ):
            raise OverflowError(f"Position out of 8-bit range: ({self.row}, {self.col})")

    def __add__(self, other: "Position") -> "Position":
        return Position(self.row + other.row, self.col + other.col)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.row - other.row, self.col - other.col)

    def __neg__(self) -> "Position":
        return Position(-self.row, -self.col)

    def manhattan(self) -> int:
        """Return ``|row| + |col|`` (use on a difference of two positions)."""
        return abs(self.row) + abs(self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


NULL_POSITION = Position(-1, -1)
