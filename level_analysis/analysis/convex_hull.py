"""Convex hull of grid positions.

Hull construction is a Graham scan specialised for integer grids:

* The anchor is the point with the minimum column, lowest row first.
* Points sharing the anchor's column come next, sorted by row.
* The remaining points follow in descending order of the cotangent
  ``drow / dcol`` relative to the anchor. ``dcol`` is strictly positive for
  them, so the cotangent is monotonic over the half plane and no ``atan2``
  is needed. Points on one ray from the anchor are ordered nearest first.
* The anchor is appended to close the scan; non left turns (signed area
  ``<= 0``) are discarded.

Coordinates are read as ``x = row`` and ``y = col``. The resulting polygon
is counter-clockwise in that frame and :meth:`ConvexHull.area` is positive.

Cell containment treats a position as a unit cell: the cell overlaps the
hull if any of its four corners lies *strictly* inside. Points on the
boundary are outside.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Sequence, Tuple

from level_analysis.config import DEFAULT_HULL_EPSILON
from level_analysis.defs import Position
from level_analysis.levels.component import Component

CELL_CORNERS: Tuple[Position, ...] = (
    Position(0, 0),
    Position(1, 0),
    Position(0, 1),
    Position(1, 1),
)


class ConvexHull:
    """Counter-clockwise circular sequence of hull vertices.

    Attributes:
        vertices: Hull vertices, the closing edge runs from the last back to
            the first.
        epsilon: Minimum signed area for a point to count as strictly inside.
    """

    __slots__ = ("vertices", "epsilon")

    def __init__(
        self, points: Iterable[Position], epsilon: float = DEFAULT_HULL_EPSILON
    ) -> None:
        unique = list(dict.fromkeys(points))
        if len(unique) < 2:
            raise ValueError(
                f"Convex hull needs at least 2 distinct points, got {len(unique)}"
            )
        self.vertices: Tuple[Position, ...] = tuple(graham_scan(unique))
        self.epsilon = epsilon

    @classmethod
    def of_component(
        cls, comp: Component, epsilon: float = DEFAULT_HULL_EPSILON
    ) -> "ConvexHull":
        """Hull of every free cell of ``comp``."""
        return cls(comp.free_cells(), epsilon)

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, index: int) -> Position:
        return self.vertices[index]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.vertices)

    def edges(self) -> Iterator[Tuple[Position, Position]]:
        """Yield consecutive vertex pairs, closing edge included."""
        n = len(self.vertices)
        for i in range(n):
            yield self.vertices[i], self.vertices[(i + 1) % n]

    def contains_point(self, x: float, y: float) -> bool:
        """True if ``(x, y)`` is strictly left of every hull edge."""
        for p, q in self.edges():
            if signed_area(p.row, p.col, q.row, q.col, x, y) <= self.epsilon:
                return False
        return True

    def contains_cell(self, pos: Position) -> bool:
        """True if any corner of the unit cell at ``pos`` is strictly inside."""
        return any(
            self.contains_point(pos.row + corner.row, pos.col + corner.col)
            for corner in CELL_CORNERS
        )

    def area(self) -> float:
        """Shoelace area; positive for the counter-clockwise hull."""
        total = 0.0
        for p, q in self.edges():
            total += (p.row - q.row) * (p.col + q.col) / 2.0
        return total

    def __repr__(self) -> str:
        return f"ConvexHull([{', '.join(str(v) for v in self.vertices)}])"


def signed_area(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> float:
    """Signed area of the triangle; positive for a left turn ``1 -> 2 -> 3``."""
    return 0.5 * ((x2 - x1) * (y3 - y2) - (y2 - y1) * (x3 - x2))


def _turn(p1: Position, p2: Position, p3: Position) -> float:
    return signed_area(p1.row, p1.col, p2.row, p2.col, p3.row, p3.col)


def graham_scan(points: Sequence[Position]) -> List[Position]:
    """Return the hull vertices of distinct ``points`` (see module docstring)."""
    points = list(points)

    # anchor is the top of the leftmost column: the scan starts from it
    min_i = min(range(len(points)), key=lambda i: (points[i].col, points[i].row))
    points[0], points[min_i] = points[min_i], points[0]
    anchor = points[0]

    # points on the anchor's column first
    k = 1
    for i in range(1, len(points)):
        if points[i].col == anchor.col:
            points[i], points[k] = points[k], points[i]
            k += 1
    points[:k] = sorted(points[:k], key=lambda p: p.row)

    def cotangent(p: Position) -> float:
        drow, dcol = p.row - anchor.row, p.col - anchor.col
        cot = drow / dcol
        if not math.isfinite(cot):
            raise ValueError(f"Unexpected non-finite polar order for {p}")
        return cot

    def distance(p: Position) -> int:
        return abs(p.row - anchor.row) + abs(p.col - anchor.col)

    # points on one ray from the anchor are visited nearest first
    points[k:] = sorted(points[k:], key=lambda p: (-cotangent(p), distance(p)))
    points.append(anchor)

    i, m = 2, 1
    while i < len(points):
        while _turn(points[m - 1], points[m], points[i]) <= 0:
            if m > 1:
                m -= 1
            elif i < len(points) - 1:
                points[i], points[m] = points[m], points[i]
                i += 1
            else:
                break
        m += 1
        points[i], points[m] = points[m], points[i]
        i += 1

    return points[:m]
