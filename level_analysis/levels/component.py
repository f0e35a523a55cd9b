"""Connected components and their cell graphs.

A :class:`Component` is one maximal 4-connected, wall-free region of a
:class:`~level_analysis.levels.level.Level` that holds at least one goal.
Cells outside the region are replaced by walls, so a component keeps the
level's full bounding grid.

Each free cell receives a dense index in column-major order (columns outer,
rows inner). Two lookup tables are kept:

* ``position -> index``: flat vector keyed by the grid offset, ``-1`` for walls.
* ``index -> position``: ordered vector of free cells.

Both tables are persistent vectors; a component never changes after
construction. The index is the row/column of the :meth:`Component.adjacency_matrix`
and :meth:`Component.graph_laplacian` matrices consumed by the spectral
segmenter.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

import numpy as np
from numpy.typing import NDArray
from pyrsistent import pvector
from pyrsistent.typing import PVector

from level_analysis.defs import DIRECTIONS, Grid, GridKey, Item, Position
from level_analysis.defs.position import POSITION_MAX
from level_analysis.levels.level import Level
from level_analysis.types import NULL_CELL_INDEX, CellIndex

logger = logging.getLogger(__name__)

# every cell of the grid must be addressable by a Position
MAX_GRID_SIDE = POSITION_MAX + 1


class Component:
    """Immutable masked sub-grid with dense cell indexing.

    Attributes:
        grid: Item grid where every non-member cell is a wall.
    """

    __slots__ = ("grid", "_index", "_positions")

    def __init__(self, grid: Grid[Item]) -> None:
        _check_grid_size(*grid.size())
        self.grid = grid
        self._index, self._positions = _index_cells(grid)

    @classmethod
    def all(cls, level: Level) -> List["Component"]:
        """Extract every goal-holding connected region of ``level``.

        Scans in row-major order and flood fills from each unvisited non-wall
        cell with an explicit stack. Every visited cell is marked done whether
        or not its region is kept. Returns components ordered by their first
        discovered cell; an empty list when no region holds a goal.
        """
        rows, cols = level.size()
        _check_grid_size(rows, cols)
        done = Grid.filled(rows, cols, False)
        scratch = Grid.filled(rows, cols, Item.wall())
        comps: List[Component] = []

        for start in done.positions():
            if done[start]:
                continue
            if level[start].is_wall():
                done[start] = True
                continue

            contains_goal = False
            nb_cells = 0
            stack = [start]
            while stack:
                cell = stack.pop()
                if done[cell]:
                    continue
                done[cell] = True
                scratch[cell] = level[cell]
                nb_cells += 1
                contains_goal = contains_goal or level[cell].is_goal()

                for direction in DIRECTIONS:
                    row, col = cell.row + direction.row, cell.col + direction.col
                    if not (0 <= row < rows and 0 <= col < cols):
                        continue
                    if not done[(row, col)] and not level[(row, col)].is_wall():
                        stack.append(Position(row, col))

            if contains_goal:
                comps.append(cls(scratch.copy()))
            else:
                logger.debug(
                    "Dropping goal-less region of %d cells found at %s", nb_cells, start
                )
            scratch.fill(Item.wall())

        logger.debug("Extracted %d component(s) from %dx%d level", len(comps), rows, cols)
        return comps

    def size(self) -> Tuple[int, int]:
        return self.grid.size()

    def __getitem__(self, key: GridKey) -> Item:
        return self.grid[key]

    def nb_free_cells(self) -> int:
        return len(self._positions)

    def index_of(self, pos: Position) -> CellIndex:
        """Dense index of ``pos``; ``-1`` for walls and out-of-grid positions."""
        if not self.grid.contains(pos):
            return NULL_CELL_INDEX
        return self._index[self.grid.offset(pos)]

    def pos_of(self, index: CellIndex) -> Position:
        """Position of the free cell with dense index ``index``."""
        if not 0 <= index < len(self._positions):
            raise IndexError(
                f"Cell index {index} out of range for {len(self._positions)} free cells"
            )
        return self._positions[index]

    def free_cells(self) -> PVector[Position]:
        """All free cells in index order."""
        return self._positions

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """Yield the free 4-neighbours of ``pos``."""
        for direction in DIRECTIONS:
            row, col = pos.row + direction.row, pos.col + direction.col
            if not self.grid.contains((row, col)):
                continue
            if self._index[self.grid.offset((row, col))] != NULL_CELL_INDEX:
                yield Position(row, col)

    def degree(self, pos: Position) -> int:
        """Number of non-wall 4-neighbours of ``pos``."""
        return sum(1 for _ in self.neighbors(pos))

    def adjacency_matrix(self) -> NDArray[np.int64]:
        """``n x n`` count of direction vectors linking cell ``i`` to cell ``j``."""
        n = self.nb_free_cells()
        adj = np.zeros((n, n), dtype=np.int64)
        for i, pos in enumerate(self._positions):
            for neighbor in self.neighbors(pos):
                adj[i, self.index_of(neighbor)] += 1
        return adj

    def graph_laplacian(
        self, adj: NDArray[np.int64], dtype: type = np.float64
    ) -> NDArray[np.float64]:
        """Degree minus adjacency; the diagonal is read from the grid, not from ``adj``."""
        lap = -adj.astype(dtype)
        for i, pos in enumerate(self._positions):
            lap[i, i] = self.degree(pos)
        return lap

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.grid == other.grid

    def __hash__(self) -> int:
        return hash((self.grid.size(), tuple(self.grid.data)))

    def __repr__(self) -> str:
        rows, cols = self.size()
        return f"Component({rows}x{cols}, {self.nb_free_cells()} free cells)"

    def __str__(self) -> str:
        rows, cols = self.size()
        return "\n".join(
            "".join(str(self.grid[(row, col)]) for col in range(cols))
            for row in range(rows)
        )


def _check_grid_size(rows: int, cols: int) -> None:
    if rows > MAX_GRID_SIDE or cols > MAX_GRID_SIDE:
        raise ValueError(
            f"Grid {rows}x{cols} exceeds the {MAX_GRID_SIDE}x{MAX_GRID_SIDE} position range"
        )


def _index_cells(
    grid: Grid[Item],
) -> Tuple[PVector[CellIndex], PVector[Position]]:
    """Build the position->index and index->position tables (column-major)."""
    rows, cols = grid.size()
    index = [NULL_CELL_INDEX] * (rows * cols)
    positions: List[Position] = []
    for col in range(cols):
        for row in range(rows):
            if not grid[(row, col)].is_wall():
                index[row * cols + col] = len(positions)
                positions.append(Position(row, col))
    return pvector(index), pvector(positions)
