"""Spectral segmentation of a component into regions.

The free cells of a :class:`~level_analysis.levels.component.Component` form
a graph (4-neighbourhood). The eigenvector of its Laplacian associated with
the second smallest eigenvalue, the *Fiedler vector*, orders cells along the
dominant connectivity axis of the component. Binning the Fiedler values into
``N`` equal-width slices yields ``N`` regions.

Binning formula, for a free cell with Fiedler value ``v``::

    region = floor(((v - min) / (max - min)) * N - 0.5)

The raw formula maps the cell holding the minimum to ``-1``, the same value
as the wall marker, while the maximum lands on ``N - 1``. ``Regions.build``
clamps ids into ``[0, N)`` unless ``clamp=False`` is passed, in which case the
raw values are kept bit-for-bit.

Eigenvectors are only defined up to sign, and a repeated second eigenvalue
makes the choice of Fiedler vector solver dependent. Labels are therefore
stable only up to mirroring, and unstable when the eigenvalue gap vanishes
(a warning is logged in that case).
"""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import Deque, Iterable, List, Tuple

import numpy as np
from numpy.typing import NDArray
from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from level_analysis.config import DEFAULT_EIGEN_GAP_TOLERANCE
from level_analysis.defs import DIRECTIONS, Grid, GridKey, Position
from level_analysis.levels.component import Component
from level_analysis.types import NULL_REGION_ID, EigenSolver, RegionId
from level_analysis.utils.linalg import sorted_eigenpairs, symmetric_eigen

logger = logging.getLogger(__name__)

UNREACHED_DISTANCE = 1 << 12


class Regions:
    """Per-cell region ids of one component.

    Attributes:
        grid: Region id per cell, ``NULL_REGION_ID`` for walls.
        nb_regions: Requested number of regions.
        cells: Labelled free cells in component index order. A free cell may
            carry ``-1`` when built with ``clamp=False``, so membership is
            read from here rather than from the grid values.
    """

    __slots__ = ("grid", "nb_regions", "cells", "_cell_set")

    def __init__(
        self, grid: Grid[RegionId], nb_regions: int, cells: Iterable[Position]
    ) -> None:
        self.grid = grid
        self.nb_regions = nb_regions
        self.cells: PVector[Position] = pvector(cells)
        self._cell_set: PSet[Position] = pset(self.cells)

    @classmethod
    def build(
        cls,
        comp: Component,
        nb_regions: int,
        clamp: bool = True,
        solver: EigenSolver = symmetric_eigen,
        gap_tolerance: float = DEFAULT_EIGEN_GAP_TOLERANCE,
    ) -> "Regions":
        """Segment ``comp`` into ``nb_regions`` spectral regions.

        Raises:
            ValueError: ``nb_regions < 1`` or the component has fewer than two
                free cells (no Fiedler vector exists).
        """
        if nb_regions < 1:
            raise ValueError(f"nb_regions must be >= 1, got {nb_regions}")

        fiedler = fiedler_vector(comp, solver, gap_tolerance)
        fiedler_min = float(fiedler.min())
        fiedler_max = float(fiedler.max())
        fiedler_dst = fiedler_max - fiedler_min
        logger.debug("Fiedler range: min=%g, max=%g", fiedler_min, fiedler_max)
        if not fiedler_dst > 0:
            raise ValueError("Degenerate Fiedler vector (constant values)")

        rows, cols = comp.size()
        grid: Grid[RegionId] = Grid.filled(rows, cols, NULL_REGION_ID)
        for index, pos in enumerate(comp.free_cells()):
            value = float(fiedler[index])
            region = math.floor(
                ((value - fiedler_min) / fiedler_dst) * nb_regions - 0.5
            )
            if clamp:
                region = min(max(region, 0), nb_regions - 1)
            grid[pos] = region

        return cls(grid, nb_regions, comp.free_cells())

    def size(self) -> Tuple[int, int]:
        return self.grid.size()

    def __getitem__(self, key: GridKey) -> RegionId:
        return self.grid[key]

    def is_free(self, pos: Position) -> bool:
        """True if ``pos`` is one of the labelled free cells."""
        return pos in self._cell_set

    def labels(self) -> PMap[Position, RegionId]:
        """Region id of every free cell."""
        return pmap({pos: self.grid[pos] for pos in self.cells})

    def cells_in(self, region: RegionId) -> List[Position]:
        """Free cells carrying ``region`` in component index order."""
        return [pos for pos in self.cells if self.grid[pos] == region]

    def __str__(self) -> str:
        rows, cols = self.size()
        lines: List[str] = []
        for row in range(rows):
            line = ""
            for col in range(cols):
                region = self.grid[(row, col)]
                if region >= 0:
                    line += f"{region % 100:>2}"
                elif not self.is_free(Position(row, col)):
                    line += "  "
                else:
                    line += "??"
            lines.append(line)
        return "\n".join(lines)


def fiedler_vector(
    comp: Component,
    solver: EigenSolver = symmetric_eigen,
    gap_tolerance: float = DEFAULT_EIGEN_GAP_TOLERANCE,
) -> NDArray[np.float64]:
    """Eigenvector of the second smallest Laplacian eigenvalue, indexed like ``comp``."""
    n = comp.nb_free_cells()
    if n < 2:
        raise ValueError(f"Spectral segmentation needs >= 2 free cells, got {n}")

    lap = comp.graph_laplacian(comp.adjacency_matrix())
    values, vectors = sorted_eigenpairs(*solver(lap))

    if n > 2 and values[2] - values[1] <= gap_tolerance:
        logger.warning(
            "Second Laplacian eigenvalue %g is repeated (gap %g); "
            "region labels depend on the eigen solver",
            values[1],
            values[2] - values[1],
        )
    return vectors[:, 1]


def wall_distance(comp: Component) -> Grid[int]:
    """Steps from each free cell to the nearest wall.

    Walls are at distance 0 and cells on the grid border are one step away
    from the outside. Computed by a multi-source breadth-first search.
    """
    rows, cols = comp.size()
    weights: Grid[int] = Grid.filled(rows, cols, UNREACHED_DISTANCE)
    queue: Deque[Position] = deque()

    for pos in weights.positions():
        if comp[pos].is_wall():
            weights[pos] = 0
            queue.append(pos)
        elif pos.row in (0, rows - 1) or pos.col in (0, cols - 1):
            weights[pos] = 1
            queue.append(pos)

    while queue:
        pos = queue.popleft()
        for direction in DIRECTIONS:
            row, col = pos.row + direction.row, pos.col + direction.col
            if not (0 <= row < rows and 0 <= col < cols):
                continue
            neighbor = Position(row, col)
            if weights[neighbor] > weights[pos] + 1:
                weights[neighbor] = weights[pos] + 1
                queue.append(neighbor)

    return weights
