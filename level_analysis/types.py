"""Common type aliases and enumerations.

``EigenSolver`` is the extension point used by the spectral segmenter to
plug in a linear-algebra backend; see :mod:`level_analysis.utils.linalg`.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple

import numpy as np
from numpy.typing import NDArray


RegionId = int

NULL_REGION_ID: RegionId = -1

CellIndex = int

NULL_CELL_INDEX: CellIndex = -1

# (eigenvalues, eigenvectors as columns) of a real symmetric matrix
EigenSolver = Callable[
    [NDArray[np.float64]], Tuple[NDArray[np.float64], NDArray[np.float64]]
]


class ItemKind(StrEnum):
    """Cell content categories."""

    EMPTY = auto()
    WALL = auto()
    AGENT = auto()
    BOX = auto()
    GOAL = auto()
