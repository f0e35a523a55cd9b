"""Linear-algebra capability used by spectral segmentation.

Only one operation is needed: the full eigen-decomposition of a dense real
symmetric matrix. Cost is O(n^3) in the number of free cells, which is fine
for single puzzle sub-boards (tens to low hundreds of cells).
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray


def symmetric_eigen(
    matrix: NDArray[np.float64],
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return ``(eigenvalues, eigenvectors)`` of a real symmetric matrix.

    Eigenvectors are the columns of the second array: ``vectors[:, k]``
    belongs to ``values[k]``.
    """
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {matrix.shape}")
    values, vectors = np.linalg.eigh(matrix)
    return values, vectors


def sorted_eigenpairs(
    values: NDArray[np.float64], vectors: NDArray[np.float64]
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Reorder eigenpairs by ascending eigenvalue (stable on ties)."""
    order = np.argsort(values, kind="stable")
    return values[order], vectors[:, order]
