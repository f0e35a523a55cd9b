"""Analysis configuration.

``AnalysisConfig`` gathers the tunables of the pipeline in
:mod:`level_analysis.analysis.pipeline`. Instances are immutable; derive
variants with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass

import numpy as np

from level_analysis.types import EigenSolver
from level_analysis.utils.linalg import symmetric_eigen

DEFAULT_NB_REGIONS = 4
DEFAULT_HULL_EPSILON = float(np.finfo(np.float64).eps)
DEFAULT_EIGEN_GAP_TOLERANCE = 1e-9


@dataclass(frozen=True)
class AnalysisConfig:
    """Pipeline settings.

    Attributes:
        nb_regions: Number of spectral regions per component.
        clamp_regions: Clamp region ids into ``[0, nb_regions)``. When False the
            raw binning formula is kept and yields ``-1`` for the cells at the
            Fiedler minimum.
        eigen_solver: Symmetric eigen-decomposition backend.
        hull_epsilon: Strictness margin of the hull containment test.
        eigen_gap_tolerance: Gap under which the second and third eigenvalues
            are reported as tied (unstable partition).
    """

    nb_regions: int = DEFAULT_NB_REGIONS
    clamp_regions: bool = True
    eigen_solver: EigenSolver = symmetric_eigen
    hull_epsilon: float = DEFAULT_HULL_EPSILON
    eigen_gap_tolerance: float = DEFAULT_EIGEN_GAP_TOLERANCE

    def __post_init__(self) -> None:
        if self.nb_regions < 1:
            raise ValueError(f"nb_regions must be >= 1, got {self.nb_regions}")
        if self.hull_epsilon < 0:
            raise ValueError(f"hull_epsilon must be >= 0, got {self.hull_epsilon}")
        if self.eigen_gap_tolerance < 0:
            raise ValueError(
                f"eigen_gap_tolerance must be >= 0, got {self.eigen_gap_tolerance}"
            )
