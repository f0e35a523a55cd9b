# tests/utils/test_linalg.py

import numpy as np
import pytest

from level_analysis.config import AnalysisConfig
from level_analysis.utils.linalg import sorted_eigenpairs, symmetric_eigen


def test_symmetric_eigen_reconstructs_matrix() -> None:
    matrix = np.array([[2.0, -1.0, 0.0], [-1.0, 2.0, -1.0], [0.0, -1.0, 2.0]])
    values, vectors = symmetric_eigen(matrix)
    np.testing.assert_allclose(vectors @ np.diag(values) @ vectors.T, matrix, atol=1e-12)


def test_symmetric_eigen_rejects_non_square() -> None:
    with pytest.raises(ValueError):
        symmetric_eigen(np.zeros((2, 3)))


def test_sorted_eigenpairs_keeps_pairs_together() -> None:
    values = np.array([3.0, 1.0, 2.0])
    vectors = np.eye(3)
    sorted_values, sorted_vectors = sorted_eigenpairs(values, vectors)
    np.testing.assert_array_equal(sorted_values, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(sorted_vectors[:, 0], [0.0, 1.0, 0.0])
    np.testing.assert_array_equal(sorted_vectors[:, 2], [1.0, 0.0, 0.0])


@pytest.mark.parametrize(
    "kwargs",
    [
        {"nb_regions": 0},
        {"hull_epsilon": -1.0},
        {"eigen_gap_tolerance": -1e-3},
    ],
)
def test_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        AnalysisConfig(**kwargs)


def test_config_defaults() -> None:
    config = AnalysisConfig()
    assert config.nb_regions == 4
    assert config.clamp_regions
    assert config.eigen_solver is symmetric_eigen
    assert config.hull_epsilon == np.finfo(np.float64).eps
