"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyreferencing.matrix import GeneralMatrix
from pyreferencing.referencing import GeneralEnvelope


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 4x4 matrix (diagonally dominant)."""
    values = rng.standard_normal((4, 4)) + 8.0 * np.eye(4)
    return GeneralMatrix.from_array(values)


@pytest.fixture
def random_rectangular(rng):
    """Random 3x5 matrix."""
    return GeneralMatrix.from_array(rng.standard_normal((3, 5)))


@pytest.fixture
def affine_2d():
    """Scale by (2, -3), shear 0.5, translate (10, 20)."""
    return GeneralMatrix.from_rows([
        [2.0, 0.5, 10.0],
        [0.0, -3.0, 20.0],
        [0.0, 0.0, 1.0],
    ])


@pytest.fixture
def unit_square():
    return GeneralEnvelope.from_corners([0.0, 0.0], [1.0, 1.0])


class ForeignMatrix:
    """MatrixLike implemented outside of GeneralMatrix."""

    def __init__(self, rows):
        self._rows = [list(r) for r in rows]

    @property
    def num_row(self):
        return len(self._rows)

    @property
    def num_col(self):
        return len(self._rows[0]) if self._rows else 0

    def get_element(self, row, column):
        return self._rows[row][column]


@pytest.fixture
def foreign_matrix():
    return ForeignMatrix([[1.0, 2.0], [3.0, 4.0]])
