"""
Dense row-major buffer backed by NumPy.

DenseBuffer is the CPU reference implementation of the DenseBackend
protocol. It stores a flat float64 array and exposes the primitive
in-place operations GeneralMatrix is built on. Inversion goes through
LAPACK via SciPy.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np
import scipy.linalg as sla
from numpy.typing import NDArray

from pyreferencing.core.compute.precision import condition_number
from pyreferencing.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pyreferencing.core.exceptions import DimensionError, SingularMatrixError

logger = logging.getLogger(__name__)


class DenseBuffer:
    """
    Flat row-major storage of doubles.

    Element (row, col) lives at data[row * num_cols + col]. The flat array
    may be longer than num_rows * num_cols after a shrinking reshape; only
    the leading num_rows * num_cols entries are meaningful.

    Not thread-safe. A buffer has exactly one owner.
    """

    __slots__ = ('_data', '_num_rows', '_num_cols')

    def __init__(
        self,
        num_rows: int,
        num_cols: int,
        data: NDArray[np.float64] | None = None,
    ):
        """
        Args:
            num_rows: Number of rows
            num_cols: Number of columns
            data: Optional flat row-major values. Copied, never aliased.
        """
        self._num_rows = num_rows
        self._num_cols = num_cols
        if data is None:
            self._data = np.zeros(num_rows * num_cols, dtype=np.float64)
        else:
            self._data = np.array(data, dtype=np.float64).ravel()

    @classmethod
    def from_array(cls, array: NDArray[np.floating[Any]]) -> DenseBuffer:
        """Build from a 2-D array (copied)."""
        if array.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {array.ndim}D with shape {array.shape}"
            )
        rows, cols = array.shape
        return cls(rows, cols, array.reshape(-1))

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def size(self) -> int:
        return self._num_rows * self._num_cols

    def as_array(self) -> NDArray[np.float64]:
        """2-D view of the meaningful part of the buffer. Callers must not keep it."""
        return self._data[:self.size].reshape(self._num_rows, self._num_cols)

    def _index(self, row: int, col: int) -> int:
        # Out-of-range access is a precondition violation; numpy raises
        # IndexError for positions beyond the flat array, but a column past
        # the row width would silently wrap onto the next row.
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexError(
                f"({row}, {col}) outside {self._num_rows}x{self._num_cols} matrix"
            )
        return row * self._num_cols + col

    def get(self, row: int, col: int) -> float:
        return float(self._data[self._index(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        self._data[self._index(row, col)] = value

    def set_data(self, data: NDArray[np.float64]) -> None:
        """Replace the contents with flat row-major values of the same size."""
        flat = np.asarray(data, dtype=np.float64).ravel()
        if flat.size != self.size:
            raise DimensionError(
                f"data: expected {self.size} values, got {flat.size}"
            )
        self._data = flat.copy()

    def reshape(self, num_rows: int, num_cols: int, save_values: bool) -> None:
        """
        Change the dimensions of the buffer.

        With save_values, the leading row-major values that fit are kept and
        new cells are zero. Without, the contents are undefined if the
        capacity suffices and zero otherwise.
        """
        new_size = num_rows * num_cols
        if new_size > self._data.size:
            grown = np.zeros(new_size, dtype=np.float64)
            if save_values:
                grown[:self.size] = self._data[:self.size]
            self._data = grown
        elif save_values and new_size > self.size:
            self._data[self.size:new_size] = 0.0
        self._num_rows = num_rows
        self._num_cols = num_cols

    def zero(self) -> None:
        self._data[:] = 0.0

    def set_identity(self) -> None:
        """Zero everything, then put 1 on the first min(rows, cols) diagonal cells."""
        self.zero()
        n = min(self._num_rows, self._num_cols)
        self._data[:n * (self._num_cols + 1):self._num_cols + 1] = 1.0

    def change_sign(self) -> None:
        np.negative(self._data, out=self._data)

    def transpose(self) -> None:
        transposed = self.as_array().T.copy()
        self._num_rows, self._num_cols = self._num_cols, self._num_rows
        self._data = transposed.reshape(-1)

    def invert(self) -> None:
        """
        Invert in place.

        Raises:
            SingularMatrixError: If the matrix is non-square, exactly
                singular, or the inverse contains non-finite values

        Matrices that are invertible but ill-conditioned are inverted with
        a RuntimeWarning, since the result may carry little precision.
        """
        shape = (self._num_rows, self._num_cols)
        if self._num_rows != self._num_cols:
            raise SingularMatrixError(
                f"Cannot invert a non-square {shape[0]}x{shape[1]} matrix",
                matrix_name='matrix',
                shape=shape,
            )
        if self._num_rows == 0:
            return

        A = self.as_array()
        cond = condition_number(A) if np.all(np.isfinite(A)) else np.inf
        logger.debug("Inverting %dx%d matrix, condition number %g", shape[0], shape[1], cond)

        try:
            inverse = sla.inv(A)
        except (np.linalg.LinAlgError, ValueError) as e:
            raise SingularMatrixError(
                f"Matrix is singular and cannot be inverted: {e}",
                matrix_name='matrix',
                condition_number=cond,
                shape=shape,
            ) from e

        if not np.all(np.isfinite(inverse)):
            raise SingularMatrixError(
                "Matrix inversion produced non-finite values",
                matrix_name='matrix',
                condition_number=cond,
                shape=shape,
            )

        if cond > ILL_CONDITIONED_THRESHOLD:
            warnings.warn(
                f"Matrix is ill-conditioned (condition number {cond:.3g}); "
                f"the inverse may be inaccurate",
                RuntimeWarning,
                stacklevel=3,
            )

        self._data = inverse.reshape(-1)

    def mult(self, other: DenseBuffer) -> DenseBuffer:
        """Return a new buffer holding self @ other."""
        if self._num_cols != other._num_rows:
            raise DimensionError(
                f"multiply: cannot multiply {self._num_rows}x{self._num_cols} "
                f"by {other._num_rows}x{other._num_cols}"
            )
        return DenseBuffer.from_array(self.as_array() @ other.as_array())

    def add(self, other: DenseBuffer) -> None:
        self._check_same_shape(other, 'add')
        self._data[:self.size] += other._data[:other.size]

    def subtract(self, other: DenseBuffer) -> None:
        self._check_same_shape(other, 'subtract')
        self._data[:self.size] -= other._data[:other.size]

    def _check_same_shape(self, other: DenseBuffer, operation: str) -> None:
        if self._num_rows != other._num_rows or self._num_cols != other._num_cols:
            raise DimensionError(
                f"{operation}: shape mismatch, {self._num_rows}x{self._num_cols} "
                f"vs {other._num_rows}x{other._num_cols}"
            )

    def copy(self) -> DenseBuffer:
        return DenseBuffer(self._num_rows, self._num_cols, self._data[:self.size])

    def __repr__(self) -> str:
        return f"DenseBuffer(num_rows={self._num_rows}, num_cols={self._num_cols})"
