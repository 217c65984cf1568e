"""
GeneralMatrix: a mutable dense matrix for coordinate transformations.

A two-dimensional array of doubles, row and column numbering beginning at
zero. Numeric work is delegated to a DenseBackend (DenseBuffer by default);
this class adds the referencing-specific predicates (is_affine,
is_identity), tolerance comparison and the copy discipline.

Ownership:
    Every constructor and clone() deep-copies. No method hands out a view
    on the internal buffer. A GeneralMatrix is not thread-safe; concurrent
    mutation needs external locking by the caller.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyreferencing.core.compute.dense import DenseBuffer
from pyreferencing.core.compute.precision import within_tolerance
from pyreferencing.core.compute.tolerances import DEFAULT_TOLERANCE
from pyreferencing.core.exceptions import DimensionError, ValidationError
from pyreferencing.core.protocols import MatrixLike
from pyreferencing.core.validation import (
    check_flat_data,
    check_regular_rows,
    check_same_shape,
    check_size,
)


class GeneralMatrix:
    """
    A two dimensional array of numbers, row-major.

    Construction:
        GeneralMatrix(3)                      # 3x3 zeros
        GeneralMatrix(2, 3)                   # 2x3 zeros
        GeneralMatrix(2, 2, [1, 2, 3, 4])     # flat row-major values
        GeneralMatrix.identity(3)
        GeneralMatrix.from_rows([[1, 2], [3, 4]])
        GeneralMatrix.from_matrix(other)      # deep copy of any MatrixLike
        GeneralMatrix.from_array(ndarray)

    Element access outside [0, num_row) x [0, num_col) is a precondition
    violation and raises IndexError.
    """

    __slots__ = ('_mat',)
    __hash__ = None  # mutable

    def __init__(
        self,
        num_row: int,
        num_col: int | None = None,
        values: ArrayLike | None = None,
    ):
        """
        Args:
            num_row: Number of rows (and columns, if num_col is omitted)
            num_col: Number of columns
            values: Optional row-major values, exactly num_row*num_col of them

        Raises:
            ValidationError: If a size is negative or values has the wrong length
        """
        num_row = check_size(num_row, 'num_row')
        num_col = num_row if num_col is None else check_size(num_col, 'num_col')
        if values is None:
            self._mat = DenseBuffer(num_row, num_col)
        else:
            data = check_flat_data(values, num_row, num_col, 'values')
            self._mat = DenseBuffer(num_row, num_col, data)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, buffer: DenseBuffer) -> GeneralMatrix:
        """Take ownership of a buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._mat = buffer
        return matrix

    @classmethod
    def identity(cls, size: int) -> GeneralMatrix:
        """Square identity matrix of size x size."""
        matrix = cls(size)
        matrix.set_identity()
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> GeneralMatrix:
        """
        Build from an array of rows.

        Raises:
            ValidationError: If the rows don't all have the same length
        """
        num_row, num_col = check_regular_rows(rows, 'rows')
        return cls(num_row, num_col, [v for row in rows for v in row])

    @classmethod
    def from_array(cls, array: ArrayLike) -> GeneralMatrix:
        """Build from a 2-D array-like (copied)."""
        try:
            arr = np.array(array, dtype=np.float64)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"array: cannot convert to numeric array: {e}") from e
        if arr.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls._wrap(DenseBuffer.from_array(arr))

    @classmethod
    def from_matrix(cls, matrix: MatrixLike) -> GeneralMatrix:
        """
        Deep copy of any MatrixLike.

        GeneralMatrix instances are copied buffer-wise; foreign matrices are
        read element by element through get_element().
        """
        if isinstance(matrix, GeneralMatrix):
            return cls._wrap(matrix._mat.copy())
        num_row = matrix.num_row
        num_col = matrix.num_col
        copy = cls(num_row, num_col)
        for j in range(num_row):
            for i in range(num_col):
                copy._mat.set(j, i, matrix.get_element(j, i))
        return copy

    @staticmethod
    def _as_general(matrix: MatrixLike) -> GeneralMatrix:
        if isinstance(matrix, GeneralMatrix):
            return matrix
        return GeneralMatrix.from_matrix(matrix)

    # ------------------------------------------------------------------
    # Dimensions and element access
    # ------------------------------------------------------------------

    @property
    def num_row(self) -> int:
        """Number of rows."""
        return self._mat.num_rows

    @property
    def num_col(self) -> int:
        """Number of columns."""
        return self._mat.num_cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._mat.num_rows, self._mat.num_cols)

    def get_element(self, row: int, column: int) -> float:
        return self._mat.get(row, column)

    def set_element(self, row: int, column: int, value: float) -> None:
        self._mat.set(row, column, value)

    def get_row(self, row: int) -> list[float]:
        """Copy of one row."""
        return [self._mat.get(row, i) for i in range(self.num_col)]

    def get_column(self, column: int) -> list[float]:
        """Copy of one column."""
        return [self._mat.get(j, column) for j in range(self.num_row)]

    def get_elements(self) -> list[list[float]]:
        """
        Copy of the values as a list of rows.

        Changes to the returned lists do not change this matrix.
        """
        return [self.get_row(j) for j in range(self.num_row)]

    @staticmethod
    def get_elements_of(matrix: MatrixLike) -> list[list[float]]:
        """Copy of any MatrixLike's values as a list of rows."""
        if isinstance(matrix, GeneralMatrix):
            return matrix.get_elements()
        return [
            [matrix.get_element(j, i) for i in range(matrix.num_col)]
            for j in range(matrix.num_row)
        ]

    def set_data(self, values: Iterable[float]) -> None:
        """
        Replace the contents with row-major values.

        Raises:
            DimensionError: If the number of values differs from num_row*num_col
        """
        self._mat.set_data(np.fromiter(values, dtype=np.float64))

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy as a 2-D array."""
        return self._mat.as_array().copy()

    # ------------------------------------------------------------------
    # In-place operations
    # ------------------------------------------------------------------

    def set_zero(self) -> None:
        """Sets each value of the matrix to 0.0."""
        self._mat.zero()

    def set_identity(self) -> None:
        """
        Sets the main diagonal to 1.0 and everything else to 0.0.

        On a rectangular matrix only the first min(num_row, num_col)
        diagonal cells are set.
        """
        self._mat.set_identity()

    def negate(self) -> None:
        """Changes the sign of each element in the matrix."""
        self._mat.change_sign()

    def transpose(self) -> None:
        """Transposes the matrix; a rectangular matrix swaps its dimensions."""
        self._mat.transpose()

    def invert(self) -> None:
        """
        Inverts the matrix in place.

        Raises:
            SingularMatrixError: If the matrix is not square, is singular,
                or the inverse would contain NaN or infinite values. The
                matrix is left unchanged in that case.
        """
        self._mat.invert()

    def multiply(self, matrix: MatrixLike) -> None:
        """
        Sets this matrix to the product self @ matrix.

        The dimensions become num_row x matrix.num_col.

        Raises:
            DimensionError: If self.num_col != matrix.num_row
        """
        self.mul(self._as_general(matrix))

    def mul(self, matrix1: GeneralMatrix, matrix2: GeneralMatrix | None = None) -> None:
        """
        In-place multiplication.

        mul(m) sets self to self @ m. mul(a, b) sets self to a @ b, whatever
        the current dimensions of self.
        """
        if matrix2 is None:
            self._mat = self._mat.mult(matrix1._mat)
        else:
            self._mat = matrix1._mat.mult(matrix2._mat)

    def add(self, matrix: MatrixLike) -> None:
        """
        Element-wise self += matrix.

        Raises:
            DimensionError: If the shapes differ
        """
        other = self._as_general(matrix)
        check_same_shape(self, other, 'add')
        self._mat.add(other._mat)

    def sub(self, matrix1: MatrixLike, matrix2: MatrixLike | None = None) -> None:
        """
        In-place subtraction.

        sub(m) sets self to self - m. sub(a, b) sets self to a - b, resizing
        self to the shape of a.

        Raises:
            DimensionError: If the operand shapes differ
        """
        if matrix2 is None:
            other = self._as_general(matrix1)
            check_same_shape(self, other, 'sub')
            self._mat.subtract(other._mat)
            return
        a = self._as_general(matrix1)
        b = self._as_general(matrix2)
        check_same_shape(a, b, 'sub')
        result = a._mat.copy()
        result.subtract(b._mat)
        self._mat = result

    def set_size(self, num_row: int, num_col: int) -> None:
        """
        Resizes the matrix.

        The row-major prefix of the current values that fits in the new
        size is kept; cells beyond the old size are zero.
        """
        num_row = check_size(num_row, 'num_row')
        num_col = check_size(num_col, 'num_col')
        self._mat.reshape(num_row, num_col, True)

    def copy_sub_matrix(
        self,
        row_source: int,
        col_source: int,
        num_rows: int,
        num_cols: int,
        row_dest: int,
        col_dest: int,
        target: GeneralMatrix,
    ) -> None:
        """
        Copies a block of this matrix into target.

        The num_rows x num_cols block starting at (row_source, col_source)
        is written into target starting at (row_dest, col_dest).

        Raises:
            DimensionError: If the block does not fit in either matrix
        """
        if (row_source < 0 or col_source < 0 or num_rows < 0 or num_cols < 0
                or row_source + num_rows > self.num_row
                or col_source + num_cols > self.num_col):
            raise DimensionError(
                f"copy_sub_matrix: {num_rows}x{num_cols} block at "
                f"({row_source}, {col_source}) exceeds {self.num_row}x{self.num_col} source"
            )
        if (row_dest < 0 or col_dest < 0
                or row_dest + num_rows > target.num_row
                or col_dest + num_cols > target.num_col):
            raise DimensionError(
                f"copy_sub_matrix: {num_rows}x{num_cols} block at "
                f"({row_dest}, {col_dest}) exceeds {target.num_row}x{target.num_col} target"
            )
        block = self._mat.as_array()[
            row_source:row_source + num_rows, col_source:col_source + num_cols
        ].copy()
        target._mat.as_array()[
            row_dest:row_dest + num_rows, col_dest:col_dest + num_cols
        ] = block

    # ------------------------------------------------------------------
    # Predicates and comparison
    # ------------------------------------------------------------------

    def is_affine(self) -> bool:
        """
        True if square and the last row is [0, ..., 0, 1].

        A 0x0 matrix has no last row to contradict this and is affine.
        """
        dimension = self.num_row
        if dimension != self.num_col:
            return False
        last = dimension - 1
        for i in range(dimension):
            if self._mat.get(last, i) != (1.0 if i == last else 0.0):
                return False
        return True

    def is_identity(self, tolerance: float | None = None) -> bool:
        """
        True if this is a square identity matrix.

        Without tolerance the comparison is exact. With a tolerance every
        element must lie within |tolerance| of the identity pattern; NaN
        values never do.
        """
        if tolerance is None:
            tolerance = DEFAULT_TOLERANCE
        return identity_within(self, tolerance)

    def equals(self, matrix: MatrixLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Element-wise comparison, see epsilon_equals()."""
        return epsilon_equals(self, matrix, tolerance)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GeneralMatrix):
            return NotImplemented
        return epsilon_equals(self, other, 0.0)

    # ------------------------------------------------------------------
    # Copying and representation
    # ------------------------------------------------------------------

    def clone(self) -> GeneralMatrix:
        """Deep copy."""
        return GeneralMatrix._wrap(self._mat.copy())

    def __copy__(self) -> GeneralMatrix:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> GeneralMatrix:
        return self.clone()

    def __str__(self) -> str:
        from pyreferencing.matrix.codec import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"GeneralMatrix(num_row={self.num_row}, num_col={self.num_col})"


def identity_within(matrix: MatrixLike, tolerance: float) -> bool:
    """
    True if any MatrixLike is an identity matrix within tolerance.

    The tolerance is made absolute first. Written so that NaN elements fail.
    """
    tolerance = abs(tolerance)
    num_row = matrix.num_row
    num_col = matrix.num_col
    if num_row != num_col:
        return False
    for j in range(num_row):
        for i in range(num_col):
            e = matrix.get_element(j, i)
            if i == j:
                e -= 1.0
            if not (abs(e) <= tolerance):
                return False
    return True


def epsilon_equals(m1: MatrixLike, m2: MatrixLike, tolerance: float) -> bool:
    """
    Compares element values of two MatrixLike objects.

    The dimensions must match and every pair of elements must differ by at
    most tolerance. Pairs with identical bit patterns (NaN, infinities) are
    considered equal.
    """
    num_row = m1.num_row
    if num_row != m2.num_row:
        return False
    num_col = m1.num_col
    if num_col != m2.num_col:
        return False
    for j in range(num_row):
        for i in range(num_col):
            if not within_tolerance(m1.get_element(j, i), m2.get_element(j, i), tolerance):
                return False
    return True
