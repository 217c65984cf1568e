"""
Core protocols for PyReferencing.

These define structural interfaces that collaborating types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
matrices, envelopes and numeric engines from other libraries can be passed
in without subclassing anything from this package.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms actually read
    - Swappable numeric engine: matrix logic only talks to DenseBackend
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal read-only view of a two-dimensional matrix.

    GeneralMatrix implements this protocol, and so can any foreign matrix
    type. Constructors, multiply() and equals() copy from such instances
    element by element.
    """

    @property
    def num_row(self) -> int:
        """Number of rows."""
        ...

    @property
    def num_col(self) -> int:
        """Number of columns."""
        ...

    def get_element(self, row: int, column: int) -> float:
        """Value at the given zero-based row and column."""
        ...


@runtime_checkable
class EnvelopeLike(Protocol):
    """
    Axis-aligned n-dimensional box.

    Only the accessors used when mapping one region onto another are
    required.
    """

    @property
    def dimension(self) -> int:
        """Number of dimensions."""
        ...

    def minimum(self, dimension: int) -> float:
        """Lower bound along the given dimension."""
        ...

    def maximum(self, dimension: int) -> float:
        """Upper bound along the given dimension."""
        ...

    def span(self, dimension: int) -> float:
        """Width along the given dimension (maximum - minimum)."""
        ...


@runtime_checkable
class DenseBackend(Protocol):
    """
    Protocol for the dense numeric engine behind GeneralMatrix.

    A backend owns a flat row-major buffer of doubles and performs the
    primitive operations in place. GeneralMatrix never touches the buffer
    directly, which keeps the numeric engine swappable.
    """

    @property
    def num_rows(self) -> int:
        ...

    @property
    def num_cols(self) -> int:
        ...

    def get(self, row: int, col: int) -> float:
        ...

    def set(self, row: int, col: int, value: float) -> None:
        ...

    def reshape(self, num_rows: int, num_cols: int, save_values: bool) -> None:
        """Change dimensions, keeping the overlapping prefix if save_values."""
        ...

    def zero(self) -> None:
        ...

    def set_identity(self) -> None:
        ...

    def change_sign(self) -> None:
        ...

    def transpose(self) -> None:
        ...

    def invert(self) -> None:
        """Invert in place, raising SingularMatrixError on failure."""
        ...

    def mult(self, other: DenseBackend) -> DenseBackend:
        """Return a new backend holding self @ other."""
        ...

    def add(self, other: DenseBackend) -> None:
        ...

    def subtract(self, other: DenseBackend) -> None:
        ...

    def copy(self) -> DenseBackend:
        ...
