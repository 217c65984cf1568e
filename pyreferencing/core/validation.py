"""
Input validation utilities for PyReferencing.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyreferencing.core.exceptions import (
    DimensionError,
    MismatchedDimensionError,
    NumericalError,
    ValidationError,
)

# Post-condition checks (e.g. "axis mapping of equal dimensions is affine").
# Follows the interpreter's -O switch unless set explicitly.
DEBUG_CHECKS: bool = __debug__


def check_size(size: int, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Raises:
        ValidationError: If size is negative or not an integer
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(size).__name__}")
    if size < 0:
        raise ValidationError(f"{name}: must be non-negative, got {size}")
    return int(size)


def check_flat_data(
    values: ArrayLike,
    num_row: int,
    num_col: int,
    name: str,
) -> NDArray[np.float64]:
    """
    Convert row-major values to a flat float64 array of exactly num_row*num_col.

    Raises:
        ValidationError: If values are not numeric or have the wrong length
    """
    try:
        result = np.array(values, dtype=np.float64).ravel()
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to numeric array: {e}") from e

    expected = num_row * num_col
    if result.size != expected:
        raise ValidationError(
            f"{name}: expected {expected} values for a {num_row}x{num_col} matrix, "
            f"got {result.size}"
        )
    return result


def check_regular_rows(rows: Sequence[Sequence[float]], name: str) -> tuple[int, int]:
    """
    Verify every row of a nested sequence has the same length.

    Returns:
        (num_row, num_col)

    Raises:
        ValidationError: If the matrix is not regular
    """
    num_row = len(rows)
    num_col = len(rows[0]) if num_row else 0
    for j, row in enumerate(rows):
        if len(row) != num_col:
            raise ValidationError(
                f"{name}: matrix is not regular, row {j} has {len(row)} "
                f"columns, expected {num_col}"
            )
    return num_row, num_col


def check_same_shape(a: Any, b: Any, operation: str) -> None:
    """
    Verify two MatrixLike objects have identical dimensions.

    Raises:
        DimensionError: If the shapes differ
    """
    if a.num_row != b.num_row or a.num_col != b.num_col:
        raise DimensionError(
            f"{operation}: shape mismatch, {a.num_row}x{a.num_col} "
            f"vs {b.num_row}x{b.num_col}"
        )


def check_dimension_match(name: str, envelope: Any, dimension: int) -> None:
    """
    Verify an envelope has the expected number of dimensions.

    Args:
        name: Parameter name for error messages
        envelope: EnvelopeLike to check
        dimension: Expected dimension

    Raises:
        MismatchedDimensionError: If envelope.dimension != dimension
    """
    actual = envelope.dimension
    if actual != dimension:
        raise MismatchedDimensionError(
            f"{name}: has {actual} dimensions, expected {dimension}",
            argument_name=name,
            dimension=actual,
            expected=dimension,
        )


def check_postcondition(condition: bool, message: str, subject: Any = None) -> None:
    """
    Verify an internal post-condition when DEBUG_CHECKS is enabled.

    The subject, if given, is rendered into the message only on failure.

    Raises:
        NumericalError: If the condition does not hold
    """
    if DEBUG_CHECKS and not condition:
        detail = "" if subject is None else f":\n{subject}"
        raise NumericalError(f"Post-condition violated: {message}{detail}")
