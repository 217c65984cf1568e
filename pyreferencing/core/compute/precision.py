"""
Numerical precision utilities.

Provides the element comparison rule shared by equals() and is_identity(),
and the condition number estimate used before inversion.
"""

import struct

import numpy as np
from numpy.typing import NDArray
from typing import Any


def same_bits(a: float, b: float) -> bool:
    """
    True if two doubles have the same IEEE-754 bit pattern.

    This is how NaN and infinite values are considered equal to themselves
    although they fail every arithmetic comparison. All NaN payloads are
    collapsed to the canonical NaN first.
    """
    if a != a and b != b:
        return True
    return struct.pack('<d', a) == struct.pack('<d', b)


def within_tolerance(a: float, b: float, tolerance: float) -> bool:
    """
    Compare two elements with an absolute tolerance.

    Uses the formula: |a - b| <= tolerance, written so that any NaN fails
    the arithmetic test. Values with identical bit patterns (NaN vs NaN,
    +Inf vs +Inf) are still reported equal.
    """
    if abs(a - b) <= tolerance:
        return True
    return same_bits(a, b)


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """
    Compute condition number of a matrix using SVD.

    Args:
        A: Input matrix

    Returns:
        Condition number (ratio of largest to smallest singular value)
        Returns inf if matrix is singular, 1.0 if it is empty.
    """
    if A.size == 0:
        return 1.0
    s = np.linalg.svd(A, compute_uv=False)
    if s[-1] == 0:
        return np.inf
    return float(s[0] / s[-1])
