"""
Core infrastructure for PyReferencing.

This module provides shared abstractions, utilities, and the numeric
backend used by the matrix and referencing modules.

Key components:
    protocols: MatrixLike, EnvelopeLike, DenseBackend protocols
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Dense storage, precision rules, tolerances
"""

from pyreferencing.core.protocols import DenseBackend, EnvelopeLike, MatrixLike
from pyreferencing.core.exceptions import (
    ReferencingError,
    ValidationError,
    DimensionError,
    MismatchedDimensionError,
    AxisMappingError,
    ColinearAxisError,
    NoSourceAxisError,
    ContentFormatError,
    IllegalStateError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "DenseBackend",
    "EnvelopeLike",
    "MatrixLike",
    # Exceptions
    "ReferencingError",
    "ValidationError",
    "DimensionError",
    "MismatchedDimensionError",
    "AxisMappingError",
    "ColinearAxisError",
    "NoSourceAxisError",
    "ContentFormatError",
    "IllegalStateError",
    "NumericalError",
    "SingularMatrixError",
]
