"""
Shared compute infrastructure for PyReferencing.

IMPORTANT: This is NOT where the matrix algorithms live. Those go in
pyreferencing.matrix. This module contains shared NUMERIC infrastructure.

Submodules:
    dense: NumPy-backed DenseBuffer (the DenseBackend reference engine)
    precision: Element comparison rules and condition numbers
    tolerances: Tolerances, number locales and format options
"""

from pyreferencing.core.compute.dense import DenseBuffer
from pyreferencing.core.compute.precision import (
    condition_number,
    same_bits,
    within_tolerance,
)
from pyreferencing.core.compute.tolerances import (
    DEFAULT_FORMAT,
    DEFAULT_TOLERANCE,
    FormatOptions,
    NumberLocale,
    get_locale,
)

__all__ = [
    # Dense storage
    "DenseBuffer",
    # Precision
    "condition_number",
    "same_bits",
    "within_tolerance",
    # Configuration
    "DEFAULT_FORMAT",
    "DEFAULT_TOLERANCE",
    "FormatOptions",
    "NumberLocale",
    "get_locale",
]
