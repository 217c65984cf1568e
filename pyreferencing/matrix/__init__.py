"""
Transformation matrices.

Provides a mutable dense matrix specialized for affine and generalized
linear coordinate transformations, and the ways to build, read, write and
convert one.

Public API:
    GeneralMatrix                  - Dense row-major matrix
    from_axes(src, dst)            - Axis reordering/inversion matrix
    from_regions(src, dst)         - Region-to-region scale/translate matrix
    from_regions_and_axes(...)     - Both at once
    load(source) / loads(text)     - Read the text format
    format_matrix(m) / dump(m, f)  - Write the text format
    to_affine2d(m) / from_affine2d(t) - Convert to/from affine.Affine
"""

from pyreferencing.matrix.general import GeneralMatrix, epsilon_equals, identity_within
from pyreferencing.matrix.axes import from_axes, from_regions, from_regions_and_axes
from pyreferencing.matrix.codec import dump, format_matrix, load, loads, parse_line
from pyreferencing.matrix.affine import from_affine2d, to_affine2d, to_coefficients

__all__ = [
    "GeneralMatrix",
    "epsilon_equals",
    "identity_within",
    "from_axes",
    "from_regions",
    "from_regions_and_axes",
    "load",
    "loads",
    "parse_line",
    "format_matrix",
    "dump",
    "to_affine2d",
    "from_affine2d",
    "to_coefficients",
]
