"""
Conversion between 3x3 matrices and two-dimensional affine transforms.

The two-dimensional representation is affine.Affine, the transform type of
rasterio and most Python GIS code. Its six fields are laid out like the
first two rows of the matrix:

    | x' |   | a  b  c | | x |
    | y' | = | d  e  f | | y |
    | 1  |   | 0  0  1 | | 1 |

a is the x scale, b the x shear, c the x translation, d the y shear, e the
y scale and f the y translation.
"""

from __future__ import annotations

from typing import Any

from affine import Affine

from pyreferencing.core.exceptions import IllegalStateError
from pyreferencing.matrix.general import GeneralMatrix


def _check_affine2d(matrix: GeneralMatrix) -> None:
    for check in (matrix.num_row, matrix.num_col):
        if check != 3:
            raise IllegalStateError(
                f"Matrix is not two-dimensional: found {check - 1} dimensions "
                f"in a {matrix.num_row}x{matrix.num_col} matrix"
            )
    if not matrix.is_affine():
        raise IllegalStateError(
            f"Matrix is not an affine transform: last row is {matrix.get_row(2)}"
        )


def to_affine2d(matrix: GeneralMatrix) -> Affine:
    """
    Affine transform equivalent to a 3x3 affine matrix.

    Raises:
        IllegalStateError: If the matrix is not 3x3, or if its last row is
            not [0, 0, 1]
    """
    _check_affine2d(matrix)
    return Affine(
        matrix.get_element(0, 0), matrix.get_element(0, 1), matrix.get_element(0, 2),
        matrix.get_element(1, 0), matrix.get_element(1, 1), matrix.get_element(1, 2),
    )


def to_coefficients(matrix: GeneralMatrix) -> tuple[float, float, float, float, float, float]:
    """
    The six coefficients in column-major order.

    Returns (scale_x, shear_y, shear_x, scale_y, translate_x, translate_y),
    the order used by PostScript-style affine transform matrices.

    Raises:
        IllegalStateError: As for to_affine2d()
    """
    _check_affine2d(matrix)
    return (
        matrix.get_element(0, 0), matrix.get_element(1, 0),
        matrix.get_element(0, 1), matrix.get_element(1, 1),
        matrix.get_element(0, 2), matrix.get_element(1, 2),
    )


def from_affine2d(transform: Any) -> GeneralMatrix:
    """
    3x3 matrix from an affine transform.

    Accepts affine.Affine or anything exposing the a, b, c, d, e, f fields.
    """
    return GeneralMatrix(3, 3, [
        transform.a, transform.b, transform.c,
        transform.d, transform.e, transform.f,
        0.0, 0.0, 1.0,
    ])
