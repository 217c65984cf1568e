"""
Axis and region mapping: synthesis of transformation matrices.

Builds the (dst_dim + 1) x (src_dim + 1) matrix that converts coordinates
expressed along the source axes, inside the source region, into coordinates
along the destination axes, inside the destination region. Axes may be
reordered, inverted (NORTH to SOUTH) or dropped; they may not change
(NORTH to UP is illegal).

The extra row and column hold the homogeneous translation terms. When the
source and destination dimensions are equal the result is affine.

Public API:
    from_axes(src_axis, dst_axis)
    from_regions(src_region, dst_region)
    from_regions_and_axes(src_region, src_axis, dst_region, dst_axis)
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from pyreferencing.core.exceptions import ColinearAxisError, NoSourceAxisError
from pyreferencing.core.protocols import EnvelopeLike
from pyreferencing.core.validation import check_dimension_match, check_postcondition
from pyreferencing.matrix.general import GeneralMatrix
from pyreferencing.referencing.cs import AxisDirection

logger = logging.getLogger(__name__)


def from_axes(
    src_axis: Sequence[AxisDirection | str],
    dst_axis: Sequence[AxisDirection | str],
) -> GeneralMatrix:
    """
    Matrix changing axis order and/or direction.

    For example, the matrix may convert (NORTH, WEST) coordinates into
    (EAST, NORTH). If the destination has fewer axes than the source, the
    extra source axes are dropped.

    Parameters
    ----------
    src_axis : sequence of AxisDirection
        Axis directions of the source coordinate system.
    dst_axis : sequence of AxisDirection
        Axis directions of the destination coordinate system.

    Returns
    -------
    GeneralMatrix of size (len(dst_axis) + 1) x (len(src_axis) + 1).

    Raises
    ------
    NoSourceAxisError
        If dst_axis contains an axis not found in src_axis.
    ColinearAxisError
        If two source axes share the absolute direction of a destination axis.
    """
    return _build(
        None, _parse_axes(src_axis),
        None, _parse_axes(dst_axis),
        valid_regions=False,
    )


def from_regions_and_axes(
    src_region: EnvelopeLike,
    src_axis: Sequence[AxisDirection | str],
    dst_region: EnvelopeLike,
    dst_axis: Sequence[AxisDirection | str],
) -> GeneralMatrix:
    """
    Matrix mapping a source region onto a destination region.

    Axis order and/or direction can change in the process. An inverted axis
    maps the source minimum onto the destination maximum.

    Parameters
    ----------
    src_region : EnvelopeLike
        Source region, one dimension per entry of src_axis.
    src_axis : sequence of AxisDirection
        Axis direction for each dimension of the source region.
    dst_region : EnvelopeLike
        Destination region, one dimension per entry of dst_axis.
    dst_axis : sequence of AxisDirection
        Axis direction for each dimension of the destination region.

    Raises
    ------
    MismatchedDimensionError
        If an envelope dimension doesn't match its axis sequence length.
    NoSourceAxisError, ColinearAxisError
        As for from_axes().
    """
    return _build(
        src_region, _parse_axes(src_axis),
        dst_region, _parse_axes(dst_axis),
        valid_regions=True,
    )


def from_regions(src_region: EnvelopeLike, dst_region: EnvelopeLike) -> GeneralMatrix:
    """
    Matrix mapping a source region onto a destination region.

    Axis order and direction are left unchanged. If the source and
    destination dimensions are equal the result is affine. Otherwise:

    - a smaller destination drops the extra source dimensions;
    - a larger destination sets the coordinates of the new dimensions to 0.

    A source dimension of zero span gives infinite or NaN coefficients.
    """
    src_dim = src_region.dimension
    dst_dim = dst_region.dimension
    matrix = GeneralMatrix(dst_dim + 1, src_dim + 1)
    for i in range(min(src_dim, dst_dim)):
        scale = _span_ratio(dst_region.span(i), src_region.span(i))
        translate = dst_region.minimum(i) - src_region.minimum(i) * scale
        matrix.set_element(i, i, scale)
        matrix.set_element(i, src_dim, translate)
    matrix.set_element(dst_dim, src_dim, 1.0)

    check_postcondition(
        src_dim != dst_dim or matrix.is_affine(),
        "region mapping of equal dimensions is not affine",
        matrix,
    )
    logger.debug("Region mapping %dD -> %dD:\n%s", src_dim, dst_dim, matrix)
    return matrix


def _span_ratio(dst_span: float, src_span: float) -> float:
    """
    IEEE division of two spans.

    A degenerate source dimension (zero span) yields an infinite or NaN
    scale, which then propagates into the matrix.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(dst_span) / np.float64(src_span))


def _parse_axes(axes: Sequence[AxisDirection | str]) -> list[AxisDirection]:
    """Accept AxisDirection members or their names, see AxisDirection.parse()."""
    return [AxisDirection.parse(axis) for axis in axes]


def _build(
    src_region: EnvelopeLike | None,
    src_axis: list[AxisDirection],
    dst_region: EnvelopeLike | None,
    dst_axis: list[AxisDirection],
    valid_regions: bool,
) -> GeneralMatrix:
    """
    Shared implementation of the axis-based builders.

    Parameters
    ----------
    valid_regions : bool
        True if the source and destination regions must be taken into
        account. If False they are ignored and may be None.
    """
    src_dim = len(src_axis)
    dst_dim = len(dst_axis)
    if valid_regions:
        check_dimension_match('src_region', src_region, src_dim)
        check_dimension_match('dst_region', dst_region, dst_dim)

    # Each destination row gets exactly one scale entry (in the column of
    # its source axis) plus the translation column; everything else stays 0.
    matrix = GeneralMatrix(dst_dim + 1, src_dim + 1)
    for dst_index, dst_axe in enumerate(dst_axis):
        found = False
        search = dst_axe.absolute()
        for src_index, src_axe in enumerate(src_axis):
            if search is not src_axe.absolute():
                continue
            if found:
                raise ColinearAxisError(
                    f"Axis {src_axe.name} and {dst_axe.name} are colinear",
                    source_axis=src_axe,
                    target_axis=dst_axe,
                )
            found = True

            normal = src_axe is dst_axe
            scale = 1.0 if normal else -1.0
            translate = 0.0
            if valid_regions:
                translate = (dst_region.minimum(dst_index) if normal
                             else dst_region.maximum(dst_index))
                scale *= _span_ratio(dst_region.span(dst_index), src_region.span(src_index))
                translate -= src_region.minimum(src_index) * scale
            matrix.set_element(dst_index, src_index, scale)
            matrix.set_element(dst_index, src_dim, translate)

        if not found:
            raise NoSourceAxisError(
                f"No source axis compatible with {dst_axe.name}",
                target_axis=dst_axe,
            )

    matrix.set_element(dst_dim, src_dim, 1.0)

    check_postcondition(
        src_dim != dst_dim or matrix.is_affine(),
        "axis mapping of equal dimensions is not affine",
        matrix,
    )
    logger.debug(
        "Axis mapping %s -> %s:\n%s",
        [a.name for a in src_axis], [a.name for a in dst_axis], matrix,
    )
    return matrix
