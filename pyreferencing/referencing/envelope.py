"""
GeneralEnvelope: an n-dimensional axis-aligned box.

Satisfies the EnvelopeLike protocol consumed by the axis mapping builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyreferencing.core.exceptions import DimensionError


@dataclass(frozen=True)
class GeneralEnvelope:
    """
    Axis-aligned box defined by its lower and upper corners.

    Immutable after construction. The corners are not required to be
    ordered; span() is then negative, which the axis mapping builder turns
    into a flipped scale factor.

    Construction:
        GeneralEnvelope.from_corners([0, 0], [10, 20])
        GeneralEnvelope.from_bounds(xmin, ymin, xmax, ymax)
    """
    _lower: NDArray[np.float64]
    _upper: NDArray[np.float64]

    @classmethod
    def from_corners(
        cls,
        lower: Sequence[float],
        upper: Sequence[float],
    ) -> GeneralEnvelope:
        """
        Build from the lower and upper corner coordinates.

        Raises:
            DimensionError: If the corners have different lengths
        """
        lower_arr = np.array(lower, dtype=np.float64).ravel()
        upper_arr = np.array(upper, dtype=np.float64).ravel()
        if lower_arr.size != upper_arr.size:
            raise DimensionError(
                f"Corner dimensions differ: lower has {lower_arr.size}, "
                f"upper has {upper_arr.size}"
            )
        lower_arr.setflags(write=False)
        upper_arr.setflags(write=False)
        return cls(_lower=lower_arr, _upper=upper_arr)

    @classmethod
    def from_bounds(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> GeneralEnvelope:
        """Two-dimensional envelope in the (left, bottom, right, top) order of bounding boxes."""
        return cls.from_corners([xmin, ymin], [xmax, ymax])

    @property
    def dimension(self) -> int:
        """Number of dimensions."""
        return int(self._lower.size)

    @property
    def lower_corner(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self._lower)

    @property
    def upper_corner(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self._upper)

    def minimum(self, dimension: int) -> float:
        return float(self._lower[dimension])

    def maximum(self, dimension: int) -> float:
        return float(self._upper[dimension])

    def span(self, dimension: int) -> float:
        return float(self._upper[dimension] - self._lower[dimension])

    def median(self, dimension: int) -> float:
        return 0.5 * (self.minimum(dimension) + self.maximum(dimension))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GeneralEnvelope):
            return NotImplemented
        return (
            np.array_equal(self._lower, other._lower)
            and np.array_equal(self._upper, other._upper)
        )

    def __hash__(self) -> int:
        return hash((self.lower_corner, self.upper_corner))

    def __repr__(self) -> str:
        return f"GeneralEnvelope(lower={list(self.lower_corner)}, upper={list(self.upper_corner)})"
