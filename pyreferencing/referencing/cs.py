"""
Coordinate system axis directions.

AxisDirection enumerates the ISO 19111 axis directions. Directions come in
opposite pairs (NORTH/SOUTH, EAST/WEST, UP/DOWN, ...); the "absolute"
direction of a pair is its positive member, in the same way abs() drops the
sign of a number. The axis mapping builder relies on absolute() to match a
destination axis with its source axis, and on exact equality to decide
whether the axis is inverted.
"""

from __future__ import annotations

import enum

from pyreferencing.core.exceptions import ValidationError


class AxisDirection(enum.Enum):
    """Direction of a coordinate system axis. Values are the ISO 19111 codes."""

    OTHER = 'other'

    # Compass points, clockwise from north. The first eight are absolute.
    NORTH = 'north'
    NORTH_NORTH_EAST = 'northNorthEast'
    NORTH_EAST = 'northEast'
    EAST_NORTH_EAST = 'eastNorthEast'
    EAST = 'east'
    EAST_SOUTH_EAST = 'eastSouthEast'
    SOUTH_EAST = 'southEast'
    SOUTH_SOUTH_EAST = 'southSouthEast'
    SOUTH = 'south'
    SOUTH_SOUTH_WEST = 'southSouthWest'
    SOUTH_WEST = 'southWest'
    WEST_SOUTH_WEST = 'westSouthWest'
    WEST = 'west'
    WEST_NORTH_WEST = 'westNorthWest'
    NORTH_WEST = 'northWest'
    NORTH_NORTH_WEST = 'northNorthWest'

    UP = 'up'
    DOWN = 'down'

    GEOCENTRIC_X = 'geocentricX'
    GEOCENTRIC_Y = 'geocentricY'
    GEOCENTRIC_Z = 'geocentricZ'

    FUTURE = 'future'
    PAST = 'past'

    COLUMN_POSITIVE = 'columnPositive'
    COLUMN_NEGATIVE = 'columnNegative'
    ROW_POSITIVE = 'rowPositive'
    ROW_NEGATIVE = 'rowNegative'

    DISPLAY_RIGHT = 'displayRight'
    DISPLAY_LEFT = 'displayLeft'
    DISPLAY_UP = 'displayUp'
    DISPLAY_DOWN = 'displayDown'

    def absolute(self) -> AxisDirection:
        """
        The positive member of this direction's opposite pair.

        SOUTH gives NORTH, WEST gives EAST, DOWN gives UP, PAST gives FUTURE.
        Directions without an opposite (OTHER, GEOCENTRIC_*) are their own
        absolute direction.
        """
        return _ABSOLUTE[self]

    def opposite(self) -> AxisDirection:
        """The direction pointing the other way, or self if there is none."""
        return _OPPOSITE.get(self, self)

    def is_opposite(self, other: AxisDirection) -> bool:
        """True if other points the opposite way along the same axis."""
        return other is not self and _OPPOSITE.get(self) is other

    @classmethod
    def parse(cls, name: str | AxisDirection) -> AxisDirection:
        """
        Look up a direction by enum name or ISO code.

        Matching ignores case, spaces, hyphens and underscores, so 'north east',
        'NORTH_EAST' and 'northEast' are the same direction.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValidationError(f"Unknown axis direction: {name!r}")
        key = _normalize(name)
        if key in _BY_KEY:
            return _BY_KEY[key]
        raise ValidationError(f"Unknown axis direction: {name!r}")

    def __str__(self) -> str:
        return self.name


def _normalize(name: str) -> str:
    return ''.join(c for c in name.lower() if c.isalnum())


_COMPASS = [
    AxisDirection.NORTH, AxisDirection.NORTH_NORTH_EAST, AxisDirection.NORTH_EAST,
    AxisDirection.EAST_NORTH_EAST, AxisDirection.EAST, AxisDirection.EAST_SOUTH_EAST,
    AxisDirection.SOUTH_EAST, AxisDirection.SOUTH_SOUTH_EAST, AxisDirection.SOUTH,
    AxisDirection.SOUTH_SOUTH_WEST, AxisDirection.SOUTH_WEST, AxisDirection.WEST_SOUTH_WEST,
    AxisDirection.WEST, AxisDirection.WEST_NORTH_WEST, AxisDirection.NORTH_WEST,
    AxisDirection.NORTH_NORTH_WEST,
]

# (positive, negative)
_PAIRS = [(_COMPASS[i], _COMPASS[i + 8]) for i in range(8)] + [
    (AxisDirection.UP, AxisDirection.DOWN),
    (AxisDirection.FUTURE, AxisDirection.PAST),
    (AxisDirection.COLUMN_POSITIVE, AxisDirection.COLUMN_NEGATIVE),
    (AxisDirection.ROW_POSITIVE, AxisDirection.ROW_NEGATIVE),
    (AxisDirection.DISPLAY_RIGHT, AxisDirection.DISPLAY_LEFT),
    (AxisDirection.DISPLAY_UP, AxisDirection.DISPLAY_DOWN),
]

_OPPOSITE: dict[AxisDirection, AxisDirection] = {}
_ABSOLUTE: dict[AxisDirection, AxisDirection] = {d: d for d in AxisDirection}
for _positive, _negative in _PAIRS:
    _OPPOSITE[_positive] = _negative
    _OPPOSITE[_negative] = _positive
    _ABSOLUTE[_negative] = _positive

_BY_KEY: dict[str, AxisDirection] = {}
for _direction in AxisDirection:
    _BY_KEY[_normalize(_direction.name)] = _direction
    _BY_KEY[_normalize(_direction.value)] = _direction
