"""
Tests for AxisDirection.

Validates absolute()/opposite() pairs across every family of directions,
and name parsing.
"""

import pytest

from pyreferencing.core.exceptions import ValidationError
from pyreferencing.matrix import from_axes
from pyreferencing.referencing import AxisDirection as AD


class TestAbsolute:

    @pytest.mark.parametrize("negative, positive", [
        (AD.SOUTH, AD.NORTH),
        (AD.WEST, AD.EAST),
        (AD.SOUTH_WEST, AD.NORTH_EAST),
        (AD.NORTH_WEST, AD.SOUTH_EAST),
        (AD.NORTH_NORTH_WEST, AD.SOUTH_SOUTH_EAST),
        (AD.DOWN, AD.UP),
        (AD.PAST, AD.FUTURE),
        (AD.COLUMN_NEGATIVE, AD.COLUMN_POSITIVE),
        (AD.ROW_NEGATIVE, AD.ROW_POSITIVE),
        (AD.DISPLAY_LEFT, AD.DISPLAY_RIGHT),
        (AD.DISPLAY_DOWN, AD.DISPLAY_UP),
    ])
    def test_negative_maps_to_positive(self, negative, positive):
        assert negative.absolute() is positive
        assert positive.absolute() is positive

    def test_north_and_south_share_absolute(self):
        assert AD.NORTH.absolute() is AD.SOUTH.absolute()

    @pytest.mark.parametrize("direction", [
        AD.OTHER, AD.GEOCENTRIC_X, AD.GEOCENTRIC_Y, AD.GEOCENTRIC_Z,
    ])
    def test_unpaired_is_own_absolute(self, direction):
        assert direction.absolute() is direction
        assert direction.opposite() is direction

    def test_every_direction_has_absolute(self):
        for direction in AD:
            assert direction.absolute().absolute() is direction.absolute()


class TestOpposite:

    def test_pairs_are_symmetric(self):
        for direction in AD:
            assert direction.opposite().opposite() is direction

    def test_is_opposite(self):
        assert AD.NORTH.is_opposite(AD.SOUTH)
        assert AD.SOUTH.is_opposite(AD.NORTH)
        assert not AD.NORTH.is_opposite(AD.NORTH)
        assert not AD.NORTH.is_opposite(AD.EAST)
        assert not AD.GEOCENTRIC_X.is_opposite(AD.GEOCENTRIC_X)

    def test_compass_opposites(self):
        assert AD.EAST_NORTH_EAST.opposite() is AD.WEST_SOUTH_WEST
        assert AD.SOUTH_EAST.opposite() is AD.NORTH_WEST


class TestParse:

    @pytest.mark.parametrize("name", [
        "NORTH_EAST", "north_east", "northEast", "North East", "north-east",
    ])
    def test_spellings(self, name):
        assert AD.parse(name) is AD.NORTH_EAST

    def test_member_passthrough(self):
        assert AD.parse(AD.UP) is AD.UP

    def test_unknown(self):
        with pytest.raises(ValidationError, match="Unknown axis direction"):
            AD.parse("sideways")

    @pytest.mark.parametrize("value", [42, None, 1.5])
    def test_non_string(self, value):
        with pytest.raises(ValidationError, match="Unknown axis direction"):
            AD.parse(value)

    def test_builder_rejects_non_string_axis(self):
        with pytest.raises(ValidationError):
            from_axes([42], [AD.NORTH])

    def test_str_is_name(self):
        assert str(AD.GEOCENTRIC_Z) == "GEOCENTRIC_Z"
