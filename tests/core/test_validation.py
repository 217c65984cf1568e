"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_size: non-negative integer dimensions
    - check_flat_data: conversion and length
    - check_regular_rows: nested rows of equal length
    - check_same_shape: MatrixLike shape equality
    - check_dimension_match: envelope dimension vs axis count
    - check_postcondition: DEBUG_CHECKS switch
"""

import numpy as np
import pytest

from pyreferencing.core import validation
from pyreferencing.core.exceptions import (
    DimensionError,
    MismatchedDimensionError,
    NumericalError,
    ValidationError,
)
from pyreferencing.core.validation import (
    check_dimension_match,
    check_flat_data,
    check_postcondition,
    check_regular_rows,
    check_same_shape,
    check_size,
)
from pyreferencing.matrix import GeneralMatrix
from pyreferencing.referencing import GeneralEnvelope


# ═══════════════════════════════════════════════════════════════════════
# check_size
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    def test_zero_allowed(self):
        assert check_size(0, "n") == 0

    def test_numpy_integer_converted(self):
        result = check_size(np.int64(3), "n")
        assert result == 3
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="n: must be non-negative"):
            check_size(-1, "n")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_size(2.0, "n")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_size(True, "n")


# ═══════════════════════════════════════════════════════════════════════
# check_flat_data
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFlatData:

    def test_list_to_float_array(self):
        result = check_flat_data([1, 2, 3, 4], 2, 2, "values")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0, 4.0])

    def test_nested_input_flattened(self):
        result = check_flat_data([[1, 2], [3, 4]], 2, 2, "values")
        assert result.shape == (4,)

    def test_wrong_length(self):
        with pytest.raises(ValidationError, match="expected 6 values for a 2x3 matrix, got 5"):
            check_flat_data([1, 2, 3, 4, 5], 2, 3, "values")

    def test_non_numeric(self):
        with pytest.raises(ValidationError, match="cannot convert"):
            check_flat_data(["a", "b"], 1, 2, "values")

    def test_copy_not_alias(self):
        source = np.array([1.0, 2.0])
        result = check_flat_data(source, 1, 2, "values")
        result[0] = 99.0
        assert source[0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# check_regular_rows
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRegularRows:

    def test_regular(self):
        assert check_regular_rows([[1, 2, 3], [4, 5, 6]], "rows") == (2, 3)

    def test_empty(self):
        assert check_regular_rows([], "rows") == (0, 0)

    def test_irregular(self):
        with pytest.raises(ValidationError, match="not regular, row 1 has 1 columns"):
            check_regular_rows([[1, 2], [3]], "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_same_shape / check_dimension_match
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_same_shape_passes(self):
        check_same_shape(GeneralMatrix(2, 3), GeneralMatrix(2, 3), "add")

    def test_different_shape(self):
        with pytest.raises(DimensionError, match="add: shape mismatch, 2x3 vs 3x2"):
            check_same_shape(GeneralMatrix(2, 3), GeneralMatrix(3, 2), "add")

    def test_dimension_match_passes(self):
        env = GeneralEnvelope.from_corners([0, 0], [1, 1])
        check_dimension_match("src_region", env, 2)

    def test_dimension_mismatch_names_argument(self):
        env = GeneralEnvelope.from_corners([0, 0, 0], [1, 1, 1])
        with pytest.raises(MismatchedDimensionError, match="dst_region") as exc_info:
            check_dimension_match("dst_region", env, 2)
        assert exc_info.value.argument_name == "dst_region"
        assert exc_info.value.dimension == 3
        assert exc_info.value.expected == 2


# ═══════════════════════════════════════════════════════════════════════
# check_postcondition
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPostcondition:

    def test_holds(self, monkeypatch):
        monkeypatch.setattr(validation, "DEBUG_CHECKS", True)
        check_postcondition(True, "always true")

    def test_violated(self, monkeypatch):
        monkeypatch.setattr(validation, "DEBUG_CHECKS", True)
        with pytest.raises(NumericalError, match="Post-condition violated: broken"):
            check_postcondition(False, "broken", GeneralMatrix(1))

    def test_disabled(self, monkeypatch):
        monkeypatch.setattr(validation, "DEBUG_CHECKS", False)
        check_postcondition(False, "ignored")
