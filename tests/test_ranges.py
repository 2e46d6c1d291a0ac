"""
Unit tests for plotting ranges.

Tests for PlotRange construction, validation of the bound ordering, and
coercion of plain (lo, hi) pairs.
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from pwplot.exceptions import InvalidRangeError, PwplotException
from pwplot.ranges import PlotRange


class TestPlotRange:
    """Tests for the PlotRange class."""

    def test_range_creation(self):
        """Test basic PlotRange creation."""
        plot_range = PlotRange(lo=-2.0, hi=3.0)
        assert plot_range.lo == -2.0
        assert plot_range.hi == 3.0
        assert plot_range.width == 5.0
        assert not plot_range.is_degenerate
        assert plot_range.as_tuple() == (-2.0, 3.0)

    def test_range_degenerate_allowed(self):
        """Test that PlotRange allows lo == hi."""
        plot_range = PlotRange(lo=1.5, hi=1.5)
        assert plot_range.is_degenerate
        assert plot_range.width == 0.0

    def test_range_reversed_bounds_raise(self):
        """Test that constructing a PlotRange with lo > hi fails validation."""
        with pytest.raises(
            ValidationError,
            match=r"Range lower bound \(3\.0\) must be <= upper bound \(1\.0\)",
        ):
            PlotRange(lo=3.0, hi=1.0)

    def test_range_is_frozen(self):
        """Test that PlotRange bounds cannot be reassigned."""
        plot_range = PlotRange(lo=0.0, hi=1.0)
        with pytest.raises(ValidationError):
            plot_range.lo = 2.0

    @pytest.mark.parametrize(
        ("x", "contains", "strictly_contains"),
        [
            pytest.param(-1.0, True, False, id="lower_bound"),
            pytest.param(0.0, True, True, id="interior"),
            pytest.param(1.0, True, False, id="upper_bound"),
            pytest.param(1.5, False, False, id="outside"),
        ],
    )
    def test_range_membership(self, x, contains, strictly_contains):
        """Test closed and open membership checks."""
        plot_range = PlotRange(lo=-1.0, hi=1.0)
        assert plot_range.contains(x) is contains
        assert plot_range.strictly_contains(x) is strictly_contains


class TestPlotRangeCoerce:
    """Tests for PlotRange.coerce."""

    def test_coerce_returns_existing_range(self):
        """Test that an existing PlotRange is passed through unchanged."""
        plot_range = PlotRange(lo=0.0, hi=1.0)
        assert PlotRange.coerce(plot_range) is plot_range

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param((-1, 2), id="int_tuple"),
            pytest.param([-1.0, 2.0], id="float_list"),
        ],
    )
    def test_coerce_pair(self, value):
        """Test that pairs are converted to float bounds."""
        plot_range = PlotRange.coerce(value)
        assert plot_range.as_tuple() == (-1.0, 2.0)
        assert isinstance(plot_range.lo, float)

    def test_coerce_reversed_pair_raises(self):
        """Test that a reversed pair is reported as InvalidRangeError."""
        with pytest.raises(InvalidRangeError, match=r"must be <= upper bound"):
            PlotRange.coerce((2.0, -2.0))

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param((1.0,), id="too_short"),
            pytest.param((0.0, 1.0, 2.0), id="too_long"),
            pytest.param(("a", 1.0), id="not_a_number"),
            pytest.param(3.0, id="scalar"),
        ],
    )
    def test_coerce_malformed_raises(self, value):
        """Test that values that are not a pair of numbers are rejected."""
        with pytest.raises(InvalidRangeError, match=r"Expected a \(lo, hi\) pair"):
            PlotRange.coerce(value)

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param((0.0, math.inf), id="infinite"),
            pytest.param((math.nan, 1.0), id="nan"),
        ],
    )
    def test_coerce_non_finite_raises(self, value):
        """Test that non-finite bounds are rejected."""
        with pytest.raises(InvalidRangeError, match=r"must be finite"):
            PlotRange.coerce(value)

    def test_invalid_range_error_hierarchy(self):
        """Test that InvalidRangeError can be caught as ValueError or PwplotException."""
        assert issubclass(InvalidRangeError, ValueError)
        assert issubclass(InvalidRangeError, PwplotException)
