"""
Plotting ranges.

Provides the closed interval over which plot data is sampled, and the
coercion used by every sampler to accept either a ``PlotRange`` or a plain
``(lo, hi)`` pair.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, model_validator

from pwplot.exceptions import InvalidRangeError


def _check_bounds(lo: float, hi: float) -> None:
    if not (math.isfinite(lo) and math.isfinite(hi)):
        msg = f"Range bounds must be finite, got [{lo}, {hi}]"
        raise InvalidRangeError(msg)
    if lo > hi:
        msg = f"Range lower bound ({lo}) must be <= upper bound ({hi})"
        raise InvalidRangeError(msg)


class PlotRange(BaseModel):
    """
    Closed interval ``[lo, hi]`` supplied by the caller of a sampler.

    The interval is never empty: ``lo == hi`` is allowed and describes a
    single x-value.

    Parameters:
        lo: Lower bound, the x of the first emitted plot point
        hi: Upper bound, the x of the last emitted plot point
    """

    model_config = ConfigDict(frozen=True)

    lo: float
    hi: float

    @model_validator(mode="after")
    def validate_bounds(self) -> PlotRange:
        """Validate that hi >= lo and both bounds are finite."""
        _check_bounds(self.lo, self.hi)
        return self

    @classmethod
    def coerce(cls, value: RangeLike) -> PlotRange:
        """
        Build a PlotRange from a PlotRange or a ``(lo, hi)`` pair.

        Args:
            value: Range to normalize.

        Returns:
            PlotRange: The validated range.

        Raises:
            InvalidRangeError: If the value is not a pair of finite numbers
                with ``lo <= hi``.
        """
        if isinstance(value, PlotRange):
            return value
        try:
            lo, hi = (float(bound) for bound in value)
        except (TypeError, ValueError) as exc:
            msg = f"Expected a (lo, hi) pair of numbers, got {value!r}"
            raise InvalidRangeError(msg) from exc
        _check_bounds(lo, hi)
        return cls(lo=lo, hi=hi)

    @property
    def width(self) -> float:
        """Length of the interval."""
        return self.hi - self.lo

    @property
    def is_degenerate(self) -> bool:
        """Whether the interval collapses to a single x-value."""
        return self.lo == self.hi

    def contains(self, x: float) -> bool:
        """Check whether ``x`` lies in the closed interval."""
        return self.lo <= x <= self.hi

    def strictly_contains(self, x: float) -> bool:
        """Check whether ``x`` lies strictly between the bounds."""
        return self.lo < x < self.hi

    def as_tuple(self) -> tuple[float, float]:
        """Return the bounds as a ``(lo, hi)`` pair."""
        return (self.lo, self.hi)


RangeLike: TypeAlias = PlotRange | tuple[float, float] | Sequence[float]

__all__ = ("PlotRange", "RangeLike")
