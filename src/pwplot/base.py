"""
Base class for plottable functions.

Provides the shared interface every function variant and every composite
implements: pointwise evaluation and breakpoint-exact plot data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field

from pwplot.ranges import PlotRange, RangeLike
from pwplot.typing.aliases import PlotData

log = logging.getLogger(__name__)


class PlottableFunction(BaseModel, ABC):
    """Base class for one-dimensional functions that can be rendered as plot data.

    A plot-data sequence is an ordered list of ``(x, y)`` points meant to be
    connected by straight segments. Every sequence returned by
    :meth:`get_plot_data` satisfies:

    - the first point has ``x == range.lo`` and the last has ``x == range.hi``
    - x-values are non-decreasing, with vertical jumps represented by two
      consecutive points sharing an x-value
    - every breakpoint (edge, kink or jump) strictly inside the range is an
      exact point of the sequence

    Subclasses implement :meth:`eval` and :meth:`_sample`. The range is
    validated and degenerate ranges are handled here, so ``_sample`` always
    receives a range with ``lo < hi``.

    Attributes:
        name (str | None): Optional label used to look the function up in a collection.
        type (str): Type identifier, the discriminator for configuration dicts.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str | None = Field(default=None, repr=False)
    type: str = Field(..., repr=False)

    @abstractmethod
    def eval(self, x: float) -> float:
        """
        Evaluate the function at a single point.

        Args:
            x: Point to evaluate at.

        Returns:
            float: Function value at ``x``.
        """

    @abstractmethod
    def _sample(self, plot_range: PlotRange) -> PlotData:
        """Sample plot data over a validated, non-degenerate range."""

    def get_plot_data(self, plot_range: RangeLike) -> PlotData:
        """
        Render the function as piecewise-linear plot data.

        Args:
            plot_range: Closed interval ``[lo, hi]`` as a PlotRange or a pair.

        Returns:
            list[tuple[float, float]]: Ordered plot points from ``lo`` to ``hi``.

        Raises:
            InvalidRangeError: If ``lo > hi`` or the range is malformed.
        """
        plot_range = PlotRange.coerce(plot_range)
        if plot_range.is_degenerate:
            y = self.eval(plot_range.lo)
            return [(plot_range.lo, y), (plot_range.hi, y)]
        data = self._sample(plot_range)
        log.debug("%s: %d points over %s", self, len(data), plot_range.as_tuple())
        return data

    def eval_many(self, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Evaluate the function pointwise over a sequence of x-values.

        Args:
            xs: Points to evaluate at, any shape.

        Returns:
            numpy.ndarray: Function values with the same shape as ``xs``.
        """
        points = np.asarray(xs, dtype=float)
        values = np.fromiter(
            (self.eval(float(x)) for x in points.ravel()),
            dtype=float,
            count=points.size,
        )
        return values.reshape(points.shape)

    def plot_array(self, plot_range: RangeLike) -> npt.NDArray[np.float64]:
        """
        Render the function as an ``(N, 2)`` array of plot points.

        Args:
            plot_range: Closed interval ``[lo, hi]`` as a PlotRange or a pair.

        Returns:
            numpy.ndarray: Column 0 holds x-values, column 1 the y-values.
        """
        return np.asarray(self.get_plot_data(plot_range), dtype=float).reshape(-1, 2)
