"""
Composite function implementations.

Provides the pointwise product of two plottable functions, whose plot data
merges the breakpoints of both operands.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import pairwise
from typing import Any, Literal

from pydantic import Field, SerializeAsAny, field_validator

from pwplot.base import PlottableFunction
from pwplot.ranges import PlotRange
from pwplot.typing.aliases import MergedPoint, PlotData, PlotPoint

log = logging.getLogger(__name__)


def merge_plot_data(
    func1: PlottableFunction,
    data1: Sequence[PlotPoint],
    func2: PlottableFunction,
    data2: Sequence[PlotPoint],
) -> list[MergedPoint]:
    """
    Merge two x-ordered plot-data sequences into ``(x, y1, y2)`` triples.

    Standard two-pointer merge. Equal x-values are consumed from both sides at
    once and take priority over the less-than branches, so a breakpoint shared
    by both operands appears once. A point present on one side only takes its
    own y and evaluates the other function directly at that x.

    Args:
        func1: First operand, evaluated where only ``data2`` has a point.
        data1: Plot data of ``func1``.
        func2: Second operand, evaluated where only ``data1`` has a point.
        data2: Plot data of ``func2``.

    Returns:
        list[tuple[float, float, float]]: Merged triples in non-decreasing x order.
    """
    merged: list[MergedPoint] = []
    idx1 = idx2 = 0
    while idx1 < len(data1) and idx2 < len(data2):
        x1, y1 = data1[idx1]
        x2, y2 = data2[idx2]
        if x1 == x2:
            merged.append((x1, y1, y2))
            idx1 += 1
            idx2 += 1
        elif x1 < x2:
            merged.append((x1, y1, func2.eval(x1)))
            idx1 += 1
        else:
            merged.append((x2, func1.eval(x2), y2))
            idx2 += 1

    merged.extend((x, y, func2.eval(x)) for x, y in data1[idx1:])
    merged.extend((x, func1.eval(x), y) for x, y in data2[idx2:])
    return merged


def is_line_segment(left: MergedPoint, right: MergedPoint) -> bool:
    """
    Decide whether the product is drawn as a straight line between two triples.

    True for a vertical jump (equal x) or when either factor is unchanged
    across the pair, in which case the product is linear in the other factor.
    """
    return left[0] == right[0] or left[1] == right[1] or left[2] == right[2]


class FunctionProduct(PlottableFunction):
    r"""
    Pointwise product of two plottable functions.

    .. math::

        f(x) = f_1(x) \cdot f_2(x)

    Plot data is exact at every breakpoint of either operand. Between two
    consecutive merged points the product is drawn as a straight line when
    :func:`is_line_segment` allows it, and sampled every ``dense_step``
    otherwise. Operands may themselves be products.

    Operands are stored by reference, so reassigning an operand's ``shift``
    or ``scale`` is visible to the product on its next evaluation.

    Parameters:
        func1: First factor
        func2: Second factor
        dense_step: Sampling step between breakpoints where both factors vary (default 0.01)

    Examples:
        >>> from pwplot import Rect, Tri
        >>> product = FunctionProduct(Rect(scale=2), Tri(scale=2))
        >>> product.eval(0.5)
        0.75
    """

    type: Literal["product"] = Field(default="product", repr=False)
    func1: SerializeAsAny[PlottableFunction]
    func2: SerializeAsAny[PlottableFunction]
    dense_step: float = Field(default=0.01, gt=0, repr=False)

    def __init__(
        self,
        func1: PlottableFunction | dict[str, Any] | None = None,
        func2: PlottableFunction | dict[str, Any] | None = None,
        /,
        **data: Any,
    ) -> None:
        if func1 is not None:
            data["func1"] = func1
        if func2 is not None:
            data["func2"] = func2
        super().__init__(**data)

    @field_validator("func1", "func2", mode="before")
    @classmethod
    def build_operand(cls, value: Any) -> Any:
        """Build operands given as configuration dicts."""
        if isinstance(value, dict):
            from pwplot.functions import from_dict

            return from_dict(value)
        return value

    def eval(self, x: float) -> float:
        return self.func1.eval(x) * self.func2.eval(x)

    def _sample(self, plot_range: PlotRange) -> PlotData:
        step = self.dense_step
        merged = merge_plot_data(
            self.func1,
            self.func1.get_plot_data(plot_range),
            self.func2,
            self.func2.get_plot_data(plot_range),
        )

        data: PlotData = []
        dense_segments = 0
        for left, right in pairwise(merged):
            if is_line_segment(left, right):
                data.append((left[0], left[1] * left[2]))
                continue
            dense_segments += 1
            data.extend(self._sample_between(left[0], right[0], step))

        if merged:
            x, y1, y2 = merged[-1]
            data.append((x, y1 * y2))

        log.debug(
            "product: %d merged points, %d densely sampled segments",
            len(merged),
            dense_segments,
        )
        return data

    def _sample_between(self, start: float, stop: float, step: float) -> PlotData:
        """Sample the product on ``[start, stop)``; ``stop`` is left to the next segment."""
        samples: PlotData = []
        i, x = 0, start
        while x < stop:
            samples.append((x, self.eval(x)))
            i += 1
            x = start + i * step
        return samples


__all__ = [
    "FunctionProduct",
    "is_line_segment",
    "merge_plot_data",
]
