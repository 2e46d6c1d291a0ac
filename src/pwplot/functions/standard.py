"""
Standard closed-form functions.

Provides the rectangular pulse, triangular pulse and causal exponential decay,
each with exact breakpoints in its plot data.
"""

from __future__ import annotations

import logging
import math
from typing import Literal

from pydantic import Field

from pwplot.exceptions import SamplingError
from pwplot.functions.core import Function, Placement
from pwplot.ranges import PlotRange
from pwplot.typing.aliases import PlotData

log = logging.getLogger(__name__)


class Rect(Function):
    r"""
    Rectangular pulse.

    .. math::

        f(x) = \begin{cases}
            1 & \text{shift} - \text{scale}/2 \le x \le \text{shift} + \text{scale}/2 \\
            0 & \text{otherwise}
        \end{cases}

    Both edges belong to the pulse. A zero ``scale`` leaves the single point
    ``x = shift``; a negative ``scale`` leaves an empty support.

    Plot data represents each edge strictly inside the range as a vertical
    jump: two stacked points ``(l, 0), (l, 1)`` on the rising edge and
    ``(r, 1), (r, 0)`` on the falling edge.

    Parameters:
        shift: Center of the pulse
        scale: Width of the pulse
    """

    type: Literal["rect"] = Field(default="rect", repr=False)

    @staticmethod
    def edges(placement: Placement) -> tuple[float, float]:
        """Return the ``(left, right)`` edges of the pulse."""
        half_width = 0.5 * placement.scale
        return placement.shift - half_width, placement.shift + half_width

    def _eval_at(self, placement: Placement, x: float) -> float:
        left, right = self.edges(placement)
        return 1.0 if left <= x <= right else 0.0

    def _sample_at(self, placement: Placement, plot_range: PlotRange) -> PlotData:
        left, right = self.edges(placement)
        data: PlotData = [(plot_range.lo, self._eval_at(placement, plot_range.lo))]
        if left < right:
            if plot_range.strictly_contains(left):
                log.debug("rect: rising edge at %s", left)
                data.extend([(left, 0.0), (left, 1.0)])
            if plot_range.strictly_contains(right):
                log.debug("rect: falling edge at %s", right)
                data.extend([(right, 1.0), (right, 0.0)])
        data.append((plot_range.hi, self._eval_at(placement, plot_range.hi)))
        return data


class Tri(Function):
    r"""
    Triangular pulse.

    .. math::

        f(x) = \max\left(0, 1 - \left|\frac{x - \text{shift}}{\text{scale}}\right|\right)

    Rises linearly from 0 at ``shift - scale`` to 1 at ``shift`` and falls back
    to 0 at ``shift + scale``. The function is piecewise linear, so the
    boundary points and the kinks strictly inside the range are all the plot
    data needed.

    Parameters:
        shift: Position of the peak
        scale: Half-width of the base
    """

    type: Literal["tri"] = Field(default="tri", repr=False)

    @staticmethod
    def kinks(placement: Placement) -> list[tuple[float, float]]:
        """Return the kink points ``(x, f(x))`` in ascending x order."""
        kinks = [
            (placement.shift - placement.scale, 0.0),
            (placement.shift, 1.0),
            (placement.shift + placement.scale, 0.0),
        ]
        # a negative scale mirrors the outer kinks
        return sorted(kinks, key=lambda point: point[0])

    def _eval_at(self, placement: Placement, x: float) -> float:
        u = placement.normalize(x)
        if u < -1:
            return 0.0
        if u < 0:
            return 1.0 + u
        if u < 1:
            return 1.0 - u
        return 0.0

    def _sample_at(self, placement: Placement, plot_range: PlotRange) -> PlotData:
        data: PlotData = [(plot_range.lo, self._eval_at(placement, plot_range.lo))]
        data.extend(
            kink for kink in self.kinks(placement) if plot_range.strictly_contains(kink[0])
        )
        data.append((plot_range.hi, self._eval_at(placement, plot_range.hi)))
        return data


class CausalExp(Function):
    r"""
    One-sided exponential decay.

    .. math::

        f(x) = \begin{cases}
            0 & x < \text{shift} \\
            e^{-(x - \text{shift})/\text{scale}} & x \ge \text{shift}
        \end{cases}

    The jump from 0 to 1 at ``shift`` is captured by an exact ``(shift, 0)``
    point followed by uniform samples starting at ``shift``. The decay is
    sampled with ``samples_per_scale`` points per unit of ``scale``, which is
    a resolution rather than an error bound.

    ``scale`` must be positive for the function to decay; ``eval`` does not
    check it, but sampling raises :class:`~pwplot.exceptions.SamplingError`
    on a non-positive step.

    Parameters:
        shift: Onset of the decay
        scale: Decay length
        samples_per_scale: Number of samples per unit of ``scale`` (default 30)
    """

    type: Literal["causal_exp"] = Field(default="causal_exp", repr=False)
    samples_per_scale: int = Field(default=30, gt=0, repr=False)

    def _eval_at(self, placement: Placement, x: float) -> float:
        u = placement.normalize(x)
        return 0.0 if u < 0 else math.exp(-u)

    def _sample_at(self, placement: Placement, plot_range: PlotRange) -> PlotData:
        step = placement.scale / self.samples_per_scale
        if not step > 0:
            msg = f"CausalExp needs a positive scale to sample, got scale={placement.scale}"
            raise SamplingError(msg)

        data: PlotData = [(plot_range.lo, self._eval_at(placement, plot_range.lo))]
        if plot_range.contains(placement.shift):
            data.append((placement.shift, 0.0))

        start = max(placement.shift, plot_range.lo)
        i, x = 0, start
        while x <= plot_range.hi:
            data.append((x, self._eval_at(placement, x)))
            i += 1
            x = start + i * step
        log.debug("causal_exp: %d decay samples from %s", i, start)

        data.append((plot_range.hi, self._eval_at(placement, plot_range.hi)))
        return data


# Registry of standard functions
functions: dict[str, type[Function]] = {
    "rect": Rect,
    "tri": Tri,
    "causal_exp": CausalExp,
}

__all__ = [
    "CausalExp",
    "Rect",
    "Tri",
    "functions",
]
