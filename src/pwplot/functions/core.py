"""
Core function classes.

Provides the base class for the closed-form pulse and decay functions, which
share a horizontal translation (``shift``) and stretch (``scale``).
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np

from pwplot.base import PlottableFunction
from pwplot.ranges import PlotRange
from pwplot.typing.aliases import PlotData

log = logging.getLogger(__name__)


class Placement(NamedTuple):
    """Snapshot of the ``shift``/``scale`` parameters of a function."""

    shift: float
    scale: float

    def normalize(self, x: float) -> float:
        """
        Map ``x`` to the unshifted, unscaled coordinate ``(x - shift) / scale``.

        Division follows IEEE float semantics: a zero ``scale`` yields
        ``inf``/``nan`` instead of raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(x - self.shift) / np.float64(self.scale))


class Function(PlottableFunction):
    """
    Base class for shifted and scaled closed-form functions.

    Subclasses define the function on normalized coordinates via
    :meth:`_eval_at` and sample it via :meth:`_sample_at`. Both receive a
    :class:`Placement` so that one ``get_plot_data`` call observes a single
    consistent snapshot of the parameters, even if they are reassigned
    between calls.

    Parameters:
        shift: Horizontal translation (default 0)
        scale: Horizontal stretch (default 1)
    """

    shift: float = 0.0
    scale: float = 1.0

    @property
    def placement(self) -> Placement:
        """Current ``(shift, scale)`` snapshot."""
        return Placement(self.shift, self.scale)

    def eval(self, x: float) -> float:
        return self._eval_at(self.placement, x)

    def _sample(self, plot_range: PlotRange) -> PlotData:
        return self._sample_at(self.placement, plot_range)

    def _eval_at(self, placement: Placement, x: float) -> float:
        msg = f"Function type {self.type} not implemented"
        raise NotImplementedError(msg)

    def _sample_at(self, placement: Placement, plot_range: PlotRange) -> PlotData:
        msg = f"Function type {self.type} not implemented"
        raise NotImplementedError(msg)
