"""
typing
"""

from __future__ import annotations

from pwplot.typing.aliases import MergedPoint, PlotData, PlotPoint

__all__ = (
    "MergedPoint",
    "PlotData",
    "PlotPoint",
)
