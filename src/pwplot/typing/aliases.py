"""
typing
"""

from __future__ import annotations

from typing import TypeAlias

PlotPoint: TypeAlias = tuple[float, float]
PlotData: TypeAlias = list[PlotPoint]
MergedPoint: TypeAlias = tuple[float, float, float]

__all__ = (
    "MergedPoint",
    "PlotData",
    "PlotPoint",
)
