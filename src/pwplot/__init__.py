"""
pwplot: breakpoint-exact piecewise-linear plot data for closed-form functions
"""

from __future__ import annotations

from pwplot._version import version as __version__
from pwplot.base import PlottableFunction
from pwplot.functions import (
    CausalExp,
    Function,
    FunctionProduct,
    Functions,
    Rect,
    Tri,
    from_dict,
    registered_functions,
)
from pwplot.ranges import PlotRange

__all__ = [
    "CausalExp",
    "Function",
    "FunctionProduct",
    "Functions",
    "PlotRange",
    "PlottableFunction",
    "Rect",
    "Tri",
    "__version__",
    "from_dict",
    "registered_functions",
]
