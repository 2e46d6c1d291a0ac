"""
Plottable functions.

Provides the rectangular pulse, triangular pulse, causal exponential decay and
the pairwise product, together with the configuration layer that builds them
from dictionaries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Annotated, Any

from pydantic import (
    Field,
    PrivateAttr,
    RootModel,
)

from pwplot.base import PlottableFunction
from pwplot.exceptions import UnknownFunctionError, custom_error_msg
from pwplot.functions import composite, standard
from pwplot.functions.core import Function, Placement

log = logging.getLogger(__name__)

Rect = standard.Rect
Tri = standard.Tri
CausalExp = standard.CausalExp
FunctionProduct = composite.FunctionProduct


registered_functions: dict[str, type[PlottableFunction]] = {
    **standard.functions,
    "product": FunctionProduct,
}

# Type alias for all function types using discriminated union
FunctionType = Annotated[
    Rect | Tri | CausalExp | FunctionProduct,
    Field(discriminator="type"),
]


def from_dict(config: Mapping[str, Any]) -> PlottableFunction:
    """
    Create a function from a dictionary configuration.

    Dispatches on the ``type`` key, e.g. ``{"type": "tri", "shift": 1.0}`` or
    ``{"type": "product", "func1": {...}, "func2": {...}}``.

    Args:
        config: Configuration dictionary.

    Returns:
        PlottableFunction: The created function.

    Raises:
        UnknownFunctionError: If ``type`` is missing or not registered.
        pydantic.ValidationError: If the remaining fields are invalid.
    """
    func_type = config.get("type")
    try:
        func_cls = registered_functions[func_type]  # type: ignore[index]
    except KeyError:
        msg = f"Unknown function type '{func_type}', expected one of {sorted(registered_functions)}"
        raise UnknownFunctionError(msg) from None
    log.debug("building %s from %s", func_cls.__name__, dict(config))
    return func_cls.model_validate(dict(config))


class Functions(RootModel[list[FunctionType]]):
    """
    Collection of plottable functions.

    Holds functions built from configuration dictionaries and provides access
    by position or by ``name``.

    Examples:
        >>> funcs = Functions.model_validate([
        ...     {"type": "rect", "name": "gate", "scale": 2.0},
        ...     {"type": "tri", "name": "ramp"},
        ... ])
        >>> funcs["gate"].eval(0.9)
        1.0
    """

    root: Annotated[
        list[FunctionType],
        custom_error_msg(
            {
                "union_tag_invalid": "Unknown function type '{tag}' does not match any of the expected functions: {expected_tags}"
            }
        ),
    ] = Field(default_factory=list)
    _map: dict[str, PlottableFunction] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any, /) -> None:
        """Index named functions after Pydantic validation."""
        self._map = {func.name: func for func in self.root if func.name is not None}

    def __getitem__(self, item: str | int) -> PlottableFunction:
        if isinstance(item, int):
            return self.root[item]
        return self._map[item]

    def __contains__(self, item: str) -> bool:
        return item in self._map

    def __iter__(self) -> Iterator[PlottableFunction]:  # type: ignore[override]  # https://github.com/pydantic/pydantic/issues/8872
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


__all__ = [
    "CausalExp",
    "Function",
    "FunctionProduct",
    "FunctionType",
    "Functions",
    "Placement",
    "PlottableFunction",
    "Rect",
    "Tri",
    "from_dict",
    "registered_functions",
]
