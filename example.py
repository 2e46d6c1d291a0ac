#!/usr/bin/env python3
"""
Example usage of pwplot.

This script demonstrates:
1. Breakpoint-exact plot data for the standard functions
2. Products with line segments and dense re-sampling
3. Building functions from configuration
4. Sampling cost of products over growing ranges
"""

import time
from contextlib import contextmanager

import pwplot
import pwplot.logging


@contextmanager
def time_block(label):
    start = time.perf_counter()
    yield
    end = time.perf_counter()
    print(f"{label}: {end - start:.4f} seconds")


def show(label, data, limit=8):
    print(f"{label}: {len(data)} points")
    for x, y in data[:limit]:
        print(f"    ({x: .4f}, {y: .4f})")
    if len(data) > limit:
        print(f"    ... last ({data[-1][0]: .4f}, {data[-1][1]: .4f})")


def main():
    """Main example function demonstrating pwplot features."""
    print("=== pwplot Example ===\n")

    # Example 1: standard functions
    print("1. Standard functions")
    print("=" * 40)
    show("Rect(scale=2) on [-2, 2]", pwplot.Rect(scale=2.0).get_plot_data((-2, 2)))
    show("Tri() on [-2, 2]", pwplot.Tri().get_plot_data((-2, 2)))
    show("CausalExp() on [-1, 3]", pwplot.CausalExp().get_plot_data((-1, 3)))
    print()

    # Example 2: products
    print("2. Products")
    print("=" * 40)
    gated = pwplot.FunctionProduct(pwplot.Rect(scale=2.0), pwplot.Tri(scale=2.0))
    show("Rect * Tri (line segments only)", gated.get_plot_data((-2, 2)))
    squared = pwplot.FunctionProduct(pwplot.Tri(), pwplot.Tri())
    show("Tri * Tri (dense between kinks)", squared.get_plot_data((-2, 2)))
    print()

    # Example 3: configuration
    print("3. Configuration")
    print("=" * 40)
    funcs = pwplot.Functions.model_validate(
        [
            {"type": "causal_exp", "name": "decay", "scale": 0.5},
            {
                "type": "product",
                "name": "windowed_decay",
                "func1": {"type": "rect", "shift": 1.0, "scale": 2.0},
                "func2": {"type": "causal_exp", "scale": 0.5},
            },
        ]
    )
    for func in funcs:
        print(f"{func.name}: {func!r}")
    print(funcs["windowed_decay"].model_dump_json(indent=2))
    print()

    # Example 4: sampling cost
    print("4. Sampling cost")
    print("=" * 40)
    nested = pwplot.FunctionProduct(squared, pwplot.CausalExp(shift=-1.0))
    for half_width in (2.0, 20.0, 200.0):
        with time_block(f"nested product on [-{half_width:g}, {half_width:g}]"):
            data = nested.plot_array((-half_width, half_width))
        print(f"    {data.shape[0]} points")


if __name__ == "__main__":
    pwplot.logging.setup()
    main()
