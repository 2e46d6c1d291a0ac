from __future__ import annotations

import pytest


def pytest_addoption(parser):
    """Add command line options for test categories."""
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests based on command line options."""
    # Skip slow tests unless --runslow option is given
    if not config.getoption("--runslow"):
        skip_slow = pytest.mark.skip(reason="need --runslow option to run")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def assert_plot_data_contract(data, lo, hi):
    """Check the boundary and ordering guarantees shared by every sampler."""
    assert data, "plot data must not be empty"
    assert data[0][0] == lo
    assert data[-1][0] == hi
    xs = [x for x, _ in data]
    assert all(a <= b for a, b in zip(xs, xs[1:], strict=False)), xs


@pytest.fixture
def check_contract():
    """Expose the plot-data contract check to tests."""
    return assert_plot_data_contract
