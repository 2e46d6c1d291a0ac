from __future__ import annotations

import importlib.metadata

import pwplot as m


def test_version():
    assert importlib.metadata.version("pwplot") == m.__version__
