from __future__ import annotations

import os

import matplotlib
import pytest

# tests must not pick up the configuration of the user running them
os.environ.pop('SCANPATH_CONFIG', None)
matplotlib.use('Agg')


@pytest.fixture
def origin():
    from scanpath.geometry import Point

    return Point.origin()


@pytest.fixture
def restore_defaults():
    from scanpath import config

    yield config
    config.load_defaults()
