"""Shared pytest setup: headless matplotlib and reusable grids."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from lifegrid.core.grid import Grid


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def blinker_grid():
    """5x5 grid with a horizontal blinker across the middle row."""
    grid = Grid(5, 5)
    for col in (1, 2, 3):
        grid[2, col] = True
    return grid
