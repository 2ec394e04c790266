"""
lifegrid: Conway's Game of Life on a bounded grid

Fixed-size grid simulation with a double-buffered stepper, a matplotlib
canvas renderer, and a timed driver loop.
"""

from .config import LifeConfig, DEFAULT_CONFIG
from .core import Grid, Simulator, next_state
from .driver import LifeDriver, create_seeded_grid

__version__ = "0.1.0"

__all__ = [
    'LifeConfig',
    'DEFAULT_CONFIG',
    'Grid',
    'Simulator',
    'next_state',
    'LifeDriver',
    'create_seeded_grid'
]
