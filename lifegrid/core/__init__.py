"""
Game of Life simulation core: bounded grid, transition rule and stepper.
"""

from .grid import Grid
from .conway_rules import next_state
from .simulator import Simulator

__all__ = [
    'Grid',
    'next_state',
    'Simulator',
]
