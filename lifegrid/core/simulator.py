"""Game of Life generation stepping.

The simulator advances a bounded grid one generation at a time. Each step
reads only the grid it is given and writes the next generation into a
second buffer, so neighbor counts never see a half-updated generation.
The two buffers trade places after every step.
"""

from typing import Optional
import logging

from .grid import Grid
from .conway_rules import next_state

logger = logging.getLogger(__name__)


class Simulator:
    """Double-buffered Game of Life stepper.

    After ``new = sim.step(old)`` the caller should treat ``new`` as the
    active grid. ``old`` is left untouched by that step and is reused as the
    write buffer only when the next call steps ``new``; any other input
    gets a freshly allocated output grid.

    Attributes:
        generation: Number of steps taken since creation or reset()
    """

    def __init__(self):
        self._generation = 0
        self._back: Optional[Grid] = None
        self._front: Optional[Grid] = None

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        """Zero the generation counter and drop both buffers."""
        self._generation = 0
        self._back = None
        self._front = None

    def live_neighbor_count(self, grid: Grid, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Neighbor coordinates that fall off the grid are left out of the
        tally entirely.

        Args:
            grid: The grid containing the cell
            row: Cell row
            col: Cell column

        Returns:
            Number of living in-bounds neighbors (0-8)
        """
        count = 0
        for n_row, n_col in grid.neighbors_of(row, col):
            if grid.in_bounds(n_row, n_col) and grid.state[n_row, n_col]:
                count += 1
        return count

    def _write_buffer(self, grid: Grid) -> Grid:
        # The spare is only recycled when stepping our own last output
        back = self._back
        if back is None or grid is not self._front or back is grid or back.shape != grid.shape:
            back = Grid(grid.row_count, grid.col_count)
        return back

    def step(self, grid: Grid) -> Grid:
        """Compute the next generation.

        Args:
            grid: Current generation (read only)

        Returns:
            Grid holding the next generation
        """
        out = self._write_buffer(grid)

        for row, col in grid.cells():
            n = self.live_neighbor_count(grid, row, col)
            out.state[row, col] = next_state(bool(grid.state[row, col]), n)

        self._back = grid
        self._front = out
        self._generation += 1

        logger.debug(f"Generation {self._generation}: {out.count_alive()} alive")
        return out

    def advance(self, grid: Grid, generations: int) -> Grid:
        """Step a grid several generations.

        Args:
            grid: Starting generation
            generations: Number of steps to take (>= 0)

        Returns:
            Grid holding the final generation
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            grid = self.step(grid)
        return grid
