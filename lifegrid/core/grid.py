"""Core grid state management for Conway's Game of Life.

This module implements the bounded grid that the simulator reads and
writes. Cell state is held in a numpy boolean array indexed as
``state[row, col]``. The grid never wraps: coordinates outside
``0 <= row < row_count`` and ``0 <= col < col_count`` simply do not exist.
"""

import numpy as np
from typing import Iterator, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class Grid:
    """Fixed-size 2D boolean grid of Game of Life cells.

    Attributes:
        row_count: Number of rows
        col_count: Number of columns
        state: 2D numpy boolean array of shape (row_count, col_count)
    """

    # Moore neighborhood, identical for every cell
    NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1),           (0, 1),
        (1, -1),  (1, 0),  (1, 1),
    )

    def __init__(self, row_count: int, col_count: int, initial_state: Optional[np.ndarray] = None):
        """Initialize an all-dead grid with the given dimensions.

        Args:
            row_count: Number of rows (>= 0)
            col_count: Number of columns (>= 0)
            initial_state: Optional boolean array to copy in

        Raises:
            ValueError: If dimensions are negative or initial_state doesn't fit
        """
        if row_count < 0 or col_count < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {row_count}x{col_count}")

        self.row_count = row_count
        self.col_count = col_count

        if initial_state is not None:
            if initial_state.shape != (row_count, col_count):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(row_count, col_count)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((row_count, col_count), dtype=bool)

        logger.debug(f"Created grid {row_count}x{col_count}")

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.col_count)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies on the grid."""
        return 0 <= row < self.row_count and 0 <= col < self.col_count

    def neighbors_of(self, row: int, col: int) -> List[Coordinate]:
        """List the 8 neighbor coordinates of a cell.

        Coordinates are not bounds-filtered: edge and corner cells get
        entries that fall off the grid, and callers must discard those
        with in_bounds().

        Args:
            row: Cell row
            col: Cell column

        Returns:
            List of (row, col) pairs in NEIGHBOR_OFFSETS order
        """
        return [(row + dr, col + dc) for dr, dc in self.NEIGHBOR_OFFSETS]

    def cells(self) -> Iterator[Coordinate]:
        """Iterate over every coordinate in row-major order."""
        for row in range(self.row_count):
            for col in range(self.col_count):
                yield (row, col)

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.row_count}x{self.col_count} grid")

    def is_alive(self, row: int, col: int) -> bool:
        """Get cell state.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check(row, col)
        return bool(self.state[row, col])

    def set_alive(self, row: int, col: int, value: bool) -> None:
        """Set cell state.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check(row, col)
        self.state[row, col] = value

    def seed_random(self, count: int, rng: Optional[np.random.Generator] = None) -> List[Coordinate]:
        """Bring randomly chosen cells to life.

        Draws ``count`` coordinate pairs uniformly and independently, with
        replacement, and sets each one alive. Repeat picks are harmless, so
        fewer than ``count`` cells may end up alive.

        Args:
            count: Number of coordinate pairs to draw
            rng: Random generator (unseeded default_rng() if None)

        Returns:
            The drawn coordinates, duplicates included

        Raises:
            ValueError: If count is negative, or positive on a grid with no cells
        """
        if count < 0:
            raise ValueError(f"Seed count must be non-negative, got {count}")
        if count == 0:
            return []
        if self.row_count == 0 or self.col_count == 0:
            raise ValueError(f"Cannot seed {count} cells on an empty {self.row_count}x{self.col_count} grid")

        if rng is None:
            rng = np.random.default_rng()

        rows = rng.integers(0, self.row_count, size=count)
        cols = rng.integers(0, self.col_count, size=count)
        self.state[rows, cols] = True

        logger.debug(f"Seeded {count} picks, {self.count_alive()} cells alive")
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.row_count, self.col_count, self.state)

    def copy_from(self, other: 'Grid') -> None:
        """Overwrite this grid's cells with another grid's cells.

        Raises:
            ValueError: If the grids differ in shape
        """
        if other.shape != self.shape:
            raise ValueError(f"Cannot copy {other.shape} grid into {self.shape} grid")
        self.state[:] = other.state

    def clear(self) -> None:
        """Reset all cells to dead state."""
        self.state.fill(False)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def __getitem__(self, key: Coordinate) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.is_alive(row, col)

    def __setitem__(self, key: Coordinate, value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        row, col = key
        self.set_alive(row, col, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self.state, other.state)

    def __str__(self) -> str:
        """String representation showing grid state."""
        alive_char = '█'
        dead_char = '░'

        lines = []
        for row in range(min(10, self.row_count)):  # Show first 10 rows
            line = ''.join(alive_char if cell else dead_char for cell in self.state[row, :20])
            if self.col_count > 20:
                line += '...'
            lines.append(line)

        if self.row_count > 10:
            lines.append('...')

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Grid({self.row_count}x{self.col_count}, alive={self.count_alive()})"
