"""
Simulator tests: neighbor tallies on a bounded grid, whole-grid stepping,
double buffering, and classic pattern behavior.
"""

import pytest
import numpy as np
from lifegrid.core.grid import Grid
from lifegrid.core.simulator import Simulator


def grid_from_rows(*rows: str) -> Grid:
    """Build a grid from strings of '#' (alive) and '.' (dead)."""
    state = np.array([[ch == '#' for ch in line] for line in rows], dtype=bool)
    return Grid(state.shape[0], state.shape[1], state)


class TestNeighborCounting:
    """Live neighbor tallies."""

    def test_center_not_counted(self):
        grid = Grid(3, 3)
        grid[1, 1] = True
        assert Simulator().live_neighbor_count(grid, 1, 1) == 0

    def test_all_around(self):
        grid = Grid(3, 3)
        grid.state[:] = True
        grid[1, 1] = False
        assert Simulator().live_neighbor_count(grid, 1, 1) == 8

    @pytest.mark.parametrize("row,col", [(0, 0), (0, 4), (4, 0), (4, 4)])
    def test_corner_counts_at_most_three(self, row, col):
        grid = Grid(5, 5)
        grid.state[:] = True
        assert Simulator().live_neighbor_count(grid, row, col) == 3

    @pytest.mark.parametrize("row,col", [(0, 2), (2, 0), (4, 2), (2, 4)])
    def test_edge_counts_at_most_five(self, row, col):
        grid = Grid(5, 5)
        grid.state[:] = True
        assert Simulator().live_neighbor_count(grid, row, col) == 5

    def test_no_wraparound(self):
        """Cells on the opposite edge are not neighbors."""
        grid = Grid(5, 5)
        grid[4, 4] = True
        grid[0, 4] = True
        grid[4, 0] = True
        assert Simulator().live_neighbor_count(grid, 0, 0) == 0


class TestStepRules:
    """Per-cell outcomes of a full step."""

    @pytest.mark.parametrize("rows,cols", [(0, 0), (0, 3), (1, 1), (6, 9)])
    def test_all_dead_stays_dead(self, rows, cols):
        grid = Grid(rows, cols)
        assert Simulator().step(grid).is_empty()

    def test_birth_on_three(self):
        grid = grid_from_rows(
            "#.#",
            "...",
            "#..",
        )
        assert Simulator().step(grid)[1, 1] is True

    def test_survival_on_three(self):
        grid = grid_from_rows(
            "#.#",
            ".#.",
            "#..",
        )
        assert Simulator().step(grid)[1, 1] is True

    def test_two_neighbors_keeps_alive(self):
        grid = grid_from_rows(
            "#..",
            ".#.",
            "..#",
        )
        assert Simulator().step(grid)[1, 1] is True

    def test_two_neighbors_keeps_dead(self):
        grid = grid_from_rows(
            "#..",
            "...",
            "..#",
        )
        assert Simulator().step(grid)[1, 1] is False

    def test_overcrowding_dies(self):
        grid = grid_from_rows(
            "###",
            ".#.",
            "#..",
        )
        assert Simulator().step(grid)[1, 1] is False

    def test_isolated_center_dies(self):
        """3x3 grid with only the center alive becomes all dead."""
        grid = Grid(3, 3)
        grid[1, 1] = True
        assert Simulator().step(grid).is_empty()

    def test_matches_rule_for_every_cell(self, rng):
        """Each output cell follows the rule against the input's tallies."""
        grid = Grid(12, 9)
        grid.seed_random(60, rng)
        before = grid.copy()
        sim = Simulator()

        after = sim.step(grid)
        for row, col in before.cells():
            n = sim.live_neighbor_count(before, row, col)
            if n == 3:
                assert after[row, col] is True
            elif n == 2:
                assert after[row, col] == before[row, col]
            else:
                assert after[row, col] is False


class TestSnapshotIsolation:
    """Step reads the input generation without modifying it."""

    def test_input_unchanged(self, rng):
        grid = Grid(20, 20)
        grid.seed_random(150, rng)
        saved = grid.copy()

        after = Simulator().step(grid)

        assert grid == saved
        assert after is not grid
        assert after.state is not grid.state

    def test_output_does_not_alias_input_on_repeated_calls(self, blinker_grid):
        """Stepping the same grid twice still writes to a separate buffer."""
        sim = Simulator()
        saved = blinker_grid.copy()

        first = sim.step(blinker_grid)
        second = sim.step(blinker_grid)

        assert blinker_grid == saved
        assert first == second
        assert second is not blinker_grid

    def test_buffers_swap(self, blinker_grid):
        """Two buffers alternate as the active generation."""
        sim = Simulator()
        g1 = sim.step(blinker_grid)
        g2 = sim.step(g1)
        g3 = sim.step(g2)

        assert g2 is blinker_grid
        assert g3 is g1

    def test_unrelated_input_gets_fresh_buffer(self, blinker_grid):
        """Stepping a grid the simulator did not produce never reuses an earlier input."""
        sim = Simulator()
        first_input = blinker_grid.copy()
        saved = first_input.copy()

        sim.step(first_input)
        other = Grid(5, 5)
        other[0, 0] = True
        out = sim.step(other)

        assert first_input == saved
        assert out is not first_input
        assert out is not other

    def test_shape_change_reallocates(self):
        sim = Simulator()
        sim.step(Grid(3, 3))
        out = sim.step(Grid(4, 6))
        assert out.shape == (4, 6)


class TestGenerationCounter:
    """Monotonic generation counting."""

    def test_starts_at_zero(self):
        assert Simulator().generation == 0

    def test_increments_once_per_step(self):
        sim = Simulator()
        grid = Grid(4, 4)
        for expected in range(1, 6):
            grid = sim.step(grid)
            assert sim.generation == expected

    def test_empty_grid_still_counts(self):
        sim = Simulator()
        sim.step(Grid(0, 0))
        assert sim.generation == 1

    def test_reset(self):
        sim = Simulator()
        sim.advance(Grid(3, 3), 4)
        sim.reset()
        assert sim.generation == 0

    def test_advance_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            Simulator().advance(Grid(3, 3), -1)


class TestPatterns:
    """Classic patterns away from the edges."""

    def test_blinker_period_two(self, blinker_grid):
        horizontal = blinker_grid.copy()
        sim = Simulator()

        vertical = sim.step(blinker_grid)
        assert vertical == grid_from_rows(
            ".....",
            "..#..",
            "..#..",
            "..#..",
            ".....",
        )

        back = sim.step(vertical)
        assert back == horizontal
        assert sim.generation == 2

    def test_blinker_on_three_by_three(self):
        """Blinker fits a 3x3 grid: all needed neighbors are in bounds."""
        grid = grid_from_rows(
            "...",
            "###",
            "...",
        )
        sim = Simulator()

        vertical = sim.step(grid)
        assert vertical == grid_from_rows(
            ".#.",
            ".#.",
            ".#.",
        )

    def test_block_still_life(self):
        grid = grid_from_rows(
            "....",
            ".##.",
            ".##.",
            "....",
        )
        saved = grid.copy()
        assert Simulator().advance(grid, 10) == saved

    def test_block_in_corner_is_stable(self):
        """A block survives even when squeezed against the boundary."""
        grid = grid_from_rows(
            "##..",
            "##..",
            "....",
        )
        saved = grid.copy()
        assert Simulator().advance(grid, 3) == saved

    def test_glider_translates_diagonally(self):
        """After four generations a glider reappears one cell down and right."""
        grid = grid_from_rows(
            "........",
            "..#.....",
            "...#....",
            ".###....",
            "........",
            "........",
            "........",
            "........",
        )
        final = Simulator().advance(grid, 4)
        assert final == grid_from_rows(
            "........",
            "........",
            "...#....",
            "....#...",
            "..###...",
            "........",
            "........",
            "........",
        )
