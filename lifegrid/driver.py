"""
Timed Game of Life Loop

Drives the simulation one tick at a time: step the grid, redraw it, then
update the generation counter. Ticks are strictly sequential; the next one
is only scheduled once the current one has finished, so a renderer never
sees a half-computed generation.
"""

from typing import Callable, Optional
import logging

import numpy as np

from matplotlib.figure import Figure
from matplotlib.text import Text

from .config import DEFAULT_CONFIG
from .core.grid import Grid
from .core.simulator import Simulator

logger = logging.getLogger(__name__)

# scheduler(delay_ms, callback) arranges exactly one future call
Scheduler = Callable[[int, Callable[[], None]], None]
Counter = Callable[[int], None]


class MatplotlibScheduler:
    """Scheduler backed by single-shot matplotlib canvas timers."""

    def __init__(self, figure: Figure):
        self.figure = figure
        self._timers = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        timer = self.figure.canvas.new_timer(interval=delay_ms)
        timer.single_shot = True
        timer.add_callback(self._fire, timer, callback)
        # Timers are garbage collected unless referenced
        self._timers.append(timer)
        timer.start()

    def _fire(self, timer, callback: Callable[[], None]) -> None:
        self._timers.remove(timer)
        callback()


class TextCounter:
    """Shows the generation number in a matplotlib Text artist."""

    def __init__(self, text: Text, template: str = "Tick: {}"):
        self.text = text
        self.template = template

    def __call__(self, generation: int) -> None:
        self.text.set_text(self.template.format(generation))


class LifeDriver:
    """Owns the active grid and runs the step-render-count cycle.

    Attributes:
        grid: Currently visible generation
        simulator: Stepper that produces each next generation
        renderer: Object with a draw(grid) method
        interval_ms: Delay between ticks
    """

    def __init__(self,
                 grid: Grid,
                 simulator: Simulator,
                 renderer,
                 counter: Optional[Counter] = None,
                 interval_ms: int = DEFAULT_CONFIG.tick_delay_ms,
                 scheduler: Optional[Scheduler] = None):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}ms")

        self.grid = grid
        self.simulator = simulator
        self.renderer = renderer
        self.counter = counter
        self.interval_ms = interval_ms
        self.scheduler = scheduler
        self.running = False
        self._run_id = 0

    @property
    def generation(self) -> int:
        return self.simulator.generation

    def tick(self) -> None:
        """Advance one generation, redraw, and update the counter."""
        self.grid = self.simulator.step(self.grid)
        self.renderer.draw(self.grid)
        if self.counter is not None:
            self.counter(self.generation)

        logger.debug(f"Tick {self.generation}: {self.grid.count_alive()} alive")

    def start(self, delay_ms: Optional[int] = None) -> None:
        """Draw the initial grid and schedule the first tick.

        Args:
            delay_ms: Pause before the first tick (config start delay if None)

        Raises:
            RuntimeError: If no scheduler was supplied
        """
        if self.scheduler is None:
            raise RuntimeError("LifeDriver.start() needs a scheduler; use run() for headless loops")
        if self.running:
            return

        if delay_ms is None:
            delay_ms = DEFAULT_CONFIG.start_delay_ms

        self.running = True
        self._run_id += 1
        self.renderer.draw(self.grid)
        logger.info(f"Starting loop on {self.grid.row_count}x{self.grid.col_count} grid, "
                    f"every {self.interval_ms}ms")
        self._schedule(delay_ms)

    def stop(self) -> None:
        """Halt the loop; an already-scheduled tick will do nothing."""
        if self.running:
            logger.info(f"Stopping loop at generation {self.generation}")
        self.running = False

    def _schedule(self, delay_ms: int) -> None:
        run_id = self._run_id
        self.scheduler(delay_ms, lambda: self._loop(run_id))

    def _loop(self, run_id: int) -> None:
        # Callbacks left over from an earlier start() are dropped
        if run_id != self._run_id or not self.running:
            return
        self.tick()
        if self.running and run_id == self._run_id:
            self._schedule(self.interval_ms)

    def run(self, generations: int) -> Grid:
        """Run a number of ticks back to back without scheduling.

        Args:
            generations: Number of ticks (>= 0)

        Returns:
            The active grid after the last tick
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.tick()
        return self.grid


def create_seeded_grid(config=DEFAULT_CONFIG) -> Grid:
    """Factory for a freshly seeded grid sized by the config."""
    grid = Grid(config.row_count, config.col_count)
    grid.seed_random(config.seed_count, np.random.default_rng(config.seed))
    logger.info(f"Seeded {config.row_count}x{config.col_count} grid with "
                f"{config.seed_count} picks, {grid.count_alive()} alive")
    return grid
