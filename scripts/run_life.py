#!/usr/bin/env python3
"""
Conway's Game of Life Runner

Seeds a bounded grid with random live cells and animates it in a
matplotlib window, or steps it headless and logs population counts.
"""

import sys
import os
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

logger = logging.getLogger(__name__)

from lifegrid.config import LifeConfig, DEFAULT_CONFIG
from lifegrid.core.simulator import Simulator
from lifegrid.driver import LifeDriver, MatplotlibScheduler, TextCounter, create_seeded_grid
from lifegrid.render.canvas import CanvasRenderer, NullRenderer


def run_windowed(config: LifeConfig):
    """Open a window and run the timed loop until it is closed."""
    import matplotlib.pyplot as plt

    dpi = 100
    fig, ax = plt.subplots(figsize=(config.surface_width / dpi, config.surface_height / dpi), dpi=dpi)
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title("Game of Life")
    label = fig.text(0.02, 0.98, "Tick: 0", va="top")

    driver = LifeDriver(
        grid=create_seeded_grid(config),
        simulator=Simulator(),
        renderer=CanvasRenderer(ax, config.surface_width, config.surface_height),
        counter=TextCounter(label),
        interval_ms=config.tick_delay_ms,
        scheduler=MatplotlibScheduler(fig),
    )
    fig.canvas.mpl_connect("close_event", lambda event: driver.stop())

    driver.start(config.start_delay_ms)
    plt.show()
    return driver


def run_headless(config: LifeConfig, generations: int, log_every: int = 10):
    """Step the simulation without drawing and log population."""
    def log_population(generation: int) -> None:
        if generation % log_every == 0 or generation == generations:
            logger.info(f"Generation {generation}: {driver.grid.count_alive()} alive")

    driver = LifeDriver(
        grid=create_seeded_grid(config),
        simulator=Simulator(),
        renderer=NullRenderer(),
        counter=log_population,
        interval_ms=config.tick_delay_ms,
    )
    driver.run(generations)
    return driver


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--rows", type=int, default=DEFAULT_CONFIG.row_count, help="Grid rows (0 needs --seed-count 0)")
    parser.add_argument("--cols", type=int, default=DEFAULT_CONFIG.col_count, help="Grid columns (0 needs --seed-count 0)")
    parser.add_argument("--seed-count", type=int, default=DEFAULT_CONFIG.seed_count, help="Random cells to bring alive")
    parser.add_argument("--interval", type=int, default=DEFAULT_CONFIG.tick_delay_ms, help="Milliseconds between ticks")
    parser.add_argument("--start-delay", type=int, default=DEFAULT_CONFIG.start_delay_ms, help="Milliseconds before first tick")
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.surface_width, help="Surface width (pixels)")
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.surface_height, help="Surface height (pixels)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (unseeded if omitted)")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--generations", type=int, default=100, help="Ticks to run in headless mode")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = LifeConfig.from_args(args)
        if args.headless:
            run_headless(config, args.generations)
        else:
            run_windowed(config)
    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        sys.exit(1)
