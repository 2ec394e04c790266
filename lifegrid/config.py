"""Run configuration for the Game of Life loop."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LifeConfig:
    """Settings for one simulation run.

    Defaults reproduce the classic browser demo: a 50x50 grid seeded with
    200 random picks, ticking every 100ms after a one second pause.
    """
    row_count: int = 50
    col_count: int = 50
    seed_count: int = 200
    tick_delay_ms: int = 100
    start_delay_ms: int = 1000
    surface_width: int = 500
    surface_height: int = 500
    seed: Optional[int] = None

    def validate(self) -> None:
        """Check settings are usable.

        Raises:
            ValueError: On negative sizes or counts, seeding an empty grid,
                or non-positive delays
        """
        if self.row_count < 0 or self.col_count < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {self.row_count}x{self.col_count}")
        if self.seed_count < 0:
            raise ValueError(f"Seed count must be non-negative, got {self.seed_count}")
        if self.seed_count > 0 and (self.row_count == 0 or self.col_count == 0):
            raise ValueError(f"Cannot seed {self.seed_count} cells on an empty {self.row_count}x{self.col_count} grid; use a seed count of 0")
        if self.tick_delay_ms <= 0 or self.start_delay_ms <= 0:
            raise ValueError("Delays must be positive milliseconds")
        if self.surface_width <= 0 or self.surface_height <= 0:
            raise ValueError(f"Surface size must be positive, got {self.surface_width}x{self.surface_height}")

    @classmethod
    def from_args(cls, args) -> 'LifeConfig':
        """Build a config from parsed command line arguments."""
        config = cls(
            row_count=args.rows,
            col_count=args.cols,
            seed_count=args.seed_count,
            tick_delay_ms=args.interval,
            start_delay_ms=args.start_delay,
            surface_width=args.width,
            surface_height=args.height,
            seed=args.seed,
        )
        config.validate()
        return config


DEFAULT_CONFIG = LifeConfig()
