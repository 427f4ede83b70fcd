"""Centralized configuration for the simulation."""

from dataclasses import dataclass


@dataclass
class WorldConfig:
    """Configuration for the world simulation."""

    width: int = 200
    height: int = 200
    initial_population: int = 20
    # Offspring beyond this population are dropped
    max_population: int = 2000
    # Random seed for reproducibility (None = random seed)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World size must be positive, got {self.width}x{self.height}")
        if self.initial_population < 0:
            raise ValueError("initial_population cannot be negative")
        if self.max_population < self.initial_population:
            raise ValueError("max_population must be at least initial_population")


@dataclass
class RunConfig:
    """Configuration for a headless run."""

    ticks: int = 1000
    report_every: int = 100

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise ValueError("ticks cannot be negative")
        if self.report_every <= 0:
            raise ValueError("report_every must be positive")


@dataclass
class Config:
    """Main configuration container."""

    world: WorldConfig
    run: RunConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            world=WorldConfig(),
            run=RunConfig(),
        )
