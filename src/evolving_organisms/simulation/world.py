"""World simulation - owns the population and advances it tick by tick."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from ..config import WorldConfig
from .genome import Genome, founder_genome
from .organism import Organism, OrganismState

logger = logging.getLogger(__name__)


@dataclass
class WorldStats:
    """Statistics about the current world state."""

    tick: int = 0
    organisms_alive: int = 0
    births_this_tick: int = 0
    deaths_this_tick: int = 0
    total_births: int = 0
    total_deaths: int = 0
    # Averages across all organisms
    avg_energy: float = 0.0
    avg_age: float = 0.0
    avg_size: float = 0.0


class StatsHistory:
    """Tracks statistics over time."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.population: deque[int] = deque(maxlen=max_length)
        self.avg_energy: deque[float] = deque(maxlen=max_length)
        self.avg_age: deque[float] = deque(maxlen=max_length)
        self.births_per_tick: deque[int] = deque(maxlen=max_length)
        self.deaths_per_tick: deque[int] = deque(maxlen=max_length)

    def record(self, stats: WorldStats) -> None:
        """Record current stats to history."""
        self.population.append(stats.organisms_alive)
        self.avg_energy.append(stats.avg_energy)
        self.avg_age.append(stats.avg_age)
        self.births_per_tick.append(stats.births_this_tick)
        self.deaths_per_tick.append(stats.deaths_this_tick)


class World:
    """
    The simulation world containing all organisms.

    Manages:
    - The organism population and its growth and decline
    - The grid organisms live on (locations wrap around its edges)
    - Simulation stepping and statistics

    Organisms never see each other. Each tick every organism is advanced
    on its own, and only then are offspring added and the dead removed.
    """

    def __init__(self, world_config: WorldConfig):
        """
        Initialize the world.

        Args:
            world_config: Configuration for world parameters
        """
        self.config = world_config
        self.width = world_config.width
        self.height = world_config.height

        # Seeded random number generator for reproducibility
        if world_config.seed is not None:
            self.seed = world_config.seed
        else:
            self.seed = random.randint(0, 2**31 - 1)
        self.rng = random.Random(self.seed)

        self.organisms: list[Organism] = []
        self._next_id = 0

        self.stats = WorldStats()
        self.stats_history = StatsHistory()

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def spawn_organism(
        self,
        genome: Genome | None = None,
        location: tuple[int, int] | None = None,
    ) -> Organism:
        """
        Create a new organism and add it to the world.

        Uses the founder genome when none is given, and a random location
        when none is given. Returns the spawned organism.
        """
        if genome is None:
            genome = founder_genome()

        # Deterministic sub-seed for this organism
        organism_seed = self.rng.randint(0, 2**31 - 1)

        organism = Organism(
            id=self._next_id,
            genome=genome,
            rng=random.Random(organism_seed),
        )
        self._next_id += 1

        if location is None:
            location = (self.rng.randrange(self.width), self.rng.randrange(self.height))
        organism.location = self._wrap(location)

        self.organisms.append(organism)
        return organism

    def initialize(self) -> None:
        """Initialize the world with its starting population."""
        for _ in range(self.config.initial_population):
            self.spawn_organism()

        self._update_stats()
        self.stats_history.record(self.stats)
        logger.info(
            "World %dx%d initialized with %d organisms (seed %d)",
            self.width,
            self.height,
            len(self.organisms),
            self.seed,
        )

    def step(self) -> list[Organism]:
        """
        Advance the simulation by one tick.

        This:
        1. Advances every organism by one frame
        2. Removes the organisms that died
        3. Adds the offspring born this tick (up to max_population)

        Returns the organisms that died this tick.
        """
        self.stats.tick += 1
        self.stats.births_this_tick = 0
        self.stats.deaths_this_tick = 0

        dead: list[Organism] = []
        offspring: list[Organism] = []

        for organism in self.organisms:
            state, child = organism.next_frame()
            if state == OrganismState.DEAD:
                dead.append(organism)
                continue

            organism.location = self._wrap(organism.location)
            if child is not None:
                offspring.append(child)

        # Population changes are applied only once every organism has moved
        if dead:
            dead_ids = {id(organism) for organism in dead}
            self.organisms = [o for o in self.organisms if id(o) not in dead_ids]
        self.stats.deaths_this_tick = len(dead)
        self.stats.total_deaths += len(dead)

        room = max(0, self.config.max_population - len(self.organisms))
        for child in offspring[:room]:
            child.location = self._wrap(child.location)
            self.organisms.append(child)
        born = min(room, len(offspring))
        self.stats.births_this_tick = born
        self.stats.total_births += born

        self._update_stats()
        self.stats_history.record(self.stats)
        logger.debug(
            "Tick %d: %d alive, %d born, %d died",
            self.stats.tick,
            self.stats.organisms_alive,
            born,
            len(dead),
        )
        return dead

    def _wrap(self, location: tuple[int, int]) -> tuple[int, int]:
        """Wrap a location around the world boundaries."""
        return (location[0] % self.width, location[1] % self.height)

    def _update_stats(self) -> None:
        self.stats.organisms_alive = len(self.organisms)

        if self.organisms:
            count = len(self.organisms)
            self.stats.avg_energy = sum(o.energy for o in self.organisms) / count
            self.stats.avg_age = sum(o.age for o in self.organisms) / count
            self.stats.avg_size = sum(o.size for o in self.organisms) / count
        else:
            self.stats.avg_energy = 0.0
            self.stats.avg_age = 0.0
            self.stats.avg_size = 0.0
