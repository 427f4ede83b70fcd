"""Organism - a genome-driven body that moves, ages and reproduces."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .body import Body, BodySquare
from .genome import Attribute, Genome

logger = logging.getLogger(__name__)

INITIAL_ENERGY = 1000
MOVEMENT_SCALE = -2


class OrganismState(Enum):
    """Life status reported after each frame."""

    ALIVE = auto()
    DEAD = auto()


@dataclass
class Organism:
    """
    A single organism in the simulation.

    Organisms have:
    - A genome, folded once into an attribute set at creation
    - A current body and a cycle of body states it animates through
    - Energy drained by metabolism every frame (death when empty)
    - An age (death when it reaches max_age)

    The body state cycle is what moves the organism: every frame the
    difference between the current body and the next state pushes the
    organism the opposite way.
    """

    id: int
    genome: Genome
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    energy: int = field(default=INITIAL_ENERGY, init=False)
    age: int = field(default=0, init=False)
    location: tuple[int, int] = field(default=(0, 0), init=False)
    body_squares: Body = field(default_factory=Body, init=False)
    current_body_state: int = field(default=0, init=False)
    attributes: Attribute = field(default_factory=Attribute, init=False)

    def __post_init__(self) -> None:
        """Derive attributes from the genome and take the first body state."""
        self.apply_gene_effects()
        if not self.attributes.body_states:
            raise ValueError(f"Organism {self.id} has no body states in its genome")
        self.body_squares = self.attributes.body_states[0].copy()

    def apply_gene_effects(self) -> None:
        """
        Fold every gene of the genome onto the current attributes.

        Not idempotent: each call adds every delta again. Only the
        constructor calls this.
        """
        for gene in self.genome.genes:
            self.attributes.apply(gene.attribute_type)

    @property
    def size(self) -> int:
        """Number of squares in the current body."""
        return len(self.body_squares)

    @staticmethod
    def calculate_movement(current_body: Body, next_body: Body) -> tuple[int, int]:
        """
        Displacement caused by changing from one body state to the next.

        Squares are paired by position in the body; extra squares in the
        longer body are ignored. Each pair's delta is truncated toward zero
        before summing.
        """
        count = min(len(current_body), len(next_body))
        if count == 0:
            return (0, 0)

        deltas = next_body.positions()[:count] - current_body.positions()[:count]
        movement = np.trunc(deltas).astype(int).sum(axis=0) * MOVEMENT_SCALE
        return (int(movement[0]), int(movement[1]))

    def mutate(self) -> None:
        """Jitter every square of every body state by up to one unit per axis."""
        new_body_states: list[Body] = []
        for body in self.attributes.body_states:
            new_body = Body()
            for square in body:
                new_body.add_square(
                    BodySquare(
                        square.x + self._perturbation(),
                        square.y + self._perturbation(),
                    )
                )
            new_body_states.append(new_body)
        self.attributes.body_states = new_body_states

    def _perturbation(self) -> float:
        # uniform in [-1.0, 1.0)
        return self.rng.random() * 2.0 - 1.0

    def reproduce(self) -> Organism:
        """
        Build an offspring candidate.

        The child shares nothing with the parent: genome and attributes are
        deep copies, and the child's body states get their own mutation.
        Energy is not charged here.
        """
        offset_x = self.rng.randint(-1, 0)
        offset_y = self.rng.randint(-1, 0)

        offspring = copy.copy(self)
        offspring.genome = self.genome.clone()
        offspring.rng = random.Random(self.rng.getrandbits(32))
        offspring.energy = self.energy // 2
        offspring.age = 0
        offspring.location = (self.location[0] + offset_x, self.location[1] + offset_y)
        offspring.body_squares = self.body_squares.copy()
        offspring.current_body_state = 0
        offspring.attributes = self.attributes.clone()

        offspring.mutate()
        return offspring

    def _next_body(self) -> Body:
        body_states = self.attributes.body_states
        if 0 <= self.current_body_state < len(body_states):
            return body_states[self.current_body_state]
        return body_states[0]

    def next_frame(self) -> tuple[OrganismState, Organism | None]:
        """
        Advance this organism by one frame.

        Returns the new life status and, when it reproduced this frame,
        the offspring. The caller owns adding the offspring to the world and
        removing this organism once it is reported dead.
        """
        # Move
        dx, dy = self.calculate_movement(self.body_squares, self._next_body())
        self.location = (self.location[0] + dx, self.location[1] + dy)

        # Cycle body state
        if self.current_body_state < len(self.attributes.body_states) - 1:
            self.current_body_state += 1
        else:
            self.current_body_state = 0

        # Metabolism
        self.energy -= int(self.attributes.metabolism * len(self.body_squares))
        if self.energy <= 0:
            logger.debug("Organism %d starved at age %d", self.id, self.age)
            return (OrganismState.DEAD, None)

        self.age += 1
        if self.age >= self.attributes.max_age:
            logger.debug("Organism %d died of old age", self.id)
            return (OrganismState.DEAD, None)

        if self.rng.random() < self.attributes.mutation_rate:
            self.mutate()

        will_reproduce = self.rng.random() < self.attributes.reproduction_rate

        # Built every frame so the random stream does not depend on the roll
        offspring = self.reproduce()
        if not will_reproduce:
            return (OrganismState.ALIVE, None)

        for body in offspring.attributes.body_states:
            if not self.body_squares.check_blueprint_validity(body.squares):
                logger.debug("Organism %d offspring rejected: disconnected body", self.id)
                return (OrganismState.ALIVE, None)

        self.energy -= offspring.energy
        logger.debug(
            "Organism %d reproduced at %s, offspring energy %d",
            self.id,
            offspring.location,
            offspring.energy,
        )
        return (OrganismState.ALIVE, offspring)
