"""Genes, genomes and the attribute set they produce."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from .body import Body


class AttributeKind(Enum):
    """What a gene modifies."""

    MAX_ENERGY = auto()
    MAX_AGE = auto()
    MAX_SIZE = auto()
    REPRODUCTION_RATE = auto()
    MUTATION_RATE = auto()
    PUBERTY_AGE = auto()
    BODY_STATES = auto()
    METABOLISM = auto()


# Scalar kinds are plain additions onto the matching Attribute field
SCALAR_FIELDS = {
    AttributeKind.MAX_ENERGY: "max_energy",
    AttributeKind.MAX_AGE: "max_age",
    AttributeKind.MAX_SIZE: "max_size",
    AttributeKind.REPRODUCTION_RATE: "reproduction_rate",
    AttributeKind.MUTATION_RATE: "mutation_rate",
    AttributeKind.PUBERTY_AGE: "puberty_age",
    AttributeKind.METABOLISM: "metabolism",
}

INTEGER_KINDS = frozenset(
    {
        AttributeKind.MAX_ENERGY,
        AttributeKind.MAX_AGE,
        AttributeKind.MAX_SIZE,
        AttributeKind.PUBERTY_AGE,
    }
)


@dataclass(frozen=True)
class AttributeType:
    """
    The effect a gene has: one kind plus its payload.

    Scalar kinds carry a numeric delta in ``amount``; energy, age, size and
    puberty deltas must be whole numbers. BODY_STATES carries the bodies to
    append in ``body_states``. Use the named constructors rather than
    building one by hand. Genes hash by value, so the bodies inside an
    effect must not be edited once it is in use.
    """

    kind: AttributeKind
    amount: float = 0
    body_states: tuple[Body, ...] = ()

    def __post_init__(self) -> None:
        if self.kind == AttributeKind.BODY_STATES:
            if self.amount:
                raise ValueError("BODY_STATES effects carry bodies, not an amount")
        elif self.body_states:
            raise ValueError(f"{self.kind.name} effects carry an amount, not bodies")
        elif self.kind in INTEGER_KINDS and not float(self.amount).is_integer():
            raise ValueError(f"{self.kind.name} effects need a whole amount, got {self.amount}")

    def __hash__(self) -> int:
        # Body is mutable and unhashable, so hash the squares it holds
        squares = tuple(tuple(body.squares) for body in self.body_states)
        return hash((self.kind, self.amount, squares))

    @classmethod
    def max_energy(cls, delta: int) -> AttributeType:
        return cls(AttributeKind.MAX_ENERGY, amount=delta)

    @classmethod
    def max_age(cls, delta: int) -> AttributeType:
        return cls(AttributeKind.MAX_AGE, amount=delta)

    @classmethod
    def max_size(cls, delta: int) -> AttributeType:
        return cls(AttributeKind.MAX_SIZE, amount=delta)

    @classmethod
    def reproduction_rate(cls, delta: float) -> AttributeType:
        return cls(AttributeKind.REPRODUCTION_RATE, amount=float(delta))

    @classmethod
    def mutation_rate(cls, delta: float) -> AttributeType:
        return cls(AttributeKind.MUTATION_RATE, amount=float(delta))

    @classmethod
    def puberty_age(cls, delta: int) -> AttributeType:
        return cls(AttributeKind.PUBERTY_AGE, amount=delta)

    @classmethod
    def metabolism(cls, delta: float) -> AttributeType:
        return cls(AttributeKind.METABOLISM, amount=float(delta))

    @classmethod
    def with_body_states(cls, bodies: list[Body]) -> AttributeType:
        return cls(AttributeKind.BODY_STATES, body_states=tuple(bodies))


@dataclass(frozen=True)
class Gene:
    """A single named modifier in a genome."""

    id: int
    name: str
    value: int
    attribute_type: AttributeType


@dataclass
class Genome:
    """An ordered list of genes."""

    genes: list[Gene] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self.genes)

    def clone(self) -> Genome:
        """Deep copy, so no body geometry is shared with the copy."""
        return copy.deepcopy(self)


@dataclass
class Attribute:
    """
    The effective profile of an organism.

    Starts from fixed defaults and is shaped by the organism's genes once,
    when the organism is created.
    """

    max_energy: int = 1000
    max_age: int = 1000
    max_size: int = 1000
    reproduction_rate: float = 0.1
    mutation_rate: float = 0.1
    puberty_age: int = 100
    body_states: list[Body] = field(default_factory=list)
    metabolism: float = 0.1

    def apply(self, effect: AttributeType) -> None:
        """Add a single gene effect onto this attribute set."""
        if effect.kind == AttributeKind.BODY_STATES:
            self.body_states.extend(body.copy() for body in effect.body_states)
            return

        name = SCALAR_FIELDS[effect.kind]
        amount = int(effect.amount) if effect.kind in INTEGER_KINDS else effect.amount
        setattr(self, name, getattr(self, name) + amount)

    def clone(self) -> Attribute:
        return copy.deepcopy(self)


def founder_genome() -> Genome:
    """
    Genome for the first generation of a world.

    A 2x2 block whose top-right square swings out and back, plus a
    metabolism gene so that larger bodies actually cost energy.
    """
    rest = Body.from_points([(0, 0), (1, 0), (0, 1), (1, 1)])
    reach = Body.from_points([(0, 0), (1, 0), (0, 1), (2, 1)])

    return Genome(
        genes=[
            Gene(0, "gait", 2, AttributeType.with_body_states([rest, reach])),
            Gene(1, "metabolism", 1, AttributeType.metabolism(0.4)),
            Gene(2, "lifespan", -200, AttributeType.max_age(-200)),
            Gene(3, "fertility", 0, AttributeType.reproduction_rate(-0.05)),
        ]
    )
