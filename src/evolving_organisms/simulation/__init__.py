"""Simulation module - pure logic, no rendering."""

from .body import Body, BodySquare
from .genome import Attribute, AttributeKind, AttributeType, Gene, Genome, founder_genome
from .organism import Organism, OrganismState
from .world import StatsHistory, World, WorldStats

__all__ = [
    "Attribute",
    "AttributeKind",
    "AttributeType",
    "Body",
    "BodySquare",
    "Gene",
    "Genome",
    "Organism",
    "OrganismState",
    "StatsHistory",
    "World",
    "WorldStats",
    "founder_genome",
]
