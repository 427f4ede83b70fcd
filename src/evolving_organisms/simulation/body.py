"""Body geometry - the squares an organism is built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

# Wider than a grid step so diagonal neighbours still count as connected.
ADJACENCY_DISTANCE = 1.5


@dataclass(frozen=True)
class BodySquare:
    """A single body cell at a continuous 2D position."""

    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Body:
    """
    An ordered set of body squares.

    Order matters: square i of one body state corresponds to square i of
    the next, which is what movement is computed from. Bodies are rebuilt
    rather than edited when the geometry changes.
    """

    squares: list[BodySquare] = field(default_factory=list)

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> Body:
        """Build a body from (x, y) pairs, keeping their order."""
        body = cls()
        for x, y in points:
            body.add_square(BodySquare(float(x), float(y)))
        return body

    def __len__(self) -> int:
        return len(self.squares)

    def __iter__(self) -> Iterator[BodySquare]:
        return iter(self.squares)

    def add_square(self, square: BodySquare) -> None:
        """Append a square. No validation is done."""
        self.squares.append(square)

    def positions(self) -> np.ndarray:
        """Square positions as an (n, 2) float array."""
        if not self.squares:
            return np.zeros((0, 2), dtype=float)
        return np.array([sq.position for sq in self.squares], dtype=float)

    def is_adjacent(self, square: BodySquare) -> bool:
        """Check if a square touches (diagonals included) any square of this body."""
        if not self.squares:
            return False
        diff = self.positions() - np.array(square.position, dtype=float)
        distances = np.hypot(diff[:, 0], diff[:, 1])
        return bool(np.any(distances < ADJACENCY_DISTANCE))

    def check_blueprint_validity(self, proposed_squares: Iterable[BodySquare]) -> bool:
        """
        Check that a proposed body would connect to this one.

        Every proposed square must be adjacent to at least one existing
        square. An empty proposal is valid.
        """
        return all(self.is_adjacent(square) for square in proposed_squares)

    def copy(self) -> Body:
        """Return an independent copy (squares are immutable, the list is not)."""
        return Body(list(self.squares))
