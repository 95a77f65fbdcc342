"""Integer grid coordinates and the eight neighbor directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """An (x, y) cell coordinate; y grows downward."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def manhattan_distance(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def euclidean_distance(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    """Eight-neighborhood directions in fixed enumeration order.

    Tie-breaking everywhere in the simulation follows this order, so it must
    not be changed: N, NE, E, SE, S, SW, W, NW.
    """

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0

    @property
    def is_cardinal(self) -> bool:
        return not self.is_diagonal

    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    def apply(self, pos: Position) -> Position:
        """Return the neighbor of *pos* one step in this direction."""
        return pos.offset(self.dx, self.dy)
