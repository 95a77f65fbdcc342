"""Bounded battlefield grid: obstacle flags plus at most one occupant per cell.

Cells outside ``[0, width) x [0, height)`` behave as obstacles for every
query, so callers never need to bounds-check a neighbor before looking it up.
"""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

import numpy as np

from liquid_war.domain.position import Position

if TYPE_CHECKING:
    from liquid_war.domain.occupant import Occupant


class Grid:
    """Single owner of all per-cell battlefield state."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self._width = width
        self._height = height
        self._obstacles = np.zeros((height, width), dtype=bool)
        self._cells: list[list[Occupant | None]] = [[None] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------

    def is_obstacle(self, pos: Position) -> bool:
        """Return True for obstacle cells and for any out-of-bounds position."""
        if not self.in_bounds(pos):
            return True
        return bool(self._obstacles[pos.y, pos.x])

    def set_obstacle(self, pos: Position) -> None:
        if self.in_bounds(pos):
            self._obstacles[pos.y, pos.x] = True

    def clear_obstacle(self, pos: Position) -> None:
        if self.in_bounds(pos):
            self._obstacles[pos.y, pos.x] = False

    def obstacle_mask(self) -> np.ndarray:
        """Return a read-only (H, W) copy of the obstacle flags."""
        mask = self._obstacles.copy()
        mask.setflags(write=False)
        return mask

    def add_border_walls(self) -> None:
        """Turn the outermost ring of cells into obstacles."""
        self._obstacles[0, :] = True
        self._obstacles[-1, :] = True
        self._obstacles[:, 0] = True
        self._obstacles[:, -1] = True

    def add_random_obstacles(self, density: float, rng: Random) -> None:
        """Mark each interior (non-border) cell as obstacle with probability *density*."""
        if not 0.0 <= density <= 1.0:
            raise ValueError("density must be in [0.0, 1.0]")
        for y in range(1, self._height - 1):
            for x in range(1, self._width - 1):
                if rng.random() < density:
                    self._obstacles[y, x] = True

    # ------------------------------------------------------------------
    # Occupants
    # ------------------------------------------------------------------

    def occupant_at(self, pos: Position) -> Occupant | None:
        if not self.in_bounds(pos):
            return None
        return self._cells[pos.y][pos.x]

    def place(self, occupant: Occupant | None, pos: Position) -> None:
        """Overwrite the slot at *pos*; ``None`` clears it.

        The occupant's stored position is synchronized. The previous cell of
        the occupant is not cleared; use :meth:`move_occupant` for moves.
        """
        if not self.in_bounds(pos):
            return
        self._cells[pos.y][pos.x] = occupant
        if occupant is not None:
            occupant.position = pos

    def move_occupant(self, src: Position, dst: Position) -> bool:
        """Move the occupant at *src* to *dst*.

        Fails when *src* is empty or *dst* is out of bounds or an obstacle.
        Occupancy of *dst* is NOT checked; callers confirm :meth:`is_free`
        first, which is safe because decisions run sequentially.
        """
        if not self.in_bounds(src) or not self.in_bounds(dst):
            return False
        if self.is_obstacle(dst):
            return False
        occupant = self.occupant_at(src)
        if occupant is None:
            return False
        self.place(None, src)
        self.place(occupant, dst)
        return True

    def is_free(self, pos: Position) -> bool:
        return (
            self.in_bounds(pos)
            and not self._obstacles[pos.y, pos.x]
            and self._cells[pos.y][pos.x] is None
        )

    def occupants(self) -> list[Occupant]:
        """Return every occupant in row-major scan order (y, then x)."""
        return [occupant for row in self._cells for occupant in row if occupant is not None]

    @property
    def occupant_count(self) -> int:
        return sum(1 for row in self._cells for occupant in row if occupant is not None)

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, occupants={self.occupant_count})"
