"""Per-team dense distance field ("gradient") over the grid."""

from __future__ import annotations

import numpy as np

from liquid_war.domain.position import Position

UNREACHABLE: int = int(np.iinfo(np.int64).max)
"""Distance of cells the search never reached; never use it in raw arithmetic."""


def extend_distance(distance: int, cost: int) -> int:
    """Return ``distance + cost`` saturated at :data:`UNREACHABLE`."""
    if distance >= UNREACHABLE or cost >= UNREACHABLE - distance:
        return UNREACHABLE
    return distance + cost


class DistanceField:
    """Minimal accumulated step cost from every cell to one team's target.

    Allocated once per team and refilled each tick through :meth:`reset`.
    Out-of-bounds reads return :data:`UNREACHABLE`; out-of-bounds writes are
    ignored.
    """

    def __init__(self, width: int, height: int, team_id: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("field dimensions must be positive")
        if team_id is None:
            raise ValueError("team_id must not be None")
        self._width = width
        self._height = height
        self._team_id = team_id
        self._distances = np.full((height, width), UNREACHABLE, dtype=np.int64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def team_id(self) -> int:
        return self._team_id

    def _in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def distance_at(self, pos: Position) -> int:
        if not self._in_bounds(pos):
            return UNREACHABLE
        return int(self._distances[pos.y, pos.x])

    def set_distance(self, pos: Position, distance: int) -> None:
        if self._in_bounds(pos):
            self._distances[pos.y, pos.x] = distance

    def is_reachable(self, pos: Position) -> bool:
        return self.distance_at(pos) < UNREACHABLE

    def reset(self) -> None:
        """Mark every cell UNREACHABLE without reallocating."""
        self._distances.fill(UNREACHABLE)

    def copy_from(self, other: DistanceField) -> None:
        if other._width != self._width or other._height != self._height:
            raise ValueError("incompatible field dimensions")
        np.copyto(self._distances, other._distances)

    def assign(self, values: np.ndarray) -> None:
        """Overwrite every cell from an (H, W) array of distances."""
        if values.shape != self._distances.shape:
            raise ValueError("incompatible field dimensions")
        np.copyto(self._distances, values)

    def to_array(self) -> np.ndarray:
        """Return a read-only (H, W) snapshot of the distances."""
        snapshot = self._distances.copy()
        snapshot.setflags(write=False)
        return snapshot

    def reachable_mask(self) -> np.ndarray:
        return self._distances < UNREACHABLE

    def max_finite_distance(self) -> int:
        """Largest reached distance, or 0 when nothing is reachable."""
        finite = self._distances[self._distances < UNREACHABLE]
        if finite.size == 0:
            return 0
        return int(finite.max())

    def __repr__(self) -> str:
        return f"DistanceField(team={self._team_id}, {self._width}x{self._height})"
