"""Distance-field computation: multi-direction relaxation from a team's target.

Step costs are small positive integers, so relaxation runs over a monotone
bucket queue keyed by distance (Dial's algorithm). Each bucket is drained in
FIFO order and a cell whose distance improved after it was queued is skipped
as stale, so every cell is expanded once and the result equals Dijkstra's.
The hot loop works on flat cell indices and plain lists; the field's numpy
array is written once at the end.
"""

from __future__ import annotations

from collections import deque

import numpy as np

from liquid_war.config.constants import (
    CARDINAL_STEP_COST,
    DIAGONAL_STEP_COST,
    UNIFORM_STEP_COST,
)
from liquid_war.config.types import CostMode
from liquid_war.domain.field import UNREACHABLE, DistanceField, extend_distance
from liquid_war.domain.grid import Grid
from liquid_war.domain.position import Direction, Position
from liquid_war.domain.team import Team


def step_cost(direction: Direction, mode: CostMode) -> int:
    """Return the cost of one step in *direction* under *mode*."""
    if mode is CostMode.UNIFORM:
        return UNIFORM_STEP_COST
    return DIAGONAL_STEP_COST if direction.is_diagonal else CARDINAL_STEP_COST


class FieldSolver:
    """Builds :class:`DistanceField` instances for the teams of one grid."""

    def __init__(self, grid: Grid) -> None:
        if grid is None:
            raise ValueError("grid must not be None")
        self._grid = grid

    @property
    def grid(self) -> Grid:
        return self._grid

    def compute(
        self,
        team: Team,
        mode: CostMode = CostMode.WEIGHTED,
        out: DistanceField | None = None,
    ) -> DistanceField:
        """Fill a distance field toward ``team.target``.

        When *out* is given it is reset and refilled in place. A target that
        is out of bounds or on an obstacle leaves the whole field UNREACHABLE.
        """
        if team is None:
            raise ValueError("team must not be None")
        grid = self._grid
        if out is None:
            field = DistanceField(grid.width, grid.height, team.team_id)
        else:
            if out.width != grid.width or out.height != grid.height:
                raise ValueError("incompatible field dimensions")
            field = out
            field.reset()

        target = team.target
        if not grid.in_bounds(target) or grid.is_obstacle(target):
            return field

        field.assign(self._relax(target, mode))
        return field

    def _relax(self, target: Position, mode: CostMode) -> np.ndarray:
        width, height = self._grid.width, self._grid.height
        blocked = self._grid.obstacle_mask().ravel().tolist()
        distances = [UNREACHABLE] * (width * height)
        steps = [(d.dx, d.dy, step_cost(d, mode)) for d in Direction]

        start = target.y * width + target.x
        distances[start] = 0
        buckets: dict[int, deque[int]] = {0: deque([start])}
        current = 0
        while buckets:
            bucket = buckets.pop(current, None)
            if bucket is None:
                current += 1
                continue
            while bucket:
                index = bucket.popleft()
                if distances[index] != current:
                    continue
                y, x = divmod(index, width)
                for dx, dy, cost in steps:
                    nx = x + dx
                    ny = y + dy
                    if not (0 <= nx < width and 0 <= ny < height):
                        continue
                    neighbor = ny * width + nx
                    if blocked[neighbor]:
                        continue
                    new_dist = extend_distance(current, cost)
                    if new_dist < distances[neighbor]:
                        distances[neighbor] = new_dist
                        buckets.setdefault(new_dist, deque()).append(neighbor)
            current += 1
        return np.array(distances, dtype=np.int64).reshape(height, width)

    def compute_weighted(self, team: Team) -> DistanceField:
        return self.compute(team, CostMode.WEIGHTED)

    def compute_uniform(self, team: Team) -> DistanceField:
        """Cost-1-per-step variant, used for reachability queries."""
        return self.compute(team, CostMode.UNIFORM)

    def is_reachable(self, team: Team, pos: Position) -> bool:
        return self.compute_uniform(team).is_reachable(pos)

    def distance_to(self, team: Team, pos: Position) -> int:
        """Uniform step count from *pos* to the team's target, or UNREACHABLE."""
        return self.compute_uniform(team).distance_at(pos)
