"""Configuration dataclasses for battlefield runs.

All frozen dataclasses that parameterise bootstrap and headless battles
live here. Validation happens in ``__post_init__`` so that a bad value is
rejected at construction instead of surfacing mid-battle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from liquid_war.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_TICKS,
    OBSTACLE_DENSITY,
    OCCUPANTS_PER_TEAM,
)
from liquid_war.domain.position import Position

__all__ = [
    "BattleConfig",
    "BattleEndReason",
    "BattleResult",
    "CostMode",
    "SpawnRegion",
    "TeamSpec",
    "default_team_specs",
]

# (x_min, x_max, y_min, y_max), max bounds exclusive
SpawnRegion = tuple[int, int, int, int]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


class BattleEndReason(str, Enum):
    """Termination reason labels recorded in a BattleResult."""

    WINNER = "winner"
    MAX_TICKS = "max_ticks"


@dataclass(frozen=True)
class BattleResult:
    """Summary of one headless battle."""

    ticks_run: int
    termination_reason: str
    winner_id: int | None
    populations: dict[int, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class CostMode(Enum):
    """Step-cost model used when computing distance fields."""

    WEIGHTED = "weighted"
    UNIFORM = "uniform"


@dataclass(frozen=True)
class TeamSpec:
    """Bootstrap description of one team: identity, appearance and spawn area."""

    team_id: int
    color: tuple[float, float, float]
    target: Position
    spawn_region: SpawnRegion
    n_occupants: int = OCCUPANTS_PER_TEAM

    def __post_init__(self) -> None:
        if self.color is None:
            raise ValueError("color must not be None")
        if len(self.color) != 3:
            raise ValueError("color must be an (r, g, b) triple")
        if not all(0.0 <= channel <= 1.0 for channel in self.color):
            raise ValueError("color channels must be in [0.0, 1.0]")
        if self.target is None:
            raise ValueError("target must not be None")
        if self.spawn_region is None or len(self.spawn_region) != 4:
            raise ValueError("spawn_region must be (x_min, x_max, y_min, y_max)")
        x_min, x_max, y_min, y_max = self.spawn_region
        if x_min >= x_max or y_min >= y_max:
            raise ValueError("spawn_region must have x_min < x_max and y_min < y_max")
        if self.n_occupants < 0:
            raise ValueError("n_occupants must be >= 0")
        if self.n_occupants > (x_max - x_min) * (y_max - y_min):
            raise ValueError("n_occupants exceeds spawn_region area")


def default_team_specs(
    grid_width: int = GRID_WIDTH,
    grid_height: int = GRID_HEIGHT,
    n_occupants: int = OCCUPANTS_PER_TEAM,
) -> tuple[TeamSpec, ...]:
    """Return the classic red-vs-blue line-up scaled to the grid size.

    On the default 200x150 board this places red at (50, 75) spawning in
    x 30..50, blue at (150, 75) spawning in x 140..160, both in y 60..100.
    """
    y_min = grid_height * 2 // 5
    y_max = max(y_min + 1, grid_height * 2 // 3)
    red_x = (grid_width * 3 // 20, max(grid_width * 3 // 20 + 1, grid_width // 4))
    blue_x = (grid_width * 7 // 10, max(grid_width * 7 // 10 + 1, grid_width * 4 // 5))
    capacity = min(
        (red_x[1] - red_x[0]) * (y_max - y_min),
        (blue_x[1] - blue_x[0]) * (y_max - y_min),
    )
    count = min(n_occupants, capacity)
    return (
        TeamSpec(
            team_id=1,
            color=(1.0, 0.0, 0.0),
            target=Position(grid_width // 4, grid_height // 2),
            spawn_region=(red_x[0], red_x[1], y_min, y_max),
            n_occupants=count,
        ),
        TeamSpec(
            team_id=2,
            color=(0.0, 0.0, 1.0),
            target=Position(grid_width * 3 // 4, grid_height // 2),
            spawn_region=(blue_x[0], blue_x[1], y_min, y_max),
            n_occupants=count,
        ),
    )


@dataclass(frozen=True)
class BattleConfig:
    """Board, team and runtime parameters for one battle.

    An empty ``teams`` tuple means "use :func:`default_team_specs` for this
    grid size"; call :meth:`resolved_teams` to get the effective line-up.
    """

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    obstacle_density: float = OBSTACLE_DENSITY
    border_walls: bool = True
    teams: tuple[TeamSpec, ...] = ()
    cost_mode: CostMode = CostMode.WEIGHTED
    max_ticks: int = MAX_TICKS
    seed: int = 0

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be positive")
        if not 0.0 <= self.obstacle_density <= 1.0:
            raise ValueError("obstacle_density must be in [0.0, 1.0]")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")
        if not isinstance(self.cost_mode, CostMode):
            raise ValueError(f"cost_mode must be a CostMode, got {self.cost_mode!r}")
        team_ids = [spec.team_id for spec in self.teams]
        if len(team_ids) != len(set(team_ids)):
            raise ValueError("team ids must be unique")
        for spec in self.teams:
            x_min, x_max, y_min, y_max = spec.spawn_region
            if x_min < 0 or y_min < 0 or x_max > self.grid_width or y_max > self.grid_height:
                raise ValueError(f"spawn_region of team {spec.team_id} lies outside the grid")

    def resolved_teams(self) -> tuple[TeamSpec, ...]:
        """Return the explicit teams, or the default line-up for this grid."""
        if self.teams:
            return self.teams
        return default_team_specs(self.grid_width, self.grid_height)
