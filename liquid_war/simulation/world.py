"""Battle world aggregate: the single owner of grid, teams and distance fields.

One tick is strictly sequential: every team's field is recomputed first,
then occupants act one at a time in row-major scan order, each seeing the
grid as left by the occupants processed before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random

from liquid_war.config.constants import DEFAULT_VITALITY
from liquid_war.config.types import BattleConfig, CostMode, TeamSpec
from liquid_war.domain.field import DistanceField
from liquid_war.domain.grid import Grid
from liquid_war.domain.occupant import Occupant
from liquid_war.domain.position import Position
from liquid_war.domain.team import Team
from liquid_war.simulation.decision import Action, DecisionEngine
from liquid_war.simulation.solver import FieldSolver

logger = logging.getLogger(__name__)


@dataclass
class TickSummary:
    """Action counts for one tick."""

    tick: int
    moves: int = 0
    attacks: int = 0
    conversions: int = 0
    heals: int = 0
    idles: int = 0


@dataclass
class BattleWorld:
    """Grid plus teams plus one reusable distance field per team."""

    grid: Grid
    cost_mode: CostMode = CostMode.WEIGHTED
    teams: dict[int, Team] = field(default_factory=dict)
    fields: dict[int, DistanceField] = field(default_factory=dict)
    tick: int = 0

    def __post_init__(self) -> None:
        if self.grid is None:
            raise ValueError("grid must not be None")
        self._solver = FieldSolver(self.grid)
        self._engine = DecisionEngine(self.grid)

    @classmethod
    def create(cls, config: BattleConfig, rng: Random) -> BattleWorld:
        """Build walls, scatter obstacles and spawn every team's occupants."""
        grid = Grid(config.grid_width, config.grid_height)
        if config.border_walls:
            grid.add_border_walls()
        if config.obstacle_density > 0.0:
            grid.add_random_obstacles(config.obstacle_density, rng)

        world = cls(grid=grid, cost_mode=config.cost_mode)
        for spec in config.resolved_teams():
            team = world.add_team(Team(spec.team_id, spec.target))
            world._spawn_in_region(team, spec, rng)
        world.recompute_fields()
        logger.info(
            "Created %dx%d battle with %d teams and %d occupants",
            grid.width,
            grid.height,
            len(world.teams),
            grid.occupant_count,
        )
        return world

    def _spawn_in_region(self, team: Team, spec: TeamSpec, rng: Random) -> None:
        x_min, x_max, y_min, y_max = spec.spawn_region
        free_cells = [
            Position(x, y)
            for y in range(y_min, y_max)
            for x in range(x_min, x_max)
            if self.grid.is_free(Position(x, y))
        ]
        if len(free_cells) < spec.n_occupants:
            logger.warning(
                "Team %d: only %d free cells for %d occupants",
                team.team_id,
                len(free_cells),
                spec.n_occupants,
            )
        for pos in rng.sample(free_cells, min(spec.n_occupants, len(free_cells))):
            self.spawn(team.team_id, pos)

    # ------------------------------------------------------------------
    # Mutation surface
    # ------------------------------------------------------------------

    def add_team(self, team: Team) -> Team:
        if team is None:
            raise ValueError("team must not be None")
        if team.team_id in self.teams:
            raise ValueError(f"duplicate team id {team.team_id}")
        self.teams[team.team_id] = team
        self.fields[team.team_id] = DistanceField(self.grid.width, self.grid.height, team.team_id)
        return team

    def spawn(self, team_id: int, pos: Position, vitality: int = DEFAULT_VITALITY) -> Occupant:
        """Create an occupant on a free cell and enrol it in the team roster."""
        team = self.team(team_id)
        if not self.grid.is_free(pos):
            raise ValueError(f"cannot spawn on non-free cell {pos}")
        occupant = Occupant(pos, team, vitality)
        self.grid.place(occupant, pos)
        team.add_occupant(occupant)
        return occupant

    def set_target(self, team_id: int, pos: Position) -> None:
        """Move a team's cursor; takes effect at the next field recomputation."""
        self.team(team_id).target = pos

    def recompute_fields(self) -> None:
        for team_id, team in self.teams.items():
            self._solver.compute(team, self.cost_mode, out=self.fields[team_id])

    def advance_tick(self) -> TickSummary:
        """Recompute all fields, then let every occupant act once."""
        self.recompute_fields()
        summary = TickSummary(tick=self.tick)
        for occupant in self.grid.occupants():
            # Looked up per occupant: an earlier conversion this tick may have changed it
            decision = self._engine.act(occupant, self.fields.get(occupant.team.team_id))
            if decision.action is Action.MOVE:
                summary.moves += 1
            elif decision.action is Action.ATTACK:
                summary.attacks += 1
                if decision.converted:
                    summary.conversions += 1
            elif decision.action is Action.HEAL:
                summary.heals += 1
            else:
                summary.idles += 1
        self.tick += 1
        logger.debug("%s", summary)
        return summary

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    def team(self, team_id: int) -> Team:
        try:
            return self.teams[team_id]
        except KeyError:
            raise KeyError(f"unknown team id {team_id}") from None

    def field_for(self, team_id: int) -> DistanceField | None:
        return self.fields.get(team_id)

    def occupants(self) -> list[Occupant]:
        return self.grid.occupants()

    def active_teams(self) -> list[Team]:
        return [team for team in self.teams.values() if team.is_active]

    def winner(self) -> Team | None:
        """The last active team once a multi-team battle is decided."""
        if len(self.teams) < 2:
            return None
        active = self.active_teams()
        if len(active) == 1:
            return active[0]
        return None

    def populations(self) -> dict[int, int]:
        return {team_id: team.occupant_count for team_id, team in self.teams.items()}
