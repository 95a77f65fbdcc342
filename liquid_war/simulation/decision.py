"""Per-occupant, per-tick action policy driven by the team's distance field.

Each neighbor direction is sorted into a tier by comparing its distance to
the occupant's own distance ``d0``:

* main: beats the running best of the scan; beating it by more than
  MAIN_TIER_MARGIN discards earlier main candidates.
* good: closer than ``d0`` but not main.
* acceptable: exactly ``d0``.

Resolution order, first applicable wins: move main, move good, move
acceptable, attack main, attack good, heal main, idle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from liquid_war.config.constants import MAIN_TIER_MARGIN
from liquid_war.domain.field import UNREACHABLE, DistanceField
from liquid_war.domain.grid import Grid
from liquid_war.domain.occupant import Occupant
from liquid_war.domain.position import Direction


class Action(Enum):
    """What an occupant did during one tick."""

    IDLE = "idle"
    MOVE = "move"
    ATTACK = "attack"
    HEAL = "heal"


@dataclass(frozen=True)
class Decision:
    """Outcome of one occupant's turn."""

    action: Action
    direction: Direction | None = None
    converted: bool = False

    @property
    def acted(self) -> bool:
        return self.action is not Action.IDLE


IDLE = Decision(Action.IDLE)


@dataclass
class DirectionTiers:
    """Candidate directions per tier, each in enumeration order."""

    main: list[Direction] = field(default_factory=list)
    good: list[Direction] = field(default_factory=list)
    acceptable: list[Direction] = field(default_factory=list)


class DecisionEngine:
    """Greedy one-cell-lookahead policy over a shared grid.

    Decisions mutate the grid immediately, so callers must evaluate
    occupants sequentially in a fixed order.
    """

    def __init__(self, grid: Grid) -> None:
        if grid is None:
            raise ValueError("grid must not be None")
        self._grid = grid

    def classify(self, occupant: Occupant, field: DistanceField) -> DirectionTiers:
        """Sort the 8 neighbor directions of *occupant* into tiers."""
        tiers = DirectionTiers()
        current = occupant.position
        current_dist = field.distance_at(current)
        best_dist = current_dist
        for direction in Direction:
            neighbor = direction.apply(current)
            if not self._grid.in_bounds(neighbor):
                continue
            neighbor_dist = field.distance_at(neighbor)
            if neighbor_dist < best_dist:
                if neighbor_dist < best_dist - MAIN_TIER_MARGIN:
                    tiers.main.clear()
                    best_dist = neighbor_dist
                tiers.main.append(direction)
            elif neighbor_dist < current_dist:
                tiers.good.append(direction)
            elif neighbor_dist == current_dist:
                tiers.acceptable.append(direction)
        return tiers

    def act(self, occupant: Occupant | None, field: DistanceField | None) -> Decision:
        """Take at most one action for *occupant*; malformed input yields IDLE."""
        if occupant is None or field is None:
            return IDLE
        current_dist = field.distance_at(occupant.position)
        if current_dist == 0 or current_dist == UNREACHABLE:
            return IDLE

        tiers = self.classify(occupant, field)
        for candidates in (tiers.main, tiers.good, tiers.acceptable):
            decision = self._try_move(occupant, candidates)
            if decision is not None:
                return decision
        for candidates in (tiers.main, tiers.good):
            decision = self._try_attack(occupant, candidates)
            if decision is not None:
                return decision
        return self._try_heal(occupant, tiers.main)

    def _try_move(self, occupant: Occupant, directions: list[Direction]) -> Decision | None:
        for direction in directions:
            destination = direction.apply(occupant.position)
            if self._grid.is_free(destination):
                self._grid.move_occupant(occupant.position, destination)
                return Decision(Action.MOVE, direction)
        return None

    def _try_attack(self, occupant: Occupant, directions: list[Direction]) -> Decision | None:
        for direction in directions:
            target = self._grid.occupant_at(direction.apply(occupant.position))
            if target is not None and target.team != occupant.team:
                converted = occupant.attack(target)
                return Decision(Action.ATTACK, direction, converted=converted)
        return None

    def _try_heal(self, occupant: Occupant, directions: list[Direction]) -> Decision:
        # Only the first ally found is considered, even if it cannot be healed
        for direction in directions:
            ally = self._grid.occupant_at(direction.apply(occupant.position))
            if ally is not None and ally is not occupant and ally.team == occupant.team:
                if occupant.heal(ally):
                    return Decision(Action.HEAL, direction)
                return IDLE
        return IDLE

    def best_direction(
        self, occupant: Occupant | None, field: DistanceField | None
    ) -> Direction | None:
        """Return the non-obstacle neighbor direction with the lowest distance.

        Only strictly improving directions count; ties keep the earlier one.
        """
        if occupant is None or field is None:
            return None
        current = occupant.position
        best: Direction | None = None
        best_dist = field.distance_at(current)
        for direction in Direction:
            neighbor = direction.apply(current)
            if self._grid.is_obstacle(neighbor):
                continue
            neighbor_dist = field.distance_at(neighbor)
            if neighbor_dist < best_dist:
                best_dist = neighbor_dist
                best = direction
        return best

    def can_move(self, occupant: Occupant | None) -> bool:
        """True when at least one neighboring cell is free."""
        if occupant is None:
            return False
        return any(self._grid.is_free(d.apply(occupant.position)) for d in Direction)
