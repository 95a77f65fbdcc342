"""Team identity, target cell and occupant roster."""

from __future__ import annotations

from typing import TYPE_CHECKING

from liquid_war.domain.position import Position

if TYPE_CHECKING:
    from liquid_war.domain.occupant import Occupant


class Team:
    """A side of the battle.

    Equality is by ``team_id``. Every roster member reports this team as its
    owner; :meth:`Occupant.convert_to` keeps both sides consistent. Appearance
    lives in :class:`liquid_war.viz.theme.TeamAppearance`, not here.
    """

    def __init__(self, team_id: int, target: Position) -> None:
        if team_id is None:
            raise ValueError("team_id must not be None")
        if target is None:
            raise ValueError("target must not be None")
        self._team_id = team_id
        self._target = target
        self._occupants: list[Occupant] = []

    @property
    def team_id(self) -> int:
        return self._team_id

    @property
    def target(self) -> Position:
        """Cell this team's occupants are routed toward (the cursor)."""
        return self._target

    @target.setter
    def target(self, new_target: Position) -> None:
        if new_target is None:
            raise ValueError("target must not be None")
        self._target = new_target

    @property
    def occupants(self) -> tuple[Occupant, ...]:
        return tuple(self._occupants)

    def add_occupant(self, occupant: Occupant) -> None:
        if occupant is None:
            raise ValueError("occupant must not be None")
        if occupant.team != self:
            raise ValueError("occupant does not belong to this team")
        if not any(member is occupant for member in self._occupants):
            self._occupants.append(occupant)

    def remove_occupant(self, occupant: Occupant) -> None:
        """Drop *occupant* from the roster; absent occupants are ignored."""
        for i, member in enumerate(self._occupants):
            if member is occupant:
                del self._occupants[i]
                return

    @property
    def occupant_count(self) -> int:
        return len(self._occupants)

    @property
    def is_active(self) -> bool:
        """A team with no occupants left has lost."""
        return bool(self._occupants)

    @property
    def total_vitality(self) -> int:
        return sum(occupant.vitality for occupant in self._occupants)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self._team_id == other._team_id

    def __hash__(self) -> int:
        return hash(self._team_id)

    def __repr__(self) -> str:
        return (
            f"Team(id={self._team_id}, target={self._target}, "
            f"occupants={len(self._occupants)})"
        )
