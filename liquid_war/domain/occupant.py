"""Grid-bound combat unit with a bounded vitality counter.

Death is ``vitality <= 0`` while healing is gated on ``vitality >
MIN_VITALITY``: an occupant at exactly MIN_VITALITY is alive but can no
longer give vitality away.
"""

from __future__ import annotations

from liquid_war.config.constants import (
    DEFAULT_VITALITY,
    MAX_VITALITY,
    MIN_VITALITY,
    VITALITY_TRANSFER,
)
from liquid_war.domain.position import Position
from liquid_war.domain.team import Team


class Occupant:
    """A single particle. Equality is by position: two occupants never share a cell."""

    def __init__(self, position: Position, team: Team, vitality: int = DEFAULT_VITALITY) -> None:
        if position is None:
            raise ValueError("position must not be None")
        if team is None:
            raise ValueError("team must not be None")
        self._position = position
        self._team = team
        # Not clamped so a test fixture can start below MIN_VITALITY
        self._vitality = vitality

    @property
    def position(self) -> Position:
        return self._position

    @position.setter
    def position(self, new_position: Position) -> None:
        if new_position is None:
            raise ValueError("position must not be None")
        self._position = new_position

    @property
    def team(self) -> Team:
        return self._team

    @property
    def vitality(self) -> int:
        return self._vitality

    @vitality.setter
    def vitality(self, value: int) -> None:
        # Capped at MAX only; values below MIN are how death is detected
        self._vitality = min(MAX_VITALITY, value)

    @property
    def vitality_ratio(self) -> float:
        """Vitality normalized to [0, 1] for renderers."""
        return max(0.0, min(1.0, self._vitality / MAX_VITALITY))

    def is_dead(self) -> bool:
        return self._vitality <= 0

    def convert_to(self, new_team: Team) -> None:
        """Transfer ownership to *new_team* and reset vitality to the default."""
        if new_team is None:
            raise ValueError("team must not be None")
        self._team.remove_occupant(self)
        self._team = new_team
        self._vitality = DEFAULT_VITALITY
        new_team.add_occupant(self)

    def attack(self, target: Occupant | None) -> bool:
        """Drain up to VITALITY_TRANSFER from an enemy.

        Returns True iff the target died and was converted to this team.
        Same-team and missing targets are a no-op.
        """
        if target is None or target.team == self._team:
            return False
        stolen = min(VITALITY_TRANSFER, target.vitality)
        target.vitality = target.vitality - stolen
        self.vitality = self._vitality + stolen
        if target.is_dead():
            target.convert_to(self._team)
            return True
        return False

    def heal(self, ally: Occupant | None) -> bool:
        """Give vitality to a teammate without leaving [MIN_VITALITY, MAX_VITALITY].

        Returns True iff any vitality was transferred.
        """
        if ally is None or ally.team != self._team:
            return False
        if self._vitality <= MIN_VITALITY or ally.vitality >= MAX_VITALITY:
            return False
        amount = min(
            VITALITY_TRANSFER,
            self._vitality - MIN_VITALITY,
            MAX_VITALITY - ally.vitality,
        )
        self.vitality = self._vitality - amount
        ally.vitality = ally.vitality + amount
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Occupant):
            return NotImplemented
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Occupant(pos={self._position}, team={self._team.team_id}, "
            f"vitality={self._vitality})"
        )
