"""Tests for liquid_war.domain.team."""

from __future__ import annotations

import pytest

from liquid_war.domain.occupant import Occupant
from liquid_war.domain.position import Position
from liquid_war.domain.team import Team


class TestTeam:
    def test_none_target_rejected(self) -> None:
        with pytest.raises(ValueError, match="target"):
            Team(1, None)  # type: ignore[arg-type]

    def test_target_can_be_moved(self) -> None:
        team = Team(1, Position(0, 0))
        team.target = Position(4, 2)
        assert team.target == Position(4, 2)
        with pytest.raises(ValueError):
            team.target = None  # type: ignore[assignment]

    def test_equality_by_id(self) -> None:
        assert Team(1, Position(0, 0)) == Team(1, Position(5, 5))
        assert Team(1, Position(0, 0)) != Team(2, Position(0, 0))
        assert len({Team(1, Position(0, 0)), Team(1, Position(1, 1))}) == 1

    def test_empty_team_is_inactive(self) -> None:
        team = Team(1, Position(0, 0))
        assert not team.is_active
        assert team.occupant_count == 0

    def test_add_and_remove(self) -> None:
        team = Team(1, Position(0, 0))
        occupant = Occupant(Position(1, 1), team, 40)
        team.add_occupant(occupant)
        team.add_occupant(occupant)
        assert team.occupant_count == 1
        assert team.is_active
        assert team.total_vitality == 40
        team.remove_occupant(occupant)
        assert not team.is_active

    def test_remove_absent_is_ignored(self) -> None:
        team = Team(1, Position(0, 0))
        team.remove_occupant(Occupant(Position(1, 1), team))
        assert team.occupant_count == 0

    def test_foreign_occupant_rejected(self) -> None:
        team = Team(1, Position(0, 0))
        other = Team(2, Position(0, 0))
        with pytest.raises(ValueError, match="does not belong"):
            team.add_occupant(Occupant(Position(1, 1), other))

    def test_none_occupant_rejected(self) -> None:
        with pytest.raises(ValueError):
            Team(1, Position(0, 0)).add_occupant(None)  # type: ignore[arg-type]

    def test_roster_keeps_insertion_order(self) -> None:
        team = Team(1, Position(0, 0))
        members = [Occupant(Position(x, 0), team) for x in (3, 1, 2)]
        for member in members:
            team.add_occupant(member)
        assert [m.position.x for m in team.occupants] == [3, 1, 2]
        assert isinstance(team.occupants, tuple)
