"""Tests for liquid_war.domain.occupant combat and assist rules."""

from __future__ import annotations

import pytest

from liquid_war.config.constants import DEFAULT_VITALITY, MAX_VITALITY, MIN_VITALITY
from liquid_war.domain.occupant import Occupant
from liquid_war.domain.position import Position
from liquid_war.domain.team import Team


@pytest.fixture
def red() -> Team:
    return Team(1, Position(0, 0))


@pytest.fixture
def blue() -> Team:
    return Team(2, Position(9, 9))


def _enlist(team: Team, pos: Position, vitality: int = DEFAULT_VITALITY) -> Occupant:
    occupant = Occupant(pos, team, vitality)
    team.add_occupant(occupant)
    return occupant


class TestConstruction:
    def test_defaults(self, red: Team) -> None:
        occupant = Occupant(Position(1, 2), red)
        assert occupant.vitality == DEFAULT_VITALITY
        assert occupant.team is red
        assert occupant.position == Position(1, 2)

    def test_none_position_rejected(self, red: Team) -> None:
        with pytest.raises(ValueError, match="position"):
            Occupant(None, red)  # type: ignore[arg-type]

    def test_none_team_rejected(self) -> None:
        with pytest.raises(ValueError, match="team"):
            Occupant(Position(0, 0), None)  # type: ignore[arg-type]

    def test_none_position_assignment_rejected(self, red: Team) -> None:
        occupant = Occupant(Position(0, 0), red)
        with pytest.raises(ValueError):
            occupant.position = None  # type: ignore[assignment]

    def test_equality_is_by_position(self, red: Team, blue: Team) -> None:
        assert Occupant(Position(3, 3), red) == Occupant(Position(3, 3), blue, 10)
        assert Occupant(Position(3, 3), red) != Occupant(Position(3, 4), red)


class TestVitality:
    def test_setter_caps_at_max_only(self, red: Team) -> None:
        occupant = Occupant(Position(0, 0), red)
        occupant.vitality = MAX_VITALITY + 50
        assert occupant.vitality == MAX_VITALITY
        occupant.vitality = -5
        assert occupant.vitality == -5

    @pytest.mark.parametrize(("vitality", "dead"), [(0, True), (-3, True), (1, False), (50, False)])
    def test_is_dead_uses_zero_threshold(self, red: Team, vitality: int, dead: bool) -> None:
        assert Occupant(Position(0, 0), red, vitality).is_dead() is dead

    def test_min_vitality_is_alive(self, red: Team) -> None:
        assert not Occupant(Position(0, 0), red, MIN_VITALITY).is_dead()

    def test_vitality_ratio_is_clamped(self, red: Team) -> None:
        assert Occupant(Position(0, 0), red, 50).vitality_ratio == pytest.approx(0.5)
        assert Occupant(Position(0, 0), red, -5).vitality_ratio == 0.0
        assert Occupant(Position(0, 0), red, 100).vitality_ratio == 1.0


class TestAttack:
    def test_same_team_is_noop(self, red: Team) -> None:
        a = _enlist(red, Position(0, 0), 50)
        b = _enlist(red, Position(1, 0), 30)
        assert not a.attack(b)
        assert (a.vitality, b.vitality) == (50, 30)

    def test_none_target_is_noop(self, red: Team) -> None:
        assert not _enlist(red, Position(0, 0)).attack(None)

    def test_drains_transfer_unit(self, red: Team, blue: Team) -> None:
        attacker = _enlist(red, Position(0, 0), 50)
        enemy = _enlist(blue, Position(1, 0), 30)
        assert not attacker.attack(enemy)
        assert attacker.vitality == 60
        assert enemy.vitality == 20
        assert enemy.team is blue

    def test_attacker_capped_at_max(self, red: Team, blue: Team) -> None:
        attacker = _enlist(red, Position(0, 0), 95)
        enemy = _enlist(blue, Position(1, 0), 50)
        attacker.attack(enemy)
        assert attacker.vitality == MAX_VITALITY
        assert enemy.vitality == 40

    def test_lethal_attack_converts(self, red: Team, blue: Team) -> None:
        attacker = _enlist(red, Position(0, 0), 50)
        enemy = _enlist(blue, Position(1, 0), 5)
        assert attacker.attack(enemy)
        assert attacker.vitality == 55
        assert enemy.team is red
        assert enemy.vitality == DEFAULT_VITALITY
        assert any(member is enemy for member in red.occupants)
        assert blue.occupant_count == 0
        assert not blue.is_active

    def test_exactly_transfer_unit_is_lethal(self, red: Team, blue: Team) -> None:
        attacker = _enlist(red, Position(0, 0))
        enemy = _enlist(blue, Position(1, 0), 10)
        assert attacker.attack(enemy)
        assert enemy.team is red

    def test_min_vitality_enemy_converts(self, red: Team, blue: Team) -> None:
        attacker = _enlist(red, Position(0, 0))
        enemy = _enlist(blue, Position(1, 0), MIN_VITALITY)
        assert attacker.attack(enemy)
        assert attacker.vitality == DEFAULT_VITALITY + MIN_VITALITY


class TestHeal:
    def test_transfers_unit(self, red: Team) -> None:
        healer = _enlist(red, Position(0, 0), 60)
        ally = _enlist(red, Position(1, 0), 30)
        assert healer.heal(ally)
        assert (healer.vitality, ally.vitality) == (50, 40)

    def test_enemy_and_none_are_noops(self, red: Team, blue: Team) -> None:
        healer = _enlist(red, Position(0, 0), 60)
        enemy = _enlist(blue, Position(1, 0), 30)
        assert not healer.heal(enemy)
        assert not healer.heal(None)
        assert (healer.vitality, enemy.vitality) == (60, 30)

    def test_healer_at_min_cannot_heal(self, red: Team) -> None:
        healer = _enlist(red, Position(0, 0), MIN_VITALITY)
        ally = _enlist(red, Position(1, 0), 30)
        assert not healer.heal(ally)
        assert ally.vitality == 30

    def test_ally_at_max_cannot_be_healed(self, red: Team) -> None:
        healer = _enlist(red, Position(0, 0), 60)
        ally = _enlist(red, Position(1, 0), MAX_VITALITY)
        assert not healer.heal(ally)
        assert healer.vitality == 60

    def test_transfer_limited_by_healer_slack(self, red: Team) -> None:
        healer = _enlist(red, Position(0, 0), 5)
        ally = _enlist(red, Position(1, 0), 30)
        assert healer.heal(ally)
        assert healer.vitality == MIN_VITALITY
        assert ally.vitality == 34
        assert not healer.heal(ally)

    def test_transfer_limited_by_ally_headroom(self, red: Team) -> None:
        healer = _enlist(red, Position(0, 0), 60)
        ally = _enlist(red, Position(1, 0), 97)
        assert healer.heal(ally)
        assert ally.vitality == MAX_VITALITY
        assert healer.vitality == 57


class TestConversion:
    def test_convert_moves_between_rosters(self, red: Team, blue: Team) -> None:
        occupant = _enlist(blue, Position(2, 2), 70)
        occupant.convert_to(red)
        assert occupant.team is red
        assert occupant.vitality == DEFAULT_VITALITY
        assert red.occupant_count == 1
        assert blue.occupant_count == 0

    def test_convert_to_none_rejected(self, red: Team) -> None:
        with pytest.raises(ValueError):
            _enlist(red, Position(0, 0)).convert_to(None)  # type: ignore[arg-type]
