"""Tests for liquid_war.domain.position."""

from __future__ import annotations

import pytest

from liquid_war.domain.position import Direction, Position


class TestPosition:
    def test_equality_and_hash_by_coordinates(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert hash(Position(3, 4)) == hash(Position(3, 4))
        assert len({Position(1, 1), Position(1, 1), Position(1, 2)}) == 2

    def test_offset_returns_new_position(self) -> None:
        origin = Position(2, 2)
        assert origin.offset(1, -1) == Position(3, 1)
        assert origin == Position(2, 2)

    def test_in_bounds(self) -> None:
        assert Position(0, 0).in_bounds(5, 5)
        assert Position(4, 4).in_bounds(5, 5)
        assert not Position(5, 0).in_bounds(5, 5)
        assert not Position(-1, 2).in_bounds(5, 5)

    def test_distances(self) -> None:
        a, b = Position(0, 0), Position(3, 4)
        assert a.manhattan_distance(b) == 7
        assert a.euclidean_distance(b) == pytest.approx(5.0)

    def test_str(self) -> None:
        assert str(Position(1, 2)) == "(1, 2)"


class TestDirection:
    def test_enumeration_order(self) -> None:
        assert [d.name for d in Direction] == [
            "NORTH",
            "NORTH_EAST",
            "EAST",
            "SOUTH_EAST",
            "SOUTH",
            "SOUTH_WEST",
            "WEST",
            "NORTH_WEST",
        ]

    def test_diagonal_and_cardinal_split(self) -> None:
        diagonals = [d for d in Direction if d.is_diagonal]
        cardinals = [d for d in Direction if d.is_cardinal]
        assert len(diagonals) == 4
        assert len(cardinals) == 4
        assert Direction.NORTH_EAST in diagonals
        assert Direction.WEST in cardinals

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction: Direction) -> None:
        assert direction.opposite().opposite() is direction
        assert direction.opposite() is not direction

    def test_apply_moves_one_cell(self) -> None:
        assert Direction.NORTH.apply(Position(5, 5)) == Position(5, 4)
        assert Direction.SOUTH_WEST.apply(Position(5, 5)) == Position(4, 6)
