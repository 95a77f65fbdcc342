"""Domain layer: positions, grid, teams, occupants and distance fields."""

from liquid_war.domain.field import UNREACHABLE, DistanceField, extend_distance
from liquid_war.domain.grid import Grid
from liquid_war.domain.occupant import Occupant
from liquid_war.domain.position import Direction, Position
from liquid_war.domain.team import Team

__all__ = [
    "Direction",
    "DistanceField",
    "Grid",
    "Occupant",
    "Position",
    "Team",
    "UNREACHABLE",
    "extend_distance",
]
