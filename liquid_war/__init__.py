"""Flow-field team battle simulation on a 2D grid."""

from liquid_war.config.types import BattleConfig, BattleResult, CostMode, TeamSpec
from liquid_war.domain import (
    UNREACHABLE,
    Direction,
    DistanceField,
    Grid,
    Occupant,
    Position,
    Team,
)
from liquid_war.simulation import (
    Action,
    BattleWorld,
    Decision,
    DecisionEngine,
    FieldSolver,
    TickSummary,
    run_battle,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "BattleConfig",
    "BattleResult",
    "BattleWorld",
    "CostMode",
    "Decision",
    "DecisionEngine",
    "Direction",
    "DistanceField",
    "FieldSolver",
    "Grid",
    "Occupant",
    "Position",
    "Team",
    "TeamSpec",
    "TickSummary",
    "UNREACHABLE",
    "run_battle",
]
