"""Simulation layer: field solver, decision policy, world aggregate and driver."""

from liquid_war.simulation.decision import (
    Action,
    Decision,
    DecisionEngine,
    DirectionTiers,
)
from liquid_war.simulation.engine import run_battle
from liquid_war.simulation.solver import FieldSolver, step_cost
from liquid_war.simulation.world import BattleWorld, TickSummary

__all__ = [
    "Action",
    "BattleWorld",
    "Decision",
    "DecisionEngine",
    "DirectionTiers",
    "FieldSolver",
    "TickSummary",
    "run_battle",
    "step_cost",
]
