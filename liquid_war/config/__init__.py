"""Configuration layer: constants and typed config dataclasses."""

from liquid_war.config.constants import (
    CARDINAL_STEP_COST,
    DEFAULT_VITALITY,
    DIAGONAL_STEP_COST,
    GRID_HEIGHT,
    GRID_WIDTH,
    LOG_INTERVAL,
    MAIN_TIER_MARGIN,
    MAX_TICKS,
    MAX_VITALITY,
    MIN_VITALITY,
    OBSTACLE_DENSITY,
    OCCUPANTS_PER_TEAM,
    UNIFORM_STEP_COST,
    VITALITY_TRANSFER,
)
from liquid_war.config.types import (
    BattleConfig,
    BattleEndReason,
    BattleResult,
    CostMode,
    TeamSpec,
    default_team_specs,
)

__all__ = [
    "BattleConfig",
    "BattleEndReason",
    "BattleResult",
    "CARDINAL_STEP_COST",
    "CostMode",
    "DEFAULT_VITALITY",
    "DIAGONAL_STEP_COST",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "LOG_INTERVAL",
    "MAIN_TIER_MARGIN",
    "MAX_TICKS",
    "MAX_VITALITY",
    "MIN_VITALITY",
    "OBSTACLE_DENSITY",
    "OCCUPANTS_PER_TEAM",
    "TeamSpec",
    "UNIFORM_STEP_COST",
    "VITALITY_TRANSFER",
    "default_team_specs",
]
