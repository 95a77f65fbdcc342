"""Centralized domain constants for battlefield simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MIN_VITALITY = 1
"""Lowest vitality a living occupant can be healed down to."""

MAX_VITALITY = 100
"""Vitality cap for every occupant."""

DEFAULT_VITALITY = 50
"""Vitality of a freshly spawned or freshly converted occupant."""

VITALITY_TRANSFER = 10
"""Largest vitality amount moved by a single attack or heal."""

CARDINAL_STEP_COST = 10
"""Weighted field cost of a N/E/S/W step (1.0 scaled by 10)."""

DIAGONAL_STEP_COST = 14
"""Weighted field cost of a diagonal step (sqrt(2) scaled by 10)."""

UNIFORM_STEP_COST = 1
"""Step cost of the uniform field variant, diagonals included."""

MAIN_TIER_MARGIN = 5
"""A neighbor must beat the running best by more than this to restart the main tier."""

GRID_WIDTH = 200
"""Default battlefield width in cells."""

GRID_HEIGHT = 150
"""Default battlefield height in cells."""

OCCUPANTS_PER_TEAM = 500
"""Default number of occupants spawned for each team."""

OBSTACLE_DENSITY = 0.05
"""Default probability that an interior cell becomes an obstacle."""

MAX_TICKS = 2_000
"""Default tick cap for a headless battle."""

LOG_INTERVAL = 100
"""Emit an INFO population report every this many ticks."""
