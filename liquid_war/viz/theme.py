"""Presentation descriptors: team colors and board palette.

Kept apart from :class:`liquid_war.domain.team.Team` so that the simulation
core never touches color math; renderers only read ``vitality_ratio``.
"""

from __future__ import annotations

from dataclasses import dataclass

from liquid_war.config.types import BattleConfig

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class TeamAppearance:
    """Base color of one team, dimmed for low-vitality occupants."""

    color: RGB
    min_brightness: float = 0.3

    def __post_init__(self) -> None:
        if self.color is None:
            raise ValueError("color must not be None")
        if not 0.0 <= self.min_brightness <= 1.0:
            raise ValueError("min_brightness must be in [0.0, 1.0]")

    def occupant_color(self, vitality_ratio: float) -> RGB:
        """Scale the base color from ``min_brightness`` (empty) to 1.0 (full)."""
        ratio = max(0.0, min(1.0, vitality_ratio))
        brightness = self.min_brightness + ratio * (1.0 - self.min_brightness)
        r, g, b = self.color
        return (r * brightness, g * brightness, b * brightness)


@dataclass(frozen=True)
class Theme:
    """Board palette for snapshot rendering."""

    background_color: RGB = (0.0, 0.0, 0.0)
    obstacle_color: RGB = (0.66, 0.66, 0.66)
    cursor_color: str = "yellow"
    unknown_team_color: RGB = (1.0, 1.0, 1.0)
    field_alpha: float = 0.3


DEFAULT_THEME = Theme()

LIGHT_THEME = Theme(
    background_color=(1.0, 1.0, 1.0),
    obstacle_color=(0.25, 0.25, 0.25),
    cursor_color="black",
    unknown_team_color=(0.5, 0.5, 0.5),
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "light": LIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]


def appearances_from_config(config: BattleConfig) -> dict[int, TeamAppearance]:
    """Map each configured team id to its appearance."""
    return {spec.team_id: TeamAppearance(color=spec.color) for spec in config.resolved_teams()}
