"""Visualization package: team appearances and snapshot rendering."""

from liquid_war.viz.render import build_frame, field_heatmap, render_snapshot
from liquid_war.viz.theme import (
    DEFAULT_THEME,
    LIGHT_THEME,
    TeamAppearance,
    Theme,
    appearances_from_config,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "LIGHT_THEME",
    "TeamAppearance",
    "Theme",
    "appearances_from_config",
    "build_frame",
    "field_heatmap",
    "get_theme",
    "render_snapshot",
]
