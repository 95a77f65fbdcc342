"""Matplotlib snapshot rendering of a battle world.

Reads only the world's query surface: obstacle mask, occupants, team
targets and distance fields.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from liquid_war.simulation.world import BattleWorld
from liquid_war.viz.theme import DEFAULT_THEME, TeamAppearance, Theme


def field_heatmap(world: BattleWorld, team_id: int) -> np.ndarray:
    """Return (H, W, 4) RGBA: blue near the target, red far away, clear if unreachable."""
    field = world.field_for(team_id)
    if field is None:
        raise ValueError(f"no distance field for team {team_id}")
    distances = field.to_array()
    reachable = field.reachable_mask()
    max_dist = field.max_finite_distance()
    ratio = np.zeros(distances.shape, dtype=float)
    if max_dist > 0:
        ratio[reachable] = distances[reachable] / max_dist
    rgba = np.zeros(distances.shape + (4,), dtype=float)
    rgba[..., 0] = ratio
    rgba[..., 2] = 1.0 - ratio
    rgba[..., 3] = np.where(reachable, 1.0, 0.0)
    return rgba


def build_frame(
    world: BattleWorld,
    appearances: dict[int, TeamAppearance],
    field_team: int | None = None,
    theme: Theme = DEFAULT_THEME,
) -> np.ndarray:
    """Compose an (H, W, 3) RGB frame: background, optional field, obstacles, occupants."""
    grid = world.grid
    frame = np.empty((grid.height, grid.width, 3), dtype=float)
    frame[...] = theme.background_color

    if field_team is not None:
        heat = field_heatmap(world, field_team)
        alpha = heat[..., 3:] * theme.field_alpha
        frame = frame * (1.0 - alpha) + heat[..., :3] * alpha

    frame[grid.obstacle_mask()] = theme.obstacle_color

    for occupant in world.occupants():
        appearance = appearances.get(occupant.team.team_id)
        if appearance is None:
            color = theme.unknown_team_color
        else:
            color = appearance.occupant_color(occupant.vitality_ratio)
        frame[occupant.position.y, occupant.position.x] = color
    return frame


def render_snapshot(
    world: BattleWorld,
    output_path: Path,
    appearances: dict[int, TeamAppearance],
    field_team: int | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Save the current world state as an image with team cursors marked."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame = build_frame(world, appearances, field_team=field_team, theme=theme)

    grid = world.grid
    scale = max(grid.width, grid.height) / 8.0
    fig, ax = plt.subplots(figsize=(grid.width / scale, grid.height / scale))
    ax.imshow(frame, origin="upper", interpolation="nearest", aspect="equal")
    for team in world.teams.values():
        ax.plot(
            team.target.x,
            team.target.y,
            marker="+",
            markersize=12,
            markeredgewidth=2,
            color=theme.cursor_color,
        )
        ax.plot(
            team.target.x,
            team.target.y,
            marker="o",
            markersize=8,
            fillstyle="none",
            color=theme.cursor_color,
        )
    ax.set_xlim(-0.5, grid.width - 0.5)
    ax.set_ylim(grid.height - 0.5, -0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title if title is not None else f"Tick {world.tick}")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
