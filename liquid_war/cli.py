"""Command-line entry point for headless battles and board snapshots."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from random import Random

from liquid_war.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_TICKS,
    OBSTACLE_DENSITY,
    OCCUPANTS_PER_TEAM,
)
from liquid_war.config.types import BattleConfig, CostMode, default_team_specs
from liquid_war.simulation.engine import run_battle
from liquid_war.simulation.world import BattleWorld
from liquid_war.viz.render import render_snapshot
from liquid_war.viz.theme import appearances_from_config, get_theme

logger = logging.getLogger(__name__)


def _add_board_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=GRID_WIDTH)
    p.add_argument("--height", type=int, default=GRID_HEIGHT)
    p.add_argument("--density", type=float, default=OBSTACLE_DENSITY)
    p.add_argument("--no-border", action="store_true", help="Skip the outer wall ring")
    p.add_argument("--occupants", type=int, default=OCCUPANTS_PER_TEAM, help="Per team")
    p.add_argument(
        "--cost-mode",
        choices=[mode.value for mode in CostMode],
        default=CostMode.WEIGHTED.value,
    )
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--field-team", type=int, default=None, help="Overlay this team's field")


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Run a headless battle until one team remains")
    p.set_defaults(func=_handle_run)
    _add_board_arguments(p)
    p.add_argument("--ticks", type=int, default=MAX_TICKS)
    p.add_argument("--snapshot", type=Path, default=None, help="Save the final board image")


def _build_snapshot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("snapshot", help="Render the freshly bootstrapped board")
    p.set_defaults(func=_handle_snapshot)
    _add_board_arguments(p)
    p.add_argument("--output", type=Path, required=True)


def _config_from_args(args: argparse.Namespace) -> BattleConfig:
    return BattleConfig(
        grid_width=args.width,
        grid_height=args.height,
        obstacle_density=args.density,
        border_walls=not args.no_border,
        teams=default_team_specs(args.width, args.height, args.occupants),
        cost_mode=CostMode(args.cost_mode),
        max_ticks=getattr(args, "ticks", MAX_TICKS),
        seed=args.seed,
    )


def _handle_run(args: argparse.Namespace, config: BattleConfig) -> None:
    world = BattleWorld.create(config, Random(config.seed))
    result = run_battle(config, world=world)
    print(
        f"ticks={result.ticks_run} reason={result.termination_reason} "
        f"winner={result.winner_id} populations={result.populations}"
    )
    if args.snapshot is not None:
        path = render_snapshot(
            world,
            args.snapshot,
            appearances_from_config(config),
            field_team=args.field_team,
            theme=args.theme_obj,
        )
        logger.info("Wrote snapshot to %s", path)


def _handle_snapshot(args: argparse.Namespace, config: BattleConfig) -> None:
    world = BattleWorld.create(config, Random(config.seed))
    path = render_snapshot(
        world,
        args.output,
        appearances_from_config(config),
        field_team=args.field_team,
        theme=args.theme_obj,
    )
    logger.info("Wrote snapshot to %s", path)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Flow-field team battle simulator")
    parser.add_argument("--theme", type=str, default="default", help="default or light")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_snapshot_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.theme_obj = get_theme(args.theme)
        config = _config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    if args.field_team is not None and args.field_team not in {
        spec.team_id for spec in config.resolved_teams()
    }:
        parser.error(f"unknown --field-team {args.field_team}")

    args.func(args, config)


if __name__ == "__main__":
    main()
