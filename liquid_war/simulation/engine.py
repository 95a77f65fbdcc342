"""Headless battle driver: advance ticks until one team remains."""

from __future__ import annotations

import logging
from collections.abc import Callable
from random import Random

from liquid_war.config.constants import LOG_INTERVAL
from liquid_war.config.types import BattleConfig, BattleEndReason, BattleResult
from liquid_war.simulation.world import BattleWorld, TickSummary

logger = logging.getLogger(__name__)

TickCallback = Callable[[BattleWorld, TickSummary], None]


def run_battle(
    config: BattleConfig | None = None,
    world: BattleWorld | None = None,
    on_tick: TickCallback | None = None,
) -> BattleResult:
    """Run one battle to completion and return its summary.

    A world is bootstrapped from ``config`` (seeded with ``config.seed``)
    unless a prepared ``world`` is passed. ``on_tick`` is called after every
    tick, e.g. to move a team's cursor; nothing is persisted.
    """
    config = config or BattleConfig()
    if world is None:
        world = BattleWorld.create(config, Random(config.seed))

    ticks_run = 0
    termination_reason = BattleEndReason.MAX_TICKS.value
    for _ in range(config.max_ticks):
        summary = world.advance_tick()
        ticks_run += 1
        if on_tick is not None:
            on_tick(world, summary)
        if ticks_run % LOG_INTERVAL == 0:
            logger.info("Tick %d populations: %s", ticks_run, world.populations())
        if world.winner() is not None:
            termination_reason = BattleEndReason.WINNER.value
            break

    winner = world.winner()
    result = BattleResult(
        ticks_run=ticks_run,
        termination_reason=termination_reason,
        winner_id=winner.team_id if winner is not None else None,
        populations=world.populations(),
    )
    logger.info(
        "Battle ended after %d ticks (%s), winner=%s",
        result.ticks_run,
        result.termination_reason,
        result.winner_id,
    )
    return result
