"""SimulationEngine — the turn driver.

Owns the current world, the seeded random generator, and the tick count,
and advances them in the canonical order:

1. Compute the next turn (static pass, then life pass)
2. Roll for and apply at most one exogenous growth event
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from reallife.simulation.config import SimulationConfig
from reallife.simulation.growth import GrowthEvent, draw_growth_event, populate
from reallife.simulation.turn import apply_exogenous_growth, is_terminal, next_turn
from reallife.world.census import Census
from reallife.world.grid import World

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the simulation forward turn by turn.

    Attributes:
        config: Loaded simulation configuration.
        world: The current world.  Replaced, never mutated, on each step.
        rng: Master seeded random generator.
        tick: Number of turns run since the last reset.
        last_growth: The growth event applied on the most recent step.
    """

    config: SimulationConfig
    world: World = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0
    last_growth: GrowthEvent | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Build the RNG and the seeded starting world from config."""
        self.reset()

    def reset(self, seed: int | None = None) -> None:
        """Start over with a freshly seeded world.

        Args:
            seed: Seed to use instead of ``config.seed``.
        """
        self.rng = np.random.default_rng(self.config.seed if seed is None else seed)
        world = World(size=self.config.world_size)
        populate(
            world,
            self.rng,
            initial_life=self.config.initial_life,
            initial_resources=self.config.initial_resources,
            life_energy=self.config.life_energy,
            resource_energy=self.config.resource_energy,
        )
        self.world = world
        self.tick = 0
        self.last_growth = None

    @property
    def census(self) -> Census:
        return Census.of(self.world)

    @property
    def finished(self) -> bool:
        """True once the world can no longer change population."""
        return is_terminal(self.world)

    def step(self) -> None:
        """Advance the simulation by one turn.

        Raises:
            InvalidStateError: If the turn hits a broken invariant.  The
                current world and tick are left as they were.
        """
        world = next_turn(self.world, self.config.rules)

        event = draw_growth_event(
            self.rng,
            self.config.world_size,
            chance=self.config.growth_chance,
            amount=self.config.growth_amount,
        )
        if event is not None:
            logger.debug(
                "growth of %d at (%d, %d)",
                event.amount,
                event.location.row,
                event.location.col,
            )
            world = apply_exogenous_growth(world, event.location, event.amount)

        self.world = world
        self.last_growth = event
        self.tick += 1

    def run(
        self,
        ticks: int,
        on_step: Callable[[SimulationEngine], None] | None = None,
    ) -> int:
        """Run up to ``ticks`` turns, stopping early once the world is terminal.

        Args:
            ticks: Maximum number of turns to advance.
            on_step: Called with the engine after every completed turn.

        Returns:
            The number of turns actually run.
        """
        logger.info("running up to %d ticks from tick %d", ticks, self.tick)
        ran = 0
        for _ in range(ticks):
            if self.finished:
                logger.info("world is terminal at tick %d", self.tick)
                break
            self.step()
            ran += 1
            if on_step is not None:
                on_step(self)
        return ran
