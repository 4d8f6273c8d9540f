"""Random inputs to the simulation — initial placement and growth events.

The turn rules are deterministic; everything random lives here and is
driven by a seeded NumPy generator owned by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reallife.world.grid import Location, World
from reallife.world.tile import Tile

if TYPE_CHECKING:
    from numpy.random import Generator


@dataclass(frozen=True)
class GrowthEvent:
    """A single exogenous energy injection.

    Attributes:
        location: Cell receiving the energy.
        amount: Energy added (positive).
    """

    location: Location
    amount: int


def populate(
    world: World,
    rng: Generator,
    *,
    initial_life: int = 8,
    initial_resources: int = 40,
    life_energy: tuple[int, int] = (10, 20),
    resource_energy: tuple[int, int] = (1, 10),
) -> None:
    """Scatter starting lives and resources over distinct random cells.

    Modifies ``world`` in place; it should be freshly created.

    Args:
        world: The world to seed.
        rng: Seeded random generator.
        initial_life: Number of Life tiles to place.
        initial_resources: Number of Resource tiles to place.
        life_energy: Inclusive (min, max) starting energy per life.
        resource_energy: Inclusive (min, max) energy per resource.

    Raises:
        ValueError: If more tiles are requested than the grid has cells.
    """
    cells = world.size * world.size
    wanted = initial_life + initial_resources
    if wanted > cells:
        msg = f"cannot place {wanted} tiles on {cells} cells"
        raise ValueError(msg)

    picks = rng.choice(cells, size=wanted, replace=False)
    for i, index in enumerate(picks):
        row, col = divmod(int(index), world.size)
        if i < initial_life:
            lo, hi = life_energy
            tile = Tile.life(int(rng.integers(lo, hi + 1)))
        else:
            lo, hi = resource_energy
            tile = Tile.resource(int(rng.integers(lo, hi + 1)))
        world.put(Location(row, col), tile)


def draw_growth_event(
    rng: Generator,
    size: int,
    *,
    chance: float,
    amount: tuple[int, int],
) -> GrowthEvent | None:
    """Roll for this turn's growth event.

    Args:
        rng: Seeded random generator.
        size: Grid dimension, bounding the random location.
        chance: Probability (0.0-1.0) that an event happens this turn.
        amount: Inclusive (min, max) energy of the event.

    Returns:
        The event, or None if none happens.
    """
    if rng.random() >= chance:
        return None
    row = int(rng.integers(0, size))
    col = int(rng.integers(0, size))
    lo, hi = amount
    return GrowthEvent(Location(row, col), int(rng.integers(lo, hi + 1)))
