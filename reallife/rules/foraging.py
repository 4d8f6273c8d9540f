"""Foraging — a life tile takes one unit of energy from a resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reallife.world.tile import EMPTY, Tile, grant_energy

if TYPE_CHECKING:
    from reallife.world.grid import Location, World


def forage(world: World, life_loc: Location, res_loc: Location, resource: Tile) -> None:
    """Move one unit of energy from ``resource`` to the life at ``life_loc``.

    A resource holding a single unit (or less) is used up and leaves an
    Empty cell behind.  Writes into ``world`` in place.

    Raises:
        InvalidStateError: If ``life_loc`` does not hold Life.
    """
    if resource.value > 1:
        world.put(res_loc, Tile.resource(resource.value - 1))
    else:
        world.put(res_loc, EMPTY)
    world.put(life_loc, grant_energy(world.get(life_loc)))
