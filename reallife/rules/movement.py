"""Movement — step a hungry life tile toward the most attractive resource.

A resource's attraction is its energy minus its Euclidean distance from the
life.  The highest score wins; among equal scores the resource visited
*last* in column-major scan order wins.  Movement is one cell per turn and
closes the column gap before the row gap.
"""

from __future__ import annotations

import logging

from reallife.errors import InvalidStateError, NoLegalMoveError
from reallife.rules.foraging import forage
from reallife.world.grid import Location, World
from reallife.world.tile import EMPTY, Tile, TileKind, energy_of, is_resource

logger = logging.getLogger(__name__)


def best_resource(world: World, life_loc: Location) -> tuple[Location, Tile] | None:
    """Return the highest-scoring resource for a life at ``life_loc``.

    Returns:
        ``(location, tile)`` of the chosen resource, or None if the grid
        holds no resource at all.
    """
    best: tuple[Location, Tile] | None = None
    best_score = 0.0
    for loc, tile in world.all_tiles_with_location():
        if not is_resource(tile):
            continue
        score = energy_of(tile) - life_loc.distance_to(loc)
        # >= so that a later tile in scan order takes a tie
        if best is None or score >= best_score:
            best = (loc, tile)
            best_score = score
    return best


def step_toward(life_loc: Location, target: Location) -> Location:
    """Return the next cell on the way from ``life_loc`` to ``target``.

    Raises:
        NoLegalMoveError: If the life is already within one cell of the
            target on both axes.
    """
    if life_loc.col > target.col + 1:
        return life_loc.offset(0, -1)
    if life_loc.col < target.col - 1:
        return life_loc.offset(0, 1)
    if life_loc.row > target.row + 1:
        return life_loc.offset(-1, 0)
    if life_loc.row < target.row - 1:
        return life_loc.offset(1, 0)
    msg = (
        f"life at ({life_loc.row}, {life_loc.col}) is already adjacent to "
        f"({target.row}, {target.col})"
    )
    raise NoLegalMoveError(msg)


def move_toward_best_resource(world: World, life_loc: Location) -> None:
    """Relocate the life at ``life_loc`` one step toward its best resource.

    With no resource on the grid the life stays put and loses one unit of
    energy.  A life already next to its target forages from it instead of
    moving.  Writes into ``world`` in place.

    Raises:
        InvalidStateError: If ``life_loc`` does not hold Life.
    """
    life = world.get(life_loc)
    if life.kind is not TileKind.LIFE:
        msg = f"expected Life at ({life_loc.row}, {life_loc.col}), found {life}"
        raise InvalidStateError(msg)

    target = best_resource(world, life_loc)
    if target is None:
        world.put(life_loc, Tile.life(life.value - 1))
        return

    target_loc, target_tile = target
    try:
        dest = step_toward(life_loc, target_loc)
    except NoLegalMoveError as exc:
        logger.debug("%s; foraging in place", exc)
        forage(world, life_loc, target_loc, target_tile)
        return

    energy = life.value - 1
    occupant = world.get(dest)
    if occupant.kind is TileKind.LIFE:
        energy += occupant.value
    world.put(life_loc, EMPTY)
    world.put(dest, Tile.life(energy))
