"""Life pass — death, reproduction, foraging, and movement.

Life tiles act one at a time in column-major order, each committing its
effect to a shared working copy before the next acts.  A life processed
later therefore sees the moves and foraging of those before it.

Locations are captured once, from the world handed in, before anything
moves.  Eggs that hatched in this turn's static pass are Life in that
world and are therefore captured too; the orchestrator hands in the
pre-hatch snapshot's life list to keep hatchlings idle until next turn.
"""

from __future__ import annotations

from collections.abc import Iterable

from reallife.errors import InvalidStateError
from reallife.rules.constants import Rules
from reallife.rules.foraging import forage
from reallife.rules.movement import move_toward_best_resource
from reallife.world.grid import Location, World
from reallife.world.tile import EMPTY, Tile, TileKind, is_empty, is_resource


def process_life(world: World, loc: Location, rules: Rules) -> None:
    """Let the life at ``loc`` take its action for this turn, in place.

    Raises:
        InvalidStateError: If ``loc`` no longer holds Life.
    """
    life = world.get(loc)
    if life.kind is not TileKind.LIFE:
        msg = f"captured life at ({loc.row}, {loc.col}) is now {life}"
        raise InvalidStateError(msg)

    energy = life.value
    if energy <= 0:
        world.put(loc, EMPTY)
        return

    if energy >= rules.reproduction_threshold:
        spawn = world.first_neighbour_matching(loc, is_empty)
        if spawn is not None:
            spawn_loc, _ = spawn
            world.put(loc, Tile.life(energy - rules.starting_life_energy))
            # An egg laid off the grid is lost; the parent still pays.
            if world.in_bounds(spawn_loc):
                world.put(spawn_loc, Tile.egg(rules.egg_hatch_steps))
            return

    food = world.first_neighbour_matching(loc, is_resource)
    if food is not None:
        res_loc, resource = food
        forage(world, loc, res_loc, resource)
        return

    move_toward_best_resource(world, loc)


def life_pass(
    world: World,
    rules: Rules,
    captured: Iterable[Location] | None = None,
) -> World:
    """Run every captured life's action over a copy of ``world``.

    Args:
        world: The world after the static pass.
        rules: Turn constants.
        captured: Life locations to process, in order.  Defaults to every
            Life tile of ``world`` in scan order.

    Returns:
        The new World.  ``world`` is left unchanged, including when an
        ``InvalidStateError`` aborts the pass.
    """
    if captured is None:
        captured = [loc for loc, _ in world.life_tiles()]
    else:
        captured = list(captured)

    working = world.copy()
    for loc in captured:
        process_life(working, loc, rules)
    return working
