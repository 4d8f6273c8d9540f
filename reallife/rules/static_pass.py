"""Static-tile pass — per-cell aging and blooming.

Every cell's next tile depends only on the previous snapshot, never on
cells already rewritten this pass, so the scan order does not matter here.
Life tiles are left untouched; they act in the life pass that follows.
"""

from __future__ import annotations

from reallife.rules.constants import Rules
from reallife.world.grid import Location, World
from reallife.world.tile import Tile, TileKind, energy_of, is_life, is_resource


def next_static_tile(world: World, loc: Location, tile: Tile, rules: Rules) -> Tile:
    """Return the tile that replaces ``tile`` at ``loc`` this turn.

    Args:
        world: The snapshot the pass reads from.
        loc: Location of the cell.
        tile: The cell's current tile.
        rules: Turn constants.
    """
    if tile.kind is TileKind.EGG:
        if tile.value <= 1:
            return Tile.life(rules.starting_life_energy)
        return Tile.egg(tile.value - 1)

    if tile.kind is TileKind.EMPTY:
        return _bloom(world, loc, tile, rules)

    # Life and Resource are unchanged by this pass.
    return tile


def _bloom(world: World, loc: Location, tile: Tile, rules: Rules) -> Tile:
    """Decide whether an Empty cell sprouts a resource.

    A neighbouring life suppresses growth outright.  Otherwise exactly
    ``bloom_neighbour_count`` resource neighbours give a sparse bloom, and
    enough neighbouring resource energy gives a dense one.
    """
    if world.first_neighbour_matching(loc, is_life) is not None:
        return tile

    resources = [
        world.get(n_loc) for n_loc in world.neighbours(loc) if is_resource(world.get(n_loc))
    ]
    if len(resources) == rules.bloom_neighbour_count:
        return Tile.resource(rules.sparse_bloom_energy)
    if sum(energy_of(r) for r in resources) >= rules.bloom_energy_threshold:
        return Tile.resource(rules.dense_bloom_energy)
    return tile


def static_pass(world: World, rules: Rules) -> World:
    """Apply the per-cell rule to every cell of ``world``.

    Returns:
        A new World; ``world`` itself is not modified.
    """
    out = World(size=world.size)
    for loc, tile in world.all_tiles_with_location():
        out.put(loc, next_static_tile(world, loc, tile, rules))
    return out
