"""Turn orchestration — the deterministic core exposed to drivers.

One turn is:

1. Static-tile pass (eggs age or hatch, empty cells may bloom)
2. Life pass (lives die, reproduce, forage, or move)

Exogenous growth is applied by the driver between turns, never inside one.
"""

from __future__ import annotations

from reallife.rules.constants import Rules
from reallife.rules.life_pass import life_pass
from reallife.rules.static_pass import static_pass
from reallife.world.census import Census
from reallife.world.grid import Location, World
from reallife.world.tile import grow_by_exogenous_amount

DEFAULT_RULES = Rules()


def next_turn(world: World, rules: Rules = DEFAULT_RULES) -> World:
    """Compute the world that follows ``world``.

    Only lives present before the static pass act this turn, so a life
    hatched during the pass first acts on the next turn.

    Args:
        world: The current world.  Not modified.
        rules: Turn constants.

    Returns:
        The next world.

    Raises:
        InvalidStateError: If a core invariant breaks mid-turn.  No partial
            world is returned.
    """
    captured = [loc for loc, _ in world.life_tiles()]
    return life_pass(static_pass(world, rules), rules, captured)


def apply_exogenous_growth(world: World, location: Location, amount: int) -> World:
    """Inject ``amount`` energy at ``location``.

    Empty cells gain a resource and resources grow; lives and eggs are left
    as they are.

    Raises:
        ValueError: If ``amount`` is not positive.
        IndexError: If ``location`` is off the grid.
    """
    if amount <= 0:
        msg = f"growth amount must be positive, got {amount}"
        raise ValueError(msg)
    return world.set(location, grow_by_exogenous_amount(amount, world.get(location)))


def is_terminal(world: World) -> bool:
    """True when the world holds no life energy and no eggs."""
    return Census.of(world).is_terminal
