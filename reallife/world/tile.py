"""Tile — the state held by a single grid cell.

A tile is one of four variants.  ``TileKind`` names the variant and the
frozen ``Tile`` dataclass carries its integer payload, so every rule can
branch on ``tile.kind`` and cover each variant explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from reallife.errors import InvalidStateError


class TileKind(Enum):
    """The closed set of cell states."""

    EMPTY = auto()
    RESOURCE = auto()
    LIFE = auto()
    EGG = auto()


@dataclass(frozen=True)
class Tile:
    """An immutable cell state.

    Attributes:
        kind: Which variant this tile is.
        value: Energy for Resource and Life, steps left to hatch for Egg,
            always 0 for Empty.
    """

    kind: TileKind
    value: int = 0

    @classmethod
    def empty(cls) -> Tile:
        """Return the unoccupied tile."""
        return EMPTY

    @classmethod
    def resource(cls, energy: int) -> Tile:
        """Return a resource holding ``energy``."""
        return cls(TileKind.RESOURCE, energy)

    @classmethod
    def life(cls, energy: int) -> Tile:
        """Return a living organism with ``energy``."""
        return cls(TileKind.LIFE, energy)

    @classmethod
    def egg(cls, steps_to_hatch: int) -> Tile:
        """Return a dormant organism hatching in ``steps_to_hatch`` turns."""
        return cls(TileKind.EGG, steps_to_hatch)

    def __str__(self) -> str:
        if self.kind is TileKind.EMPTY:
            return "Empty"
        return f"{self.kind.name.capitalize()}({self.value})"


EMPTY = Tile(TileKind.EMPTY)


def is_empty(tile: Tile) -> bool:
    return tile.kind is TileKind.EMPTY


def is_resource(tile: Tile) -> bool:
    return tile.kind is TileKind.RESOURCE


def is_life(tile: Tile) -> bool:
    return tile.kind is TileKind.LIFE


def is_egg(tile: Tile) -> bool:
    return tile.kind is TileKind.EGG


def energy_of(tile: Tile) -> int:
    """Return the energy stored in a Resource or Life tile, else 0."""
    if tile.kind in (TileKind.RESOURCE, TileKind.LIFE):
        return tile.value
    return 0


def grow_by_exogenous_amount(amount: int, tile: Tile) -> Tile:
    """Add externally injected energy to a tile.

    Empty cells become a Resource of ``amount``; a Resource grows by
    ``amount``.  Life and Egg tiles do not accept injected energy and are
    returned unchanged.

    Args:
        amount: Energy to add.
        tile: The tile receiving it.

    Returns:
        The grown tile.
    """
    if tile.kind is TileKind.EMPTY:
        return Tile.resource(amount)
    if tile.kind is TileKind.RESOURCE:
        return Tile.resource(tile.value + amount)
    return tile


def grant_energy(tile: Tile) -> Tile:
    """Give one unit of energy to a Life tile.

    Raises:
        InvalidStateError: If ``tile`` is not Life.
    """
    if tile.kind is not TileKind.LIFE:
        msg = f"cannot grant energy to {tile}"
        raise InvalidStateError(msg)
    return Tile.life(tile.value + 1)
