"""Census — aggregate counts over a world, for terminal checks and reporting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reallife.world.tile import TileKind

if TYPE_CHECKING:
    from reallife.world.grid import World


@dataclass(frozen=True)
class Census:
    """Totals gathered from one world snapshot.

    Attributes:
        population: Number of Life tiles.
        life_energy: Summed energy of all Life tiles.
        eggs: Number of Egg tiles.
        resources: Number of Resource tiles.
        resource_energy: Summed energy of all Resource tiles.
    """

    population: int = 0
    life_energy: int = 0
    eggs: int = 0
    resources: int = 0
    resource_energy: int = 0

    @classmethod
    def of(cls, world: World) -> Census:
        """Count the tiles of ``world``."""
        population = life_energy = eggs = resources = resource_energy = 0
        for _, tile in world.all_tiles_with_location():
            if tile.kind is TileKind.LIFE:
                population += 1
                life_energy += tile.value
            elif tile.kind is TileKind.EGG:
                eggs += 1
            elif tile.kind is TileKind.RESOURCE:
                resources += 1
                resource_energy += tile.value
        return cls(
            population=population,
            life_energy=life_energy,
            eggs=eggs,
            resources=resources,
            resource_energy=resource_energy,
        )

    @property
    def is_terminal(self) -> bool:
        """True when no life energy and no eggs remain."""
        return self.life_energy == 0 and self.eggs == 0

    def summary(self) -> str:
        return (
            f"life={self.population} energy={self.life_energy} "
            f"eggs={self.eggs} resources={self.resources} "
            f"resource_energy={self.resource_energy}"
        )
