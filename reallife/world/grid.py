"""World grid — the square container of tiles for one simulation instant.

The World maps every ``Location`` on a ``size x size`` board to a Tile and
provides the spatial queries the turn rules rely on: neighbour enumeration
in a fixed order, first-match neighbour search, and a column-major scan.
Both orders decide which candidate wins a tie, so they must not change.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from reallife.world.tile import EMPTY, Tile, is_life

# Row/column offsets of the 8-neighbourhood, in visiting order.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True)
class Location:
    """A grid coordinate.

    Attributes:
        row: Row index.
        col: Column index.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Location:
        """Return the location shifted by ``(d_row, d_col)``."""
        return Location(self.row + d_row, self.col + d_col)

    def distance_to(self, other: Location) -> float:
        """Euclidean distance between two locations."""
        return math.hypot(self.row - other.row, self.col - other.col)


@dataclass
class World:
    """A square grid of tiles.

    Treat a World as a value: ``set`` returns a new World and leaves this
    one alone.  Only the turn rules write in place, and only on a private
    ``copy()``.

    Attributes:
        size: Number of rows and of columns.
        tiles: 2D list of tiles indexed as ``tiles[row][col]``.
    """

    size: int
    tiles: list[list[Tile]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Fill the grid with Empty tiles unless tiles were supplied."""
        if not self.tiles:
            self.tiles = [[EMPTY] * self.size for _ in range(self.size)]
        elif len(self.tiles) != self.size or any(
            len(row) != self.size for row in self.tiles
        ):
            msg = f"tiles do not form a {self.size}x{self.size} grid"
            raise ValueError(msg)

    @classmethod
    def from_tiles(cls, size: int, placed: dict[Location, Tile]) -> World:
        """Build a World of Empty tiles with ``placed`` tiles written in.

        Args:
            size: Grid dimension.
            placed: Tiles to place, keyed by location.

        Raises:
            IndexError: If any location is outside the grid.
        """
        world = cls(size=size)
        for loc, tile in placed.items():
            world.put(loc, tile)
        return world

    def in_bounds(self, loc: Location) -> bool:
        return 0 <= loc.row < self.size and 0 <= loc.col < self.size

    def get(self, loc: Location) -> Tile:
        """Return the tile at ``loc``; Empty when ``loc`` is off the grid."""
        if not self.in_bounds(loc):
            return EMPTY
        return self.tiles[loc.row][loc.col]

    def put(self, loc: Location, tile: Tile) -> None:
        """Overwrite the tile at ``loc`` in place.

        Raises:
            IndexError: If ``loc`` is out of bounds.
        """
        if not self.in_bounds(loc):
            msg = f"({loc.row}, {loc.col}) out of bounds for {self.size}x{self.size}"
            raise IndexError(msg)
        self.tiles[loc.row][loc.col] = tile

    def set(self, loc: Location, tile: Tile) -> World:
        """Return a new World with the single cell at ``loc`` replaced.

        Raises:
            IndexError: If ``loc`` is out of bounds.
        """
        world = self.copy()
        world.put(loc, tile)
        return world

    def copy(self) -> World:
        """Return an independent World holding the same tiles."""
        return World(size=self.size, tiles=[list(row) for row in self.tiles])

    def neighbours(self, loc: Location) -> list[Location]:
        """Return the 8 locations around ``loc`` in the fixed visiting order.

        Off-grid locations are kept; looking them up yields Empty.
        """
        return [loc.offset(d_row, d_col) for d_row, d_col in NEIGHBOUR_OFFSETS]

    def first_neighbour_matching(
        self,
        loc: Location,
        predicate: Callable[[Tile], bool],
    ) -> tuple[Location, Tile] | None:
        """Return the first neighbour whose tile satisfies ``predicate``.

        Off-grid neighbours take part and read as Empty.

        Args:
            loc: Centre location.
            predicate: Test applied to each neighbouring tile.

        Returns:
            ``(location, tile)`` of the first match, or None.
        """
        for n_loc in self.neighbours(loc):
            tile = self.get(n_loc)
            if predicate(tile):
                return n_loc, tile
        return None

    def all_tiles_with_location(self) -> Iterator[tuple[Location, Tile]]:
        """Yield every cell in column-major order (columns outer, rows inner)."""
        for col in range(self.size):
            for row in range(self.size):
                yield Location(row, col), self.tiles[row][col]

    def life_tiles(self) -> list[tuple[Location, Tile]]:
        """Return every Life tile with its location, in scan order."""
        return [
            (loc, tile) for loc, tile in self.all_tiles_with_location() if is_life(tile)
        ]


def all_tiles_with_location(world: World) -> Iterator[tuple[Location, Tile]]:
    """Read-only scan of ``world`` for renderers and reporting."""
    return world.all_tiles_with_location()
