"""Tests for reallife.world.grid and reallife.world.census."""

import pytest

from reallife.world.census import Census
from reallife.world.grid import Location, World, all_tiles_with_location
from reallife.world.tile import EMPTY, Tile, is_life, is_resource


class TestLocation:
    """Tests for the Location value type."""

    def test_structural_equality(self) -> None:
        assert Location(1, 2) == Location(1, 2)
        assert Location(1, 2) != Location(2, 1)
        assert len({Location(0, 0), Location(0, 0)}) == 1

    def test_distance(self) -> None:
        assert Location(0, 0).distance_to(Location(3, 4)) == 5.0
        assert Location(1, 1).distance_to(Location(2, 2)) == pytest.approx(2**0.5)
        assert Location(4, 0).distance_to(Location(0, 0)) == 4.0


class TestWorld:
    """Tests for the World grid."""

    def test_dimensions(self, small_world: World) -> None:
        assert small_world.size == 5
        assert len(small_world.tiles) == 5
        assert all(len(row) == 5 for row in small_world.tiles)

    def test_starts_empty(self, small_world: World) -> None:
        assert all(tile == EMPTY for _, tile in small_world.all_tiles_with_location())

    def test_get_out_of_bounds_is_empty(self) -> None:
        world = World.from_tiles(3, {Location(0, 0): Tile.life(5)})
        assert world.get(Location(-1, 0)) == EMPTY
        assert world.get(Location(0, 3)) == EMPTY
        assert world.get(Location(0, 0)) == Tile.life(5)

    def test_set_returns_new_world(self, small_world: World) -> None:
        updated = small_world.set(Location(2, 2), Tile.resource(3))
        assert updated.get(Location(2, 2)) == Tile.resource(3)
        assert small_world.get(Location(2, 2)) == EMPTY

    def test_set_out_of_bounds(self, small_world: World) -> None:
        with pytest.raises(IndexError):
            small_world.set(Location(5, 0), Tile.resource(1))

    def test_copy_is_independent(self, small_world: World) -> None:
        clone = small_world.copy()
        clone.put(Location(0, 0), Tile.life(1))
        assert small_world.get(Location(0, 0)) == EMPTY
        assert clone != small_world

    def test_mismatched_tiles_rejected(self) -> None:
        with pytest.raises(ValueError):
            World(size=3, tiles=[[EMPTY] * 3, [EMPTY] * 2, [EMPTY] * 3])

    def test_neighbour_order(self, small_world: World) -> None:
        assert small_world.neighbours(Location(2, 2)) == [
            Location(1, 1),
            Location(1, 2),
            Location(1, 3),
            Location(2, 1),
            Location(2, 3),
            Location(3, 1),
            Location(3, 2),
            Location(3, 3),
        ]

    def test_neighbours_keep_off_grid(self, small_world: World) -> None:
        # Top-left corner — still 8 neighbours, 5 of them off the grid
        neighbours = small_world.neighbours(Location(0, 0))
        assert len(neighbours) == 8
        assert sum(not small_world.in_bounds(n) for n in neighbours) == 5

    def test_first_neighbour_matching_uses_order(self) -> None:
        world = World.from_tiles(
            5,
            {
                Location(3, 3): Tile.resource(9),
                Location(1, 2): Tile.resource(1),
                Location(2, 3): Tile.resource(4),
            },
        )
        found = world.first_neighbour_matching(Location(2, 2), is_resource)
        assert found == (Location(1, 2), Tile.resource(1))

    def test_first_neighbour_matching_none(self, small_world: World) -> None:
        assert small_world.first_neighbour_matching(Location(2, 2), is_life) is None

    def test_first_neighbour_includes_off_grid(self, small_world: World) -> None:
        found = small_world.first_neighbour_matching(Location(0, 0), lambda t: t == EMPTY)
        assert found == (Location(-1, -1), EMPTY)

    def test_scan_is_column_major(self) -> None:
        world = World(size=2)
        order = [loc for loc, _ in world.all_tiles_with_location()]
        assert order == [Location(0, 0), Location(1, 0), Location(0, 1), Location(1, 1)]

    def test_scan_is_restartable(self, small_world: World) -> None:
        first = list(all_tiles_with_location(small_world))
        second = list(all_tiles_with_location(small_world))
        assert first == second
        assert len(first) == 25

    def test_life_tiles_in_scan_order(self) -> None:
        world = World.from_tiles(
            4,
            {
                Location(0, 3): Tile.life(1),
                Location(3, 0): Tile.life(2),
                Location(1, 0): Tile.life(3),
                Location(2, 2): Tile.resource(4),
            },
        )
        assert world.life_tiles() == [
            (Location(1, 0), Tile.life(3)),
            (Location(3, 0), Tile.life(2)),
            (Location(0, 3), Tile.life(1)),
        ]


class TestCensus:
    """Tests for aggregate counts."""

    def test_counts(self) -> None:
        world = World.from_tiles(
            4,
            {
                Location(0, 0): Tile.life(3),
                Location(0, 1): Tile.life(4),
                Location(1, 1): Tile.egg(2),
                Location(2, 2): Tile.resource(5),
            },
        )
        census = Census.of(world)
        assert census == Census(
            population=2,
            life_energy=7,
            eggs=1,
            resources=1,
            resource_energy=5,
        )
        assert not census.is_terminal
        assert "life=2" in census.summary()
