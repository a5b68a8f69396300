"""Tests for the World facade."""

from blocksim.math_utils import Vector3
from blocksim.tiles import Cube, CubeEntity


class TestWorld:
    """Tests for the registry and entity surface of World."""

    def test_new_world_is_empty(self, world):
        """A fresh world has no tiles and no entities."""
        assert world.is_empty()
        assert list(world.tiles()) == []
        assert list(world.iter_entities()) == []

    def test_add_and_get_tile(self, world):
        """Tiles are looked up by integer coordinate."""
        cube = Cube((1, 0, -1))
        world.add_tile(cube)
        assert world.contains((1, 0, -1))
        assert world.get_tile((1, 0, -1)) is cube
        assert world.get_tile((0, 0, 0)) is None
        assert not world.is_empty()

    def test_entity_alone_makes_world_non_empty(self, world):
        """Entities count toward emptiness even without tiles."""
        world.add_entity(CubeEntity(center=Vector3(0, 4, 0)))
        assert not world.is_empty()

    def test_iter_entities_in_insertion_order(self, world):
        """Entities iterate in the order they were added."""
        first = world.add_entity(CubeEntity(center=Vector3(0, 0, 0)))
        second = world.add_entity(CubeEntity(center=Vector3(1, 0, 0)))
        assert list(world.iter_entities()) == [first.entity, second.entity]

    def test_clear_tiles_keeps_entities(self, world):
        """Clearing tiles leaves entities in place."""
        world.add_tile(Cube((0, 0, 0)))
        world.add_entity(CubeEntity())
        world.clear_tiles()
        assert list(world.tiles()) == []
        assert len(list(world.iter_entities())) == 1

    def test_physics_frame_counter(self, world):
        """Ticks without an explicit frame number are counted by the world."""
        world.resolve_entity_physics()
        world.resolve_entity_physics()
        info = world.physics.get_debug_info()
        assert info["update_count"] == 2
        assert info["phase"] == "PHYSICS"
        assert info["enabled"] is True

    def test_repr(self, world):
        world.add_tile(Cube((0, 0, 0)))
        assert repr(world) == "World(tiles=1, entities=0)"
