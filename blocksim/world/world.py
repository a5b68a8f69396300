"""World: tiles, entities, and the per-tick systems that operate on them.

The World owns one SpatialRegistry and one EntitySet and exposes the
surface the rest of the engine uses:

    world = World()
    world.add_tile(Cube((0, 0, 0)))
    handle = world.add_entity(CubeEntity(center=Vector3(0, 3, 0), weight=0.1))

    world.resolve_entity_physics()           # once per tick, before snapshots
    geometry = world.build_geometry_buffers()
    lights, light_count = world.build_light_sources()
"""

import logging
from typing import Iterator, Optional, Sequence, Tuple

from blocksim.systems.base import SystemResult
from blocksim.world.entity import Entity, EntityHandle, EntitySet
from blocksim.world.geometry import GeometryAssembler, GeometryBuffers
from blocksim.world.light import LightCollector, LightSources
from blocksim.world.physics import MotionIntegrator
from blocksim.world.registry import SpatialRegistry
from blocksim.world.tile import Tile

logger = logging.getLogger(__name__)


class World:
    """A block world of static tiles and dynamic entities.

    Attributes:
        entities: Ordered entity set
        registry: Coordinate-keyed tile registry
        physics: Motion integrator system
    """

    def __init__(self) -> None:
        self.entities = EntitySet()
        self.registry = SpatialRegistry(self.entities)
        self.physics = MotionIntegrator(self.registry, self.entities)
        self._geometry = GeometryAssembler(self.registry, self.entities)
        self._lights = LightCollector(self.registry, self.entities)
        self._physics_frame = 0

    # --- Registry surface ---

    def add_tile(self, tile: Tile) -> None:
        self.registry.insert(tile)

    def add_entity(self, entity: Entity) -> EntityHandle:
        return self.entities.insert(entity)

    def contains(self, coord: Sequence[int]) -> bool:
        return self.registry.contains(coord)

    def get_tile(self, coord: Sequence[int]) -> Optional[Tile]:
        return self.registry.get(coord)

    def is_empty(self) -> bool:
        return self.registry.is_empty()

    def clear_tiles(self) -> None:
        self.registry.clear()

    def tiles(self) -> Iterator[Tile]:
        return iter(self.registry)

    def iter_entities(self) -> Iterator[Entity]:
        return iter(self.entities)

    # --- Per-tick work ---

    def resolve_entity_physics(self, frame: Optional[int] = None) -> SystemResult:
        """Advance every entity by one tick."""
        if frame is None:
            self._physics_frame += 1
            frame = self._physics_frame
        return self.physics.update(frame)

    def build_geometry_buffers(self) -> GeometryBuffers:
        return self._geometry.build()

    def build_light_sources(self) -> Tuple[LightSources, int]:
        return self._lights.build()

    def __repr__(self) -> str:
        return f"World(tiles={len(self.registry)}, entities={len(self.entities)})"
