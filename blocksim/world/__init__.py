"""World layer: tiles, entities, motion integration, mesh and light assembly."""

from blocksim.world.drawable import Drawable, Triangles, Vertex
from blocksim.world.entity import Entity, EntityHandle, EntitySet
from blocksim.world.geometry import GeometryAssembler, GeometryBuffers
from blocksim.world.light import Light, LightCollector, LightSources
from blocksim.world.physics import MotionIntegrator
from blocksim.world.registry import SpatialRegistry
from blocksim.world.tile import Tile
from blocksim.world.world import World

__all__ = [
    "Drawable",
    "Entity",
    "EntityHandle",
    "EntitySet",
    "GeometryAssembler",
    "GeometryBuffers",
    "Light",
    "LightCollector",
    "LightSources",
    "MotionIntegrator",
    "SpatialRegistry",
    "Tile",
    "Triangles",
    "Vertex",
    "World",
]
