"""Assembly of one index-consistent mesh for the whole world.

Tile meshes come pre-concatenated from the registry cache. Entities move,
so their meshes are rebuilt every tick and appended after the tiles with
their indices offset by the running vertex count.
"""

from dataclasses import dataclass, field
from typing import List

from blocksim.world.drawable import Vertex
from blocksim.world.entity import EntitySet
from blocksim.world.registry import SpatialRegistry


@dataclass
class GeometryBuffers:
    """Renderer-ready vertex and index sequences.

    Every index refers to a position in ``vertices``.
    """

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)


class GeometryAssembler:
    """Merges cached tile geometry with freshly built entity geometry."""

    def __init__(self, registry: SpatialRegistry, entities: EntitySet) -> None:
        self.registry = registry
        self.entities = entities

    def build(self) -> GeometryBuffers:
        tile_vertices, tile_indices = self.registry.tile_geometry()
        vertices = list(tile_vertices)
        indices = list(tile_indices)

        for entity in self.entities:
            mesh = entity.build_object_data()
            offset = len(vertices)
            indices.extend(i + offset for i in mesh.indices)
            vertices.extend(mesh.vertices)

        return GeometryBuffers(vertices=vertices, indices=indices)
