"""Coordinate-keyed store of static tiles with a cached combined mesh.

Tiles never move, so their meshes are built once on insertion and kept
concatenated (indices already offset) until the registry changes in a
way that invalidates the concatenation. Appending a tile at a new
coordinate extends the cache in place; replacing a tile at an occupied
coordinate or clearing the registry marks it dirty, and it is rebuilt
lazily on the next ``tile_geometry()`` call.

Iteration order is the order in which coordinates were first occupied.
Light collection walks tiles in this order, so which lights survive the
light buffer's capacity is reproducible.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from blocksim.world.drawable import Triangles, Vertex
from blocksim.world.entity import EntitySet
from blocksim.world.tile import Tile, TileCoord, validate_tile_coord

logger = logging.getLogger(__name__)


class SpatialRegistry:
    """Static tiles keyed by their integer coordinate.

    Attributes:
        entities: The entity set checked by is_empty() (may be None)
    """

    def __init__(self, entities: Optional[EntitySet] = None) -> None:
        self.entities = entities
        self._tiles: Dict[TileCoord, Tile] = {}
        self._meshes: Dict[TileCoord, Triangles] = {}

        self._vertices: List[Vertex] = []
        self._indices: List[int] = []
        self._geometry_valid = True

    # --- Mutation ---

    def insert(self, tile: Tile) -> TileCoord:
        """Build the tile's mesh, cache it, and store the tile.

        A tile inserted at an occupied coordinate replaces the previous one.

        Returns:
            The normalized coordinate the tile was stored under
        """
        coord = validate_tile_coord(tile.position)
        mesh = tile.build_object_data()
        replacing = coord in self._tiles

        self._tiles[coord] = tile
        self._meshes[coord] = mesh

        if replacing:
            self._invalidate(f"tile replaced at {coord}")
        elif self._geometry_valid:
            self._append_mesh(mesh)
        return coord

    def clear(self) -> None:
        """Remove every tile and its cached mesh."""
        self._tiles.clear()
        self._meshes.clear()
        self._vertices = []
        self._indices = []
        self._geometry_valid = True

    # --- Queries ---

    def contains(self, coord: Sequence[int]) -> bool:
        return tuple(coord) in self._tiles

    def __contains__(self, coord: Sequence[int]) -> bool:
        return self.contains(coord)

    def get(self, coord: Sequence[int]) -> Optional[Tile]:
        return self._tiles.get(tuple(coord))

    def is_empty(self) -> bool:
        """True only when there are no tiles and no entities."""
        if self._tiles:
            return False
        return self.entities is None or self.entities.is_empty()

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def items(self) -> Iterator[Tuple[TileCoord, Tile]]:
        return iter(self._tiles.items())

    def mesh_for(self, coord: Sequence[int]) -> Optional[Triangles]:
        """The cached (0-based) mesh of the tile at ``coord``."""
        return self._meshes.get(tuple(coord))

    # --- Cached geometry ---

    def tile_geometry(self) -> Tuple[List[Vertex], List[int]]:
        """Concatenated vertices and offset indices of every tile.

        The returned lists are the cache itself; callers must copy before
        extending them.
        """
        if not self._geometry_valid:
            self._rebuild_geometry()
        return self._vertices, self._indices

    def _append_mesh(self, mesh: Triangles) -> None:
        offset = len(self._vertices)
        self._indices.extend(i + offset for i in mesh.indices)
        self._vertices.extend(mesh.vertices)

    def _invalidate(self, reason: str) -> None:
        if self._geometry_valid:
            self._geometry_valid = False
            logger.debug("Tile geometry cache invalidated: %s", reason)

    def _rebuild_geometry(self) -> None:
        self._vertices = []
        self._indices = []
        for mesh in self._meshes.values():
            self._append_mesh(mesh)
        self._geometry_valid = True
        logger.debug(
            "Rebuilt tile geometry: %d tiles, %d vertices", len(self._meshes), len(self._vertices)
        )
