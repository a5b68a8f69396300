"""Concrete tile and entity kinds."""

from blocksim.tiles.cube import Cube, CubeEntity, build_cube_mesh

__all__ = ["Cube", "CubeEntity", "build_cube_mesh"]
