"""Axis-aligned cubes: the standard tile, and a free-moving cube entity.

Both build the same 24-vertex, 36-index mesh: four vertices per face so
each face carries its own flat normal. Emissive cubes flip their normals
inward, so a light source sitting inside its own cube still shades the
cube's faces as lit rather than back-facing.
"""

from typing import Optional, Sequence, Tuple

from blocksim.color import to_rgba
from blocksim.math_utils import Vector3
from blocksim.world.drawable import LightColor, Triangles, Vec3, Vertex
from blocksim.world.tile import TileCoord, validate_tile_coord

DEFAULT_HALF_WIDTH = 0.5
DEFAULT_CUBE_COLOR: Vec3 = (0.3, 0.3, 0.8)

FRONT: Vec3 = (0.0, 0.0, 1.0)
BACK: Vec3 = (0.0, 0.0, -1.0)
LEFT: Vec3 = (-1.0, 0.0, 0.0)
RIGHT: Vec3 = (1.0, 0.0, 0.0)
TOP: Vec3 = (0.0, 1.0, 0.0)
BOTTOM: Vec3 = (0.0, -1.0, 0.0)

OUTWARD_NORMALS = (FRONT, BACK, LEFT, RIGHT, TOP, BOTTOM)
INWARD_NORMALS = (BACK, FRONT, RIGHT, LEFT, BOTTOM, TOP)

# Corner indices (into the 8 cube corners) for each face, in vertex order
_FACE_CORNERS = (
    (0, 2, 1, 3),  # front
    (4, 6, 5, 7),  # back
    (4, 5, 0, 1),  # left
    (6, 7, 2, 3),  # right
    (5, 1, 7, 3),  # top
    (4, 0, 6, 2),  # bottom
)

CUBE_INDICES: Tuple[int, ...] = (
    0, 1, 3, 0, 3, 2,
    7, 5, 4, 7, 4, 6,
    11, 9, 8, 11, 8, 10,
    12, 13, 15, 12, 15, 14,
    16, 17, 19, 16, 19, 18,
    23, 21, 20, 23, 20, 22,
)


def build_cube_mesh(
    center: Sequence[float],
    half_width: float,
    color: Vec3,
    emissive: bool = False,
) -> Triangles:
    """Build a self-contained cube mesh around ``center``."""
    cx, cy, cz = (float(c) for c in center)
    hw = half_width
    corners = (
        (cx - hw, cy - hw, cz + hw),
        (cx - hw, cy + hw, cz + hw),
        (cx + hw, cy - hw, cz + hw),
        (cx + hw, cy + hw, cz + hw),
        (cx - hw, cy - hw, cz - hw),
        (cx - hw, cy + hw, cz - hw),
        (cx + hw, cy - hw, cz - hw),
        (cx + hw, cy + hw, cz - hw),
    )
    normals = INWARD_NORMALS if emissive else OUTWARD_NORMALS
    color = tuple(float(c) for c in color)

    vertices = [
        Vertex(position=corners[corner], color=color, normal=normal)
        for face, normal in zip(_FACE_CORNERS, normals)
        for corner in face
    ]
    return Triangles(vertices=vertices, indices=list(CUBE_INDICES))


class Cube:
    """A unit cube tile at an integer coordinate.

    The registry caches a tile's mesh on insertion, so a Cube has no
    mutators: to make a tile emissive, insert a new Cube with ``light=``
    at the same position.
    """

    def __init__(
        self,
        position: Sequence[int] = (0, 0, 0),
        color: Vec3 = DEFAULT_CUBE_COLOR,
        light: Optional[Sequence[float]] = None,
        half_width: float = DEFAULT_HALF_WIDTH,
    ) -> None:
        self.position: TileCoord = validate_tile_coord(position)
        self.color: Vec3 = tuple(color)
        self.light: Optional[LightColor] = to_rgba(light) if light is not None else None
        self.half_width = half_width

    @property
    def center(self) -> Vector3:
        return Vector3(*self.position)

    def build_object_data(self) -> Triangles:
        return build_cube_mesh(self.position, self.half_width, self.color, self.light is not None)

    def __repr__(self) -> str:
        return f"Cube(position={self.position}, color={self.color})"


class CubeEntity:
    """A free-moving cube with velocity and weight."""

    def __init__(
        self,
        center: Optional[Vector3] = None,
        velocity: Optional[Vector3] = None,
        weight: float = 0.0,
        color: Vec3 = DEFAULT_CUBE_COLOR,
        light: Optional[Sequence[float]] = None,
        half_width: float = DEFAULT_HALF_WIDTH,
    ) -> None:
        self.center: Vector3 = center.copy() if center is not None else Vector3()
        self.velocity: Vector3 = velocity.copy() if velocity is not None else Vector3()
        self.weight: float = float(weight)
        self.color: Vec3 = tuple(color)
        self.light: Optional[LightColor] = to_rgba(light) if light is not None else None
        self.half_width = half_width

    def set_light(self, light: Sequence[float]) -> None:
        self.light = to_rgba(light)

    def build_object_data(self) -> Triangles:
        return build_cube_mesh(self.center, self.half_width, self.color, self.light is not None)

    def __repr__(self) -> str:
        return f"CubeEntity(center={self.center!r}, velocity={self.velocity!r}, weight={self.weight})"
