"""Mesh data and the Drawable protocol shared by tiles and entities.

Every drawable builds its own self-contained mesh: a vertex list plus a
triangle index list whose indices are 0-based into that vertex list. The
world concatenates meshes and offsets indices itself, so implementations
must never pre-offset their indices.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple, runtime_checkable

Vec3 = Tuple[float, float, float]
LightColor = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex as consumed by the renderer."""

    position: Vec3
    color: Vec3
    normal: Vec3


@dataclass
class Triangles:
    """A self-contained triangle mesh (0-based indices)."""

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def is_self_contained(self) -> bool:
        """Whether every index refers to a vertex of this mesh."""
        count = len(self.vertices)
        return all(0 <= i < count for i in self.indices)


@runtime_checkable
class Drawable(Protocol):
    """Anything the world can render and light.

    ``color`` is an RGB float triple. ``light`` is an RGBA float color for
    an emissive object (a point light at the object's position) or None.
    """

    color: Vec3
    light: Optional[LightColor]

    def build_object_data(self) -> Triangles:
        """Build a fresh, 0-based mesh for this object."""
        ...
