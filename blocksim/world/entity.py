"""Dynamic entities and the ordered set that owns them.

Handles
-------
``EntitySet.insert`` returns an ``EntityHandle`` rather than a second
copy of the entity. A handle is a stable integer id resolved through the
owning set on every access, so the simulation and any external script
holding the handle always see the same live object:

    handle = world.add_entity(CubeEntity(center=Vector3(0, 5, 0)))
    handle.entity.velocity = Vector3(0.2, 0, 0)  # visible to the next tick

Mutations through a handle must happen between ticks, never while the
motion integrator is running.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, Union, runtime_checkable

from blocksim.exceptions import EntityError
from blocksim.math_utils import Vector3
from blocksim.world.drawable import Drawable


@runtime_checkable
class Entity(Drawable, Protocol):
    """A dynamic world object with a continuous position.

    ``weight`` scales gravity and damps free motion: after an unobstructed
    move the velocity is multiplied by ``1 - weight``.
    """

    center: Vector3
    velocity: Vector3
    weight: float


@dataclass(frozen=True)
class EntityHandle:
    """Stable reference to one entity inside an EntitySet."""

    id: int
    owner: "EntitySet" = field(compare=False, repr=False)

    @property
    def entity(self) -> Entity:
        """The live entity this handle refers to."""
        return self.owner.resolve(self)

    def __str__(self) -> str:
        return f"Entity#{self.id}"


class EntitySet:
    """Ordered collection of entities; iteration follows insertion order.

    There is no removal: ids are list positions and stay valid for the
    lifetime of the set.
    """

    def __init__(self) -> None:
        self._entities: List[Entity] = []

    def insert(self, entity: Entity) -> EntityHandle:
        """Store an entity and return a handle aliasing it."""
        self._entities.append(entity)
        return EntityHandle(len(self._entities) - 1, self)

    def resolve(self, handle: Union[EntityHandle, int]) -> Entity:
        """Return the live entity for a handle (or a raw id)."""
        if isinstance(handle, EntityHandle):
            if handle.owner is not self:
                raise EntityError(f"{handle} belongs to a different entity set")
            index = handle.id
        else:
            index = handle

        if not 0 <= index < len(self._entities):
            raise EntityError(f"No entity with id {index}")
        return self._entities[index]

    def __getitem__(self, handle: Union[EntityHandle, int]) -> Entity:
        return self.resolve(handle)

    def handles(self) -> Iterator[EntityHandle]:
        """Yield a handle for every entity, in insertion order."""
        for index in range(len(self._entities)):
            yield EntityHandle(index, self)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def is_empty(self) -> bool:
        return not self._entities
