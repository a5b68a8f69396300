"""Per-tick motion integration with collision against the tile grid.

Every tick, each entity (in insertion order) makes two sequential moves:

1. a velocity pass, displacing it by its velocity, and
2. a gravity pass, displacing it by ``(0, -weight, 0)``.

The gravity pass observes the state the velocity pass left behind; the
two are never summed into one move.

Collision policy
----------------
Each pass tests a single candidate tile: the one containing the
attempted destination (coordinates rounded half away from zero). To keep
that test sound, the attempted move is first clamped to one tile per
axis. While the destination tile is occupied, the move is shortened by a
tenth of the clamped displacement, at most ten times, so an entity ends
either on a free tile or where it started.

Velocity response:
    collided:  velocity = velocity - original_displacement
    free:      velocity = velocity * (1 - weight)

``original_displacement`` is the unclamped request, so a blocked fall
adds ``weight`` back to the vertical velocity and a blocked velocity
move reverses the velocity (bounce).
"""

import logging
from typing import Optional

from blocksim.config.simulation import MAX_STEP_PER_AXIS, MAX_SUBSTEPS, SUBSTEP_FRACTION
from blocksim.math_utils import Vector3, to_tile_coord
from blocksim.systems.base import BaseSystem, SystemResult
from blocksim.update_phases import UpdatePhase, runs_in_phase
from blocksim.world.entity import Entity, EntitySet
from blocksim.world.registry import SpatialRegistry

logger = logging.getLogger(__name__)


@runs_in_phase(UpdatePhase.PHYSICS)
class MotionIntegrator(BaseSystem):
    """Advances every entity's velocity- and gravity-driven displacement."""

    def __init__(self, registry: SpatialRegistry, entities: EntitySet) -> None:
        super().__init__("MotionIntegrator")
        self.registry = registry
        self.entities = entities

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        collisions = 0
        for entity in self.entities:
            collisions += self.integrate(entity)

        if collisions:
            logger.debug("Tick %d: resolved %d collisions", frame, collisions)
        return SystemResult(
            entities_affected=len(self.entities),
            collisions=collisions,
        )

    def integrate(self, entity: Entity) -> int:
        """Run both passes for one entity.

        Returns:
            Number of passes (0-2) that collided
        """
        velocity = entity.velocity.copy()
        weight = entity.weight

        collided = 0
        if self.apply_displacement(entity, velocity):
            collided += 1
        if self.apply_displacement(entity, Vector3(0.0, -weight, 0.0)):
            collided += 1
        return collided

    def apply_displacement(self, entity: Entity, displacement: Vector3) -> bool:
        """Move ``entity`` by ``displacement``, backing off from occupied tiles.

        Returns:
            True if the destination tile was occupied and the move was shortened
        """
        original = displacement.copy()
        displacement = displacement.clamped(-MAX_STEP_PER_AXIS, MAX_STEP_PER_AXIS)
        increment = displacement * SUBSTEP_FRACTION

        center = entity.center.copy()
        velocity = entity.velocity.copy()
        weight = entity.weight

        collided = False
        substeps = 0
        while not displacement.is_zero() and self.registry.contains(
            to_tile_coord(center + displacement)
        ):
            collided = True
            substeps += 1
            if substeps >= MAX_SUBSTEPS:
                # repeated float subtraction may stop just short of zero
                displacement = Vector3()
            else:
                displacement = displacement - increment

        entity.center = center + displacement
        if collided:
            entity.velocity = velocity - original
        else:
            entity.velocity = velocity * (1.0 - weight)
        return collided
