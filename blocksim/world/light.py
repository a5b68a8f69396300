"""Fixed-capacity light buffer and the collector that fills it.

The renderer consumes a fixed array of MAX_LIGHT_SOURCES point lights
plus a used-count. Emissive tiles are collected first (registry order),
then emissive entities (insertion order). Once the buffer is full any
further sources are dropped: the capacity limits the visual effect, it
is not an error.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from blocksim.color import to_rgba
from blocksim.config.simulation import MAX_LIGHT_SOURCES
from blocksim.world.entity import EntitySet
from blocksim.world.registry import SpatialRegistry

logger = logging.getLogger(__name__)

Vec4 = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Light:
    """One point light: homogeneous position (x, y, z, 1) and RGBA color."""

    position: Vec4 = (0.0, 0.0, 0.0, 0.0)
    color: Vec4 = (0.0, 0.0, 0.0, 0.0)


def _empty_slots() -> List[Light]:
    return [Light() for _ in range(MAX_LIGHT_SOURCES)]


@dataclass
class LightSources:
    """The light buffer: always exactly MAX_LIGHT_SOURCES slots."""

    light_uniforms: List[Light] = field(default_factory=_empty_slots)

    def __len__(self) -> int:
        return len(self.light_uniforms)

    def __getitem__(self, index: int) -> Light:
        return self.light_uniforms[index]

    def active(self, count: int) -> List[Light]:
        """The first ``count`` slots (the ones the collector filled)."""
        return self.light_uniforms[:count]


class LightCollector:
    """Packs emissive tiles and entities into a LightSources buffer."""

    def __init__(
        self,
        registry: SpatialRegistry,
        entities: EntitySet,
        capacity: int = MAX_LIGHT_SOURCES,
    ) -> None:
        self.registry = registry
        self.entities = entities
        self.capacity = min(capacity, MAX_LIGHT_SOURCES)

    def build(self) -> Tuple[LightSources, int]:
        """Collect lights for the current world state.

        Returns:
            (buffer, count) where count <= capacity is the number of filled slots
        """
        sources = LightSources()
        count = 0
        dropped = 0

        for position, color in self._emitters():
            if count >= self.capacity:
                dropped += 1
                continue
            sources.light_uniforms[count] = Light(position=position, color=to_rgba(color))
            count += 1

        if dropped:
            logger.debug("Light buffer full: dropped %d of %d sources", dropped, count + dropped)
        return sources, count

    def _emitters(self):
        for tile in self.registry:
            light: Optional[tuple] = tile.light
            if light is not None:
                x, y, z = tile.position
                yield (float(x), float(y), float(z), 1.0), light

        for entity in self.entities:
            light = entity.light
            if light is not None:
                center = entity.center
                yield (center.x, center.y, center.z, 1.0), light
