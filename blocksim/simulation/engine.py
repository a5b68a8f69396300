"""Tick engine: automaton, world physics, and render buffer assembly.

The engine is a COORDINATOR. It owns the automaton grid, the rule that
advances it, and the World, and runs one tick as a fixed sequence of
phases (see ``blocksim.update_phases``):

    AUTOMATA     grid = step(grid, rule); tiles rebuilt from the palette
    PHYSICS      every entity integrated against the new tiles
    RENDER_PREP  geometry and light buffers snapshot the post-physics world

Cells whose state appears in the palette become Cube tiles, other states
(typically the dead state) leave their coordinate empty. Entities are
untouched by the automaton; scripts hold their handles and may adjust
them between ticks.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from blocksim.automata import Automata
from blocksim.config.automata import ALIVE_STATE, DEFAULT_ALIVE_COLOR
from blocksim.config.simulation_config import SimulationConfig
from blocksim.exceptions import ConfigurationError
from blocksim.rules import StateFunction, life_rule, seed_random, step_automata
from blocksim.systems.base import SystemResult
from blocksim.tiles.cube import Cube
from blocksim.update_phases import PHASE_DESCRIPTIONS, UpdatePhase
from blocksim.world.drawable import LightColor, Vec3, Vertex
from blocksim.world.entity import Entity, EntityHandle
from blocksim.world.geometry import GeometryBuffers
from blocksim.world.light import LightSources
from blocksim.world.world import World

logger = logging.getLogger(__name__)

PaletteEntry = Tuple[Vec3, Optional[LightColor]]


@dataclass
class FrameOutput:
    """Everything a renderer needs for one tick."""

    tick: int
    geometry: GeometryBuffers
    lights: LightSources
    light_count: int
    physics: SystemResult = field(default_factory=SystemResult.empty)

    @property
    def vertices(self) -> Sequence[Vertex]:
        return self.geometry.vertices

    @property
    def indices(self) -> Sequence[int]:
        return self.geometry.indices

    @property
    def index_count(self) -> int:
        return self.geometry.index_count


def normalize_palette(palette: Optional[Iterable[Sequence[Any]]]) -> Dict[int, PaletteEntry]:
    """Turn ``[(state, color)]`` / ``[(state, color, light)]`` into a lookup."""
    if palette is None:
        return {ALIVE_STATE: (DEFAULT_ALIVE_COLOR, None)}

    lookup: Dict[int, PaletteEntry] = {}
    for entry in palette:
        if len(entry) == 2:
            state, color = entry
            light = None
        elif len(entry) == 3:
            state, color, light = entry
        else:
            raise ConfigurationError(f"Palette entries are (state, color[, light]), got {entry!r}")
        lookup[int(state)] = (tuple(color), tuple(light) if light is not None else None)
    return lookup


class SimulationEngine:
    """Drives the automaton and the world one tick at a time.

    Attributes:
        config: Simulation configuration
        world: Tiles and entities
        automata: Current automaton generation (None for world-only runs)
        state_function: Rule advancing the automaton (None to freeze it)
        tick: Ticks completed
        paused: Whether update() is a no-op
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        automata: Optional[Automata] = None,
        state_function: Optional[StateFunction] = None,
        palette: Optional[Iterable[Sequence[Any]]] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Simulation configuration (defaults if None)
            automata: Initial automaton grid
            state_function: Rule used to step the automaton each tick
            palette: (state, color[, light]) entries; states listed become tiles
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)
        """
        self.config = (config or SimulationConfig()).validate()

        if rng is not None:
            self.rng = rng
        else:
            seed = seed if seed is not None else self.config.seed
            self.rng = random.Random(seed)
            if seed is not None:
                logger.info("SimulationEngine initialized with seed: %s", seed)

        self.world = World()
        self.automata = automata
        self.state_function = state_function
        self.palette = normalize_palette(palette)

        self.tick = 0
        self.paused = False
        self.last_frame: Optional[FrameOutput] = None
        self.total_physics = SystemResult.empty()
        self._physics_result = SystemResult.empty()
        self._is_setup = False

    @classmethod
    def from_config(
        cls,
        config: Optional[SimulationConfig] = None,
        palette: Optional[Iterable[Sequence[Any]]] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "SimulationEngine":
        """Build a randomly seeded Life-like automaton from ``config.automata``."""
        config = (config or SimulationConfig()).validate()
        engine = cls(config, palette=palette, rng=rng, seed=seed)

        settings = config.automata
        automata = Automata(settings.size)
        seed_random(automata, engine.rng, settings.seed_density)
        engine.automata = automata
        engine.state_function = life_rule(settings.survive, settings.birth, settings.neighborhood)
        return engine

    # --- Lifecycle ---

    def setup(self) -> None:
        """Create tiles for the initial automaton generation."""
        self.sync_tiles()
        self._is_setup = True
        logger.info(
            "Simulation ready: grid=%s, tiles=%d, entities=%d",
            self.automata.size.as_tuple() if self.automata is not None else None,
            len(self.world.registry),
            len(self.world.entities),
        )

    def add_entity(self, entity: Entity) -> EntityHandle:
        return self.world.add_entity(entity)

    def sync_tiles(self) -> int:
        """Replace all tiles with one Cube per palette-listed cell.

        Returns:
            Number of tiles created
        """
        self.world.clear_tiles()
        if self.automata is None:
            return 0

        created = 0
        for coord, state in self.automata.iter_cells():
            entry = self.palette.get(state)
            if entry is None:
                continue
            color, light = entry
            self.world.add_tile(Cube(coord, color=color, light=light))
            created += 1
        return created

    # --- Tick ---

    def update(self) -> Optional[FrameOutput]:
        """Run one tick and return its frame (the previous one when paused)."""
        if self.paused:
            return self.last_frame
        if not self._is_setup:
            self.setup()

        for phase in UpdatePhase:
            self._run_phase(phase)
        return self.last_frame

    def _run_phase(self, phase: UpdatePhase) -> None:
        logger.debug("Tick %d: %s", self.tick, PHASE_DESCRIPTIONS[phase])
        if phase is UpdatePhase.FRAME_START:
            self.tick += 1
        elif phase is UpdatePhase.AUTOMATA:
            self._step_automata()
        elif phase is UpdatePhase.PHYSICS:
            if self.config.physics_enabled:
                self._physics_result = self.world.resolve_entity_physics(self.tick)
            else:
                self._physics_result = SystemResult.skipped_result()
        elif phase is UpdatePhase.RENDER_PREP:
            self.last_frame = self.build_frame()
        elif phase is UpdatePhase.FRAME_END:
            self.total_physics = self.total_physics + self._physics_result

    def _step_automata(self) -> None:
        if not self.config.automata_enabled:
            return
        if self.automata is None or self.state_function is None:
            return
        self.automata = step_automata(self.automata, self.state_function)
        self.sync_tiles()

    def build_frame(self) -> FrameOutput:
        """Snapshot the world into renderer-ready buffers."""
        lights, light_count = self.world.build_light_sources()
        return FrameOutput(
            tick=self.tick,
            geometry=self.world.build_geometry_buffers(),
            lights=lights,
            light_count=light_count,
            physics=self._physics_result,
        )

    # --- Reporting ---

    def get_stats(self) -> Dict[str, Any]:
        frame = self.last_frame
        return {
            "tick": self.tick,
            "live_cells": (
                sum(1 for s in self.automata.iter_states() if s in self.palette)
                if self.automata is not None
                else 0
            ),
            "tiles": len(self.world.registry),
            "entities": len(self.world.entities),
            "vertices": frame.geometry.vertex_count if frame else 0,
            "indices": frame.index_count if frame else 0,
            "lights": frame.light_count if frame else 0,
            "collisions": self.total_physics.collisions,
        }

    def run_headless(self, max_ticks: int, stats_interval: int = 0) -> Optional[FrameOutput]:
        """Run ``max_ticks`` ticks, logging stats every ``stats_interval`` ticks.

        Returns:
            The last FrameOutput
        """
        if not self._is_setup:
            self.setup()

        for _ in range(max_ticks):
            self.update()
            if stats_interval > 0 and self.tick % stats_interval == 0:
                self._log_stats()

        logger.info("Finished %d ticks", self.tick)
        self._log_stats()
        return self.last_frame

    def _log_stats(self) -> None:
        stats = self.get_stats()
        logger.info("=" * self.config.display.separator_width)
        logger.info(
            "Tick %d | cells=%d tiles=%d entities=%d",
            stats["tick"],
            stats["live_cells"],
            stats["tiles"],
            stats["entities"],
        )
        logger.info(
            "Buffers | vertices=%d indices=%d lights=%d collisions=%d",
            stats["vertices"],
            stats["indices"],
            stats["lights"],
            stats["collisions"],
        )
