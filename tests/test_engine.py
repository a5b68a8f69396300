"""Tests for the tick engine and its frame output."""

import pytest

from blocksim.automata import Automata
from blocksim.config.simulation_config import AutomataConfig, SimulationConfig
from blocksim.exceptions import ConfigurationError
from blocksim.math_utils import Vector3
from blocksim.simulation import SimulationEngine, normalize_palette
from blocksim.tiles import CubeEntity


def _single_block_rule(target):
    def rule(automata, coord, state):
        return 1 if coord == target else 0

    return rule


class TestEngineSetup:
    """Tests for engine construction and setup."""

    def test_tiles_match_live_cells(self, simulation_engine):
        """setup() creates one tile per live cell."""
        live = simulation_engine.automata.count(1)
        assert live > 0
        assert len(simulation_engine.world.registry) == live

    def test_seed_is_deterministic(self):
        """Equal seeds give equal automata."""
        config = SimulationConfig(automata=AutomataConfig(size=(5, 5, 5)))
        a = SimulationEngine.from_config(config, seed=11)
        b = SimulationEngine.from_config(config, seed=11)
        assert a.automata.cells == b.automata.cells

    def test_config_seed_used(self):
        """config.seed is used when no seed is passed."""
        config = SimulationConfig(seed=4, automata=AutomataConfig(size=(5, 5, 5)))
        a = SimulationEngine.from_config(config)
        b = SimulationEngine.from_config(config)
        assert a.automata.cells == b.automata.cells

    def test_world_only_engine(self):
        """An engine without an automaton still renders entities."""
        engine = SimulationEngine()
        engine.add_entity(CubeEntity(center=Vector3(0, 5, 0)))
        frame = engine.update()
        assert frame.index_count == 36


class TestEngineTick:
    """Tests for one update() call."""

    def test_update_advances_tick(self, simulation_engine):
        """update() advances the tick and stores the frame."""
        frame = simulation_engine.update()
        assert simulation_engine.tick == 1
        assert frame.tick == 1
        assert frame is simulation_engine.last_frame

    def test_frame_reflects_new_generation(self, simulation_engine):
        """Tiles and geometry follow the stepped automaton."""
        frame = simulation_engine.update()
        live = simulation_engine.automata.count(1)
        assert len(simulation_engine.world.registry) == live
        assert frame.index_count == 36 * live
        assert all(0 <= i < len(frame.vertices) for i in frame.indices)

    def test_automaton_steps_before_physics(self):
        """Tiles created this tick already block entities this tick."""
        engine = SimulationEngine(
            automata=Automata((5, 5, 5)),
            state_function=_single_block_rule((1, 0, 0)),
        )
        handle = engine.add_entity(CubeEntity(center=Vector3(0, 0, 0), velocity=Vector3(1, 0, 0)))
        engine.setup()
        assert not engine.world.contains((1, 0, 0))

        frame = engine.update()
        assert engine.world.contains((1, 0, 0))
        assert handle.entity.center.x == pytest.approx(0.4)
        assert frame.physics.collisions == 1

    def test_frame_snapshots_post_physics_positions(self):
        """Entity geometry is built after physics has run."""
        engine = SimulationEngine()
        engine.add_entity(CubeEntity(center=Vector3(0, 0, 0), velocity=Vector3(1, 0, 0)))
        frame = engine.update()
        xs = [v.position[0] for v in frame.vertices]
        assert min(xs) == pytest.approx(0.5)

    def test_paused_update_returns_previous_frame(self, simulation_engine):
        """A paused engine does not tick."""
        frame = simulation_engine.update()
        simulation_engine.paused = True
        assert simulation_engine.update() is frame
        assert simulation_engine.tick == 1

    def test_automata_disabled(self, seeded_rng):
        """The automaton is frozen when stepping is disabled."""
        config = SimulationConfig(automata_enabled=False, automata=AutomataConfig(size=(5, 5, 5)))
        engine = SimulationEngine.from_config(config, rng=seeded_rng)
        before = list(engine.automata.cells)
        engine.update()
        assert engine.automata.cells == before

    def test_physics_disabled(self):
        """Entities stay put when physics is disabled."""
        engine = SimulationEngine(SimulationConfig(physics_enabled=False))
        handle = engine.add_entity(CubeEntity(velocity=Vector3(1, 0, 0)))
        frame = engine.update()
        assert frame.physics.skipped
        assert handle.entity.center == Vector3(0, 0, 0)

    def test_palette_lights(self):
        """Palette entries with a light become emissive tiles."""
        automata = Automata((3, 3, 3))
        automata[(0, 0, 0)] = 2
        automata[(1, 0, 0)] = 1
        engine = SimulationEngine(
            automata=automata,
            palette=[(1, (1.0, 1.0, 1.0)), (2, (1.0, 0.0, 0.0), (1.0, 0.0, 0.0))],
        )
        frame = engine.update()
        assert len(engine.world.registry) == 2
        assert frame.light_count == 1
        assert frame.lights[0].position == (0.0, 0.0, 0.0, 1.0)


class TestEngineReporting:
    """Tests for stats and headless runs."""

    def test_run_headless(self, simulation_engine):
        """run_headless runs the requested ticks and returns the last frame."""
        frame = simulation_engine.run_headless(max_ticks=3, stats_interval=1)
        assert simulation_engine.tick == 3
        assert frame.tick == 3

    def test_stats_keys(self, simulation_engine):
        """get_stats reports the expected counters."""
        simulation_engine.update()
        stats = simulation_engine.get_stats()
        assert set(stats) == {
            "tick",
            "live_cells",
            "tiles",
            "entities",
            "vertices",
            "indices",
            "lights",
            "collisions",
        }
        assert stats["tiles"] == stats["live_cells"]

    def test_collisions_accumulate(self):
        """Collision counts are summed across ticks."""
        engine = SimulationEngine(
            automata=Automata((5, 5, 5)),
            state_function=_single_block_rule((1, 0, 0)),
        )
        engine.add_entity(CubeEntity(center=Vector3(0, 0, 0), velocity=Vector3(1, 0, 0)))
        engine.run_headless(max_ticks=2)
        assert engine.get_stats()["collisions"] >= 1


class TestNormalizePalette:
    """Tests for palette normalization."""

    def test_default(self):
        """No palette renders the alive state in white."""
        assert normalize_palette(None) == {1: ((1.0, 1.0, 1.0), None)}

    def test_with_light(self):
        """Colors and lights are normalized to tuples."""
        palette = normalize_palette([(2, [0, 1, 0], [1, 1, 1])])
        assert palette == {2: ((0, 1, 0), (1, 1, 1))}

    def test_bad_entry(self):
        """Entries must have two or three items."""
        with pytest.raises(ConfigurationError):
            normalize_palette([(1,)])
