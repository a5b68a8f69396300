"""Pytest configuration and fixtures for block simulation tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def world():
    """Provide an empty world."""
    from blocksim.world import World

    return World()


@pytest.fixture
def small_automata():
    """Provide an empty 3x3x3 grid."""
    from blocksim.automata import Automata, GridSize

    return Automata(GridSize(3, 3, 3))


@pytest.fixture
def simulation_engine(seeded_rng):
    """Setup a simulation engine on a small seeded grid."""
    from blocksim.config.simulation_config import AutomataConfig, SimulationConfig
    from blocksim.simulation.engine import SimulationEngine

    config = SimulationConfig(automata=AutomataConfig(size=(6, 6, 6), seed_density=0.3))
    engine = SimulationEngine.from_config(config, rng=seeded_rng)
    engine.setup()
    return engine
