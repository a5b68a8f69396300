"""Conway's Game of Life, lifted to three dimensions.

Cells have two states (0 dead, 1 alive) and count live cells over the
26-cell Moore neighborhood, wrapping at the grid faces. The 4555 variant
(survive on 4-5, birth on 5) keeps structures bounded instead of filling
the grid.
"""

import random
from typing import Optional

from blocksim.automata import Automata, Coord
from blocksim.config.automata import ALIVE_STATE, DEAD_STATE
from blocksim.config.simulation_config import AutomataConfig, SimulationConfig
from blocksim.rules import life_rule, seed_random

CGOL_SURVIVE = (4, 5)
CGOL_BIRTH = (5,)

CGOL_CONFIG = SimulationConfig(
    headless=False,
    automata=AutomataConfig(
        size=(24, 24, 24),
        seed_density=0.15,
        survive=CGOL_SURVIVE,
        birth=CGOL_BIRTH,
        neighborhood="moore",
    ),
)

# (state, color, light) entries handed to the engine
CGOL_PALETTE = [(ALIVE_STATE, (1.0, 1.0, 1.0))]

_cgol_rule = life_rule(CGOL_SURVIVE, CGOL_BIRTH, "moore", ALIVE_STATE, DEAD_STATE)


def cgol_automata_init(rng: Optional[random.Random] = None) -> Automata:
    """Create a randomly seeded grid sized by CGOL_CONFIG."""
    settings = CGOL_CONFIG.automata
    automata = Automata(settings.size)
    seed_random(automata, rng, settings.seed_density, ALIVE_STATE)
    return automata


def cgol_state_function(automata: Automata, coord: Coord, state: int) -> int:
    """Next state of one cell under the 4555 rule."""
    return _cgol_rule(automata, coord, state)
