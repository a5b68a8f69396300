"""Rule application for cellular automata.

A rule is a plain function ``(automata, coord, state) -> new_state``. The
driver here evaluates it for every cell against the *current* grid and
writes the results into a fresh grid, so a rule never observes a cell it
has already updated within the same step.
"""

import logging
import random
from typing import Callable, Iterable, Optional

from blocksim.automata import Automata, Coord
from blocksim.config.automata import ALIVE_STATE, DEAD_STATE
from blocksim.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

StateFunction = Callable[[Automata, Coord, int], int]


def step_automata(automata: Automata, state_function: StateFunction) -> Automata:
    """Compute the next generation of ``automata`` into a new grid.

    Args:
        automata: Current generation (left untouched)
        state_function: Rule mapping (grid, coord, state) to the next state

    Returns:
        A new Automata of the same size holding the next generation
    """
    next_cells = [state_function(automata, coord, state) for coord, state in automata.iter_cells()]
    return Automata(automata.size, next_cells)


def life_rule(
    survive: Iterable[int],
    birth: Iterable[int],
    neighborhood: str = "moore",
    alive_state: int = ALIVE_STATE,
    dead_state: int = DEAD_STATE,
) -> StateFunction:
    """Build a two-state totalistic (Life-like) rule.

    A live cell stays alive when its live-neighbor count is in ``survive``;
    a dead cell becomes alive when the count is in ``birth``.

    Args:
        survive: Neighbor counts that keep a live cell alive
        birth: Neighbor counts that bring a dead cell to life
        neighborhood: "moore" (26 cells) or "von_neumann" (6 cells)
        alive_state: State value treated as alive
        dead_state: State value written for dead cells

    Returns:
        A StateFunction suitable for step_automata()
    """
    survive_set = frozenset(survive)
    birth_set = frozenset(birth)

    if neighborhood == "moore":
        neighbors_of = Automata.moore_neighborhood
    elif neighborhood == "von_neumann":
        neighbors_of = Automata.von_neumann_neighborhood
    else:
        raise ConfigurationError(f"Unknown neighborhood {neighborhood!r}")

    def rule(automata: Automata, coord: Coord, state: int) -> int:
        alive = sum(1 for n in neighbors_of(automata, coord) if automata[n] == alive_state)
        if state == alive_state:
            return alive_state if alive in survive_set else dead_state
        return alive_state if alive in birth_set else dead_state

    return rule


def seed_random(
    automata: Automata,
    rng: Optional[random.Random] = None,
    density: float = 0.2,
    state: int = ALIVE_STATE,
) -> int:
    """Set a random fraction of cells to ``state``.

    Cells are visited in index order and each is set with probability
    ``density``, so a seeded RNG always produces the same pattern.

    Returns:
        Number of cells set
    """
    if not 0.0 <= density <= 1.0:
        raise ConfigurationError(f"density must be within [0, 1], got {density}")
    rng = rng if rng is not None else random.Random()

    seeded = 0
    for coord in automata.iter_coords():
        if rng.random() < density:
            automata[coord] = state
            seeded += 1

    logger.debug("Seeded %d/%d cells with state %d", seeded, len(automata), state)
    return seeded
