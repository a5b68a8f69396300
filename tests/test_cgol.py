"""Tests for the 3D Game of Life preset."""

import random

from blocksim.automata import Automata, GridSize
from blocksim.presets.cgol import (
    CGOL_CONFIG,
    CGOL_PALETTE,
    cgol_automata_init,
    cgol_state_function,
)
from blocksim.simulation import SimulationEngine


def _grid_with_neighbors(count, center_alive):
    grid = Automata((5, 5, 5))
    for coord in grid.moore_neighborhood((2, 2, 2))[:count]:
        grid[coord] = 1
    grid[(2, 2, 2)] = 1 if center_alive else 0
    return grid


class TestCgol:
    """Tests for the 4555 rule."""

    def test_init_size(self, seeded_rng):
        """The preset grid is 24x24x24 and partly alive."""
        grid = cgol_automata_init(seeded_rng)
        assert grid.size == GridSize(24, 24, 24)
        assert 0 < grid.count(1) < len(grid)

    def test_init_deterministic(self):
        """Equal seeds give equal starting grids."""
        a = cgol_automata_init(random.Random(3))
        b = cgol_automata_init(random.Random(3))
        assert a.cells == b.cells

    def test_survive_on_four(self):
        """A live cell with 4 live neighbors survives."""
        grid = _grid_with_neighbors(4, center_alive=True)
        assert cgol_state_function(grid, (2, 2, 2), 1) == 1

    def test_die_on_six(self):
        """A live cell with 6 live neighbors dies."""
        grid = _grid_with_neighbors(6, center_alive=True)
        assert cgol_state_function(grid, (2, 2, 2), 1) == 0

    def test_birth_on_five(self):
        """A dead cell with 5 live neighbors is born."""
        grid = _grid_with_neighbors(5, center_alive=False)
        assert cgol_state_function(grid, (2, 2, 2), 0) == 1

    def test_no_birth_on_four(self):
        """A dead cell with 4 live neighbors stays dead."""
        grid = _grid_with_neighbors(4, center_alive=False)
        assert cgol_state_function(grid, (2, 2, 2), 0) == 0

    def test_runs_in_engine(self, seeded_rng):
        """The preset drives a full engine tick."""
        engine = SimulationEngine(
            CGOL_CONFIG,
            automata=cgol_automata_init(seeded_rng),
            state_function=cgol_state_function,
            palette=CGOL_PALETTE,
        )
        frame = engine.update()
        assert frame.index_count == 36 * engine.automata.count(1)
