"""Tests for rule application and random seeding."""

import random

import pytest

from blocksim.automata import Automata
from blocksim.exceptions import ConfigurationError
from blocksim.rules import life_rule, seed_random, step_automata


class TestStepAutomata:
    """Tests for the double-buffered step driver."""

    def test_returns_new_grid(self, small_automata):
        """Stepping never mutates the input grid."""
        small_automata[(1, 1, 1)] = 1
        nxt = step_automata(small_automata, lambda grid, coord, state: 1 - state)
        assert nxt is not small_automata
        assert small_automata.count(1) == 1
        assert nxt.count(1) == 26

    def test_rule_sees_only_previous_generation(self):
        """A lone live cell births all 26 Moore neighbors in one step.

        If the driver wrote in place, cells visited later would see the
        newly born cells and the count would differ.
        """
        grid = Automata((5, 5, 5))
        grid[(2, 2, 2)] = 1
        rule = life_rule(survive=(), birth=(1,))
        nxt = step_automata(grid, rule)
        assert nxt.count(1) == 26
        assert nxt[(2, 2, 2)] == 0

    def test_von_neumann_rule(self):
        """The same seed under von Neumann births exactly 6 cells."""
        grid = Automata((5, 5, 5))
        grid[(2, 2, 2)] = 1
        nxt = step_automata(grid, life_rule(survive=(), birth=(1,), neighborhood="von_neumann"))
        assert nxt.count(1) == 6
        assert nxt[(1, 2, 2)] == 1
        assert nxt[(1, 1, 2)] == 0

    def test_empty_grid_stays_empty(self):
        """No live cells, no births (for a rule without birth on 0)."""
        grid = Automata((4, 4, 4))
        nxt = step_automata(grid, life_rule((4, 5), (5,)))
        assert nxt.count(1) == 0

    def test_survival(self):
        """A live cell with a survive count of neighbors stays alive."""
        grid = Automata((5, 5, 5))
        grid[(2, 2, 2)] = 1
        for coord in [(1, 2, 2), (3, 2, 2), (2, 1, 2), (2, 3, 2)]:
            grid[coord] = 1
        nxt = step_automata(grid, life_rule(survive=(4,), birth=()))
        assert nxt[(2, 2, 2)] == 1

    def test_unknown_neighborhood_rejected(self):
        """Only moore and von_neumann are supported."""
        with pytest.raises(ConfigurationError):
            life_rule((4,), (5,), neighborhood="hexagonal")


class TestSeedRandom:
    """Tests for random seeding."""

    def test_deterministic_with_seed(self):
        """Equal seeds produce equal grids."""
        a = Automata((6, 6, 6))
        b = Automata((6, 6, 6))
        seed_random(a, random.Random(7), 0.3)
        seed_random(b, random.Random(7), 0.3)
        assert a.cells == b.cells

    def test_returns_seeded_count(self, seeded_rng):
        """The return value is the number of cells set."""
        grid = Automata((6, 6, 6))
        seeded = seed_random(grid, seeded_rng, 0.5)
        assert seeded == grid.count(1)
        assert 0 < seeded < len(grid)

    def test_density_extremes(self, seeded_rng):
        """Density 0 sets nothing and density 1 sets everything."""
        empty = Automata((3, 3, 3))
        full = Automata((3, 3, 3))
        assert seed_random(empty, seeded_rng, 0.0) == 0
        assert seed_random(full, seeded_rng, 1.0) == 27

    @pytest.mark.parametrize("density", [-0.1, 1.5])
    def test_invalid_density(self, small_automata, density):
        """Density must be within [0, 1]."""
        with pytest.raises(ConfigurationError):
            seed_random(small_automata, density=density)
