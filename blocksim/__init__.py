"""Block world simulation engine.

This package contains the headless simulation logic for a block/voxel
world, with no rendering dependencies. Key modules include:

- automata: Toroidal 3D cell grid (cellular-automaton host)
- rules: Double-buffered rule application and Life-like rules
- world: Tile registry, entity set, motion integration, mesh and light assembly
- tiles: Concrete tile and entity kinds (cubes)
- simulation: Tick engine tying the automaton and the world together

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from subpackages for internal helpers.
"""

from . import automata as automata
from . import rules as rules
from . import simulation as simulation
from . import world as world

# Public API of the blocksim package. Keep this list intentionally small.
__all__ = [
    "automata",
    "rules",
    "simulation",
    "world",
]
