"""Block simulation exception hierarchy.

Centralised base classes so callers can catch library failures with a
single ``except BlockSimError`` and contract violations stay easy to
tell apart from configuration mistakes.
"""


class BlockSimError(Exception):
    """Root of all block simulation exceptions."""


class SimulationError(BlockSimError):
    """Errors during simulation execution (grid, world, systems)."""


class GridIndexError(SimulationError, IndexError):
    """A write addressed a cell outside the grid extents."""


class EntityError(SimulationError):
    """An entity handle could not be resolved."""


class ConfigurationError(BlockSimError, ValueError):
    """Invalid or missing configuration."""


class CellStateError(SimulationError, ValueError):
    """A cell state was negative or not an integer."""
