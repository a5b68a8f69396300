"""Per-tick world systems.

Each system follows the BaseSystem contract: ``update(frame)`` returns a
SystemResult with the counters the engine aggregates into its stats.
"""

from blocksim.systems.base import BaseSystem, SystemResult

__all__ = ["BaseSystem", "SystemResult"]
