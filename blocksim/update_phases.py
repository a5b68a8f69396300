"""Update phase definitions for explicit execution ordering.

A tick is an atomic batch: the automaton (if any) mutates the grid and
the tile registry first, physics then advances every entity, and only
after physics has finished for all entities are the render buffers
assembled. The engine runs these phases explicitly, in enum order:

    for phase in UpdatePhase:
        self._run_phase(phase)

Systems may declare which phase they belong to with ``@runs_in_phase``;
the declaration is used for diagnostics and validation.
"""

from enum import Enum, auto
from typing import Callable, Dict, Optional

# Explicit public API
__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]


class UpdatePhase(Enum):
    """Phases of a simulation tick, in execution order.

    1. FRAME_START: Advance the tick counter
    2. AUTOMATA: Step the cellular automaton and rebuild tiles
    3. PHYSICS: Integrate entity motion against the tile grid
    4. RENDER_PREP: Assemble geometry and light buffers
    5. FRAME_END: Record statistics
    """

    FRAME_START = auto()
    AUTOMATA = auto()
    PHYSICS = auto()
    RENDER_PREP = auto()
    FRAME_END = auto()


# Human-readable descriptions for debugging
PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.FRAME_START: "Initializing tick",
    UpdatePhase.AUTOMATA: "Applying automaton rule and syncing tiles",
    UpdatePhase.PHYSICS: "Integrating entity motion",
    UpdatePhase.RENDER_PREP: "Assembling geometry and light buffers",
    UpdatePhase.FRAME_END: "Recording statistics",
}


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.PHYSICS)
        class MotionIntegrator(BaseSystem):
            ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def get_system_phase(system: object) -> Optional[UpdatePhase]:
    """Get the declared phase of a system instance or class, if any."""
    return getattr(system, "_phase", None)
