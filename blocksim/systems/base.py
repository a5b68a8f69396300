"""Base class for per-tick world systems.

A system owns one piece of per-tick work over the world (currently only
entity motion). It is constructed with the collaborators it reads and
writes, can be switched off without being removed, and reports what a
tick did through a SystemResult so the engine can aggregate statistics:

    @runs_in_phase(UpdatePhase.PHYSICS)
    class MotionIntegrator(BaseSystem):
        def _do_update(self, frame):
            ...
            return SystemResult(entities_affected=n, collisions=hits)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from blocksim.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """What one system update did.

    Attributes:
        entities_affected: Entities the system processed
        collisions: Moves that were shortened by an occupied tile
        skipped: True when the system was disabled for the tick
    """

    entities_affected: int = 0
    collisions: int = 0
    skipped: bool = False

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()

    def __add__(self, other: "SystemResult") -> "SystemResult":
        """Sum counters across ticks; skipped results contribute nothing."""
        if other.skipped:
            return self
        if self.skipped:
            return other
        return SystemResult(
            entities_affected=self.entities_affected + other.entities_affected,
            collisions=self.collisions + other.collisions,
        )


class BaseSystem(ABC):
    """Common enable switch, update counting and phase lookup.

    Subclasses implement ``_do_update``; callers use ``update``.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, name: str) -> None:
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def update_count(self) -> int:
        """Number of ticks the system actually ran (disabled ticks excluded)."""
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, frame: int) -> SystemResult:
        """Run one tick unless disabled.

        Args:
            frame: Tick number, used for log context

        Returns:
            The subclass result, ``SystemResult.empty()`` if it returned None,
            or a skipped result when disabled
        """
        if not self._enabled:
            return SystemResult.skipped_result()

        result = self._do_update(frame)
        self._update_count += 1
        return result if result is not None else SystemResult.empty()

    @abstractmethod
    def _do_update(self, frame: int) -> Optional[SystemResult]:
        """Per-tick work of the concrete system."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase else None,
        }

    def __repr__(self) -> str:
        phase = f", phase={self._phase.name}" if self._phase else ""
        return f"{self.__class__.__name__}({self._name!r}, enabled={self._enabled}{phase})"
