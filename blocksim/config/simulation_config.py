"""Lightweight simulation configuration helpers."""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Optional, Tuple

from blocksim.config.automata import (
    DEFAULT_BIRTH,
    DEFAULT_GRID_SIZE,
    DEFAULT_SEED_DENSITY,
    DEFAULT_SURVIVE,
)
from blocksim.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH, SEPARATOR_WIDTH
from blocksim.exceptions import ConfigurationError

NEIGHBORHOODS = ("moore", "von_neumann")


@dataclass
class DisplayConfig:
    """Minimal display configuration for preview and headless runs."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    separator_width: int = SEPARATOR_WIDTH
    frame_rate: int = FRAME_RATE


@dataclass
class AutomataConfig:
    """Grid extents and Life-like rule parameters."""

    size: Tuple[int, int, int] = DEFAULT_GRID_SIZE
    seed_density: float = DEFAULT_SEED_DENSITY
    survive: Tuple[int, ...] = DEFAULT_SURVIVE
    birth: Tuple[int, ...] = DEFAULT_BIRTH
    neighborhood: str = "moore"

    def validate(self) -> None:
        if len(self.size) != 3 or any(int(n) <= 0 for n in self.size):
            raise ConfigurationError(f"Grid size must be three positive extents, got {self.size}")
        if not 0.0 <= self.seed_density <= 1.0:
            raise ConfigurationError(f"seed_density must be within [0, 1], got {self.seed_density}")
        if self.neighborhood not in NEIGHBORHOODS:
            raise ConfigurationError(
                f"Unknown neighborhood {self.neighborhood!r}; expected one of {NEIGHBORHOODS}"
            )


@dataclass
class SimulationConfig:
    """Configuration toggles for simulation runtime behavior.

    Attributes:
        headless: Whether to run without the pygame preview.
        seed: Optional RNG seed for reproducible automaton seeding.
        physics_enabled: Whether the motion integrator runs each tick.
        automata_enabled: Whether the automaton steps each tick.
    """

    headless: bool = True
    seed: Optional[int] = None
    physics_enabled: bool = True
    automata_enabled: bool = True
    display: DisplayConfig = field(default_factory=DisplayConfig)
    automata: AutomataConfig = field(default_factory=AutomataConfig)

    def validate(self) -> "SimulationConfig":
        self.automata.validate()
        return self

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with top-level fields replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a nested dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        display_data = data.get("display") or {}
        automata_data = dict(data.get("automata") or {})
        for key in ("size", "survive", "birth"):
            if key in automata_data:
                automata_data[key] = tuple(automata_data[key])

        top = {
            k: v
            for k, v in data.items()
            if k in cls.__dataclass_fields__ and k not in ("display", "automata")
        }
        return cls(
            display=DisplayConfig(
                **{k: v for k, v in display_data.items() if k in DisplayConfig.__dataclass_fields__}
            ),
            automata=AutomataConfig(
                **{k: v for k, v in automata_data.items() if k in AutomataConfig.__dataclass_fields__}
            ),
            **top,
        ).validate()
