"""Simulation package: the tick engine and its frame output."""

from blocksim.simulation.engine import FrameOutput, SimulationEngine, normalize_palette

__all__ = ["FrameOutput", "SimulationEngine", "normalize_palette"]
