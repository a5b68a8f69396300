"""Main entry point for the block world simulation.

This module provides command-line options to run the simulation:
- Preview mode (default): pygame window with an orbiting camera
- Headless mode: stats-only, as fast as possible
"""

import argparse
import logging
import sys

from blocksim.config.simulation_config import AutomataConfig, SimulationConfig
from blocksim.exceptions import BlockSimError

logger = logging.getLogger(__name__)


PRESETS = ("cgol",)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Translate parsed arguments into a SimulationConfig."""
    return SimulationConfig(
        headless=args.headless,
        seed=args.seed,
        automata=AutomataConfig(
            size=tuple(args.size),
            seed_density=args.density,
            survive=tuple(args.survive),
            birth=tuple(args.birth),
            neighborhood=args.neighborhood,
        ),
    ).validate()


def build_engine(args: argparse.Namespace):
    """Create the engine for the parsed arguments.

    A preset replaces the grid and rule flags with its own config,
    palette, seeding and state function.
    """
    from blocksim.simulation.engine import SimulationEngine

    if args.preset == "cgol":
        from blocksim.presets.cgol import (
            CGOL_CONFIG,
            CGOL_PALETTE,
            cgol_automata_init,
            cgol_state_function,
        )

        logger.info("Using preset: cgol (grid and rule flags ignored)")
        config = CGOL_CONFIG.with_overrides(headless=args.headless, seed=args.seed)
        engine = SimulationEngine(config, palette=CGOL_PALETTE)
        engine.automata = cgol_automata_init(engine.rng)
        engine.state_function = cgol_state_function
        return engine

    return SimulationEngine.from_config(build_config(args))


def run_headless(engine, max_ticks: int, stats_interval: int) -> None:
    """Run the simulation in headless mode (no visualization).

    Args:
        engine: SimulationEngine to drive
        max_ticks: Number of ticks to simulate
        stats_interval: Log stats every N ticks
    """
    engine.run_headless(max_ticks=max_ticks, stats_interval=stats_interval)


def run_preview(engine) -> None:
    """Run the simulation in a pygame window."""
    try:
        from rendering.preview import run_preview as run_preview_window
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .[preview]")
        sys.exit(1)

    run_preview_window(engine)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Block World Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the preview window (default)
  python main.py

  # Run headless for testing/benchmarking
  python main.py --headless --max-ticks 500 --stats-interval 50

  # Reproducible run on a small grid
  python main.py --headless --size 12 12 12 --seed 42

  # 3D Game of Life (4555) preset
  python main.py --preset cgol
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=200,
        help="Ticks to simulate in headless mode (default: 200)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=20,
        help="Log stats every N ticks in headless mode (default: 20)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=3,
        default=list(AutomataConfig().size),
        metavar=("X", "Y", "Z"),
        help="Grid extents (default: %(default)s)",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=AutomataConfig().seed_density,
        help="Fraction of cells alive at start (default: %(default)s)",
    )
    parser.add_argument(
        "--survive",
        type=int,
        nargs="+",
        default=list(AutomataConfig().survive),
        help="Live-neighbor counts that keep a cell alive (default: %(default)s)",
    )
    parser.add_argument(
        "--birth",
        type=int,
        nargs="+",
        default=list(AutomataConfig().birth),
        help="Live-neighbor counts that bring a cell to life (default: %(default)s)",
    )
    parser.add_argument(
        "--neighborhood",
        choices=("moore", "von_neumann"),
        default="moore",
        help="Neighborhood counted by the rule (default: %(default)s)",
    )
    parser.add_argument(
        "--preset",
        choices=PRESETS,
        default=None,
        help="Run a bundled automaton instead of the grid and rule flags",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv=None) -> None:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        engine = build_engine(args)
        if args.headless:
            logger.info("Starting headless simulation...")
            logger.info(
                "Configuration: %d ticks, stats every %d ticks", args.max_ticks, args.stats_interval
            )
            run_headless(engine, args.max_ticks, args.stats_interval)
        else:
            run_preview(engine)
    except BlockSimError as e:
        logger.error("Simulation failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
