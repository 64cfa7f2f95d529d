"""Entry point for ``python -m antsim``.

Loads the default YAML config, builds a simulation with the configured
number of ants at the nest, and either opens a Pygame window to watch
them wander or runs headless for a fixed number of ticks.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

import numpy as np

from antsim.simulation.config import ConfigError, SimulationConfig
from antsim.simulation.engine import Simulation

logger = logging.getLogger("antsim")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="antsim",
        description="antsim - pheromone-laying ant wander simulation",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--ants",
        type=int,
        default=None,
        help="Number of ants to start with (default: initial_ants from config)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=1,
        help="Pixel size per grid cell (default: 1)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=60.0,
        help="Simulation ticks per second (default: 60)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and log a summary",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Ticks to run in headless mode (default: 1000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def run_headless(simulation: Simulation, ticks: int) -> None:
    """Advance ``ticks`` steps and log what the grid looks like afterwards."""
    simulation.run(ticks)
    snapshot = simulation.snapshot()
    logger.info(
        "Tick %d: %d ants, %d path cells, %d food cells",
        snapshot.tick,
        snapshot.population,
        int(np.count_nonzero(snapshot.path)),
        int(np.count_nonzero(snapshot.food)),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create the simulation, launch renderer or headless run."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimulationConfig.from_yaml(args.config)
    except (ConfigError, FileNotFoundError) as exc:
        parser.error(str(exc))

    ants = config.initial_ants if args.ants is None else args.ants
    if ants < 0:
        parser.error(f"--ants must be >= 0, got {ants}")

    simulation = Simulation(config=config)
    simulation.add_agents(ants)

    if args.headless:
        run_headless(simulation, args.ticks)
        return

    from antsim.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(
        simulation=simulation,
        cell_size=args.cell_size,
        ticks_per_second=args.speed,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
