"""Entry point for ``python -m reallife``.

Loads the default YAML config, seeds a world, and runs it headless,
printing a census line after every turn until the tick budget is spent
or all life has died out.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from reallife.simulation.config import SimulationConfig
from reallife.simulation.engine import SimulationEngine

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reallife",
        description="reallife - foraging life on a grid of resources",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=200,
        help="Maximum number of turns to run (default: 200)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def _report(engine: SimulationEngine) -> None:
    print(f"Tick: {engine.tick:>5}  {engine.census.summary()}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, run it."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config.exists():
        config = SimulationConfig.from_yaml(args.config)
    else:
        config = SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed

    engine = SimulationEngine(config=config)
    _report(engine)
    engine.run(args.ticks, on_step=_report)

    if engine.finished:
        print(f"All life ended after {engine.tick} ticks.")


if __name__ == "__main__":
    main()
