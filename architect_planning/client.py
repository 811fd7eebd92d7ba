"""
Demo client for the Architectural Planning Adapter

Usage:
    architect-planning [--config FILE] [--name NAME --area SQFT] [--rate RATE] [--plain]

The client only talks to the MakingArchitecturalPlan interface; the
adapter behind it coordinates the Architect and the estimator.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from architect_planning.adapters import MakingArchitecturalPlan
from architect_planning.engine import InvalidArgumentError, ParserError, get_parser
from architect_planning.models import BuildingDescriptor, PlanningConfig, PlanningSettings
from architect_planning.service import (
    configure,
    create_plain_planner,
    create_planning_service,
)

logger = logging.getLogger(__name__)

EXIT_INVALID_ARGUMENT = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="architect-planning",
        description="Create architectural plans with raw-material cost estimates",
    )
    parser.add_argument("--config", help="Path to planning YAML file")
    parser.add_argument("--name", help="Building name (overrides configured buildings)")
    parser.add_argument("--area", type=float, help="Built-up area in sq.ft.")
    parser.add_argument("--rate", type=float, help="Cost per sq.ft. (overrides config)")
    parser.add_argument("--plain", action="store_true",
                        help="Use the architect directly, without cost estimation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_config(args: argparse.Namespace) -> PlanningConfig:
    """Configuration from --config, with command line overrides applied."""
    config = get_parser().parse_file(args.config) if args.config else PlanningConfig()

    if args.rate is not None:
        config = PlanningConfig(
            planning=PlanningSettings(default_rate=args.rate),
            buildings=config.buildings,
        )
    if args.name is not None:
        config = PlanningConfig(
            planning=config.planning,
            buildings=[BuildingDescriptor(name=args.name, area_sq_ft=args.area)],
        )
    return config


def run(planner: MakingArchitecturalPlan, buildings: List[BuildingDescriptor]) -> None:
    """Plan every building through the interface, stopping at the first failure."""
    for building in buildings:
        planner.make_plan(building.name, building.area_sq_ft)


def main(argv: Optional[Sequence[str]] = None) -> int:
    arg_parser = build_parser()
    args = arg_parser.parse_args(argv)
    if (args.name is None) != (args.area is None):
        arg_parser.error("--name and --area must be given together")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args)
    except ParserError as e:
        logger.error(f"Configuration error: {e.message}")
        for error in e.errors:
            logger.error(f"  {error}")
        return EXIT_CONFIG_ERROR

    configure(config)
    if args.plain:
        planner = create_plain_planner()
    else:
        planner = create_planning_service(default_rate=config.planning.default_rate)

    try:
        run(planner, config.buildings)
    except InvalidArgumentError as e:
        logger.error(f"Planning failed: {e.message}")
        return EXIT_INVALID_ARGUMENT

    return 0


if __name__ == "__main__":
    sys.exit(main())
