#!/usr/bin/env python3
"""
Batch simulation runner comparing buy behaviors.

Usage:
    # 300 games with the default settings
    monopoly-sim

    # 1000 reproducible games, richer players, shorter games
    monopoly-sim -n 1000 --seed 7 -b 500 -t 200

    # Machine-readable report
    monopoly-sim -n 100 --json
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from monopoly_sim.exceptions import ConfigurationError
from monopoly_sim.runner import GameRunner, default_players_factory
from monopoly_sim.schemas import SimulationReport
from monopoly_sim.settings import SimulationSettings, get_settings

logger = logging.getLogger(__name__)


def format_report(report: SimulationReport) -> str:
    lines = [
        f"Number of timed out matches: {report.num_timed_out_games}",
        f"Number of turns on average: {report.average_num_turns:.2f}",
        "Winning percentage of each behavior:",
    ]
    for behavior, share in report.winning_percentage_per_behavior.items():
        lines.append(f"  - {behavior}: {share:.2%}")
    lines.append(f"Most successful behavior: {report.most_successful_behavior or 'n/a'}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Simulate many games and compare buy behaviors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-n", "--games",
        type=int,
        default=settings.num_simulations,
        help=f"Number of games to run (default: {settings.num_simulations})",
    )
    parser.add_argument(
        "-b", "--balance",
        type=int,
        default=settings.starting_balance,
        help=f"Starting balance of every player (default: {settings.starting_balance})",
    )
    parser.add_argument(
        "-t", "--max-turns",
        type=int,
        default=settings.max_num_turns,
        help=f"Maximum turns per game (default: {settings.max_num_turns})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for reproducible batches",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        parser = build_parser()
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = SimulationSettings(
            **{
                **get_settings().model_dump(),
                "num_simulations": args.games,
                "starting_balance": args.balance,
                "max_num_turns": args.max_turns,
                "seed": args.seed,
            }
        )
        config = settings.to_game_config()
        rng = random.Random(config.seed)
        runner = GameRunner(
            default_players_factory(config.starting_balance, rng),
            config=config,
            rng=rng,
        )
        runner.run(settings.num_simulations)
    except (ConfigurationError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    report = runner.report()
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
