#!/usr/bin/env python3
"""
Command line entry point for checking, normalizing and converting simulation inputs.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ygo_hand_sim.conditions.parser import parse_condition
from ygo_hand_sim.conditions.serializer import condition_to_string
from ygo_hand_sim.errors import HandSimError
from ygo_hand_sim.settings import Settings
from ygo_hand_sim.simulation_io import SimulationIO
from ygo_hand_sim.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ygo-hand-sim",
        description="Check and convert Yu-Gi-Oh! hand simulation inputs",
    )
    parser.add_argument("--config", help="Path to an INI settings file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Load a simulation YAML file and summarize it")
    check.add_argument("file", help="Simulation input YAML file")

    normalize = subparsers.add_parser(
        "normalize", help="Load a simulation YAML file and write it back in canonical form"
    )
    normalize.add_argument("file", help="Simulation input YAML file")
    normalize.add_argument("-o", "--output", help="Output file (default: stdout)")

    parse = subparsers.add_parser("parse", help="Parse a single condition string")
    parse.add_argument("expression", help='Condition, e.g. "2+ CardA AND (CardB OR CardC)"')
    parse.add_argument("--json", action="store_true", help="Print the condition tree as JSON")

    convert = subparsers.add_parser("convert-ydk", help="Convert a YDK deck file to simulation YAML")
    convert.add_argument("file", help="YDK deck file")
    convert.add_argument("-o", "--output", help="Output file (default: stdout)")
    return parser


def _write_output(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info(f"Wrote {output}")
    else:
        sys.stdout.write(text)


def run(args: argparse.Namespace, sim_io: SimulationIO) -> None:
    if args.command == "check":
        simulation_input = asyncio.run(sim_io.load_from_yaml_file(args.file))
        deck = simulation_input.deck
        print(f"Deck: {deck.non_empty_count} cards ({len(deck)} slots), "
              f"{len(deck.card_counts())} unique")
        print(f"Conditions: {len(simulation_input.conditions)}")
        for condition in simulation_input.conditions:
            print(f"  {condition_to_string(condition)}")
    elif args.command == "normalize":
        simulation_input = asyncio.run(sim_io.load_from_yaml_file(args.file))
        _write_output(sim_io.serialize_simulation_input_to_yaml(simulation_input), args.output)
    elif args.command == "parse":
        condition = parse_condition(args.expression)
        if args.json:
            print(json.dumps(condition.model_dump(), indent=2))
        else:
            print(condition_to_string(condition))
    elif args.command == "convert-ydk":
        _write_output(asyncio.run(sim_io.convert_ydk_file(args.file)), args.output)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    setup_logging(settings, level=args.log_level)

    try:
        run(args, SimulationIO(settings))
    except (HandSimError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
