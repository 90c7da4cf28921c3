from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import data_path, log_level
from .errors import FinderError
from .lookup import lookup_trains
from .presenter import format_trains

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trainfinder",
        description="Find the best three trains between two stations.",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="path to the train dataset (default: $TRAINFINDER_DATA_PATH or data.json)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $TRAINFINDER_LOG_LEVEL or WARNING)",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def prompt_token(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    tokens = line.split()
    return tokens[0] if tokens else ""


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or log_level())

    departure = prompt_token("Departure station: ")
    arrival = prompt_token("Arrival station: ")
    criteria = prompt_token("Criteria: ")

    try:
        trains = lookup_trains(
            departure,
            arrival,
            criteria,
            path=args.data if args.data is not None else data_path(),
        )
    except FinderError as exc:
        logger.error("%s", exc)
        return 1

    for line in format_trains(trains):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
