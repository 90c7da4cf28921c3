from __future__ import annotations

import logging
from pathlib import Path

from ..db.models import Train
from .config import data_path
from .finder import find_trains
from .loader import load_trains

logger = logging.getLogger(__name__)


def lookup_trains(
    departure: str,
    arrival: str,
    criteria: str,
    path: Path | None = None,
) -> list[Train]:
    trains = load_trains(path if path is not None else data_path())
    result = find_trains(departure, arrival, criteria, trains)
    logger.debug(
        "Found %d trains from station %s to station %s by %s",
        len(result),
        departure,
        arrival,
        criteria,
    )
    return result
