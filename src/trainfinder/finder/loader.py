from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..db.models import Train
from .errors import DatasetError
from .parser import parse_trains

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def read_dataset(path: Path) -> Any:
    logger.debug("Reading train dataset from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"cannot read train dataset {path}: {exc}") from exc
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DatasetError(f"malformed JSON in train dataset {path}: {exc}") from exc


def load_trains(path: Path) -> list[Train]:
    payload = read_dataset(path)
    try:
        trains = parse_trains(payload)
    except DatasetError as exc:
        raise DatasetError(f"{path}: {exc}") from exc
    logger.debug("Loaded %d trains from %s", len(trains), path)
    return trains
