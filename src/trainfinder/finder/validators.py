from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import ValidationError, ValidationErrorKind

MIN_STATION_ID = 1
MAX_STATION_ID = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Criterion(str, Enum):
    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"


@dataclass(frozen=True)
class StationQuery:
    departure_station_id: int
    arrival_station_id: int
    criterion: Criterion


def parse_station_id(
    value: str,
    empty_kind: ValidationErrorKind,
    bad_kind: ValidationErrorKind,
) -> int:
    if value == "":
        raise ValidationError(empty_kind)
    if _INTEGER_PATTERN.fullmatch(value) is None:
        raise ValidationError(bad_kind)
    try:
        station_id = int(value)
    except ValueError:
        raise ValidationError(bad_kind) from None
    if not MIN_STATION_ID <= station_id <= MAX_STATION_ID:
        raise ValidationError(bad_kind)
    return station_id


def parse_criterion(value: str) -> Criterion:
    try:
        return Criterion(value)
    except ValueError:
        raise ValidationError(ValidationErrorKind.UNSUPPORTED_CRITERIA) from None


def validate_query(departure: str, arrival: str, criteria: str) -> StationQuery:
    departure_id = parse_station_id(
        departure,
        ValidationErrorKind.EMPTY_DEPARTURE_STATION,
        ValidationErrorKind.BAD_DEPARTURE_STATION_INPUT,
    )
    arrival_id = parse_station_id(
        arrival,
        ValidationErrorKind.EMPTY_ARRIVAL_STATION,
        ValidationErrorKind.BAD_ARRIVAL_STATION_INPUT,
    )
    criterion = parse_criterion(criteria)
    return StationQuery(
        departure_station_id=departure_id,
        arrival_station_id=arrival_id,
        criterion=criterion,
    )
