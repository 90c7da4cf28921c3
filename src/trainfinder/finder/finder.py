from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from ..db.models import Train
from .validators import Criterion, StationQuery, validate_query

RESULT_LIMIT = 3

_SORT_KEYS: dict[Criterion, Callable[[Train], Any]] = {
    Criterion.PRICE: lambda train: train.price,
    Criterion.ARRIVAL_TIME: lambda train: train.arrival_time,
    Criterion.DEPARTURE_TIME: lambda train: train.departure_time,
}


def select_matching(trains: Iterable[Train], query: StationQuery) -> list[Train]:
    return [
        train
        for train in trains
        if train.departure_station_id == query.departure_station_id
        and train.arrival_station_id == query.arrival_station_id
    ]


def sort_by_criterion(trains: Sequence[Train], criterion: Criterion) -> list[Train]:
    return sorted(trains, key=_SORT_KEYS[criterion])


def find_trains(
    departure: str,
    arrival: str,
    criteria: str,
    trains: Sequence[Train],
) -> list[Train]:
    """Return up to three trains between two stations, best first.

    Only the first three matches in collection order are ranked; any later
    match is dropped before sorting, however well it would score.
    """
    query = validate_query(departure, arrival, criteria)
    matching = select_matching(trains, query)
    if not matching:
        return []
    retained = matching[:RESULT_LIMIT]
    return sort_by_criterion(retained, query.criterion)[:RESULT_LIMIT]
