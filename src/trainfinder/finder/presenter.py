from __future__ import annotations

from collections.abc import Iterable
from datetime import time

from ..db.models import Train
from ..utils.time import calendar_parts


def format_time(value: time) -> str:
    parts = calendar_parts(value)
    return (
        f"time.Date({parts.year}, time.{parts.month}, {parts.day}, "
        f"{parts.hour}, {parts.minute}, {parts.second}, {parts.nanosecond} "
        f"time.{parts.location})"
    )


def format_train(train: Train) -> str:
    """Render one train on a single line.

    Prices are Python floats (double precision), so a value sitting on a
    rounding boundary may print one cent apart from a single-precision store.
    """
    return (
        f"{{TrainID: {train.train_id}, "
        f"DepartureStationID: {train.departure_station_id}, "
        f"ArrivalStationID: {train.arrival_station_id}, "
        f"Price: {train.price:.2f}, "
        f"ArrivalTime: {format_time(train.arrival_time)}, "
        f"DepartureTime: {format_time(train.departure_time)}}}"
    )


def format_trains(trains: Iterable[Train]) -> list[str]:
    return [format_train(train) for train in trains]
