from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time

TIME_OF_DAY_FORMAT = "%H:%M:%S"

_TIME_OF_DAY_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2}")

# Placeholder date for values that carry no calendar date.
REFERENCE_YEAR = 0
REFERENCE_MONTH = "January"
REFERENCE_DAY = 1
REFERENCE_LOCATION = "UTC"


@dataclass(frozen=True)
class CalendarParts:
    year: int
    month: str
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    location: str


def parse_time_of_day(value: str) -> time:
    """Parse an ``HH:MM:SS`` wall-clock string into a date-less ``time``."""
    if not isinstance(value, str) or _TIME_OF_DAY_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid time of day {value!r}, expected HH:MM:SS")
    try:
        return datetime.strptime(value, TIME_OF_DAY_FORMAT).time()
    except ValueError as exc:
        raise ValueError(
            f"invalid time of day {value!r}, expected HH:MM:SS"
        ) from exc


def format_time_of_day(value: time) -> str:
    return value.strftime(TIME_OF_DAY_FORMAT)


def calendar_parts(value: time) -> CalendarParts:
    return CalendarParts(
        year=REFERENCE_YEAR,
        month=REFERENCE_MONTH,
        day=REFERENCE_DAY,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        nanosecond=value.microsecond * 1000,
        location=REFERENCE_LOCATION,
    )
