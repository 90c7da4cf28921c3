from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    UNSUPPORTED_CRITERIA = "unsupported criteria"
    EMPTY_DEPARTURE_STATION = "empty departure station"
    EMPTY_ARRIVAL_STATION = "empty arrival station"
    BAD_ARRIVAL_STATION_INPUT = "bad arrival station input"
    BAD_DEPARTURE_STATION_INPUT = "bad departure station input"


class FinderError(Exception):
    """Base class for every failure a lookup can report."""


class ValidationError(FinderError):
    def __init__(self, kind: ValidationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class DatasetError(FinderError):
    """The train dataset could not be read or decoded."""
