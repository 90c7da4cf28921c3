from __future__ import annotations

from datetime import time
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..db.models import Train
from ..utils.time import parse_time_of_day
from .errors import DatasetError


class TrainRecord(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    train_id: int = Field(..., alias="TrainID")
    departure_station_id: int = Field(..., alias="DepartureStationID")
    arrival_station_id: int = Field(..., alias="ArrivalStationID")
    price: float = Field(..., alias="Price")
    arrival_time: time = Field(..., alias="ArrivalTime")
    departure_time: time = Field(..., alias="DepartureTime")

    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def parse_time_fields(cls, value: Any) -> time:
        if not isinstance(value, str):
            raise ValueError("time of day must be a string")
        return parse_time_of_day(value)

    def to_train(self) -> Train:
        return Train(
            train_id=self.train_id,
            departure_station_id=self.departure_station_id,
            arrival_station_id=self.arrival_station_id,
            price=self.price,
            arrival_time=self.arrival_time,
            departure_time=self.departure_time,
        )


def parse_train(record: Any) -> Train:
    return TrainRecord.model_validate(record).to_train()


def parse_trains(payload: Any) -> list[Train]:
    if not isinstance(payload, list):
        raise DatasetError(
            f"train dataset must be a JSON array, got {type(payload).__name__}"
        )
    trains: list[Train] = []
    for index, record in enumerate(payload):
        try:
            trains.append(parse_train(record))
        except pydantic.ValidationError as exc:
            raise DatasetError(f"invalid train record at index {index}: {exc}") from exc
    return trains
