from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class Train:
    train_id: int
    departure_station_id: int
    arrival_station_id: int
    price: float
    arrival_time: time
    departure_time: time
