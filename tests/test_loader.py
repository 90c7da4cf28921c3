from __future__ import annotations

import json
from datetime import time
from pathlib import Path
from typing import Any

import pytest

from trainfinder.db.models import Train
from trainfinder.finder.errors import DatasetError, FinderError
from trainfinder.finder.loader import load_trains
from trainfinder.finder.parser import parse_trains


def _record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "TrainID": 1,
        "DepartureStationID": 1,
        "ArrivalStationID": 2,
        "Price": 42.5,
        "ArrivalTime": "10:30:00",
        "DepartureTime": "08:15:30",
    }
    record.update(overrides)
    return record


def _write(tmp_path: Path, payload: Any) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload))
    return path


def test_parse_trains_decodes_records() -> None:
    trains = parse_trains([_record(), _record(TrainID=2, Price=7, Extra="ignored")])

    assert trains[0] == Train(
        train_id=1,
        departure_station_id=1,
        arrival_station_id=2,
        price=42.5,
        arrival_time=time(10, 30),
        departure_time=time(8, 15, 30),
    )
    assert trains[1].train_id == 2
    assert trains[1].price == 7.0


def test_parse_trains_rejects_non_array() -> None:
    with pytest.raises(DatasetError):
        parse_trains({"TrainID": 1})


def test_parse_trains_rejects_bad_time() -> None:
    with pytest.raises(DatasetError, match="index 1"):
        parse_trains([_record(), _record(ArrivalTime="25:00:00")])


def test_parse_trains_rejects_string_ids() -> None:
    with pytest.raises(DatasetError):
        parse_trains([_record(TrainID="1")])


def test_parse_trains_rejects_missing_field() -> None:
    record = _record()
    del record["DepartureTime"]

    with pytest.raises(DatasetError):
        parse_trains([record])


def test_load_trains_reads_file_in_order(tmp_path: Path) -> None:
    path = _write(tmp_path, [_record(TrainID=3), _record(TrainID=1)])

    trains = load_trains(path)

    assert [train.train_id for train in trains] == [3, 1]


def test_load_trains_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DatasetError, match="cannot read"):
        load_trains(tmp_path / "missing.json")


def test_load_trains_reports_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[{")

    with pytest.raises(DatasetError, match="malformed JSON"):
        load_trains(path)


def test_load_trains_errors_are_finder_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, [_record(DepartureTime=900)])

    with pytest.raises(FinderError):
        load_trains(path)


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_load_trains_rejects_non_finite_constants(
    tmp_path: Path, constant: str
) -> None:
    path = tmp_path / "data.json"
    path.write_text(
        '[{"TrainID": 1, "DepartureStationID": 1, "ArrivalStationID": 2, '
        f'"Price": {constant}, "ArrivalTime": "10:30:00", '
        '"DepartureTime": "08:15:30"}]'
    )

    with pytest.raises(DatasetError, match="malformed JSON"):
        load_trains(path)


def test_parse_trains_rejects_overflowing_price() -> None:
    with pytest.raises(DatasetError):
        parse_trains([_record(Price=float("inf"))])


def test_parse_trains_rejects_unpadded_time() -> None:
    with pytest.raises(DatasetError, match="index 0"):
        parse_trains([_record(ArrivalTime="10:5:3")])
