from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from bluetraffic.util.errors import DataLoadError
from bluetraffic.util.session import load_session_data
from bluetraffic.util.stations import is_url, load_stations
from bluetraffic.util.trips import load_trips

TRIPS_CSV = """ride_id,rideable_type,started_at,ended_at,start_station_id,end_station_id,is_member
r1,classic_bike,2024-03-01 08:00:20.140000,2024-03-01 08:10:05.000000,A32000,B32006,1
r2,electric_bike,2024-03-01 17:45:00,2024-03-01 18:05:00,B32006,A32000,0
r3,classic_bike,not a date,2024-03-01 18:05:00,A32000,A32000,0
"""


def _write_stations(tmp_path: Path, stations) -> Path:
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {"stations": stations}}), encoding="utf-8")
    return path


def test_load_stations(tmp_path: Path) -> None:
    path = _write_stations(
        tmp_path,
        [
            {"short_name": "A32000", "name": "Kendall T", "lat": 42.3625, "lon": -71.0843, "capacity": 19},
            {"short_name": 32006, "name": "MIT", "lat": "42.3581", "lon": "oops"},
        ],
    )

    stations = load_stations(path)
    assert [s.short_name for s in stations] == ["A32000", "32006"]
    assert stations[0].lat == pytest.approx(42.3625)
    assert stations[1].lat == pytest.approx(42.3581)
    assert math.isnan(stations[1].lon)


def test_load_stations_errors(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        load_stations(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        load_stations(bad)

    not_utf8 = tmp_path / "latin1.json"
    not_utf8.write_bytes(b'{"data": {"stations": [{"name": "\xff\xfe"}]}}')
    with pytest.raises(DataLoadError):
        load_stations(not_utf8)

    wrong_shape = tmp_path / "wrong.json"
    wrong_shape.write_text(json.dumps({"stations": []}), encoding="utf-8")
    with pytest.raises(DataLoadError):
        load_stations(wrong_shape)


def test_load_trips(tmp_path: Path) -> None:
    path = tmp_path / "trips.csv"
    path.write_text(TRIPS_CSV, encoding="utf-8")

    trips = load_trips(path)
    assert list(trips.columns) == ["start_station_id", "end_station_id", "started_at", "ended_at"]
    assert len(trips) == 3
    assert trips.loc[0, "start_station_id"] == "A32000"
    assert trips.loc[0, "started_at"].hour == 8
    assert trips["started_at"].isna().sum() == 1


def test_load_trips_errors(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        load_trips(tmp_path / "missing.csv")

    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(DataLoadError):
        load_trips(empty)

    partial = tmp_path / "partial.csv"
    partial.write_text("start_station_id,end_station_id\nA,B\n", encoding="utf-8")
    with pytest.raises(DataLoadError):
        load_trips(partial)


def test_load_session_data(tmp_path: Path) -> None:
    stations_path = _write_stations(
        tmp_path,
        [{"short_name": "A32000", "name": "Kendall T", "lat": 42.3625, "lon": -71.0843}],
    )
    trips_path = tmp_path / "trips.csv"
    trips_path.write_text(TRIPS_CSV, encoding="utf-8")

    data = load_session_data(stations_path, trips_path)
    assert len(data.stations) == 1
    assert len(data.trips) == 3


def test_load_session_data_fails_as_a_whole(tmp_path: Path) -> None:
    trips_path = tmp_path / "trips.csv"
    trips_path.write_text(TRIPS_CSV, encoding="utf-8")

    with pytest.raises(DataLoadError):
        load_session_data(tmp_path / "missing.json", trips_path)


def test_is_url() -> None:
    assert is_url("https://dsc106.com/labs/lab07/data/bluebikes-stations.json")
    assert not is_url("data/bluebikes-stations.json")
