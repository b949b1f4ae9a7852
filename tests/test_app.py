from __future__ import annotations

import json

import pytest

from bluetraffic.types import Station
from bluetraffic.viz.app.single import clamp_time_filter, create_app
from bluetraffic.viz.view_state import StationViewState


@pytest.fixture
def view(stations, trips):
    return StationViewState(stations, trips)


@pytest.fixture
def client(view):
    app = create_app(view, title="Bluebikes")
    app.config["TESTING"] = True
    return app.test_client()


def test_index_applies_time_filter(client, view) -> None:
    resp = client.get("/?time=480")

    assert resp.status_code == 200
    assert view.time_filter == 480
    assert b"8:00 AM" in resp.data


def test_index_defaults_to_any_time(client, view) -> None:
    view.update(480)
    resp = client.get("/")

    assert resp.status_code == 200
    assert view.time_filter == -1


@pytest.mark.parametrize(
    "query,expected",
    [("time=abc", -1), ("time=-40", -1), ("time=5000", 1439), ("time=1065", 1065)],
)
def test_index_sanitizes_time(client, view, query, expected) -> None:
    assert client.get(f"/?{query}").status_code == 200
    assert view.time_filter == expected


def test_traffic_json(client, view) -> None:
    resp = client.get("/traffic.json?time=480")
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["time_filter"] == 480
    assert data["time_label"] == "8:00 AM"
    assert data["trip_count"] == 2
    assert data["radius_range"] == [3.0, 50.0]

    by_id = {s["short_name"]: s for s in data["stations"]}
    assert by_id["A32000"]["departures"] == 2
    assert by_id["A32000"]["arrivals"] == 0
    assert by_id["A32000"]["departure_ratio"] == 1.0

    # read-only: the page state is untouched
    assert view.time_filter == -1


def test_traffic_json_any_time(client) -> None:
    data = client.get("/traffic.json").get_json()
    assert data["time_label"] == "any time"
    assert sum(s["total_traffic"] for s in data["stations"]) == 10


def test_clamp_time_filter() -> None:
    assert clamp_time_filter(-7) == -1
    assert clamp_time_filter(0) == 0
    assert clamp_time_filter(2000) == 1439


def test_traffic_json_is_strict_json_for_missing_coordinates(stations, trips) -> None:
    broken = stations + [Station(short_name="X", name="Nowhere", lat=float("nan"), lon=-71.1)]
    app = create_app(StationViewState(broken, trips))
    app.config["TESTING"] = True

    resp = app.test_client().get("/traffic.json")

    def _reject(token):
        raise ValueError(f"non-standard JSON constant {token}")

    data = json.loads(resp.get_data(as_text=True), parse_constant=_reject)
    by_id = {s["short_name"]: s for s in data["stations"]}
    assert by_id["X"]["lat"] is None
    assert by_id["X"]["lon"] == -71.1
    assert by_id["X"]["total_traffic"] == 0
