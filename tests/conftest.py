from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import pytest


def pytest_configure() -> None:
    """
    Allow `pytest` to run from a checkout without an editable install.
    """

    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


def _make_trips(rows) -> pd.DataFrame:
    """rows: (start_id, end_id, 'HH:MM' started, 'HH:MM' ended)"""
    return pd.DataFrame(
        {
            "start_station_id": pd.Series([r[0] for r in rows], dtype=object),
            "end_station_id": pd.Series([r[1] for r in rows], dtype=object),
            "started_at": pd.to_datetime([f"2024-03-01 {r[2]}" for r in rows]),
            "ended_at": pd.to_datetime([f"2024-03-01 {r[3]}" for r in rows]),
        }
    )


@pytest.fixture
def make_trips():
    return _make_trips


@pytest.fixture
def stations():
    from bluetraffic.types import Station

    return [
        Station(short_name="A32000", name="Kendall T", lat=42.3625, lon=-71.0843),
        Station(short_name="B32006", name="MIT at Mass Ave", lat=42.3581, lon=-71.0932),
        Station(short_name="C32011", name="Central Square", lat=42.3653, lon=-71.1030),
    ]


@pytest.fixture
def trips() -> pd.DataFrame:
    return _make_trips(
        [
            ("A32000", "B32006", "08:00", "08:10"),
            ("A32000", "C32011", "08:30", "08:55"),
            ("B32006", "A32000", "12:00", "12:20"),
            ("C32011", "A32000", "17:45", "18:05"),
            ("C32011", "B32006", "23:50", "23:59"),
        ]
    )
