# bluetraffic/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

import pandas as pd

from bluetraffic.types import Station, StationTraffic


def _count_by(trips: pd.DataFrame, column: str) -> Dict[str, int]:
    if trips.empty:
        return {}
    return trips[column].value_counts().to_dict()


def compute_station_traffic(
    stations: Iterable[Station],
    trips: pd.DataFrame,
) -> Dict[str, StationTraffic]:
    """
    Per-station arrivals / departures over `trips`.

    departures: trips grouped by start_station_id
    arrivals:   trips grouped by end_station_id

    Returns a new dict short_name -> StationTraffic in station order.
    Stations with no trips get zeros; trips pointing at unknown ids are ignored.
    """
    departures = _count_by(trips, "start_station_id")
    arrivals = _count_by(trips, "end_station_id")

    traffic: Dict[str, StationTraffic] = {}
    for s in stations:
        sid = s.short_name
        traffic[sid] = StationTraffic(
            short_name=sid,
            arrivals=int(arrivals.get(sid, 0)),
            departures=int(departures.get(sid, 0)),
        )

    return traffic


def max_total_traffic(traffic: Mapping[str, StationTraffic]) -> int:
    return max((t.total_traffic for t in traffic.values()), default=0)


def hourly_trip_counts(trips: pd.DataFrame) -> List[int]:
    """Trips started in each hour of the day, index 0..23."""
    if trips.empty:
        return [0] * 24

    hours = trips["started_at"].dropna().dt.hour
    counts = hours.value_counts().reindex(range(24), fill_value=0)
    return [int(v) for v in counts.tolist()]
