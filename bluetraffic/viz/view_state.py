# bluetraffic/viz/view_state.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from bluetraffic.traffic.aggregate import compute_station_traffic, max_total_traffic
from bluetraffic.traffic.scale import RadiusScale, range_for, station_flow
from bluetraffic.traffic.time_filter import (
    DEFAULT_TOLERANCE_MINUTES,
    MINUTES_PER_DAY,
    NO_FILTER,
    filter_trips_by_time,
)
from bluetraffic.types import Station, StationTraffic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StationCircle:
    station: Station
    traffic: StationTraffic
    radius: float
    departure_ratio: float


@dataclass(frozen=True)
class TrafficSnapshot:
    time_filter: int
    scale: RadiusScale
    circles: List[StationCircle]
    trip_count: int

    @property
    def is_filtered(self) -> bool:
        return self.time_filter != NO_FILTER

    def by_station(self) -> Dict[str, StationCircle]:
        return {c.station.short_name: c for c in self.circles}


def validate_time_filter(time_filter: int) -> int:
    t = int(time_filter)
    if t != NO_FILTER and not (0 <= t < MINUTES_PER_DAY):
        raise ValueError(
            f"time_filter must be -1 or in [0, {MINUTES_PER_DAY - 1}], got {time_filter}"
        )
    return t


class StationViewState:
    """
    Current station view for one session.

    Unfiltered (time_filter == -1) or filtered (a minute of day). Every change
    recomputes traffic from the full trip log; nothing carries over from the
    previous filter. The radius domain comes from the unfiltered traffic and
    stays fixed for the session.
    """

    def __init__(
        self,
        stations: List[Station],
        trips: pd.DataFrame,
        *,
        tolerance: int = DEFAULT_TOLERANCE_MINUTES,
    ):
        self.stations = list(stations)
        self.trips = trips
        self.tolerance = int(tolerance)

        baseline = compute_station_traffic(self.stations, trips)
        self.base_scale = RadiusScale(domain_max=max_total_traffic(baseline))
        self.current = self._build(NO_FILTER, baseline, len(trips))

    @property
    def time_filter(self) -> int:
        return self.current.time_filter

    @property
    def is_filtered(self) -> bool:
        return self.current.is_filtered

    def snapshot(self, time_filter: int) -> TrafficSnapshot:
        t = validate_time_filter(time_filter)
        filtered = filter_trips_by_time(self.trips, t, self.tolerance)
        traffic = compute_station_traffic(self.stations, filtered)
        return self._build(t, traffic, len(filtered))

    def update(self, time_filter: int) -> TrafficSnapshot:
        snap = self.snapshot(time_filter)
        logger.debug(
            "time_filter=%s -> %d trips across %d stations",
            snap.time_filter,
            snap.trip_count,
            len(snap.circles),
        )
        self.current = snap
        return snap

    def _build(self, time_filter: int, traffic: Dict[str, StationTraffic], trip_count: int):
        scale = self.base_scale.with_range(range_for(time_filter))

        station_traffic = [traffic[s.short_name] for s in self.stations]
        radii = scale.radii([t.total_traffic for t in station_traffic])

        circles = []
        for s, t, r in zip(self.stations, station_traffic, radii):
            circles.append(
                StationCircle(
                    station=s,
                    traffic=t,
                    radius=float(r),
                    departure_ratio=station_flow(t.departures, t.total_traffic),
                )
            )

        return TrafficSnapshot(
            time_filter=time_filter,
            scale=scale,
            circles=circles,
            trip_count=int(trip_count),
        )
