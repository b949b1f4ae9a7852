# bluetraffic/types.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Station:
    short_name: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class StationTraffic:
    short_name: str
    arrivals: int = 0
    departures: int = 0

    @property
    def total_traffic(self) -> int:
        return self.arrivals + self.departures
