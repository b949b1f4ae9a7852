# bluetraffic/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_STATIONS_JSON = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
DEFAULT_TRIPS_CSV = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    stations_json: str = DEFAULT_STATIONS_JSON
    trips_csv: str = DEFAULT_TRIPS_CSV
    host: str = "127.0.0.1"
    port: int = 8080
    time_tolerance_minutes: int = 60
    bike_lanes: bool = True
    log_level: str = "INFO"
    title: str = "Boston Bluebikes Traffic"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            stations_json=env.get("STATIONS_JSON", DEFAULT_STATIONS_JSON),
            trips_csv=env.get("TRIPS_CSV", DEFAULT_TRIPS_CSV),
            host=env.get("HOST", "127.0.0.1"),
            port=int(env.get("PORT", "8080")),
            time_tolerance_minutes=int(env.get("TIME_TOLERANCE_MINUTES", "60")),
            bike_lanes=_as_bool(env.get("BIKE_LANES", "1")),
            log_level=env.get("LOG_LEVEL", "INFO"),
            title=env.get("MAP_TITLE", "Boston Bluebikes Traffic"),
        )
