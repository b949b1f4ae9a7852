# bluetraffic/util/session.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

from bluetraffic.types import Station
from bluetraffic.util.stations import load_stations
from bluetraffic.util.trips import load_trips

logger = logging.getLogger(__name__)


@dataclass
class SessionData:
    stations: List[Station]
    trips: pd.DataFrame


def load_session_data(stations_source: str | Path, trips_source: str | Path) -> SessionData:
    """
    Fetch the station list and the trip log concurrently.

    Both must finish before anything is aggregated. A failure in either one
    propagates (DataLoadError) once both have settled.
    """
    with ThreadPoolExecutor(max_workers=2) as ex:
        stations_fut = ex.submit(load_stations, stations_source)
        trips_fut = ex.submit(load_trips, trips_source)

        stations = stations_fut.result()
        trips = trips_fut.result()

    logger.info("Session data ready: %d stations, %d trips", len(stations), len(trips))
    return SessionData(stations=stations, trips=trips)
