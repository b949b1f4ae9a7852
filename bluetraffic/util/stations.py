# bluetraffic/util/stations.py
from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Dict, List

from bluetraffic.types import Station
from bluetraffic.util.errors import DataLoadError

logger = logging.getLogger(__name__)


def is_url(source: str | Path) -> bool:
    return str(source).lower().startswith(("http:", "https:", "ftp:"))


def _http_get_json(url: str, timeout: int = 30) -> Dict[str, Any]:
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": "bluetraffic/1.0",
            "Accept": "application/json",
        },
    )
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        raw = resp.read().decode("utf-8", errors="replace")
    return json.loads(raw)


def _as_float(v) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float("nan")


def load_stations(source: str | Path) -> List[Station]:
    """
    Load Bluebikes stations from a station_information style JSON (path or URL):

      {"data": {"stations": [{"short_name": ..., "name": ..., "lat": ..., "lon": ...}, ...]}}

    Returns Station records with only the fields the map needs.
    """
    try:
        if is_url(source):
            raw = _http_get_json(str(source))
        else:
            with open(source, encoding="utf-8") as f:
                raw = json.load(f)
    except (OSError, urllib.error.URLError, ValueError) as e:
        raise DataLoadError(f"could not load stations from {source}: {e}") from e

    try:
        records = raw["data"]["stations"]
    except (KeyError, TypeError) as e:
        raise DataLoadError(f"{source}: expected data.stations in station JSON") from e

    stations = []
    for s in records:
        stations.append(
            Station(
                short_name=str(s.get("short_name", "")),
                name=s.get("name", ""),
                lat=_as_float(s.get("lat")),
                lon=_as_float(s.get("lon")),
            )
        )

    logger.info("Loaded %d stations from %s", len(stations), source)
    return stations
