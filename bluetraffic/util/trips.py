# bluetraffic/util/trips.py
from __future__ import annotations

import logging
import urllib.error
from pathlib import Path

import pandas as pd

from bluetraffic.util.errors import DataLoadError

logger = logging.getLogger(__name__)

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def load_trips(source: str | Path) -> pd.DataFrame:
    """
    Load a Bluebikes trip CSV (path or URL) with at least:

      start_station_id, end_station_id, started_at, ended_at

    Station ids stay strings so they match station short_name values.
    Timestamps are parsed once here; unparseable values become NaT.
    """
    try:
        df = pd.read_csv(
            source,
            usecols=lambda c: c.strip() in TRIP_COLUMNS,
            dtype={"start_station_id": str, "end_station_id": str},
        )
    except (
        OSError,
        urllib.error.URLError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
        UnicodeDecodeError,
    ) as e:
        raise DataLoadError(f"could not load trips from {source}: {e}") from e

    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(f"{source}: trips CSV missing columns {missing}")

    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"].str.strip()
    out["end_station_id"] = df["end_station_id"].str.strip()
    out["started_at"] = pd.to_datetime(df["started_at"], format="ISO8601", errors="coerce")
    out["ended_at"] = pd.to_datetime(df["ended_at"], format="ISO8601", errors="coerce")

    logger.info("Loaded %d trips from %s", len(out), source)
    return out
