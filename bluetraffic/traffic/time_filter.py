# bluetraffic/traffic/time_filter.py
from __future__ import annotations

from datetime import datetime

import pandas as pd

NO_FILTER = -1
DEFAULT_TOLERANCE_MINUTES = 60
MINUTES_PER_DAY = 1440


def minutes_since_midnight(ts):
    """
    Minute-of-day (hour * 60 + minute) of a timestamp, ignoring date and seconds.

    Accepts a single datetime/Timestamp or a datetime Series.
    """
    if isinstance(ts, pd.Series):
        return ts.dt.hour * 60 + ts.dt.minute
    return ts.hour * 60 + ts.minute


def filter_trips_by_time(
    trips: pd.DataFrame,
    time_filter: int,
    tolerance: int = DEFAULT_TOLERANCE_MINUTES,
) -> pd.DataFrame:
    """
    Keep trips that started OR ended within `tolerance` minutes of `time_filter`.

    time_filter == -1 means "any time": the input frame is returned as-is.

    Differences are plain integers, so a target of 23:50 and a trip at 00:05
    are 1425 minutes apart, not 15.
    """
    if time_filter == NO_FILTER or trips.empty:
        return trips

    started = minutes_since_midnight(trips["started_at"])
    ended = minutes_since_midnight(trips["ended_at"])

    keep = ((started - time_filter).abs() <= tolerance) | (
        (ended - time_filter).abs() <= tolerance
    )
    return trips[keep]


def format_time(minutes: int) -> str:
    """480 -> '8:00 AM'"""
    hour, minute = divmod(int(minutes) % MINUTES_PER_DAY, 60)
    label = datetime(2000, 1, 1, hour, minute).strftime("%I:%M %p")
    return label.lstrip("0")
