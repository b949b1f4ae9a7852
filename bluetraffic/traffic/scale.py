# bluetraffic/traffic/scale.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

UNFILTERED_RANGE: Tuple[float, float] = (0.0, 25.0)
FILTERED_RANGE: Tuple[float, float] = (3.0, 50.0)

FLOW_BUCKETS = (0.0, 0.5, 1.0)
ZERO_TRAFFIC_FLOW = 0.5


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale: traffic in [0, domain_max] -> radius in range_.

    Circle area, not radius, grows linearly with traffic. The domain is fixed
    once from the unfiltered data; filters only swap the range.
    """
    domain_max: float
    range_: Tuple[float, float] = UNFILTERED_RANGE

    def __call__(self, total_traffic: float) -> float:
        r0, r1 = self.range_
        if self.domain_max <= 0:
            return float(r0)

        v = min(max(float(total_traffic), 0.0), float(self.domain_max))
        t = math.sqrt(v) / math.sqrt(self.domain_max)
        return r0 + t * (r1 - r0)

    def radii(self, totals) -> np.ndarray:
        r0, r1 = self.range_
        values = np.asarray(totals, dtype=float)
        if self.domain_max <= 0:
            return np.full(values.shape, float(r0))

        t = np.sqrt(np.clip(values, 0.0, self.domain_max)) / np.sqrt(self.domain_max)
        return r0 + t * (r1 - r0)

    def with_range(self, range_: Tuple[float, float]) -> "RadiusScale":
        return RadiusScale(domain_max=self.domain_max, range_=tuple(range_))


def range_for(time_filter: int) -> Tuple[float, float]:
    return UNFILTERED_RANGE if time_filter == -1 else FILTERED_RANGE


def station_flow(departures: int, total_traffic: int) -> float:
    """
    Quantize departures / total into {0, 0.5, 1} (equal thirds of [0, 1]).

    1 = mostly departures, 0 = mostly arrivals. A station with no traffic is
    reported as balanced.
    """
    if total_traffic <= 0:
        return ZERO_TRAFFIC_FLOW

    ratio = min(max(departures / total_traffic, 0.0), 1.0)
    n = len(FLOW_BUCKETS)
    idx = min(int(ratio * n), n - 1)
    return FLOW_BUCKETS[idx]
