# bluetraffic/viz/overlays/stations.py
import math

import folium

from bluetraffic.traffic.time_filter import format_time

DEPARTURES_COLOR = "#4682b4"  # steelblue
ARRIVALS_COLOR = "#ff8c00"  # darkorange
BALANCED_COLOR = "#a98776"

FLOW_COLORS = {
    1.0: DEPARTURES_COLOR,
    0.5: BALANCED_COLOR,
    0.0: ARRIVALS_COLOR,
}


def flow_color(departure_ratio: float) -> str:
    return FLOW_COLORS.get(departure_ratio, BALANCED_COLOR)


def station_tooltip(circle, time_filter: int) -> str:
    t = circle.traffic
    lines = [
        f"<strong>{circle.station.name}</strong>",
        f"{t.total_traffic} total trips:",
        f"🚲 {t.departures} departures",
        f"🏁 {t.arrivals} arrivals",
    ]
    if time_filter != -1:
        lines.insert(1, f"around {format_time(time_filter)}")
    return "<br>".join(lines)


def add_station_circles(m, snapshot):
    """
    One circle per station.
      radius = sqrt-scaled total traffic
      fill   = departure ratio bucket (departures / balanced / arrivals)
    """
    for c in snapshot.circles:
        s = c.station
        if math.isnan(s.lat) or math.isnan(s.lon):
            continue

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=c.radius,
            color="white",
            weight=1,
            fill=True,
            fill_color=flow_color(c.departure_ratio),
            fill_opacity=0.8,
            opacity=0.8,
            tooltip=station_tooltip(c, snapshot.time_filter),
        ).add_to(m)
