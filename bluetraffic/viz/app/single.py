# bluetraffic/viz/app/single.py
from __future__ import annotations

import logging
import math

from flask import Flask, jsonify, request

from bluetraffic.config import Settings
from bluetraffic.traffic.aggregate import hourly_trip_counts
from bluetraffic.traffic.time_filter import MINUTES_PER_DAY, NO_FILTER, format_time
from bluetraffic.util.session import load_session_data
from bluetraffic.viz.maps.render import render_map_document
from bluetraffic.viz.overlays.bike_lanes import BIKE_LANE_LAYERS
from bluetraffic.viz.view_state import StationViewState

logger = logging.getLogger(__name__)


def clamp_time_filter(t: int) -> int:
    return max(NO_FILTER, min(int(t), MINUTES_PER_DAY - 1))


def _coord(value: float) -> float | None:
    # NaN is not valid JSON
    return None if math.isnan(value) else value


def snapshot_to_dict(snapshot) -> dict:
    return {
        "time_filter": snapshot.time_filter,
        "time_label": (
            format_time(snapshot.time_filter) if snapshot.is_filtered else "any time"
        ),
        "trip_count": snapshot.trip_count,
        "radius_range": list(snapshot.scale.range_),
        "stations": [
            {
                "short_name": c.station.short_name,
                "name": c.station.name,
                "lat": _coord(c.station.lat),
                "lon": _coord(c.station.lon),
                "arrivals": c.traffic.arrivals,
                "departures": c.traffic.departures,
                "total_traffic": c.traffic.total_traffic,
                "radius": c.radius,
                "departure_ratio": c.departure_ratio,
            }
            for c in snapshot.circles
        ],
    }


def create_app(
    view: StationViewState,
    *,
    title: str | None = None,
    bike_lanes=None,
) -> Flask:
    """
    Page server for one session.

      /              map for ?time=<minute of day>, -1 or missing = any time
      /traffic.json  the same per-station numbers as JSON
    """
    hourly_counts = hourly_trip_counts(view.trips)

    app = Flask(__name__)

    def _resolve_time() -> int:
        return clamp_time_filter(request.args.get("time", NO_FILTER, type=int))

    @app.route("/")
    def _index():
        snapshot = view.update(_resolve_time())
        return render_map_document(
            snapshot,
            title=title,
            bike_lanes=bike_lanes,
            hourly_counts=hourly_counts,
        )

    @app.route("/traffic.json")
    def _traffic():
        return jsonify(snapshot_to_dict(view.snapshot(_resolve_time())))

    return app


def serve_traffic_map(settings: Settings | None = None, *, debug: bool = False):
    """
    Load the session data, then serve the map until interrupted.

    Requests are handled on a single thread; each one recomputes the view
    synchronously.
    """
    settings = settings or Settings.from_env()

    data = load_session_data(settings.stations_json, settings.trips_csv)
    view = StationViewState(
        data.stations,
        data.trips,
        tolerance=settings.time_tolerance_minutes,
    )

    app = create_app(
        view,
        title=settings.title,
        bike_lanes=BIKE_LANE_LAYERS if settings.bike_lanes else None,
    )

    logger.info("Serving on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=int(settings.port), debug=debug, threaded=False)
