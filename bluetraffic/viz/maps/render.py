# bluetraffic/viz/maps/render.py
import folium

from bluetraffic.viz.overlays.bike_lanes import add_bike_lanes
from bluetraffic.viz.overlays.hover import build_hover_script
from bluetraffic.viz.overlays.stations import add_station_circles
from bluetraffic.viz.widgets.legend import build_legend_widget
from bluetraffic.viz.widgets.map_frame import build_map_frame
from bluetraffic.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 42.36027
CENTER_LON = -71.09415


def build_map(snapshot, *, bike_lanes=None, hourly_counts=None):
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
    )

    # bike network (optional, fetched from the overlay URLs)
    if bike_lanes:
        add_bike_lanes(m, bike_lanes)

    # stations + hover growth
    add_station_circles(m, snapshot)
    m.get_root().html.add_child(build_hover_script(m.get_name()))

    # time slider + legend
    m.get_root().html.add_child(build_time_slider(snapshot.time_filter, hourly_counts))
    m.get_root().html.add_child(build_legend_widget())

    return m


def render_map_document(
    snapshot,
    *,
    title: str | None = None,
    bike_lanes=None,
    hourly_counts=None,
):
    """
    Single place that assembles the full Folium map HTML document.
    """
    m = build_map(snapshot, bike_lanes=bike_lanes, hourly_counts=hourly_counts)
    m.get_root().html.add_child(build_map_frame(title))
    return m.get_root().render()
