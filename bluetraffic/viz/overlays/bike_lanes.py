# bluetraffic/viz/overlays/bike_lanes.py
import folium

BOSTON_LANES_URL = (
    "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
    "boston::existing-bike-network-2022.geojson"
)
CAMBRIDGE_LANES_URL = (
    "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/"
    "Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson"
)

BIKE_LANE_LAYERS = [
    ("Boston bike lanes", BOSTON_LANES_URL, "#1E7D30"),
    ("Cambridge bike lanes", CAMBRIDGE_LANES_URL, "#0C61B0"),
]


def _line_style(color):
    return lambda _feature: {"color": color, "weight": 3, "opacity": 0.4}


def add_bike_lanes(m, layers=BIKE_LANE_LAYERS):
    """
    Bike network overlays. `layers` is a list of (name, geojson, color) where
    geojson is a URL or an already-loaded dict.
    """
    for name, data, color in layers:
        folium.GeoJson(
            data,
            name=name,
            style_function=_line_style(color),
        ).add_to(m)
