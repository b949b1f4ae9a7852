# bluetraffic/viz/widgets/legend.py
import folium

from bluetraffic.viz.overlays.stations import (
    ARRIVALS_COLOR,
    BALANCED_COLOR,
    DEPARTURES_COLOR,
)

LEGEND_ITEMS = [
    (DEPARTURES_COLOR, "more departures"),
    (BALANCED_COLOR, "balanced"),
    (ARRIVALS_COLOR, "more arrivals"),
]


def build_legend_widget():
    """
    Legend for the departure-ratio colors. map_frame moves it onto the map.
    """
    rows = "".join(
        f'<div><span class="legend-dot" style="background:{color}"></span> {label}</div>'
        for color, label in LEGEND_ITEMS
    )

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 140px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
.legend-dot {{
  width: 10px;
  height: 10px;
  border-radius: 50%;
  display: inline-block;
  margin-right: 6px;
}}
</style>

<div id="map-legend">
  <div><strong>Legend</strong></div>
  {rows}
</div>
"""
    )
