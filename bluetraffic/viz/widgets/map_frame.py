# bluetraffic/viz/widgets/map_frame.py
import html
import json

import folium

# floating widgets that get moved on top of the map, bottom to top
FLOATING_IDS = ("timebar", "map-legend", "map-title")


def build_map_frame(title: str | None = None, *, height: str = "85vh"):
    """
    Puts the Leaflet container in a relative #map-wrap and moves the floating
    widgets (time slider, legend, title) inside it so they sit on the map.
    """
    title_html = ""
    if title:
        title_html = f'<div id="map-title">{html.escape(title)}</div>'

    return folium.Element(
        f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: {height} !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

{title_html}

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const leaflet = document.querySelector(".leaflet-container");
  if (!leaflet || document.getElementById("map-wrap")) return;

  const frame = document.createElement("div");
  frame.id = "map-wrap";
  leaflet.before(frame);
  frame.append(leaflet);

  for (const id of {json.dumps(list(FLOATING_IDS))}) {{
    const widget = document.getElementById(id);
    if (widget) frame.append(widget);
  }}
}});
</script>
"""
    )
