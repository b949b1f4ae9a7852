# bluetraffic/viz/overlays/hover.py
import folium

HOVER_SCALE = 1.3
HOVER_FILL = "#d63e3e"


def build_hover_script(map_name: str):
    """
    Grow a station circle by HOVER_SCALE and recolor it while the pointer is
    over it; restore radius and fill on mouseout.
    """
    return folium.Element(
        f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const map = window["{map_name}"];
  if (!map) return;

  map.eachLayer((layer) => {{
    if (!(layer instanceof L.CircleMarker)) return;

    const radius = layer.getRadius();
    const fill = layer.options.fillColor;

    layer.on("mouseover", () => {{
      layer.setRadius(radius * {HOVER_SCALE});
      layer.setStyle({{ fillColor: "{HOVER_FILL}" }});
    }});
    layer.on("mouseout", () => {{
      layer.setRadius(radius);
      layer.setStyle({{ fillColor: fill }});
    }});
  }});
}});
</script>
"""
    )
