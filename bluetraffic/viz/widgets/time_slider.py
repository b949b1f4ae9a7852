# bluetraffic/viz/widgets/time_slider.py
import folium

from bluetraffic.traffic.time_filter import NO_FILTER, format_time

BAR_MAX_PX = 60


def build_time_slider(time_filter, hourly_counts=None):
    """
    Time-of-day filter:
      - range input from -1 ("any time") to 1439 (minute of day)
      - label shows the selected time or "(any time)"
      - bars = trips started per hour; clicking a bar jumps to that hour

    Changing the value reloads the page with ?time=<minutes>.
    """
    hourly_counts = list(hourly_counts or [])
    max_count = max(hourly_counts, default=0)

    if time_filter == NO_FILTER:
        selected_label = ""
        any_display, selected_display = "block", "none"
    else:
        selected_label = format_time(time_filter)
        any_display, selected_display = "none", "block"

    bars = []
    for hour, count in enumerate(hourly_counts):
        height = int((count / max_count) * BAR_MAX_PX) if max_count > 0 else 0
        active = time_filter != NO_FILTER and time_filter // 60 == hour
        bars.append(
            f"""
            <div class="timebar-item"
                 onclick="setTime({hour * 60})"
                 title="{format_time(hour * 60)}: {count} trips">
              <div class="timebar-bar"
                   style="height:{height}px; opacity:{'1.0' if active else '0.55'};">
              </div>
            </div>
            """
        )

    return folium.Element(
        f"""
<style>
#timebar {{
  position: absolute;
  left: 0;
  right: 0;
  bottom: 14px;
  height: 120px;
  z-index: 1200;
  pointer-events: auto;
  padding: 0 16px;
  background: linear-gradient(
    to top,
    rgba(255,255,255,0.92),
    rgba(255,255,255,0.55),
    rgba(255,255,255,0)
  );
}}

#timebar-header {{
  display: flex;
  align-items: baseline;
  gap: 12px;
  font-size: 13px;
}}

#time-slider {{
  flex: 1;
}}

#selected-time, #any-time {{
  min-width: 80px;
  font-weight: 600;
}}

#any-time {{
  color: #666;
  font-style: italic;
}}

#timebar-bars {{
  display: flex;
  align-items: flex-end;
  height: {BAR_MAX_PX + 4}px;
  gap: 4px;
}}

.timebar-item {{
  flex: 1;
  display: flex;
  align-items: flex-end;
  height: 100%;
  cursor: pointer;
}}

.timebar-bar {{
  width: 100%;
  background: #4682b4;
  border-radius: 2px;
}}
</style>

<div id="timebar">
  <div id="timebar-bars">
    {''.join(bars)}
  </div>
  <label id="timebar-header">
    Filter by time:
    <input id="time-slider" type="range" min="-1" max="1439" value="{time_filter}"
           oninput="previewTime(this.value)" onchange="setTime(this.value)">
    <time id="selected-time" style="display:{selected_display}">{selected_label}</time>
    <em id="any-time" style="display:{any_display}">(any time)</em>
  </label>
</div>

<script>
function formatMinutes(minutes) {{
  const d = new Date(0, 0, 0, 0, minutes);
  return d.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

function previewTime(value) {{
  const t = Number(value);
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (t === -1) {{
    selected.style.display = "none";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatMinutes(t);
    selected.style.display = "block";
    anyTime.style.display = "none";
  }}
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("time", String(t));
  window.location.href = url.toString();
}}
</script>
"""
    )
