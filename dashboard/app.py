"""ELD Trip Planner Dashboard — Streamlit + Plotly + route backend."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from eldplanner.models.route import RouteResult

from shared import (
    DEFAULT_MAP_HEIGHT,
    ERROR_MESSAGES,
    PLOTLY_LAYOUT_DEFAULTS,
    PRIMARY_BLUE,
    SUCCESS_MESSAGES,
    EldLogService,
    RouteMapService,
    TripPlannerError,
    check_backend,
    fetch_route,
    render_trip_form,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="ELD Trip Planner",
    page_icon="\U0001f69b",
    layout="wide",
)

st.title("ELD Trip Planner")
st.caption("Plan a trip and check it against Hours-of-Service limits")


# ── Sidebar — trip form ──────────────────────────────────────────────────────

if check_backend():
    st.sidebar.caption(SUCCESS_MESSAGES["BACKEND_CONNECTED"])
else:
    st.sidebar.warning(ERROR_MESSAGES["BACKEND_ERROR"])

trip = render_trip_form()
if trip is not None:
    try:
        st.session_state["route"] = fetch_route(trip.model_dump())
    except TripPlannerError as exc:
        st.session_state.pop("route", None)
        st.error(str(exc))
        st.stop()
    st.toast(SUCCESS_MESSAGES["ROUTE_CALCULATED"])

route_payload = st.session_state.get("route")
if route_payload is None:
    st.info("Enter your trip details in the sidebar to calculate a route.")
    st.stop()

result = RouteResult.model_validate(route_payload)
map_service = RouteMapService()
eld_service = EldLogService()


# ── Trip overview ────────────────────────────────────────────────────────────

overview = map_service.overview(result)
kpi1, kpi2, kpi3, kpi4, kpi5 = st.columns(5)
kpi1.metric("Distance", overview.distance)
kpi2.metric("Driving Time", overview.duration)
kpi3.metric("Stops", overview.stop_count)
kpi4.metric("Rest Stops", overview.rest_stop_count)
kpi5.metric("Fuel Stops", overview.fuel_stop_count)


# ── Route map ────────────────────────────────────────────────────────────────

st.subheader("Route")

map_data = map_service.prepare_map(result)
fig_map = go.Figure()

if map_data.path_lats:
    fig_map.add_trace(go.Scattermap(
        lat=map_data.path_lats,
        lon=map_data.path_lons,
        mode="lines",
        name="Route",
        line=dict(color=PRIMARY_BLUE, width=4),
        hoverinfo="skip",
    ))
else:
    st.warning("No route geometry returned; showing stops only.")

kinds: dict[str, list] = {}
for marker in map_data.markers:
    kinds.setdefault(marker.kind, []).append(marker)

for kind, markers in kinds.items():
    fig_map.add_trace(go.Scattermap(
        lat=[m.latitude for m in markers],
        lon=[m.longitude for m in markers],
        mode="markers",
        name=kind.title(),
        marker=dict(size=12, color=markers[0].color),
        text=[f"{m.title}<br>{m.description}" for m in markers],
        hovertemplate="%{text}<extra></extra>",
    ))

fig_map.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    height=DEFAULT_MAP_HEIGHT,
    map=dict(
        style="open-street-map",
        center=dict(lat=map_data.center[0], lon=map_data.center[1]),
        zoom=map_data.zoom,
    ),
    legend=dict(orientation="h", yanchor="bottom", y=0.01, xanchor="left", x=0.01),
)
st.plotly_chart(fig_map, use_container_width=True)


# ── Stops ────────────────────────────────────────────────────────────────────

stops_tab, fuel_tab = st.tabs(["Stops", "Fuel Stops"])
with stops_tab:
    if result.stops:
        st.dataframe(map_service.stop_rows(result.stops), use_container_width=True, hide_index=True)
    else:
        st.info("No stops scheduled.")
with fuel_tab:
    if result.fuel_stops:
        st.dataframe(map_service.stop_rows(result.fuel_stops), use_container_width=True, hide_index=True)
    else:
        st.info("No fuel stops needed.")


# ── ELD compliance log ───────────────────────────────────────────────────────

st.subheader("ELD Compliance Log")
st.caption("Electronic Logging Device compliant duty status record")

view = eld_service.build_view(result)

badge_cols = st.columns(len(view.badges))
for col, badge in zip(badge_cols, view.badges):
    icon = "✅" if badge.passed else "⚠️"
    col.markdown(f"{icon} **{badge.label}**")

for badge in view.badges:
    if badge.passed:
        continue
    if badge.severity == "warning":
        st.warning(badge.message)
    else:
        st.error(badge.message)

if view.events:
    st.dataframe(
        [{k: v for k, v in row.items() if k != "color"} for row in view.events],
        use_container_width=True,
        hide_index=True,
    )
else:
    st.info("No duty events to log for this route.")

if view.fuel_events:
    with st.expander("Fuel stop duty events"):
        st.dataframe(
            [{k: v for k, v in row.items() if k != "color"} for row in view.fuel_events],
            use_container_width=True,
            hide_index=True,
        )

if result.hos_status and result.hos_status.violations:
    with st.expander("Backend HOS violations"):
        for violation in result.hos_status.violations:
            st.write(f"- {violation}")
