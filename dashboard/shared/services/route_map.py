"""Route map and trip overview service."""

from __future__ import annotations

from dataclasses import dataclass

from eldplanner.models.route import RouteResult, Stop, StopType

from ..api_logging import log_service_call
from ..constants import DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM, MARKER_COLORS
from ..formatters import format_hours, format_miles, format_timestamp


@dataclass(frozen=True)
class StopMarker:
    latitude: float
    longitude: float
    kind: str
    title: str
    description: str
    color: str


@dataclass(frozen=True)
class RouteMapData:
    path_lats: list[float]
    path_lons: list[float]
    markers: list[StopMarker]
    center: tuple[float, float]
    zoom: int


@dataclass(frozen=True)
class TripOverview:
    distance: str
    duration: str
    stop_count: int
    fuel_stop_count: int
    rest_stop_count: int


def stop_marker(stop: Stop) -> StopMarker:
    kind = stop.stop_type.value if stop.stop_type else "unknown"
    return StopMarker(
        latitude=stop.location.latitude,
        longitude=stop.location.longitude,
        kind=kind,
        title=f"{kind.title()}: {stop.location.address}",
        description=stop.description,
        color=MARKER_COLORS.get(kind, MARKER_COLORS["unknown"]),
    )


def stop_row(stop: Stop) -> dict:
    return {
        "Type": stop.type.title(),
        "Location": stop.location.address,
        "Arrival": format_timestamp(stop.time),
        "Duration": format_hours(stop.duration),
        "Description": stop.description,
    }


def zoom_for_span(span_degrees: float) -> int:
    """Rough map zoom that fits a lat/lon span of the given size."""
    if span_degrees > 20:
        return 3
    if span_degrees > 8:
        return 4
    if span_degrees > 3:
        return 5
    if span_degrees > 1:
        return 7
    return 9


class RouteMapService:
    """Shapes a route result into map traces and overview metrics."""

    @log_service_call
    def prepare_map(self, result: RouteResult) -> RouteMapData:
        """Route line in (lat, lon) order plus one marker per stop and fuel stop."""
        path = result.route.latlon_path
        markers = [stop_marker(s) for s in [*result.stops, *result.fuel_stops]]

        points = path or [(m.latitude, m.longitude) for m in markers]
        if not points:
            return RouteMapData([], [], markers, DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM)

        lats = [p[0] for p in points]
        lons = [p[1] for p in points]
        center = ((min(lats) + max(lats)) / 2, (min(lons) + max(lons)) / 2)
        span = max(max(lats) - min(lats), max(lons) - min(lons))
        return RouteMapData(
            path_lats=[p[0] for p in path],
            path_lons=[p[1] for p in path],
            markers=markers,
            center=center,
            zoom=zoom_for_span(span),
        )

    @log_service_call
    def overview(self, result: RouteResult) -> TripOverview:
        return TripOverview(
            distance=format_miles(result.route.distance),
            duration=format_hours(result.route.duration),
            stop_count=len(result.stops),
            fuel_stop_count=len(result.fuel_stops),
            rest_stop_count=sum(1 for s in result.stops if s.stop_type == StopType.REST),
        )

    def stop_rows(self, stops: list[Stop]) -> list[dict]:
        return [stop_row(s) for s in stops]
