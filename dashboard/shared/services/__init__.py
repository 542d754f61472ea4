"""Service layer — display shaping for the trip planner dashboard."""

from .eld_log import ComplianceBadge, EldLogService, EldLogView, compliance_badges, event_row
from .route_map import (
    RouteMapData,
    RouteMapService,
    StopMarker,
    TripOverview,
    stop_marker,
    stop_row,
    zoom_for_span,
)

__all__ = [
    "ComplianceBadge",
    "EldLogService",
    "EldLogView",
    "RouteMapData",
    "RouteMapService",
    "StopMarker",
    "TripOverview",
    "compliance_badges",
    "event_row",
    "stop_marker",
    "stop_row",
    "zoom_for_span",
]
