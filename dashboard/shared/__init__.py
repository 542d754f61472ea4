"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    DEFAULT_MAP_HEIGHT,
    ERROR_MESSAGES,
    MARKER_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    PRIMARY_BLUE,
    STATUS_COLORS,
    STATUS_LABELS,
    SUCCESS_MESSAGES,
)
from .formatters import format_hours, format_limit, format_miles, format_timestamp

# --- Errors & data access ---
from .errors import TripPlannerError, user_message_for
from .fetchers import check_backend, fetch_place_label, fetch_route

# --- Service layer ---
from .services import EldLogService, EldLogView, RouteMapData, RouteMapService, TripOverview

# --- UI components ---
from .trip_form import render_trip_form

__all__ = [
    "DEFAULT_MAP_HEIGHT",
    "ERROR_MESSAGES",
    "EldLogService",
    "EldLogView",
    "MARKER_COLORS",
    "PLOTLY_LAYOUT_DEFAULTS",
    "PRIMARY_BLUE",
    "RouteMapData",
    "RouteMapService",
    "STATUS_COLORS",
    "STATUS_LABELS",
    "SUCCESS_MESSAGES",
    "TripOverview",
    "TripPlannerError",
    "check_backend",
    "fetch_place_label",
    "fetch_route",
    "format_hours",
    "format_limit",
    "format_miles",
    "format_timestamp",
    "render_trip_form",
    "user_message_for",
]
