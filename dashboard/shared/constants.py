"""Shared constants for the trip planner dashboard."""

from __future__ import annotations

PRIMARY_BLUE = "#1976D2"

# Marker colors per stop kind
MARKER_COLORS: dict[str, str] = {
    "pickup": "#4CAF50",  # green
    "dropoff": "#F44336",  # red
    "rest": "#FF9800",  # orange
    "fuel": "#9C27B0",  # purple
    "unknown": "#888888",
}

STATUS_COLORS: dict[str, str] = {
    "ON_DUTY": "#2E7D32",
    "OFF_DUTY": "#D32F2F",
    "ON_DUTY_NOT_DRIVING": "#ED6C02",
}

STATUS_LABELS: dict[str, str] = {
    "ON_DUTY": "On Duty",
    "OFF_DUTY": "Off Duty",
    "ON_DUTY_NOT_DRIVING": "On Duty (Not Driving)",
}

# Geographic center of the contiguous US
DEFAULT_MAP_CENTER: tuple[float, float] = (39.8283, -98.5795)
DEFAULT_MAP_ZOOM = 3
DEFAULT_MAP_HEIGHT = 450

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=0, r=0, t=0, b=0),
)

ERROR_MESSAGES: dict[str, str] = {
    "NETWORK_ERROR": "Network connection failed. Please check your internet connection.",
    "BACKEND_ERROR": "Backend service unavailable. Please try again later.",
    "VALIDATION_ERROR": "Please check your input and try again.",
    "ROUTE_CALCULATION_FAILED": "Route calculation failed. Please try again.",
    "GENERIC_ERROR": "An unexpected error occurred. Please try again.",
}

SUCCESS_MESSAGES: dict[str, str] = {
    "ROUTE_CALCULATED": "Route calculated successfully!",
    "BACKEND_CONNECTED": "Connected to backend service.",
}
