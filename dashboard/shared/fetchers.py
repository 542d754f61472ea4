"""Cached backend fetchers for the trip planner dashboard."""

from __future__ import annotations

from typing import Any

import streamlit as st

from eldplanner import ReverseGeocoder, RouteServiceClient
from eldplanner.config import get_settings
from eldplanner.exceptions import EldPlannerError

from .api_logging import log_api_call
from .errors import TripPlannerError, user_message_for


@st.cache_data(ttl=600, show_spinner=False)
@log_api_call
def fetch_route(trip: dict[str, Any]) -> dict[str, Any]:
    """Calculate a route for a validated trip payload, as JSON-ready dict."""
    settings = get_settings()
    try:
        with RouteServiceClient(settings.backend_url, settings.timeout) as backend:
            result = backend.calculate_route(trip)
    except EldPlannerError as exc:
        raise TripPlannerError(user_message_for(exc)) from exc
    return result.model_dump(mode="json")


@st.cache_data(ttl=3600, show_spinner=False)
@log_api_call
def fetch_place_label(latitude: float, longitude: float) -> str:
    """Short "City, ST" label for coordinates; falls back to the coordinates."""
    settings = get_settings()
    with ReverseGeocoder(
        settings.geocoder_url,
        timeout=settings.timeout,
        user_agent=settings.geocoder_user_agent,
        zoom=settings.geocoder_zoom,
    ) as geocoder:
        return geocoder.resolve_label(latitude, longitude)


@log_api_call
def check_backend() -> bool:
    """Return True when the backend health check succeeds (never cached)."""
    settings = get_settings()
    with RouteServiceClient(settings.backend_url, settings.timeout) as backend:
        return backend.test_connection()
