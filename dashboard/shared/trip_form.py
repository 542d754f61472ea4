"""Sidebar trip form rendering and validation."""

from __future__ import annotations

import streamlit as st

from eldplanner.exceptions import TripRequestError
from eldplanner.models.trip import MAX_CYCLE_USED, MIN_CYCLE_USED, TripRequest

from .fetchers import fetch_place_label

_CURRENT_KEY = "current_location"


def _fill_current_location() -> None:
    """Render the coordinate lookup that pre-fills the current location."""
    with st.sidebar.expander("Use coordinates for current location"):
        lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=41.8781, format="%.6f")
        lon = st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=-87.6298, format="%.6f")
        if st.button("Look up place"):
            st.session_state[_CURRENT_KEY] = fetch_place_label(lat, lon)


def render_trip_form() -> TripRequest | None:
    """Render the trip details form in the sidebar.

    Returns a validated TripRequest once submitted, or None while the form is
    untouched or invalid (field errors are shown next to the form).
    """
    st.sidebar.header("Trip Details")
    _fill_current_location()

    with st.sidebar.form("trip_form"):
        current = st.text_input("Current location", key=_CURRENT_KEY, placeholder="Chicago, IL")
        pickup = st.text_input("Pickup location", placeholder="Gary, IN")
        dropoff = st.text_input("Dropoff location", placeholder="Indianapolis, IN")
        cycle_used = st.number_input(
            "Current cycle used (hours)",
            min_value=MIN_CYCLE_USED,
            max_value=MAX_CYCLE_USED,
            value=0.0,
            step=0.5,
        )
        submitted = st.form_submit_button("Calculate Route")

    if not submitted:
        return None

    try:
        return TripRequest.from_form({
            "current_location": current,
            "pickup_location": pickup,
            "dropoff_location": dropoff,
            "cycle_used": cycle_used,
        })
    except TripRequestError as exc:
        for field, message in exc.field_errors.items():
            st.sidebar.error(f"{field.replace('_', ' ').capitalize()}: {message}")
        return None
