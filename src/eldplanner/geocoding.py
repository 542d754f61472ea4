"""Reverse geocoding of coordinates into short "City, ST" place labels.

Labels come from a fixed chain of strategies, each of which either returns a
label or ``None``. The chain always ends with the raw coordinates, so label
resolution never fails even when the provider is down or answers with
something unexpected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from eldplanner._http import AsyncTransport, SyncTransport
from eldplanner.config import DEFAULT_GEOCODER_URL
from eldplanner.exceptions import EldPlannerError

REVERSE_ENDPOINT = "/reverse"
DEFAULT_ZOOM = 16
DEFAULT_USER_AGENT = "eld-trip-planner/0.1"

logger = logging.getLogger(__name__)

US_STATE_ABBREVIATIONS: dict[str, str] = {
    "Alabama": "AL",
    "Alaska": "AK",
    "Arizona": "AZ",
    "Arkansas": "AR",
    "California": "CA",
    "Colorado": "CO",
    "Connecticut": "CT",
    "Delaware": "DE",
    "Florida": "FL",
    "Georgia": "GA",
    "Hawaii": "HI",
    "Idaho": "ID",
    "Illinois": "IL",
    "Indiana": "IN",
    "Iowa": "IA",
    "Kansas": "KS",
    "Kentucky": "KY",
    "Louisiana": "LA",
    "Maine": "ME",
    "Maryland": "MD",
    "Massachusetts": "MA",
    "Michigan": "MI",
    "Minnesota": "MN",
    "Mississippi": "MS",
    "Missouri": "MO",
    "Montana": "MT",
    "Nebraska": "NE",
    "Nevada": "NV",
    "New Hampshire": "NH",
    "New Jersey": "NJ",
    "New Mexico": "NM",
    "New York": "NY",
    "North Carolina": "NC",
    "North Dakota": "ND",
    "Ohio": "OH",
    "Oklahoma": "OK",
    "Oregon": "OR",
    "Pennsylvania": "PA",
    "Rhode Island": "RI",
    "South Carolina": "SC",
    "South Dakota": "SD",
    "Tennessee": "TN",
    "Texas": "TX",
    "Utah": "UT",
    "Vermont": "VT",
    "Virginia": "VA",
    "Washington": "WA",
    "West Virginia": "WV",
    "Wisconsin": "WI",
    "Wyoming": "WY",
    "District of Columbia": "DC",
}

_CITY_KEYS = ("city", "town", "village", "municipality")


def state_abbreviation(state_name: str) -> str | None:
    """Postal abbreviation for a US state name, or None if unknown."""
    return US_STATE_ABBREVIATIONS.get(state_name)


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.6f}, {longitude:.6f}"


def _address(payload: Any) -> dict[str, Any]:
    if isinstance(payload, dict) and isinstance(payload.get("address"), dict):
        return payload["address"]
    return {}


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _city(address: dict[str, Any]) -> str | None:
    for key in _CITY_KEYS:
        city = _text(address.get(key))
        if city:
            return city
    return None


# ── Label strategies ─────────────────────────────────────────────────────────


def us_city_state_label(payload: Any) -> str | None:
    """Return "City, ST" for United States results with a city and a state."""
    address = _address(payload)
    city, state = _city(address), _text(address.get("state"))
    if address.get("country") != "United States" or not city or not state:
        return None
    return f"{city}, {state_abbreviation(state) or state}"


def city_state_label(payload: Any) -> str | None:
    """Return "City, State" with the full state name."""
    address = _address(payload)
    city, state = _city(address), _text(address.get("state"))
    if not city or not state:
        return None
    return f"{city}, {state}"


def display_name_label(payload: Any) -> str | None:
    """First two comma-separated segments of the provider's display name."""
    if not isinstance(payload, dict):
        return None
    display_name = _text(payload.get("display_name"))
    if not display_name:
        return None
    parts = [part.strip() for part in display_name.split(",")]
    if len(parts) < 2:
        return None
    return f"{parts[0]}, {parts[1]}"


LABEL_STRATEGIES: tuple[Callable[[Any], str | None], ...] = (
    us_city_state_label,
    city_state_label,
    display_name_label,
)


def format_place_label(payload: Any, latitude: float, longitude: float) -> str:
    """Build a place label from a reverse-geocoding payload.

    Tries each strategy in LABEL_STRATEGIES and falls back to the coordinates
    formatted to six decimals.
    """
    for strategy in LABEL_STRATEGIES:
        label = strategy(payload)
        if label:
            return label
    return format_coordinates(latitude, longitude)


def _reverse_params(latitude: float, longitude: float, zoom: int) -> dict[str, Any]:
    return {
        "format": "json",
        "lat": latitude,
        "lon": longitude,
        "zoom": zoom,
        "addressdetails": 1,
    }


class ReverseGeocoder:
    """Synchronous reverse-geocoding client for a Nominatim-compatible service.

    Usage:
        with ReverseGeocoder() as geocoder:
            label = geocoder.resolve_label(41.8781, -87.6298)  # "Chicago, IL"
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GEOCODER_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        zoom: int = DEFAULT_ZOOM,
    ) -> None:
        self.zoom = zoom
        self._transport = SyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    def __enter__(self) -> ReverseGeocoder:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def reverse(self, latitude: float, longitude: float) -> Any:
        """Raw reverse-geocoding payload for a coordinate pair."""
        return self._transport.get(
            REVERSE_ENDPOINT, _reverse_params(latitude, longitude, self.zoom),
        )

    def resolve_label(self, latitude: float, longitude: float) -> str:
        """Short place label for a coordinate pair; never raises."""
        try:
            payload = self.reverse(latitude, longitude)
        except EldPlannerError as exc:
            logger.warning("Reverse geocoding failed for %s: %s",
                           format_coordinates(latitude, longitude), exc)
            payload = None
        return format_place_label(payload, latitude, longitude)


class AsyncReverseGeocoder:
    """Asynchronous reverse-geocoding client.

    Usage:
        async with AsyncReverseGeocoder() as geocoder:
            label = await geocoder.resolve_label(41.8781, -87.6298)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GEOCODER_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        zoom: int = DEFAULT_ZOOM,
    ) -> None:
        self.zoom = zoom
        self._transport = AsyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    async def __aenter__(self) -> AsyncReverseGeocoder:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    async def reverse(self, latitude: float, longitude: float) -> Any:
        """Raw reverse-geocoding payload for a coordinate pair."""
        return await self._transport.get(
            REVERSE_ENDPOINT, _reverse_params(latitude, longitude, self.zoom),
        )

    async def resolve_label(self, latitude: float, longitude: float) -> str:
        """Short place label for a coordinate pair; never raises."""
        try:
            payload = await self.reverse(latitude, longitude)
        except EldPlannerError as exc:
            logger.warning("Reverse geocoding failed for %s: %s",
                           format_coordinates(latitude, longitude), exc)
            payload = None
        return format_place_label(payload, latitude, longitude)
