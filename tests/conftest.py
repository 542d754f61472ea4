"""Shared test fixtures and sample backend responses."""

from __future__ import annotations

import copy

import pytest

BASE_URL = "http://localhost:8000"
GEOCODER_URL = "https://nominatim.openstreetmap.org"


def make_stop(
    stop_type: str,
    time: str,
    duration: float = 0.0,
    description: str = "",
    address: str = "Somewhere, US",
    coordinates: tuple[float, float] = (-87.6298, 41.8781),
) -> dict:
    return {
        "type": stop_type,
        "location": {"address": address, "coordinates": list(coordinates)},
        "time": time,
        "duration": duration,
        "description": description,
    }


def make_route_payload(
    duration: float = 8.0,
    distance: float = 450.0,
    stops: list[dict] | None = None,
    fuel_stops: list[dict] | None = None,
    coordinates: list[list[float]] | None = None,
) -> dict:
    return {
        "route": {
            "distance": distance,
            "duration": duration,
            "coordinates": coordinates if coordinates is not None else [
                [-87.6298, 41.8781],
                [-87.3464, 41.5934],
                [-86.1581, 39.7684],
            ],
        },
        "stops": stops or [],
        "fuel_stops": fuel_stops or [],
    }


SAMPLE_PICKUP = make_stop(
    "pickup", "2024-01-15T07:00:00Z", duration=1.0,
    description="Load freight", address="Gary, IN", coordinates=(-87.3464, 41.5934),
)
SAMPLE_REST = make_stop(
    "rest", "2024-01-15T18:00:00Z", duration=10.0,
    description="10-hour reset", address="Lafayette, IN", coordinates=(-86.8753, 40.4167),
)
SAMPLE_DROPOFF = make_stop(
    "dropoff", "2024-01-16T06:00:00Z", duration=1.0,
    description="Unload freight", address="Indianapolis, IN", coordinates=(-86.1581, 39.7684),
)
SAMPLE_FUEL = make_stop(
    "fuel", "2024-01-15T12:00:00Z", duration=0.5,
    description="Diesel", address="Merrillville, IN", coordinates=(-87.3328, 41.4828),
)

SAMPLE_ROUTE = make_route_payload(
    duration=8.0,
    stops=[SAMPLE_PICKUP, SAMPLE_REST, SAMPLE_DROPOFF],
    fuel_stops=[SAMPLE_FUEL],
)

SAMPLE_TRIP = {
    "current_location": "Chicago, IL",
    "pickup_location": "Gary, IN",
    "dropoff_location": "Indianapolis, IN",
    "cycle_used": 12.5,
}

SAMPLE_HEALTH = {"status": "ok", "timestamp": "2024-01-15T06:00:00Z"}

SAMPLE_REVERSE_US = {
    "display_name": "Chicago, Cook County, Illinois, United States",
    "address": {
        "city": "Chicago",
        "county": "Cook County",
        "state": "Illinois",
        "country": "United States",
    },
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def route_payload() -> dict:
    return copy.deepcopy(SAMPLE_ROUTE)
