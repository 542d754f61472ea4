"""eldplanner — Typed client and HOS/ELD log derivation for the trip planner backend."""

from eldplanner.client import AsyncRouteServiceClient, RouteServiceClient
from eldplanner.eld import build_duty_log, build_fuel_log, stop_to_event
from eldplanner.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    BackendTimeoutError,
    EldPlannerError,
    RouteValidationError,
    TripRequestError,
)
from eldplanner.geocoding import AsyncReverseGeocoder, ReverseGeocoder, format_place_label
from eldplanner.hos import DEFAULT_LIMITS, HOSLimits, evaluate_compliance

__all__ = [
    "AsyncReverseGeocoder",
    "AsyncRouteServiceClient",
    "BackendAPIError",
    "BackendConnectionError",
    "BackendTimeoutError",
    "DEFAULT_LIMITS",
    "EldPlannerError",
    "HOSLimits",
    "ReverseGeocoder",
    "RouteServiceClient",
    "RouteValidationError",
    "TripRequestError",
    "build_duty_log",
    "build_fuel_log",
    "evaluate_compliance",
    "format_place_label",
    "stop_to_event",
]

__version__ = "0.1.0"
