"""Trip planner data models."""

from eldplanner.models.backend_log import DailyLog, ELDEntry, HOSStatus
from eldplanner.models.duty import (
    ComplianceSummary,
    DropoffEvent,
    DutyEvent,
    DutyStatus,
    FuelEvent,
    PickupEvent,
    RestEvent,
)
from eldplanner.models.health import HealthStatus
from eldplanner.models.location import StopLocation
from eldplanner.models.route import RouteData, RouteResult, Stop, StopType
from eldplanner.models.trip import TripRequest

__all__ = [
    "ComplianceSummary",
    "DailyLog",
    "DropoffEvent",
    "DutyEvent",
    "DutyStatus",
    "ELDEntry",
    "FuelEvent",
    "HOSStatus",
    "HealthStatus",
    "PickupEvent",
    "RestEvent",
    "RouteData",
    "RouteResult",
    "Stop",
    "StopLocation",
    "StopType",
    "TripRequest",
]
