"""Duty log assembly: one duty-status event per scheduled stop.

Each recognised stop kind maps to a fixed event variant::

    pickup   -> PickupEvent   ON_DUTY               no duration
    dropoff  -> DropoffEvent  OFF_DUTY              no duration
    rest     -> RestEvent     OFF_DUTY              stop duration
    fuel     -> FuelEvent     ON_DUTY_NOT_DRIVING   stop duration

Stops of any other kind produce no event. They are logged at WARNING so a
new backend stop kind shows up in the logs instead of silently shrinking the
duty log.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from eldplanner.models.duty import DropoffEvent, DutyEvent, FuelEvent, PickupEvent, RestEvent
from eldplanner.models.route import RouteResult, Stop, StopType

logger = logging.getLogger(__name__)


def stop_to_event(stop: Stop) -> DutyEvent | None:
    """Map one stop to its duty event, or None for an unrecognised stop kind."""
    kind = stop.stop_type
    timestamp, location = stop.time, stop.location.address
    if kind == StopType.PICKUP:
        return PickupEvent(timestamp=timestamp, location=location, notes=f"Pickup: {stop.description}")
    if kind == StopType.DROPOFF:
        return DropoffEvent(timestamp=timestamp, location=location, notes=f"Dropoff: {stop.description}")
    if kind == StopType.REST:
        return RestEvent(
            timestamp=timestamp,
            location=location,
            duration=stop.duration,
            notes=f"Mandatory rest: {stop.description}",
        )
    if kind == StopType.FUEL:
        return FuelEvent(
            timestamp=timestamp,
            location=location,
            duration=stop.duration,
            notes=f"Fuel stop: {stop.description}",
        )
    return None


def map_stops(stops: Iterable[Stop]) -> list[DutyEvent]:
    """Map stops to events in input order, dropping unrecognised kinds."""
    events: list[DutyEvent] = []
    for stop in stops:
        event = stop_to_event(stop)
        if event is None:
            logger.warning(
                "Skipping stop with unrecognised type %r at %s",
                stop.type, stop.location.address,
            )
            continue
        events.append(event)
    return events


def sort_events(events: Iterable[DutyEvent]) -> list[DutyEvent]:
    """Order events by timestamp; equal timestamps keep their input order."""
    return sorted(events, key=lambda e: e.timestamp)


def build_duty_log(result: RouteResult) -> list[DutyEvent]:
    """Chronological duty log for the route's ``stops``."""
    events = sort_events(map_stops(result.stops))
    logger.debug("Built duty log with %d events from %d stops", len(events), len(result.stops))
    return events


def build_fuel_log(result: RouteResult) -> list[DutyEvent]:
    """Chronological events for ``fuel_stops``, kept apart from the duty log."""
    return sort_events(map_stops(result.fuel_stops))
