"""Computed route models returned by the route backend."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from eldplanner.models._types import Coordinate, Hours, Miles, Timestamp
from eldplanner.models.backend_log import DailyLog, HOSStatus
from eldplanner.models.location import StopLocation


class StopType(str, Enum):
    """Stop kinds the planner knows how to log."""

    PICKUP = "pickup"
    DROPOFF = "dropoff"
    REST = "rest"
    FUEL = "fuel"


class RouteData(BaseModel):
    """Route totals and geometry."""

    model_config = ConfigDict(frozen=True)

    distance: Miles
    duration: Hours
    coordinates: list[Coordinate] = Field(default_factory=list)

    @property
    def latlon_path(self) -> list[tuple[float, float]]:
        """Geometry as (latitude, longitude) pairs, the order map widgets expect."""
        return [(lat, lon) for lon, lat in self.coordinates]


class Stop(BaseModel):
    """A scheduled pickup, dropoff, rest or fuel stop along the route.

    ``type`` is stored exactly as received. Use :attr:`stop_type` to get the
    recognised kind, which is ``None`` for anything outside :class:`StopType`.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    location: StopLocation
    time: Timestamp
    duration: Hours
    description: str

    @property
    def stop_type(self) -> StopType | None:
        try:
            return StopType(self.type)
        except ValueError:
            return None


class RouteResult(BaseModel):
    """Complete trip result: route, ordered stops and fuel stops."""

    model_config = ConfigDict(frozen=True)

    route: RouteData
    stops: list[Stop]
    fuel_stops: list[Stop]
    eld_logs: list[DailyLog] = Field(default_factory=list)
    hos_status: HOSStatus | None = None

    def stops_of_type(self, stop_type: StopType) -> list[Stop]:
        """Stops of one kind from ``stops`` and ``fuel_stops``.

        Every entry counts, including separate records with equal fields. An
        entry of ``stops`` that is also listed in ``fuel_stops`` is counted
        once, matched one-for-one against the ``fuel_stops`` entries.
        """
        listed = [s for s in self.fuel_stops if s.stop_type == stop_type]
        unmatched = list(listed)
        found: list[Stop] = []
        for stop in self.stops:
            if stop.stop_type != stop_type:
                continue
            if stop in unmatched:
                unmatched.remove(stop)
                continue
            found.append(stop)
        return found + listed
