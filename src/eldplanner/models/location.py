"""Stop location model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from eldplanner.models._types import Coordinate


class StopLocation(BaseModel):
    """Address and [longitude, latitude] position of a stop."""

    model_config = ConfigDict(frozen=True)

    address: str
    coordinates: Coordinate

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]
