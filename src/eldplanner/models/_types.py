"""Reusable annotated field types for route response models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, Field

Hours = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]
Miles = Annotated[float, Field(ge=0.0, allow_inf_nan=False)]
Longitude = Annotated[float, Field(ge=-180.0, le=180.0, allow_inf_nan=False)]
Latitude = Annotated[float, Field(ge=-90.0, le=90.0, allow_inf_nan=False)]

# Backend geometry is [longitude, latitude].
Coordinate = tuple[Longitude, Latitude]


def _assume_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps so mixed inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_assume_utc)]
