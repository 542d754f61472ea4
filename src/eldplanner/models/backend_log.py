"""Daily log and HOS status extras computed by the backend."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from eldplanner.models._types import Hours, Timestamp


class ELDEntry(BaseModel):
    """One duty-status block of a backend daily log."""

    model_config = ConfigDict(frozen=True)

    status: Literal["driving", "on_duty", "sleeper", "off_duty"]
    start_time: Timestamp
    end_time: Timestamp
    location: str
    duration: Hours


class DailyLog(BaseModel):
    """Backend daily log sheet."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    entries: list[ELDEntry] = Field(default_factory=list)
    total_drive_time: Hours
    total_duty_time: Hours


class HOSStatus(BaseModel):
    """Backend view of the driver's cycle and daily clocks."""

    model_config = ConfigDict(frozen=True)

    cycle_used: Hours
    remaining_hours: float
    drive_time_today: Hours
    duty_time_today: Hours
    next_reset: Timestamp | None = None
    violations: list[str] = Field(default_factory=list)
