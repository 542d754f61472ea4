"""Duty-status events and compliance summary derived from a route."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from eldplanner.models._types import Hours, Timestamp


class DutyStatus(str, Enum):
    ON_DUTY = "ON_DUTY"
    OFF_DUTY = "OFF_DUTY"
    ON_DUTY_NOT_DRIVING = "ON_DUTY_NOT_DRIVING"


class _DutyEventBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: Timestamp
    location: str
    notes: str


class PickupEvent(_DutyEventBase):
    """Loading at the shipper; the driver goes on duty."""

    kind: Literal["pickup"] = "pickup"
    duty_status: Literal[DutyStatus.ON_DUTY] = DutyStatus.ON_DUTY


class DropoffEvent(_DutyEventBase):
    """Delivery at the consignee; the driver goes off duty."""

    kind: Literal["dropoff"] = "dropoff"
    duty_status: Literal[DutyStatus.OFF_DUTY] = DutyStatus.OFF_DUTY


class RestEvent(_DutyEventBase):
    """Mandatory off-duty rest of a known length."""

    kind: Literal["rest"] = "rest"
    duty_status: Literal[DutyStatus.OFF_DUTY] = DutyStatus.OFF_DUTY
    duration: Hours


class FuelEvent(_DutyEventBase):
    """Fueling, logged as on duty but not driving."""

    kind: Literal["fuel"] = "fuel"
    duty_status: Literal[DutyStatus.ON_DUTY_NOT_DRIVING] = DutyStatus.ON_DUTY_NOT_DRIVING
    duration: Hours


DutyEvent = Annotated[
    Union[PickupEvent, DropoffEvent, RestEvent, FuelEvent],
    Field(discriminator="kind"),
]


class ComplianceSummary(BaseModel):
    """Aggregated hours for a trip and the outcome of each HOS rule."""

    model_config = ConfigDict(frozen=True)

    total_driving_hours: float
    total_on_duty_hours: float
    rest_hours: float
    driving_limit: float
    on_duty_limit: float
    restart_hours: float
    is_driving_compliant: bool
    is_on_duty_compliant: bool
    has_adequate_rest: bool

    @property
    def is_compliant(self) -> bool:
        return self.is_driving_compliant and self.is_on_duty_compliant and self.has_adequate_rest

    @property
    def driving_message(self) -> str:
        return f"Driving time exceeds {self.driving_limit:g}-hour limit"

    @property
    def on_duty_message(self) -> str:
        return f"On-duty time exceeds {self.on_duty_limit:g}-hour limit"

    @property
    def rest_message(self) -> str:
        return "Insufficient rest periods scheduled"

    @property
    def violations(self) -> list[str]:
        """Warning lines for each failed rule, in display order."""
        checks = [
            (self.is_driving_compliant, self.driving_message),
            (self.is_on_duty_compliant, self.on_duty_message),
            (self.has_adequate_rest, self.rest_message),
        ]
        return [message for passed, message in checks if not passed]
