"""Trip submission model sent to the route backend."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eldplanner.exceptions import TripRequestError

LOCATION_MIN_LENGTH = 3
LOCATION_MAX_LENGTH = 200
MIN_CYCLE_USED = 0.0
MAX_CYCLE_USED = 14 * 24.0  # 14 days in hours

LocationText = Annotated[
    str,
    Field(min_length=LOCATION_MIN_LENGTH, max_length=LOCATION_MAX_LENGTH),
]


class TripRequest(BaseModel):
    """Trip parameters: three locations and hours already used in the cycle."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    current_location: LocationText
    pickup_location: LocationText
    dropoff_location: LocationText
    cycle_used: float = Field(ge=MIN_CYCLE_USED, le=MAX_CYCLE_USED, allow_inf_nan=False)

    @classmethod
    def from_form(cls, data: dict[str, Any]) -> TripRequest:
        """Validate raw form input, raising TripRequestError with per-field messages."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise TripRequestError(_field_messages(exc, data)) from exc


def _field_messages(exc: ValidationError, data: dict[str, Any]) -> dict[str, str]:
    messages: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field in messages:
            continue
        raw = data.get(field)
        kind = error["type"]
        if kind == "missing" or (isinstance(raw, str) and not raw.strip()):
            messages[field] = "This field is required"
        elif kind == "string_too_short":
            messages[field] = f"Must be at least {LOCATION_MIN_LENGTH} characters"
        elif kind == "string_too_long":
            messages[field] = f"Must be no more than {LOCATION_MAX_LENGTH} characters"
        elif kind == "greater_than_equal":
            messages[field] = f"Must be at least {MIN_CYCLE_USED:g} hours"
        elif kind == "less_than_equal":
            messages[field] = f"Must be no more than {MAX_CYCLE_USED:g} hours"
        else:
            messages[field] = error["msg"]
    return messages
