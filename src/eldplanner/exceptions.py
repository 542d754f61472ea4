"""Custom exceptions for the ELD trip planner client."""

from __future__ import annotations


class EldPlannerError(Exception):
    """Base exception for all trip planner client errors."""


class BackendConnectionError(EldPlannerError):
    """Raised when the client cannot connect to the route backend."""


class BackendTimeoutError(EldPlannerError):
    """Raised when a request to the route backend times out."""


class BackendAPIError(EldPlannerError):
    """Raised when the backend returns an error response (4xx/5xx).

    ``detail`` holds the backend's own ``error`` message when the response
    body carries one, so callers can show it to the user verbatim.
    """

    def __init__(self, status_code: int, message: str, detail: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail or message}")


class RouteValidationError(EldPlannerError):
    """Raised when a route response fails model validation."""


class TripRequestError(EldPlannerError):
    """Raised when trip form input is invalid.

    ``field_errors`` maps each offending field name to a display message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = field_errors
        summary = "; ".join(f"{k}: {v}" for k, v in field_errors.items())
        super().__init__(f"Invalid trip request: {summary}")
