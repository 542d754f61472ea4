"""Dashboard-facing error type and user message mapping."""

from __future__ import annotations

from eldplanner.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    BackendTimeoutError,
    RouteValidationError,
    TripRequestError,
)

from .constants import ERROR_MESSAGES


class TripPlannerError(Exception):
    """Failure the UI can show as-is. UI catches only this."""


def user_message_for(exc: BaseException) -> str:
    """Translate a client exception into the message shown to the user.

    Transport failures get the generic retryable network message. Backend
    errors are shown verbatim when the backend explains itself.
    """
    if isinstance(exc, TripPlannerError):
        return str(exc)
    if isinstance(exc, (BackendConnectionError, BackendTimeoutError)):
        return ERROR_MESSAGES["NETWORK_ERROR"]
    if isinstance(exc, BackendAPIError):
        return exc.detail or ERROR_MESSAGES["ROUTE_CALCULATION_FAILED"]
    if isinstance(exc, TripRequestError):
        return ERROR_MESSAGES["VALIDATION_ERROR"]
    if isinstance(exc, RouteValidationError):
        return ERROR_MESSAGES["BACKEND_ERROR"]
    return ERROR_MESSAGES["GENERIC_ERROR"]
