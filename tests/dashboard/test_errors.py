"""Tests for shared/errors.py — user-facing error messages."""

from __future__ import annotations

import pytest

from eldplanner.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    BackendTimeoutError,
    RouteValidationError,
    TripRequestError,
)
from shared.constants import ERROR_MESSAGES
from shared.errors import TripPlannerError, user_message_for


class TestUserMessageFor:
    @pytest.mark.parametrize(
        "exc",
        [BackendConnectionError("refused"), BackendTimeoutError("slow")],
    )
    def test_transport_failures_are_generic(self, exc):
        assert user_message_for(exc) == ERROR_MESSAGES["NETWORK_ERROR"]

    def test_backend_detail_verbatim(self):
        exc = BackendAPIError(400, '{"error": "Unknown city"}', detail="Unknown city")
        assert user_message_for(exc) == "Unknown city"

    def test_backend_error_without_detail(self):
        exc = BackendAPIError(500, "Internal Server Error")
        assert user_message_for(exc) == ERROR_MESSAGES["ROUTE_CALCULATION_FAILED"]

    def test_validation_errors(self):
        assert user_message_for(TripRequestError({"cycle_used": "bad"})) == ERROR_MESSAGES["VALIDATION_ERROR"]
        assert user_message_for(RouteValidationError("bad")) == ERROR_MESSAGES["BACKEND_ERROR"]

    def test_planner_error_passthrough(self):
        assert user_message_for(TripPlannerError("Already friendly")) == "Already friendly"

    def test_anything_else_is_generic(self):
        assert user_message_for(KeyError("x")) == ERROR_MESSAGES["GENERIC_ERROR"]
