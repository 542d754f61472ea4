"""Tests for the route service client classes."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from eldplanner import AsyncRouteServiceClient, RouteServiceClient
from eldplanner.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    RouteValidationError,
    TripRequestError,
)
from eldplanner.models.health import HealthStatus
from eldplanner.models.route import RouteResult
from eldplanner.models.trip import TripRequest
from tests.conftest import SAMPLE_HEALTH, SAMPLE_ROUTE, SAMPLE_TRIP

BASE_URL = "http://localhost:8000"
ROUTE_URL = f"{BASE_URL}/api/calculate-route/"
HEALTH_URL = f"{BASE_URL}/api/health/"


class TestRouteServiceClient:
    @respx.mock
    def test_calculate_route(self) -> None:
        route = respx.post(ROUTE_URL).mock(
            return_value=httpx.Response(200, json=SAMPLE_ROUTE)
        )
        with RouteServiceClient() as backend:
            result = backend.calculate_route(TripRequest.model_validate(SAMPLE_TRIP))
        assert isinstance(result, RouteResult)
        assert len(result.stops) == 3
        assert len(result.fuel_stops) == 1
        assert json.loads(route.calls.last.request.content) == SAMPLE_TRIP

    @respx.mock
    def test_calculate_route_accepts_mapping(self) -> None:
        respx.post(ROUTE_URL).mock(return_value=httpx.Response(200, json=SAMPLE_ROUTE))
        with RouteServiceClient() as backend:
            result = backend.calculate_route(dict(SAMPLE_TRIP))
        assert result.route.duration == 8.0

    def test_invalid_trip_is_rejected_before_sending(self) -> None:
        with respx.mock(assert_all_called=False) as mock:
            route = mock.post(ROUTE_URL)
            with RouteServiceClient() as backend:
                with pytest.raises(TripRequestError):
                    backend.calculate_route({**SAMPLE_TRIP, "cycle_used": 400})
            assert not route.called

    @respx.mock
    def test_custom_base_url(self) -> None:
        respx.post("https://planner.example.com/api/calculate-route/").mock(
            return_value=httpx.Response(200, json=SAMPLE_ROUTE)
        )
        with RouteServiceClient("https://planner.example.com", timeout=5.0) as backend:
            result = backend.calculate_route(SAMPLE_TRIP)
        assert len(result.stops) == 3

    @respx.mock
    def test_malformed_route_response(self) -> None:
        respx.post(ROUTE_URL).mock(
            return_value=httpx.Response(200, json={"route": {"distance": 10}})
        )
        with RouteServiceClient() as backend:
            with pytest.raises(RouteValidationError):
                backend.calculate_route(SAMPLE_TRIP)

    @respx.mock
    def test_backend_error_detail(self) -> None:
        respx.post(ROUTE_URL).mock(
            return_value=httpx.Response(400, json={"error": "Unable to find dropoff location"})
        )
        with RouteServiceClient() as backend:
            with pytest.raises(BackendAPIError) as exc_info:
                backend.calculate_route(SAMPLE_TRIP)
        assert exc_info.value.detail == "Unable to find dropoff location"

    @respx.mock
    def test_health_check(self) -> None:
        respx.get(HEALTH_URL).mock(return_value=httpx.Response(200, json=SAMPLE_HEALTH))
        with RouteServiceClient() as backend:
            health = backend.health_check()
        assert isinstance(health, HealthStatus)
        assert health.is_healthy

    @respx.mock
    def test_test_connection_true(self) -> None:
        respx.get(HEALTH_URL).mock(return_value=httpx.Response(200, json=SAMPLE_HEALTH))
        with RouteServiceClient() as backend:
            assert backend.test_connection() is True

    @respx.mock
    def test_test_connection_false_on_error(self) -> None:
        respx.get(HEALTH_URL).mock(side_effect=httpx.ConnectError("refused"))
        with RouteServiceClient() as backend:
            assert backend.test_connection() is False

    @respx.mock
    def test_clients_are_independent(self) -> None:
        respx.get("http://a.example/api/health/").mock(
            return_value=httpx.Response(200, json=SAMPLE_HEALTH)
        )
        respx.get("http://b.example/api/health/").mock(
            return_value=httpx.Response(503, text="down")
        )
        with RouteServiceClient("http://a.example") as a, RouteServiceClient("http://b.example") as b:
            assert a.test_connection() is True
            assert b.test_connection() is False


class TestAsyncRouteServiceClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_calculate_route(self) -> None:
        respx.post(ROUTE_URL).mock(return_value=httpx.Response(200, json=SAMPLE_ROUTE))
        async with AsyncRouteServiceClient() as backend:
            result = await backend.calculate_route(SAMPLE_TRIP)
        assert isinstance(result, RouteResult)
        assert result.stops[0].type == "pickup"

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.post(ROUTE_URL).mock(side_effect=httpx.ConnectError("fail"))
        async with AsyncRouteServiceClient() as backend:
            with pytest.raises(BackendConnectionError):
                await backend.calculate_route(SAMPLE_TRIP)

    @respx.mock
    @pytest.mark.asyncio
    async def test_health_check(self) -> None:
        respx.get(HEALTH_URL).mock(return_value=httpx.Response(200, json=SAMPLE_HEALTH))
        async with AsyncRouteServiceClient() as backend:
            health = await backend.health_check()
            connected = await backend.test_connection()
        assert health.status == "ok"
        assert connected is True
