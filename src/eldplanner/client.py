"""Public client classes for the route-computation backend."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from eldplanner._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from eldplanner.exceptions import EldPlannerError, RouteValidationError
from eldplanner.models.health import HealthStatus
from eldplanner.models.route import RouteResult
from eldplanner.models.trip import TripRequest

CALCULATE_ROUTE_ENDPOINT = "/api/calculate-route/"
HEALTH_ENDPOINT = "/api/health/"

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _validate(model_type: type[T], data: Any) -> T:
    """Validate a decoded JSON body against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise RouteValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _trip_payload(trip: TripRequest | Mapping[str, Any]) -> dict[str, Any]:
    if not isinstance(trip, TripRequest):
        trip = TripRequest.from_form(dict(trip))
    return trip.model_dump()


def _log_route(result: RouteResult) -> None:
    logger.info(
        "Route calculated: %.1f mi, %.1f h, %d stops, %d fuel stops",
        result.route.distance, result.route.duration,
        len(result.stops), len(result.fuel_stops),
    )


class RouteServiceClient:
    """Synchronous client for the route-computation backend.

    Usage:
        backend = RouteServiceClient("https://planner.example.com")
        result = backend.calculate_route(trip)
        backend.close()

        # Or as a context manager:
        with RouteServiceClient() as backend:
            healthy = backend.test_connection()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self._transport = SyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    def __enter__(self) -> RouteServiceClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def calculate_route(self, trip: TripRequest | Mapping[str, Any]) -> RouteResult:
        """Compute a route with its stops and fuel stops for a trip."""
        payload = _trip_payload(trip)
        logger.info("Requesting route calculation from %s", self.base_url)
        data = self._transport.post(CALCULATE_ROUTE_ENDPOINT, payload)
        result = _validate(RouteResult, data)
        _log_route(result)
        return result

    def health_check(self) -> HealthStatus:
        """Get the backend health status."""
        return _validate(HealthStatus, self._transport.get(HEALTH_ENDPOINT))

    def test_connection(self) -> bool:
        """Return True when the backend answers its health check."""
        try:
            self.health_check()
        except EldPlannerError as exc:
            logger.warning("Backend connection test failed: %s", exc)
            return False
        return True


class AsyncRouteServiceClient:
    """Asynchronous client for the route-computation backend.

    Usage:
        async with AsyncRouteServiceClient() as backend:
            result = await backend.calculate_route(trip)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self._transport = AsyncTransport(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> AsyncRouteServiceClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def calculate_route(self, trip: TripRequest | Mapping[str, Any]) -> RouteResult:
        """Compute a route with its stops and fuel stops for a trip."""
        payload = _trip_payload(trip)
        logger.info("Requesting route calculation from %s", self.base_url)
        data = await self._transport.post(CALCULATE_ROUTE_ENDPOINT, payload)
        result = _validate(RouteResult, data)
        _log_route(result)
        return result

    async def health_check(self) -> HealthStatus:
        """Get the backend health status."""
        return _validate(HealthStatus, await self._transport.get(HEALTH_ENDPOINT))

    async def test_connection(self) -> bool:
        """Return True when the backend answers its health check."""
        try:
            await self.health_check()
        except EldPlannerError as exc:
            logger.warning("Backend connection test failed: %s", exc)
            return False
        return True
