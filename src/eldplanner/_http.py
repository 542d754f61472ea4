"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from eldplanner.exceptions import (
    BackendAPIError,
    BackendConnectionError,
    BackendTimeoutError,
)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str | None:
    """Return the backend's ``error`` message from a JSON error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return None


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        detail = _error_detail(response)
        logger.warning(
            "%s %s failed with HTTP %d: %s",
            response.request.method, response.request.url, response.status_code,
            detail or response.reason_phrase,
        )
        raise BackendAPIError(
            status_code=response.status_code,
            message=response.text,
            detail=detail,
        )
    logger.debug(
        "%s %s -> %d", response.request.method, response.request.url, response.status_code,
    )
    try:
        return response.json()
    except ValueError as exc:
        raise BackendAPIError(
            status_code=response.status_code,
            message=f"Response is not valid JSON: {response.text[:200]}",
        ) from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
        )

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise BackendConnectionError(str(exc)) from exc
        return _handle_response(response)

    def post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        """Perform a JSON POST request and return parsed JSON."""
        try:
            response = self._client.post(endpoint, json=payload)
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise BackendConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
        )

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise BackendConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        """Perform an async JSON POST request and return parsed JSON."""
        try:
            response = await self._client.post(endpoint, json=payload)
        except httpx.TimeoutException as exc:
            raise BackendTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise BackendConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
