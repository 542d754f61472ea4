"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from eldplanner.models.route import RouteResult  # noqa: E402

from tests.conftest import (  # noqa: E402
    SAMPLE_DROPOFF,
    SAMPLE_FUEL,
    SAMPLE_PICKUP,
    SAMPLE_ROUTE,
    make_route_payload,
    make_stop,
)


# ── Sample data fixtures ─────────────────────────────────────────────────────


@pytest.fixture
def sample_result() -> RouteResult:
    """Pickup, 10h rest, dropoff and one fuel stop over an 8h drive."""
    return RouteResult.model_validate(SAMPLE_ROUTE)


@pytest.fixture
def failing_result() -> RouteResult:
    """12h drive with 3h of fueling and no rest: every rule fails."""
    fuel = make_stop("fuel", "2024-01-15T12:00:00Z", duration=3.0, description="Long queue")
    return RouteResult.model_validate(make_route_payload(
        duration=12.0,
        stops=[SAMPLE_DROPOFF, SAMPLE_PICKUP],
        fuel_stops=[fuel],
    ))


@pytest.fixture
def stops_only_result() -> RouteResult:
    """No route geometry, so the map falls back to stop positions."""
    return RouteResult.model_validate(make_route_payload(
        coordinates=[],
        stops=[SAMPLE_PICKUP, SAMPLE_DROPOFF],
        fuel_stops=[SAMPLE_FUEL],
    ))


@pytest.fixture(autouse=True)
def _api_log_to_tmp(tmp_path):
    """Keep the dashboard API log out of the source tree during tests."""
    import logging

    import shared.api_logging as mod

    old = (mod._logger, mod._LOG_DIR, mod._LOG_FILE)
    named_logger = logging.getLogger("eld_dashboard.api")
    named_logger.handlers.clear()
    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "backend_calls.log")
    yield
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger, mod._LOG_DIR, mod._LOG_FILE = old
