"""Formatting helpers for the trip planner dashboard."""

from __future__ import annotations

from datetime import datetime


def format_hours(hours: float | None) -> str:
    """Format hours as '8.5h' or '—' if None."""
    if hours is None:
        return "—"
    return f"{hours:.1f}h"


def format_miles(miles: float | None) -> str:
    if miles is None:
        return "—"
    return f"{miles:,.0f} mi"


def format_timestamp(value: datetime | None) -> str:
    """Format a timestamp as 'Mon 15 Jan 2024 06:00 UTC'."""
    if value is None:
        return "—"
    return value.strftime("%a %d %b %Y %H:%M %Z").strip()


def format_limit(actual: float, limit: float) -> str:
    """Format an aggregate against its limit, e.g. '12.0h / 11h'."""
    return f"{actual:.1f}h / {limit:g}h"
