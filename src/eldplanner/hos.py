"""Hours-of-Service compliance checks over a computed route."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eldplanner.models.duty import ComplianceSummary
from eldplanner.models.route import RouteResult, StopType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HOSLimits:
    """FMCSA property-carrying limits, in hours.

    Usage:
        evaluate_compliance(result)                                # defaults
        evaluate_compliance(result, HOSLimits(driving_hours=10))   # override
    """

    driving_hours: float = 11.0
    on_duty_hours: float = 14.0
    restart_hours: float = 10.0
    weekly_hours: float = 60.0  # 7-day cycle
    eight_day_hours: float = 70.0  # 8-day cycle


DEFAULT_LIMITS = HOSLimits()


def total_stop_hours(result: RouteResult, stop_type: StopType) -> float:
    """Sum of durations for one stop kind across stops and fuel stops."""
    return sum((stop.duration for stop in result.stops_of_type(stop_type)), 0.0)


def evaluate_compliance(
    result: RouteResult,
    limits: HOSLimits = DEFAULT_LIMITS,
) -> ComplianceSummary:
    """Aggregate driving, on-duty and rest hours and check them against ``limits``.

    Driving time is the backend's route duration; fuel stops add on-duty time
    and rest stops count towards the restart period. Boundary values pass:
    exactly 11 driving hours, 14 on-duty hours or 10 rest hours are compliant.
    """
    driving = result.route.duration
    on_duty = driving + total_stop_hours(result, StopType.FUEL)
    rest = total_stop_hours(result, StopType.REST)

    summary = ComplianceSummary(
        total_driving_hours=driving,
        total_on_duty_hours=on_duty,
        rest_hours=rest,
        driving_limit=limits.driving_hours,
        on_duty_limit=limits.on_duty_hours,
        restart_hours=limits.restart_hours,
        is_driving_compliant=driving <= limits.driving_hours,
        is_on_duty_compliant=on_duty <= limits.on_duty_hours,
        has_adequate_rest=rest >= limits.restart_hours,
    )
    if summary.violations:
        logger.info("Route fails HOS checks: %s", "; ".join(summary.violations))
    return summary
