"""ELD compliance log service — display shaping for the duty log and HOS badges."""

from __future__ import annotations

from dataclasses import dataclass

from eldplanner.eld import build_duty_log, build_fuel_log
from eldplanner.hos import DEFAULT_LIMITS, HOSLimits, evaluate_compliance
from eldplanner.models.duty import ComplianceSummary, DutyEvent
from eldplanner.models.route import RouteResult

from ..api_logging import log_service_call
from ..constants import STATUS_COLORS, STATUS_LABELS
from ..formatters import format_hours, format_limit, format_timestamp


@dataclass(frozen=True)
class ComplianceBadge:
    label: str
    passed: bool
    # Rest shortfalls are warnings, limit breaches are errors
    severity: str
    message: str | None = None


@dataclass(frozen=True)
class EldLogView:
    summary: ComplianceSummary
    badges: list[ComplianceBadge]
    warnings: list[str]
    events: list[dict]
    fuel_events: list[dict]


def event_row(event: DutyEvent) -> dict:
    """Table row for one duty event."""
    status = event.duty_status.value
    duration = getattr(event, "duration", None)
    return {
        "Time": format_timestamp(event.timestamp),
        "Status": STATUS_LABELS.get(status, status),
        "Location": event.location,
        "Duration": format_hours(duration) if duration is not None else "—",
        "Notes": event.notes,
        "color": STATUS_COLORS.get(status, "#888888"),
    }


def compliance_badges(summary: ComplianceSummary) -> list[ComplianceBadge]:
    """One badge per HOS rule; failed rules carry their warning line."""
    return [
        ComplianceBadge(
            label=f"Driving: {format_limit(summary.total_driving_hours, summary.driving_limit)}",
            passed=summary.is_driving_compliant,
            severity="success" if summary.is_driving_compliant else "error",
            message=None if summary.is_driving_compliant else summary.driving_message,
        ),
        ComplianceBadge(
            label=f"On Duty: {format_limit(summary.total_on_duty_hours, summary.on_duty_limit)}",
            passed=summary.is_on_duty_compliant,
            severity="success" if summary.is_on_duty_compliant else "error",
            message=None if summary.is_on_duty_compliant else summary.on_duty_message,
        ),
        ComplianceBadge(
            label=f"Rest: {format_hours(summary.rest_hours)}",
            passed=summary.has_adequate_rest,
            severity="success" if summary.has_adequate_rest else "warning",
            message=None if summary.has_adequate_rest else summary.rest_message,
        ),
    ]


class EldLogService:
    """Builds the ELD compliance log view from a route result."""

    def __init__(self, limits: HOSLimits = DEFAULT_LIMITS) -> None:
        self._limits = limits

    @log_service_call
    def build_view(self, result: RouteResult) -> EldLogView:
        """Derive the duty log, fuel log and compliance badges for display."""
        summary = evaluate_compliance(result, self._limits)
        return EldLogView(
            summary=summary,
            badges=compliance_badges(summary),
            warnings=summary.violations,
            events=[event_row(e) for e in build_duty_log(result)],
            fuel_events=[event_row(e) for e in build_fuel_log(result)],
        )
