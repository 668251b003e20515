"""SlaCompliancePolicy: response-time compliance and resolution averages."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.value_objects.enums import TicketPriority

FULL_COMPLIANCE = 100


@dataclass(frozen=True)
class ComplianceReport:
    priority: TicketPriority
    total: int
    met: int
    compliance_percent: int
    response_hours: int | None = None
    resolution_hours: int | None = None

    @property
    def has_target(self) -> bool:
        return self.response_hours is not None


@dataclass(frozen=True)
class TicketOverview:
    total_resolved: int
    total_active: int
    unassigned_active: int
    critical_active: int


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() would give 2 for 2.5)."""
    return math.floor(value + 0.5)


def whole_hours_between(start: datetime, end: datetime) -> int:
    """Elapsed whole hours, truncated towards zero (1h59m → 1)."""
    return math.trunc((end - start).total_seconds() / 3600)


def evaluate_compliance(
    tickets: Iterable[Ticket],
    priority: TicketPriority,
    target: SlaTarget | None,
) -> ComplianceReport:
    """Compute first-response compliance for one priority.

    Only resolved/closed tickets with a first response are considered. No
    qualifying tickets, or no configured target, both degrade to
    ``total=0, met=0, compliance_percent=100``.
    """
    response_hours = target.response_hours if target else None
    resolution_hours = target.resolution_hours if target else None

    qualifying = [t for t in tickets if t.priority == priority and t.is_reportable()]
    if not qualifying or target is None:
        return ComplianceReport(
            priority=priority,
            total=0,
            met=0,
            compliance_percent=FULL_COMPLIANCE,
            response_hours=response_hours,
            resolution_hours=resolution_hours,
        )

    met = sum(
        1 for t in qualifying
        if whole_hours_between(t.created_at, t.first_response_at) <= target.response_hours
    )
    return ComplianceReport(
        priority=priority,
        total=len(qualifying),
        met=met,
        compliance_percent=round_half_up(met / len(qualifying) * 100),
        response_hours=response_hours,
        resolution_hours=resolution_hours,
    )


def average_resolution_hours(tickets: Iterable[Ticket]) -> int:
    """Mean created→resolved time in whole hours over every resolved ticket.

    Priority-agnostic; returns 0 when nothing has been resolved yet.
    """
    durations = [
        whole_hours_between(t.created_at, t.resolved_at)
        for t in tickets
        if t.resolved_at is not None
    ]
    if not durations:
        return 0
    return round_half_up(sum(durations) / len(durations))


def summarize(tickets: Iterable[Ticket]) -> TicketOverview:
    """Dashboard counters over the whole ticket set."""
    total_resolved = total_active = unassigned_active = critical_active = 0
    for t in tickets:
        if t.is_active():
            total_active += 1
            if not t.is_assigned():
                unassigned_active += 1
            if t.priority == TicketPriority.CRITICAL:
                critical_active += 1
        else:
            total_resolved += 1
    return TicketOverview(
        total_resolved=total_resolved,
        total_active=total_active,
        unassigned_active=unassigned_active,
        critical_active=critical_active,
    )
