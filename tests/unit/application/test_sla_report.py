"""Tests for SlaReportUseCase, UpdateSlaTargetUseCase and OperatorOverviewUseCase."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from helpdesk.application.use_cases.operator_overview import OperatorOverviewUseCase
from helpdesk.application.use_cases.sla_report import SlaReportUseCase
from helpdesk.application.use_cases.update_sla_target import UpdateSlaTargetUseCase
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.errors import NotFoundError
from helpdesk.domain.value_objects.enums import TicketCategory, TicketPriority, TicketStatus

CREATED = datetime(2026, 5, 4, 8, 0, tzinfo=timezone.utc)


def _make_ticket(
    tid: int,
    priority=TicketPriority.HIGH,
    status=TicketStatus.RESOLVED,
    response_h: int | None = None,
    resolved_h: int | None = None,
    operator: str | None = "op-a",
) -> Ticket:
    return Ticket(
        id=tid, ticket_number=tid, title="t", category=TicketCategory.SOFTWARE,
        priority=priority, customer_id="c", created_at=CREATED, updated_at=CREATED,
        status=status, assigned_operator_id=operator,
        first_response_at=CREATED + timedelta(hours=response_h) if response_h is not None else None,
        resolved_at=CREATED + timedelta(hours=resolved_h) if resolved_h is not None else None,
    )


@pytest.mark.asyncio
async def test_high_priority_compliance(ticket_repo, sla_repo):
    sla_repo.add(TicketPriority.HIGH, 4, 24)
    ticket_repo.add(
        _make_ticket(1, response_h=2),
        _make_ticket(2, response_h=5),
        _make_ticket(3, response_h=1),
        _make_ticket(4, response_h=10),
        _make_ticket(5, response_h=1, status=TicketStatus.IN_PROGRESS),
    )

    report = await SlaReportUseCase(ticket_repo, sla_repo).compliance(TicketPriority.HIGH)

    assert (report.total, report.met, report.compliance_percent) == (4, 2, 50)


@pytest.mark.asyncio
async def test_compliance_without_target(ticket_repo, sla_repo):
    ticket_repo.add(_make_ticket(1, response_h=50))
    report = await SlaReportUseCase(ticket_repo, sla_repo).compliance(TicketPriority.HIGH)
    assert (report.total, report.compliance_percent) == (0, 100)
    assert report.response_hours is None


@pytest.mark.asyncio
async def test_compliance_all_lists_every_priority_most_urgent_first(ticket_repo, sla_repo):
    sla_repo.add(TicketPriority.LOW, 24, 72)
    sla_repo.add(TicketPriority.CRITICAL, 1, 4)
    ticket_repo.add(
        _make_ticket(1, priority=TicketPriority.CRITICAL, response_h=2),
        _make_ticket(2, priority=TicketPriority.LOW, response_h=2),
    )

    reports = await SlaReportUseCase(ticket_repo, sla_repo).compliance_all()

    assert [r.priority for r in reports] == [
        TicketPriority.CRITICAL, TicketPriority.HIGH, TicketPriority.MEDIUM, TicketPriority.LOW,
    ]
    by_priority = {r.priority: r for r in reports}
    assert by_priority[TicketPriority.CRITICAL].compliance_percent == 0
    assert by_priority[TicketPriority.LOW].compliance_percent == 100
    assert by_priority[TicketPriority.HIGH].total == 0


@pytest.mark.asyncio
async def test_average_resolution_hours(ticket_repo, sla_repo):
    ticket_repo.add(
        _make_ticket(1, resolved_h=6),
        _make_ticket(2, resolved_h=9, priority=TicketPriority.LOW),
        _make_ticket(3, status=TicketStatus.OPEN),
    )
    assert await SlaReportUseCase(ticket_repo, sla_repo).average_resolution_hours() == 8


@pytest.mark.asyncio
async def test_overview(ticket_repo, sla_repo):
    ticket_repo.add(
        _make_ticket(1, status=TicketStatus.OPEN, operator=None, priority=TicketPriority.CRITICAL),
        _make_ticket(2, status=TicketStatus.PENDING),
        _make_ticket(3, resolved_h=4),
    )
    summary, avg = await SlaReportUseCase(ticket_repo, sla_repo).overview()
    assert summary.total_active == 2
    assert summary.total_resolved == 1
    assert summary.unassigned_active == 1
    assert summary.critical_active == 1
    assert avg == 4


# ─── UpdateSlaTargetUseCase ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_keeps_unspecified_hours(sla_repo):
    sla_repo.add(TicketPriority.MEDIUM, 8, 48)
    updated = await UpdateSlaTargetUseCase(sla_repo).execute(
        TicketPriority.MEDIUM, response_hours=6
    )
    assert (updated.response_hours, updated.resolution_hours) == (6, 48)
    assert sla_repo.targets[TicketPriority.MEDIUM].response_hours == 6


@pytest.mark.asyncio
async def test_update_missing_target_raises_not_found(sla_repo):
    with pytest.raises(NotFoundError):
        await UpdateSlaTargetUseCase(sla_repo).execute(TicketPriority.LOW, response_hours=1)


# ─── OperatorOverviewUseCase ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_operator_overview_counts(skill_repo, ticket_repo):
    skill_repo.add("op-b", TicketCategory.NETWORK, 2)
    skill_repo.add("op-a", TicketCategory.SOFTWARE, 5)
    skill_repo.add("op-a", TicketCategory.DATABASE, 3)
    ticket_repo.add(
        _make_ticket(1, status=TicketStatus.OPEN, operator="op-a"),
        _make_ticket(2, status=TicketStatus.IN_PROGRESS, operator="op-a"),
        _make_ticket(3, status=TicketStatus.CLOSED, operator="op-a"),
        _make_ticket(4, status=TicketStatus.RESOLVED, operator="op-b"),
        _make_ticket(5, status=TicketStatus.OPEN, operator="someone-else"),
    )

    overviews = await OperatorOverviewUseCase(skill_repo, ticket_repo).execute()

    assert [o.operator_id for o in overviews] == ["op-a", "op-b"]
    op_a, op_b = overviews
    assert op_a.skills == {TicketCategory.SOFTWARE: 5, TicketCategory.DATABASE: 3}
    assert (op_a.active_tickets, op_a.resolved_tickets) == (2, 1)
    assert (op_b.active_tickets, op_b.resolved_tickets) == (0, 1)


@pytest.mark.asyncio
async def test_operator_overview_empty(skill_repo, ticket_repo):
    assert await OperatorOverviewUseCase(skill_repo, ticket_repo).execute() == []
