"""SlaReportUseCase: read-only SLA compliance and resolution reporting."""

from __future__ import annotations

import logging

from helpdesk.application.ports.sla_repo import SlaTargetRepository
from helpdesk.application.ports.ticket_repo import TicketFilter, TicketRepository
from helpdesk.domain.policies.sla_compliance import (
    ComplianceReport,
    TicketOverview,
    average_resolution_hours,
    evaluate_compliance,
    summarize,
)
from helpdesk.domain.value_objects.enums import REPORTING_STATUSES, TicketPriority

logger = logging.getLogger(__name__)

# Order used by the reports page: most urgent first
REPORT_PRIORITY_ORDER = sorted(TicketPriority, key=lambda p: p.rank, reverse=True)


class SlaReportUseCase:
    """Pull-based queries over the ticket set; never writes."""

    def __init__(self, ticket_repo: TicketRepository, sla_repo: SlaTargetRepository):
        self._tickets = ticket_repo
        self._sla = sla_repo

    async def compliance(self, priority: TicketPriority) -> ComplianceReport:
        target = await self._sla.get_by_priority(priority)
        if target is None:
            logger.info("No SLA target configured for priority %s", priority.value)
        tickets = await self._tickets.list(
            TicketFilter(statuses=REPORTING_STATUSES, priority=priority)
        )
        return evaluate_compliance(tickets, priority, target)

    async def compliance_all(self) -> list[ComplianceReport]:
        targets = {t.priority: t for t in await self._sla.get_all()}
        tickets = await self._tickets.list(TicketFilter(statuses=REPORTING_STATUSES))
        return [
            evaluate_compliance(tickets, priority, targets.get(priority))
            for priority in REPORT_PRIORITY_ORDER
        ]

    async def average_resolution_hours(self) -> int:
        return average_resolution_hours(await self._tickets.list())

    async def overview(self) -> tuple[TicketOverview, int]:
        """Dashboard counters plus the average resolution time."""
        tickets = await self._tickets.list()
        return summarize(tickets), average_resolution_hours(tickets)
