"""Workload Tracker: active ticket counts derived from the ticket store."""

from __future__ import annotations

from collections.abc import Iterable

from helpdesk.application.ports.ticket_repo import TicketFilter, TicketRepository
from helpdesk.domain.policies.workload import count_active
from helpdesk.domain.value_objects.enums import ACTIVE_STATUSES


class WorkloadTracker:
    def __init__(self, ticket_repo: TicketRepository):
        self._tickets = ticket_repo

    async def active_count_for(self, operator_ids: Iterable[str]) -> dict[str, int]:
        ids = frozenset(operator_ids)
        if not ids:
            return {}
        tickets = await self._tickets.list(
            TicketFilter(statuses=ACTIVE_STATUSES, assigned_operator_ids=ids)
        )
        return count_active(tickets, ids)
