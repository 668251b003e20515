"""OperatorOverviewUseCase: skills and ticket counts per operator."""

from __future__ import annotations

from dataclasses import dataclass, field

from helpdesk.application.ports.skill_repo import SkillRepository
from helpdesk.application.ports.ticket_repo import TicketFilter, TicketRepository
from helpdesk.domain.policies.workload import count_active
from helpdesk.domain.value_objects.enums import REPORTING_STATUSES, TicketCategory


@dataclass
class OperatorOverview:
    operator_id: str
    skills: dict[TicketCategory, int] = field(default_factory=dict)
    active_tickets: int = 0
    resolved_tickets: int = 0


class OperatorOverviewUseCase:
    """Everyone holding at least one skill record, ordered by operator id."""

    def __init__(self, skill_repo: SkillRepository, ticket_repo: TicketRepository):
        self._skills = skill_repo
        self._tickets = ticket_repo

    async def execute(self) -> list[OperatorOverview]:
        overviews: dict[str, OperatorOverview] = {}
        for record in await self._skills.list_all():
            ov = overviews.setdefault(record.operator_id, OperatorOverview(record.operator_id))
            ov.skills[record.skill] = record.proficiency_level

        if not overviews:
            return []

        ids = frozenset(overviews)
        tickets = await self._tickets.list(TicketFilter(assigned_operator_ids=ids))
        for op_id, active in count_active(tickets, ids).items():
            overviews[op_id].active_tickets = active
        for t in tickets:
            if t.status in REPORTING_STATUSES:
                overviews[t.assigned_operator_id].resolved_tickets += 1

        return [overviews[op_id] for op_id in sorted(overviews)]
