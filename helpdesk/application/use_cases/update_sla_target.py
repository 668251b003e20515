"""UpdateSlaTargetUseCase: edit the hours of an existing SLA target."""

from __future__ import annotations

import logging

from helpdesk.application.ports.sla_repo import SlaTargetRepository
from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.errors import NotFoundError
from helpdesk.domain.value_objects.enums import TicketPriority

logger = logging.getLogger(__name__)


class UpdateSlaTargetUseCase:
    def __init__(self, sla_repo: SlaTargetRepository):
        self._sla = sla_repo

    async def execute(
        self,
        priority: TicketPriority,
        response_hours: int | None = None,
        resolution_hours: int | None = None,
    ) -> SlaTarget:
        """Only configured priorities can be edited; missing fields are kept.

        Raises:
            NotFoundError: no target exists for *priority*.
            ValueError: the resulting hours are negative.
        """
        current = await self._sla.get_by_priority(priority)
        if current is None:
            raise NotFoundError("SlaTarget", priority.value)

        updated = SlaTarget(
            priority=priority,
            response_hours=current.response_hours if response_hours is None else response_hours,
            resolution_hours=(
                current.resolution_hours if resolution_hours is None else resolution_hours
            ),
        )
        saved = await self._sla.upsert(updated)
        logger.info(
            "SLA target %s: response %dh → %dh, resolution %dh → %dh",
            priority.value, current.response_hours, saved.response_hours,
            current.resolution_hours, saved.resolution_hours,
        )
        return saved
