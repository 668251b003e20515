"""AssignTicketUseCase: route an unassigned ticket to the best operator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.application.ports.ticket_repo import TicketRepository
from helpdesk.application.services.skill_registry import SkillRegistry
from helpdesk.application.services.workload_tracker import WorkloadTracker
from helpdesk.application.services.change_events import publish, utcnow
from helpdesk.domain.entities.assignment import AssignmentResult
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.entities.ticket_changed import CHANGE_ASSIGNED, TicketChanged
from helpdesk.domain.errors import (
    AlreadyAssignedError,
    ConcurrentModificationError,
    NotFoundError,
    PreconditionFailedError,
)
from helpdesk.domain.policies.operator_scoring import pick_best

logger = logging.getLogger(__name__)


class AssignTicketUseCase:
    """Pick an operator by skill and workload and claim the ticket for them."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        skill_registry: SkillRegistry,
        workload_tracker: WorkloadTracker,
        notifier: ChangeNotifier | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._tickets = ticket_repo
        self._registry = skill_registry
        self._workload = workload_tracker
        self._notifier = notifier
        self._clock = clock

    async def execute(self, ticket_id: int) -> AssignmentResult:
        """Assign *ticket_id* to the highest-scoring qualified operator.

        Pipeline:
        1. Load the ticket; it must exist, be unassigned and still active
        2. Candidates holding the ticket's category skill
        3. Current active workload of every candidate
        4. Score (proficiency * 10 - workload * 3), tie-break by operator id
        5. Conditional write: only succeeds while the ticket is unassigned and active

        Raises:
            NotFoundError: the ticket does not exist.
            AlreadyAssignedError: the ticket has (or just got) an operator.
            PreconditionFailedError: the ticket is (or just became) resolved or closed.
            ConcurrentModificationError: the write was rejected but a re-read
                shows the ticket assignable again (e.g. closed, then reopened).
        """
        ticket = await self._tickets.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)
        _ensure_assignable(ticket)

        candidates = await self._registry.skills_for(ticket.category)
        if not candidates:
            logger.warning(
                "Ticket %s: no operators with skill %s, leaving unassigned",
                ticket_id, ticket.category.value,
            )
            return AssignmentResult(
                ticket_id=ticket_id,
                operator_id=None,
                reason=f"No operators with skill '{ticket.category.value}'",
            )

        workload = await self._workload.active_count_for(c.operator_id for c in candidates)
        best = pick_best(candidates, workload)

        if not await self._tickets.assign_if_unassigned(ticket_id, best.operator_id):
            # Someone assigned, resolved or closed the ticket since it was read
            current = await self._tickets.get_by_id(ticket_id)
            if current is None:
                raise NotFoundError("Ticket", ticket_id)
            logger.warning(
                "Ticket %s: conditional assignment rejected (status=%s, operator=%s)",
                ticket_id, current.status.value, current.assigned_operator_id,
            )
            _ensure_assignable(current)
            raise ConcurrentModificationError(ticket_id, current.version)

        ticket.assigned_operator_id = best.operator_id
        logger.info(
            "Ticket %s → operator %s (proficiency=%d, active=%d, score=%d)",
            ticket_id, best.operator_id, best.proficiency_level,
            best.active_count, best.score,
        )

        await publish(
            self._notifier,
            TicketChanged(
                ticket_id=ticket_id,
                change=CHANGE_ASSIGNED,
                status=ticket.status,
                assigned_operator_id=best.operator_id,
                occurred_at=self._clock(),
            ),
        )
        return AssignmentResult(
            ticket_id=ticket_id,
            operator_id=best.operator_id,
            score=best.score,
            reason=(
                f"Best score {best.score} "
                f"(proficiency {best.proficiency_level}, {best.active_count} active)"
            ),
        )


def _ensure_assignable(ticket: Ticket) -> None:
    if ticket.is_assigned():
        raise AlreadyAssignedError(ticket.id, ticket.assigned_operator_id)
    if not ticket.is_active():
        raise PreconditionFailedError(
            f"Ticket {ticket.id} is {ticket.status.value}; only active tickets can be assigned",
            {"ticket_id": ticket.id, "status": ticket.status.value},
        )
