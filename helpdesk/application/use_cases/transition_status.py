"""TransitionStatusUseCase: move a ticket through its lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.application.ports.ticket_repo import TicketRepository
from helpdesk.application.services.change_events import publish, utcnow
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.entities.ticket_changed import CHANGE_STATUS, TicketChanged
from helpdesk.domain.errors import (
    ConcurrentModificationError,
    NotFoundError,
    PreconditionFailedError,
)
from helpdesk.domain.policies.status_transitions import apply_status, is_transition_allowed
from helpdesk.domain.value_objects.enums import TicketStatus

logger = logging.getLogger(__name__)


class TransitionStatusUseCase:
    def __init__(
        self,
        ticket_repo: TicketRepository,
        notifier: ChangeNotifier | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._tickets = ticket_repo
        self._notifier = notifier
        self._clock = clock

    async def execute(self, ticket_id: int, new_status: TicketStatus) -> Ticket:
        """Apply *new_status* and its set-once timestamp side effects.

        Re-applying the current status only refreshes updated_at and emits no
        change event.

        Raises:
            NotFoundError: the ticket does not exist.
            PreconditionFailedError: the lifecycle forbids the move.
            ConcurrentModificationError: someone else saved the ticket first.
        """
        ticket = await self._tickets.get_by_id(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket", ticket_id)

        previous = ticket.status
        if not is_transition_allowed(previous, new_status):
            raise PreconditionFailedError(
                f"Ticket {ticket_id} cannot move from {previous.value} to {new_status.value}",
                {"ticket_id": ticket_id, "from": previous.value, "to": new_status.value},
            )

        expected_version = ticket.version
        now = self._clock()
        stamped = apply_status(ticket, new_status, now)

        saved = await self._tickets.save_if_version(ticket, expected_version)
        if saved is None:
            logger.warning(
                "Ticket %s: version %d is stale, transition to %s rejected",
                ticket_id, expected_version, new_status.value,
            )
            raise ConcurrentModificationError(ticket_id, expected_version)

        if previous == new_status:
            # Only updated_at moved; the version still advances with the write
            logger.info("Ticket %s: already %s, updated_at refreshed", ticket_id, previous.value)
            return saved

        logger.info(
            "Ticket %s: %s → %s (stamped: %s)",
            ticket_id, previous.value, new_status.value, ", ".join(stamped) or "none",
        )

        await publish(
            self._notifier,
            TicketChanged(
                ticket_id=ticket_id,
                change=CHANGE_STATUS,
                status=saved.status,
                assigned_operator_id=saved.assigned_operator_id,
                occurred_at=now,
            ),
        )
        return saved
