"""Port interface for ticket persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.value_objects.enums import TicketCategory, TicketPriority, TicketStatus


@dataclass(frozen=True)
class TicketFilter:
    """Conjunctive filter; ``None`` fields are ignored."""

    statuses: frozenset[TicketStatus] | None = None
    priority: TicketPriority | None = None
    category: TicketCategory | None = None
    assigned_operator_ids: frozenset[str] | None = None
    unassigned_only: bool = False

    def matches(self, ticket: Ticket) -> bool:
        if self.statuses is not None and ticket.status not in self.statuses:
            return False
        if self.priority is not None and ticket.priority != self.priority:
            return False
        if self.category is not None and ticket.category != self.category:
            return False
        if (
            self.assigned_operator_ids is not None
            and ticket.assigned_operator_id not in self.assigned_operator_ids
        ):
            return False
        if self.unassigned_only and ticket.assigned_operator_id is not None:
            return False
        return True


class TicketRepository(ABC):
    @abstractmethod
    async def get_by_id(self, ticket_id: int) -> Ticket | None:
        ...

    @abstractmethod
    async def list(self, ticket_filter: TicketFilter | None = None) -> list[Ticket]:
        ...

    @abstractmethod
    async def assign_if_unassigned(self, ticket_id: int, operator_id: str) -> bool:
        """Atomically set assigned_operator_id while it is NULL and the ticket is active.

        Both conditions are checked by the write itself, not by an earlier
        read. Writes no other column. Returns False when the ticket is
        missing, already has an operator, or has been resolved or closed.
        """
        ...

    @abstractmethod
    async def save_if_version(self, ticket: Ticket, expected_version: int) -> Ticket | None:
        """Persist status + lifecycle timestamps if the stored version matches.

        On success the stored version is incremented and the updated ticket
        returned; on a version mismatch nothing is written and None returned.
        """
        ...
