"""Ticket entity: a customer-reported unit of work."""

from dataclasses import dataclass
from datetime import datetime

from helpdesk.domain.value_objects.enums import (
    ACTIVE_STATUSES,
    REPORTING_STATUSES,
    TicketCategory,
    TicketPriority,
    TicketStatus,
)


@dataclass
class Ticket:
    id: int | None
    ticket_number: int | None
    title: str
    category: TicketCategory
    priority: TicketPriority
    customer_id: str
    created_at: datetime
    updated_at: datetime
    status: TicketStatus = TicketStatus.OPEN
    assigned_operator_id: str | None = None
    first_response_at: datetime | None = None
    resolved_at: datetime | None = None
    closed_at: datetime | None = None
    # Concurrency token, bumped by every committed status transition
    version: int = 1

    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def is_assigned(self) -> bool:
        return self.assigned_operator_id is not None

    def is_reportable(self) -> bool:
        """Resolved/closed and already answered once."""
        return self.status in REPORTING_STATUSES and self.first_response_at is not None
