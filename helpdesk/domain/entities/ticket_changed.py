"""TicketChanged: logical event emitted after a successful mutation."""

from dataclasses import dataclass
from datetime import datetime

from helpdesk.domain.value_objects.enums import TicketStatus

CHANGE_ASSIGNED = "assigned"
CHANGE_STATUS = "status"


@dataclass(frozen=True)
class TicketChanged:
    ticket_id: int
    change: str
    status: TicketStatus
    assigned_operator_id: str | None
    occurred_at: datetime

    def to_payload(self) -> dict:
        return {
            "ticket_id": self.ticket_id,
            "change": self.change,
            "status": self.status.value,
            "assigned_operator_id": self.assigned_operator_id,
            "occurred_at": self.occurred_at.isoformat(),
        }
