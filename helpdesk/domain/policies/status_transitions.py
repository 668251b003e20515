"""StatusTransitionPolicy: ticket lifecycle rules and SLA timestamp stamping."""

from __future__ import annotations

from datetime import datetime

from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.value_objects.enums import TicketStatus

# Status entered → timestamp field stamped on first entry
_STAMPED_ON_ENTRY: dict[TicketStatus, str] = {
    TicketStatus.IN_PROGRESS: "first_response_at",
    TicketStatus.RESOLVED: "resolved_at",
    TicketStatus.CLOSED: "closed_at",
}


def is_transition_allowed(current: TicketStatus, new: TicketStatus) -> bool:
    """Single gate for lifecycle moves.

    Every status may currently move to every other one, including
    closed → open (reopen). Tighten the graph here; the timestamp logic in
    ``apply_status`` does not depend on it.
    """
    return True


def apply_status(ticket: Ticket, new_status: TicketStatus, now: datetime) -> list[str]:
    """Move *ticket* to *new_status* in place.

    Timestamps are set-once: entering in_progress / resolved / closed only
    writes first_response_at / resolved_at / closed_at when that field is
    still empty. Re-entering the current status only refreshes updated_at.

    Returns:
        names of the timestamp fields that were stamped by this call.
    """
    stamped: list[str] = []
    if ticket.status != new_status:
        ticket.status = new_status
        field_name = _STAMPED_ON_ENTRY.get(new_status)
        if field_name and getattr(ticket, field_name) is None:
            setattr(ticket, field_name, now)
            stamped.append(field_name)
    ticket.updated_at = now
    return stamped
