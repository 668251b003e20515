"""Ticket endpoints: read views, assignment and status transitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from helpdesk.adapters.persistence.repositories import SqlTicketRepository
from helpdesk.application.ports.ticket_repo import TicketFilter
from helpdesk.application.use_cases.assign_ticket import AssignTicketUseCase
from helpdesk.application.use_cases.transition_status import TransitionStatusUseCase
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.errors import NotFoundError
from helpdesk.domain.value_objects.enums import TicketCategory, TicketPriority, TicketStatus
from helpdesk.infrastructure.api.dependencies import (
    get_assign_ticket_uc,
    get_ticket_repo,
    get_transition_status_uc,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])


class StatusChangeRequest(BaseModel):
    status: TicketStatus


@router.get("")
async def list_tickets(
    status: TicketStatus | None = None,
    priority: TicketPriority | None = None,
    category: TicketCategory | None = None,
    assigned_operator_id: str | None = None,
    unassigned: bool = False,
    repo: SqlTicketRepository = Depends(get_ticket_repo),
):
    """List tickets, optionally filtered."""
    tickets = await repo.list(
        TicketFilter(
            statuses=frozenset({status}) if status else None,
            priority=priority,
            category=category,
            assigned_operator_ids=(
                frozenset({assigned_operator_id}) if assigned_operator_id else None
            ),
            unassigned_only=unassigned,
        )
    )
    return {
        "total": len(tickets),
        "tickets": [_serialize_ticket(t) for t in tickets],
    }


@router.get("/{ticket_id}")
async def get_ticket(ticket_id: int, repo: SqlTicketRepository = Depends(get_ticket_repo)):
    ticket = await repo.get_by_id(ticket_id)
    if ticket is None:
        raise NotFoundError("Ticket", ticket_id)
    return _serialize_ticket(ticket)


@router.post("/{ticket_id}/assign")
async def assign_ticket(
    ticket_id: int,
    uc: AssignTicketUseCase = Depends(get_assign_ticket_uc),
):
    """Route the ticket to the best operator, or report that nobody qualifies."""
    result = await uc.execute(ticket_id)
    return result.to_payload()


@router.post("/{ticket_id}/status")
async def change_status(
    ticket_id: int,
    body: StatusChangeRequest,
    uc: TransitionStatusUseCase = Depends(get_transition_status_uc),
):
    ticket = await uc.execute(ticket_id, body.status)
    return _serialize_ticket(ticket)


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _serialize_ticket(t: Ticket) -> dict:
    """Convert a domain Ticket to an API response dict."""
    return {
        "id": t.id,
        "ticket_number": t.ticket_number,
        "title": t.title,
        "category": t.category.value,
        "priority": t.priority.value,
        "status": t.status.value,
        "customer_id": t.customer_id,
        "assigned_operator_id": t.assigned_operator_id,
        "created_at": _iso(t.created_at),
        "updated_at": _iso(t.updated_at),
        "first_response_at": _iso(t.first_response_at),
        "resolved_at": _iso(t.resolved_at),
        "closed_at": _iso(t.closed_at),
    }
