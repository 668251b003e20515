"""WorkloadPolicy: count active tickets per operator."""

from __future__ import annotations

from collections.abc import Iterable

from helpdesk.domain.entities.ticket import Ticket


def count_active(tickets: Iterable[Ticket], operator_ids: Iterable[str]) -> dict[str, int]:
    """Return operator_id → number of active tickets assigned to them.

    Every requested operator is present in the result; idle operators map to 0.
    Tickets assigned to operators outside *operator_ids* are ignored.
    """
    workload = {op_id: 0 for op_id in operator_ids}
    for ticket in tickets:
        op_id = ticket.assigned_operator_id
        if op_id in workload and ticket.is_active():
            workload[op_id] += 1
    return workload
