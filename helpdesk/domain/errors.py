"""Domain errors raised by the use cases and mapped to HTTP at the API edge.

A ticket that cannot be routed because nobody holds the skill is *not* an
error: it is reported through ``AssignmentResult.unassigned``. Likewise a
priority without an SLA target yields an empty compliance report.
"""

from __future__ import annotations


class HelpdeskError(Exception):
    """Base class for all business-level failures."""

    kind = "error"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(HelpdeskError):
    kind = "not_found"

    def __init__(self, resource_type: str, resource_id: object):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class PreconditionFailedError(HelpdeskError):
    kind = "precondition_failed"


class AlreadyAssignedError(PreconditionFailedError):
    kind = "already_assigned"

    def __init__(self, ticket_id: int, operator_id: str | None):
        self.ticket_id = ticket_id
        self.operator_id = operator_id
        super().__init__(
            f"Ticket {ticket_id} is already assigned",
            {"ticket_id": ticket_id, "assigned_operator_id": operator_id},
        )


class ConcurrentModificationError(HelpdeskError):
    """Optimistic-lock conflict; the caller may re-read and retry."""

    kind = "concurrent_modification"

    def __init__(self, ticket_id: int, expected_version: int):
        self.ticket_id = ticket_id
        self.expected_version = expected_version
        super().__init__(
            f"Ticket {ticket_id} was modified concurrently (expected version {expected_version})",
            {"ticket_id": ticket_id, "expected_version": expected_version},
        )
