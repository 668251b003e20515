"""SLA target: per-priority response and resolution deadlines in hours."""

from dataclasses import dataclass

from helpdesk.domain.value_objects.enums import TicketPriority


@dataclass
class SlaTarget:
    priority: TicketPriority
    response_hours: int
    resolution_hours: int

    def __post_init__(self):
        if self.response_hours < 0 or self.resolution_hours < 0:
            raise ValueError("SLA hours cannot be negative")
