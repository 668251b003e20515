"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class TicketCategory(str, Enum):
    """Skill domain shared by ticket categories and operator skills."""

    NETWORK = "network"
    SOFTWARE = "software"
    HARDWARE = "hardware"
    DATABASE = "database"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TicketPriority.LOW: 0,
    TicketPriority.MEDIUM: 1,
    TicketPriority.HIGH: 2,
    TicketPriority.CRITICAL: 3,
}


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    PENDING = "pending"
    RESOLVED = "resolved"
    CLOSED = "closed"


# Statuses that count towards an operator's workload
ACTIVE_STATUSES = frozenset(
    {TicketStatus.OPEN, TicketStatus.IN_PROGRESS, TicketStatus.PENDING}
)

# Statuses that make a ticket eligible for SLA reporting
REPORTING_STATUSES = frozenset({TicketStatus.RESOLVED, TicketStatus.CLOSED})
