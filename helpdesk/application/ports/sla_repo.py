"""Port interface for SLA target configuration."""

from abc import ABC, abstractmethod

from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.value_objects.enums import TicketPriority


class SlaTargetRepository(ABC):
    @abstractmethod
    async def get_by_priority(self, priority: TicketPriority) -> SlaTarget | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[SlaTarget]:
        ...

    @abstractmethod
    async def upsert(self, target: SlaTarget) -> SlaTarget:
        ...
