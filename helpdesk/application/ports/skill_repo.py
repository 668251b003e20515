"""Port interface for operator skill persistence."""

from abc import ABC, abstractmethod

from helpdesk.domain.entities.operator_skill import OperatorSkillRecord
from helpdesk.domain.value_objects.enums import TicketCategory


class SkillRepository(ABC):
    @abstractmethod
    async def list_by_category(self, category: TicketCategory) -> list[OperatorSkillRecord]:
        ...

    @abstractmethod
    async def list_all(self) -> list[OperatorSkillRecord]:
        ...

    @abstractmethod
    async def upsert(self, record: OperatorSkillRecord) -> OperatorSkillRecord:
        """Insert or replace the record for (operator_id, skill)."""
        ...
