"""Port interface for publishing ticket change events."""

from abc import ABC, abstractmethod

from helpdesk.domain.entities.ticket_changed import TicketChanged


class ChangeNotifier(ABC):
    @abstractmethod
    async def ticket_changed(self, event: TicketChanged) -> None:
        """Hand the event to the delivery channel. Must not block on consumers."""
        ...
