"""Publishing of ticket change events on behalf of the use cases."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.domain.entities.ticket_changed import TicketChanged

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def publish(notifier: ChangeNotifier | None, event: TicketChanged) -> None:
    """Deliver *event*; delivery problems are logged, never raised.

    Notifiers that share the caller's transaction must isolate their own
    failures (see ``PgNotifyChangeNotifier``) so the change still commits.
    """
    if notifier is None:
        return
    try:
        await notifier.ticket_changed(event)
    except Exception:
        logger.exception(
            "Failed to publish %s event for ticket %s", event.change, event.ticket_id
        )
