"""Change notifiers: Postgres NOTIFY channel and a log-only fallback."""

from __future__ import annotations

import json
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.domain.entities.ticket_changed import TicketChanged

logger = logging.getLogger(__name__)


class PgNotifyChangeNotifier(ChangeNotifier):
    """Queue a NOTIFY in the caller's transaction.

    Postgres delivers it to LISTENers only when that transaction commits, so
    subscribers never see a change that was rolled back. The statement runs
    in a savepoint: if it fails, only the savepoint is rolled back and the
    ticket change it reports still commits.
    """

    def __init__(self, session: AsyncSession, channel: str):
        self._s = session
        self._channel = channel

    async def ticket_changed(self, event: TicketChanged) -> None:
        payload = json.dumps(event.to_payload())
        async with self._s.begin_nested():
            await self._s.execute(
                text("SELECT pg_notify(:channel, :payload)"),
                {"channel": self._channel, "payload": payload},
            )
        logger.debug("NOTIFY %s: %s", self._channel, payload)


class LoggingChangeNotifier(ChangeNotifier):
    """Used when NOTIFICATIONS_ENABLED is off."""

    async def ticket_changed(self, event: TicketChanged) -> None:
        logger.info(
            "Ticket %s changed (%s): status=%s operator=%s",
            event.ticket_id, event.change, event.status.value, event.assigned_operator_id,
        )
