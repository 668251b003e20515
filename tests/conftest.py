"""Pytest configuration and shared in-memory fakes of the ports."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.application.ports.skill_repo import SkillRepository
from helpdesk.application.ports.sla_repo import SlaTargetRepository
from helpdesk.application.ports.ticket_repo import TicketFilter, TicketRepository
from helpdesk.domain.entities.operator_skill import OperatorSkillRecord
from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.entities.ticket_changed import TicketChanged

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


# ─── In-memory fakes ────────────────────────────────────────────────


class FakeTicketRepo(TicketRepository):
    """Stores copies so callers cannot mutate the 'database' by accident.

    With ``interleave=True`` every call yields to the event loop first,
    letting concurrent coroutines interleave between read and write.
    """

    def __init__(self):
        self.tickets: dict[int, Ticket] = {}
        self.interleave = False

    def add(self, *tickets: Ticket) -> None:
        for t in tickets:
            self.tickets[t.id] = replace(t)

    async def _pause(self):
        if self.interleave:
            await asyncio.sleep(0)

    async def get_by_id(self, ticket_id):
        await self._pause()
        t = self.tickets.get(ticket_id)
        return replace(t) if t else None

    async def list(self, ticket_filter=None):
        await self._pause()
        f = ticket_filter or TicketFilter()
        return [replace(t) for t in self.tickets.values() if f.matches(t)]

    async def assign_if_unassigned(self, ticket_id, operator_id):
        await self._pause()
        stored = self.tickets.get(ticket_id)
        if stored is None or stored.assigned_operator_id is not None or not stored.is_active():
            return False
        stored.assigned_operator_id = operator_id
        return True

    async def save_if_version(self, ticket, expected_version):
        await self._pause()
        stored = self.tickets.get(ticket.id)
        if stored is None or stored.version != expected_version:
            return None
        saved = replace(
            stored,
            status=ticket.status,
            first_response_at=ticket.first_response_at,
            resolved_at=ticket.resolved_at,
            closed_at=ticket.closed_at,
            updated_at=ticket.updated_at,
            version=expected_version + 1,
        )
        self.tickets[ticket.id] = saved
        return replace(saved)


class FakeSkillRepo(SkillRepository):
    def __init__(self):
        self.records: list[OperatorSkillRecord] = []

    def add(self, operator_id, skill, level) -> None:
        self.records.append(OperatorSkillRecord(operator_id, skill, level))

    async def list_by_category(self, category):
        # Deliberately unsorted: ordering is the registry's job
        return [r for r in self.records if r.skill == category]

    async def list_all(self):
        return list(self.records)

    async def upsert(self, record):
        self.records = [
            r for r in self.records
            if (r.operator_id, r.skill) != (record.operator_id, record.skill)
        ]
        self.records.append(record)
        return record


class FakeSlaRepo(SlaTargetRepository):
    def __init__(self):
        self.targets: dict = {}

    def add(self, priority, response_hours, resolution_hours) -> None:
        self.targets[priority] = SlaTarget(priority, response_hours, resolution_hours)

    async def get_by_priority(self, priority):
        return self.targets.get(priority)

    async def get_all(self):
        return list(self.targets.values())

    async def upsert(self, target):
        self.targets[target.priority] = target
        return target


class RecordingNotifier(ChangeNotifier):
    def __init__(self):
        self.events: list[TicketChanged] = []

    async def ticket_changed(self, event):
        self.events.append(event)


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def ticket_repo():
    return FakeTicketRepo()


@pytest.fixture
def skill_repo():
    return FakeSkillRepo()


@pytest.fixture
def sla_repo():
    return FakeSlaRepo()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fixed_clock():
    """Clock returning T0 + 1h on the first call, +1h more on every call."""
    calls = {"n": 0}

    def _now():
        calls["n"] += 1
        return T0 + timedelta(hours=calls["n"])

    return _now
