"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.adapters.persistence.models import (
    OperatorSkillModel,
    SlaConfigModel,
    TicketModel,
)
from helpdesk.application.ports.skill_repo import SkillRepository
from helpdesk.application.ports.sla_repo import SlaTargetRepository
from helpdesk.application.ports.ticket_repo import TicketFilter, TicketRepository
from helpdesk.domain.entities.operator_skill import OperatorSkillRecord
from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.entities.ticket import Ticket
from helpdesk.domain.value_objects.enums import (
    ACTIVE_STATUSES,
    TicketCategory,
    TicketPriority,
    TicketStatus,
)

# ─── Mappers ─────────────────────────────────────────────────────────


def _ticket_to_domain(m: TicketModel) -> Ticket:
    return Ticket(
        id=m.id,
        ticket_number=m.ticket_number,
        title=m.title,
        category=TicketCategory(m.category),
        priority=TicketPriority(m.priority),
        customer_id=m.customer_id,
        created_at=m.created_at,
        updated_at=m.updated_at,
        status=TicketStatus(m.status),
        assigned_operator_id=m.assigned_operator_id,
        first_response_at=m.first_response_at,
        resolved_at=m.resolved_at,
        closed_at=m.closed_at,
        version=m.version,
    )


def _skill_to_domain(m: OperatorSkillModel) -> OperatorSkillRecord:
    return OperatorSkillRecord(
        operator_id=m.user_id,
        skill=TicketCategory(m.skill),
        proficiency_level=m.proficiency_level,
    )


def _sla_to_domain(m: SlaConfigModel) -> SlaTarget:
    return SlaTarget(
        priority=TicketPriority(m.priority),
        response_hours=m.response_hours,
        resolution_hours=m.resolution_hours,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlTicketRepository(TicketRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, ticket_id: int) -> Ticket | None:
        # populate_existing: a conflicting writer may have committed since our last read
        m = await self._s.get(TicketModel, ticket_id, populate_existing=True)
        return _ticket_to_domain(m) if m else None

    async def list(self, ticket_filter: TicketFilter | None = None) -> list[Ticket]:
        stmt = select(TicketModel).order_by(TicketModel.ticket_number)
        f = ticket_filter or TicketFilter()
        if f.statuses is not None:
            stmt = stmt.where(TicketModel.status.in_([s.value for s in f.statuses]))
        if f.priority is not None:
            stmt = stmt.where(TicketModel.priority == f.priority.value)
        if f.category is not None:
            stmt = stmt.where(TicketModel.category == f.category.value)
        if f.assigned_operator_ids is not None:
            stmt = stmt.where(TicketModel.assigned_operator_id.in_(sorted(f.assigned_operator_ids)))
        if f.unassigned_only:
            stmt = stmt.where(TicketModel.assigned_operator_id.is_(None))
        result = await self._s.execute(stmt)
        return [_ticket_to_domain(m) for m in result.scalars()]

    async def assign_if_unassigned(self, ticket_id: int, operator_id: str) -> bool:
        result = await self._s.execute(
            update(TicketModel)
            .where(
                TicketModel.id == ticket_id,
                TicketModel.assigned_operator_id.is_(None),
                TicketModel.status.in_([s.value for s in ACTIVE_STATUSES]),
            )
            .values(assigned_operator_id=operator_id)
        )
        await self._s.flush()
        return result.rowcount == 1

    async def save_if_version(self, ticket: Ticket, expected_version: int) -> Ticket | None:
        result = await self._s.execute(
            update(TicketModel)
            .where(
                TicketModel.id == ticket.id,
                TicketModel.version == expected_version,
            )
            .values(
                status=ticket.status.value,
                first_response_at=ticket.first_response_at,
                resolved_at=ticket.resolved_at,
                closed_at=ticket.closed_at,
                updated_at=ticket.updated_at,
                version=expected_version + 1,
            )
        )
        await self._s.flush()
        if result.rowcount != 1:
            return None
        ticket.version = expected_version + 1
        return ticket


class SqlSkillRepository(SkillRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def list_by_category(self, category: TicketCategory) -> list[OperatorSkillRecord]:
        result = await self._s.execute(
            select(OperatorSkillModel)
            .where(OperatorSkillModel.skill == category.value)
            .order_by(OperatorSkillModel.proficiency_level.desc(), OperatorSkillModel.user_id)
        )
        return [_skill_to_domain(m) for m in result.scalars()]

    async def list_all(self) -> list[OperatorSkillRecord]:
        result = await self._s.execute(
            select(OperatorSkillModel).order_by(OperatorSkillModel.user_id, OperatorSkillModel.skill)
        )
        return [_skill_to_domain(m) for m in result.scalars()]

    async def upsert(self, record: OperatorSkillRecord) -> OperatorSkillRecord:
        stmt = insert(OperatorSkillModel).values(
            user_id=record.operator_id,
            skill=record.skill.value,
            proficiency_level=record.proficiency_level,
        )
        await self._s.execute(
            stmt.on_conflict_do_update(
                constraint="uq_operator_skills_user_skill",
                set_={"proficiency_level": stmt.excluded.proficiency_level},
            )
        )
        await self._s.flush()
        return record


class SqlSlaTargetRepository(SlaTargetRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_priority(self, priority: TicketPriority) -> SlaTarget | None:
        result = await self._s.execute(
            select(SlaConfigModel).where(SlaConfigModel.priority == priority.value)
        )
        m = result.scalar_one_or_none()
        return _sla_to_domain(m) if m else None

    async def get_all(self) -> list[SlaTarget]:
        result = await self._s.execute(select(SlaConfigModel).order_by(SlaConfigModel.id))
        return [_sla_to_domain(m) for m in result.scalars()]

    async def upsert(self, target: SlaTarget) -> SlaTarget:
        stmt = insert(SlaConfigModel).values(
            priority=target.priority.value,
            response_hours=target.response_hours,
            resolution_hours=target.resolution_hours,
        )
        await self._s.execute(
            stmt.on_conflict_do_update(
                index_elements=[SlaConfigModel.priority],
                set_={
                    "response_hours": stmt.excluded.response_hours,
                    "resolution_hours": stmt.excluded.resolution_hours,
                },
            )
        )
        await self._s.flush()
        return target
