"""FastAPI dependency injection: wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.adapters.notifier.pg_notify import LoggingChangeNotifier, PgNotifyChangeNotifier
from helpdesk.adapters.persistence.database import get_session
from helpdesk.adapters.persistence.repositories import (
    SqlSkillRepository,
    SqlSlaTargetRepository,
    SqlTicketRepository,
)
from helpdesk.application.ports.change_notifier import ChangeNotifier
from helpdesk.application.services.skill_registry import SkillRegistry
from helpdesk.application.services.workload_tracker import WorkloadTracker
from helpdesk.application.use_cases.assign_ticket import AssignTicketUseCase
from helpdesk.application.use_cases.operator_overview import OperatorOverviewUseCase
from helpdesk.application.use_cases.sla_report import SlaReportUseCase
from helpdesk.application.use_cases.transition_status import TransitionStatusUseCase
from helpdesk.application.use_cases.update_sla_target import UpdateSlaTargetUseCase
from helpdesk.config import settings

_logging_notifier = LoggingChangeNotifier()


def get_ticket_repo(session: AsyncSession = Depends(get_session)) -> SqlTicketRepository:
    return SqlTicketRepository(session)


def get_skill_repo(session: AsyncSession = Depends(get_session)) -> SqlSkillRepository:
    return SqlSkillRepository(session)


def get_sla_repo(session: AsyncSession = Depends(get_session)) -> SqlSlaTargetRepository:
    return SqlSlaTargetRepository(session)


def get_notifier(session: AsyncSession = Depends(get_session)) -> ChangeNotifier:
    if settings.notifications_enabled:
        return PgNotifyChangeNotifier(session, settings.notify_channel)
    return _logging_notifier


def get_assign_ticket_uc(
    ticket_repo: SqlTicketRepository = Depends(get_ticket_repo),
    skill_repo: SqlSkillRepository = Depends(get_skill_repo),
    notifier: ChangeNotifier = Depends(get_notifier),
) -> AssignTicketUseCase:
    return AssignTicketUseCase(
        ticket_repo=ticket_repo,
        skill_registry=SkillRegistry(skill_repo),
        workload_tracker=WorkloadTracker(ticket_repo),
        notifier=notifier,
    )


def get_transition_status_uc(
    ticket_repo: SqlTicketRepository = Depends(get_ticket_repo),
    notifier: ChangeNotifier = Depends(get_notifier),
) -> TransitionStatusUseCase:
    return TransitionStatusUseCase(ticket_repo=ticket_repo, notifier=notifier)


def get_sla_report_uc(
    ticket_repo: SqlTicketRepository = Depends(get_ticket_repo),
    sla_repo: SqlSlaTargetRepository = Depends(get_sla_repo),
) -> SlaReportUseCase:
    return SlaReportUseCase(ticket_repo=ticket_repo, sla_repo=sla_repo)


def get_update_sla_target_uc(
    sla_repo: SqlSlaTargetRepository = Depends(get_sla_repo),
) -> UpdateSlaTargetUseCase:
    return UpdateSlaTargetUseCase(sla_repo=sla_repo)


def get_operator_overview_uc(
    skill_repo: SqlSkillRepository = Depends(get_skill_repo),
    ticket_repo: SqlTicketRepository = Depends(get_ticket_repo),
) -> OperatorOverviewUseCase:
    return OperatorOverviewUseCase(skill_repo=skill_repo, ticket_repo=ticket_repo)
