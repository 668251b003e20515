"""Operator roster and SLA target settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from helpdesk.adapters.persistence.repositories import SqlSlaTargetRepository
from helpdesk.application.use_cases.operator_overview import OperatorOverviewUseCase
from helpdesk.application.use_cases.sla_report import REPORT_PRIORITY_ORDER
from helpdesk.application.use_cases.update_sla_target import UpdateSlaTargetUseCase
from helpdesk.domain.entities.sla_target import SlaTarget
from helpdesk.domain.value_objects.enums import TicketPriority
from helpdesk.infrastructure.api.dependencies import (
    get_operator_overview_uc,
    get_sla_repo,
    get_update_sla_target_uc,
)

router = APIRouter(tags=["settings"])


class SlaTargetUpdate(BaseModel):
    response_hours: int | None = Field(default=None, ge=0)
    resolution_hours: int | None = Field(default=None, ge=0)


@router.get("/operators")
async def list_operators(uc: OperatorOverviewUseCase = Depends(get_operator_overview_uc)):
    """Operators with their skills and active / resolved ticket counts."""
    operators = await uc.execute()
    return {
        "total_operators": len(operators),
        "operators": [
            {
                "operator_id": op.operator_id,
                "skills": {skill.value: level for skill, level in op.skills.items()},
                "active_tickets": op.active_tickets,
                "resolved_tickets": op.resolved_tickets,
            }
            for op in operators
        ],
    }


@router.get("/sla-targets")
async def list_sla_targets(repo: SqlSlaTargetRepository = Depends(get_sla_repo)):
    targets = {t.priority: t for t in await repo.get_all()}
    return {
        "targets": [
            _serialize_target(targets[p]) for p in REPORT_PRIORITY_ORDER if p in targets
        ]
    }


@router.put("/sla-targets/{priority}")
async def update_sla_target(
    priority: TicketPriority,
    body: SlaTargetUpdate,
    uc: UpdateSlaTargetUseCase = Depends(get_update_sla_target_uc),
):
    target = await uc.execute(
        priority,
        response_hours=body.response_hours,
        resolution_hours=body.resolution_hours,
    )
    return _serialize_target(target)


def _serialize_target(t: SlaTarget) -> dict:
    return {
        "priority": t.priority.value,
        "response_hours": t.response_hours,
        "resolution_hours": t.resolution_hours,
    }
