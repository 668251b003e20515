"""Reporting endpoints: SLA compliance, resolution time, dashboard counters."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from helpdesk.application.use_cases.sla_report import SlaReportUseCase
from helpdesk.domain.policies.sla_compliance import ComplianceReport
from helpdesk.domain.value_objects.enums import TicketPriority
from helpdesk.infrastructure.api.dependencies import get_sla_report_uc

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/sla")
async def sla_compliance_all(uc: SlaReportUseCase = Depends(get_sla_report_uc)):
    """Compliance for every priority, most urgent first."""
    reports = await uc.compliance_all()
    return {"priorities": [_serialize_report(r) for r in reports]}


@router.get("/sla/{priority}")
async def sla_compliance(
    priority: TicketPriority,
    uc: SlaReportUseCase = Depends(get_sla_report_uc),
):
    return _serialize_report(await uc.compliance(priority))


@router.get("/resolution-time")
async def resolution_time(uc: SlaReportUseCase = Depends(get_sla_report_uc)):
    return {"average_resolution_hours": await uc.average_resolution_hours()}


@router.get("/overview")
async def overview(uc: SlaReportUseCase = Depends(get_sla_report_uc)):
    """Aggregate counters for the manager dashboard."""
    summary, avg_hours = await uc.overview()
    return {
        "total_resolved": summary.total_resolved,
        "total_active": summary.total_active,
        "unassigned_active": summary.unassigned_active,
        "critical_active": summary.critical_active,
        "average_resolution_hours": avg_hours,
    }


def _serialize_report(r: ComplianceReport) -> dict:
    return {
        "priority": r.priority.value,
        "total": r.total,
        "met": r.met,
        "compliance_percent": r.compliance_percent,
        "response_hours": r.response_hours,
        "resolution_hours": r.resolution_hours,
    }
