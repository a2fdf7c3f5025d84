"""
Decision support endpoints consumed by the DSS dashboard
"""
from fastapi import APIRouter, Body, Depends, Request
from typing import Any

from app.exceptions import DSSError, MalformedActionRequestError
from app.services.action_service import ActionService
from app.services.claims_repository import ClaimsRepository
from app.services.insight_report import InsightReportService
from app.utils.logger import log

router = APIRouter(prefix="/api/dss", tags=["dss"])


def get_repository(request: Request) -> ClaimsRepository:
    return request.app.state.repository


def get_report_service(request: Request) -> InsightReportService:
    return request.app.state.report_service


def get_action_service(request: Request) -> ActionService:
    return request.app.state.action_service


@router.get("/insights")
async def get_insights(service: InsightReportService = Depends(get_report_service)):
    """
    Full insight report: metrics, alerts, insights, action items,
    performance trends and per-state analysis
    """
    try:
        return service.build_report().to_dict()
    except DSSError:
        raise
    except Exception as e:
        log.error(f"Insight report error: {str(e)}")
        raise DSSError("Failed to generate insights") from e


@router.get("/state-analysis")
async def get_state_analysis(service: InsightReportService = Depends(get_report_service)):
    """Rollups for every state, keyed by state id"""
    return {rid: r.to_dict() for rid, r in service.state_analysis().items()}


@router.get("/state-analysis/{region_id}")
async def get_region_analysis(region_id: str, service: InsightReportService = Depends(get_report_service)):
    """Rollup for a single state"""
    return service.region_analysis(region_id).to_dict()


@router.get("/overview")
async def get_overview(service: InsightReportService = Depends(get_report_service)):
    """Dataset-wide claim totals and village status counts"""
    return service.overview()


@router.post("/action/{action_id}")
async def confirm_action(
    action_id: str,
    body: Any = Body(None),
    service: ActionService = Depends(get_action_service)
):
    """
    Acknowledge a dashboard action. Nothing is persisted.

    Body: {"parameters": {...}}. The raw body is taken so that any
    malformed payload is reported as 400 rather than a validation error.
    """
    if not isinstance(body, dict):
        raise MalformedActionRequestError("Request body must be a JSON object")
    parameters = body.get("parameters")
    return await service.acknowledge(action_id, parameters)


@router.post("/reload")
def reload_data(repository: ClaimsRepository = Depends(get_repository)):
    """Re-read the claims dataset; the previous snapshot is kept on failure"""
    snapshot = repository.reload()
    return {
        "success": True,
        "regionCount": len(snapshot.regions),
        "loadedAt": snapshot.loaded_at,
    }
