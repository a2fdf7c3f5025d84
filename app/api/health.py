"""
Health check and status endpoints
"""
from fastapi import APIRouter, Request
from app.config import get_settings
from app.scheduler import get_scheduled_jobs
from app.utils.helpers import utc_now_iso
from app import __version__

settings = get_settings()

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    repository = request.app.state.repository
    return {
        "status": "healthy" if repository.is_loaded else "degraded",
        "timestamp": utc_now_iso(),
        "version": __version__
    }


@router.get("/status")
async def get_status(request: Request):
    """Get system status"""
    repository = request.app.state.repository
    snapshot = repository.snapshot() if repository.is_loaded else None
    return {
        "app_name": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "data": {
            "loaded": snapshot is not None,
            "source": snapshot.source if snapshot else settings.data_path,
            "loaded_at": snapshot.loaded_at if snapshot else None,
            "states": len(snapshot.regions) if snapshot else 0,
            "error": None if snapshot else "Claims data is currently unavailable",
        },
        "pending_actions": request.app.state.action_service.pending_count,
        "scheduled_jobs": get_scheduled_jobs(),
        "timestamp": utc_now_iso()
    }
