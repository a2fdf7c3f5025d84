"""
FRA Atlas Decision Support System
Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import random

from app.config import get_settings
from app.exceptions import DSSError, MalformedActionRequestError
from app.services.action_service import ActionService
from app.services.claims_repository import ClaimsRepository
from app.services.insight_report import InsightReportService
from app.utils.logger import log
from app import __version__

# Import routers
from app.api import health, dss
from app.middleware.cache_control import NoCacheMiddleware

settings = get_settings()


def create_app(
    repository: Optional[ClaimsRepository] = None,
    action_service: Optional[ActionService] = None,
    rng: Optional[random.Random] = None
) -> FastAPI:
    """
    Build the application. Collaborators default to instances configured
    from settings and are created at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        # Startup
        log.info(f"Starting {settings.app_name} v{__version__}")
        log.info(f"Environment: {settings.environment}")

        repo = repository or ClaimsRepository.from_file(settings.data_path)
        if not repo.is_loaded:
            log.error("Claims dataset unavailable; insight endpoints will return 500")

        app.state.repository = repo
        app.state.report_service = InsightReportService(
            repo,
            rng=rng or random.Random(settings.trend_jitter_seed)
        )
        app.state.action_service = action_service or ActionService(
            delay_min=settings.action_delay_min_seconds,
            delay_max=settings.action_delay_max_seconds,
            timeout=settings.action_timeout_seconds
        )

        # Periodic dataset reload
        from app.scheduler import start_scheduler, stop_scheduler
        try:
            start_scheduler(repo)
        except Exception as e:
            log.error(f"Scheduler startup error: {str(e)}")

        yield

        # Shutdown
        stop_scheduler()
        await app.state.action_service.cancel_all()
        log.info("Shutting down application")

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="""
        Decision support for Forest Rights Act claim records

        - Per-state claim rollups and approval / pending rates
        - Threshold alerts for pending-claim backlogs
        - Narrative insights with confidence, impact and timeline
        - Recommended actions and performance trends
        """,
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(NoCacheMiddleware)

    @app.exception_handler(DSSError)
    async def dss_error_handler(request: Request, exc: DSSError):
        if exc.status_code >= 500:
            log.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def action_validation_handler(request: Request, exc: RequestValidationError):
        # Undecodable action bodies are malformed requests, not 422s
        if request.url.path.startswith("/api/dss/action/"):
            error = MalformedActionRequestError("Request body must be a JSON object")
            return JSONResponse(status_code=error.status_code, content=error.to_dict())
        return await request_validation_exception_handler(request, exc)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(dss.router)

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "app": settings.app_name,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "status": "/status",
            "endpoints": {
                "insights": "GET /api/dss/insights",
                "state_analysis": "GET /api/dss/state-analysis",
                "state_analysis_single": "GET /api/dss/state-analysis/{region_id}",
                "overview": "GET /api/dss/overview",
                "confirm_action": "POST /api/dss/action/{action_id}",
                "reload_data": "POST /api/dss/reload"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.debug
    )
