"""Health check endpoints."""

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.lms.api.http.app_data import ApplicationDependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "lms"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, str] | JSONResponse:
    """Readiness probe: 503 when the database is unreachable."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    if not app_deps.database_service.health_check():
        return JSONResponse(
            status_code=503, content={"status": "unavailable", "database": "unhealthy"}
        )
    return {"status": "ready", "database": "healthy"}
