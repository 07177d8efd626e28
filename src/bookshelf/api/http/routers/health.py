"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    return {"status": "healthy", "service": "bookshelf"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check - validates the database and the cover storage.

    Returns 200 if both are usable, 503 otherwise.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    checks = {}

    db_healthy = app_deps.database_service.health_check()
    checks["database"] = {
        "status": "healthy" if db_healthy else "unhealthy",
        "type": "sqlite" if config.database.is_sqlite else "postgresql",
    }

    storage_healthy = app_deps.asset_store.is_writable()
    checks["storage"] = {
        "status": "healthy" if storage_healthy else "unhealthy",
        "root": str(app_deps.asset_store.root),
    }

    all_healthy = db_healthy and storage_healthy
    body = {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks,
        "environment": config.app.environment,
    }
    if not all_healthy:
        return JSONResponse(status_code=503, content=body)
    return body


@router.get("/database", response_model=None)
def database_health(request: Request) -> dict[str, Any] | JSONResponse:
    """Database connectivity with connection pool statistics."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    healthy = app_deps.database_service.health_check()
    body = {
        "status": "healthy" if healthy else "unhealthy",
        "pool": app_deps.database_service.get_pool_status(),
    }
    if not healthy:
        return JSONResponse(status_code=503, content=body)
    return body
