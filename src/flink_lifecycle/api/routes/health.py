"""Health and readiness routes."""

from fastapi import APIRouter, Depends

from flink_lifecycle import __version__
from flink_lifecycle.api.dependencies import get_lifecycle_service, get_settings
from flink_lifecycle.application.services import JobLifecycleService
from flink_lifecycle.config import Settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "version": __version__}


@router.get("/readyz")
async def readyz(
    settings: Settings = Depends(get_settings),
    _: JobLifecycleService = Depends(get_lifecycle_service),
) -> dict[str, object]:
    """Readiness probe; reports how missing observe times are handled."""

    return {
        "status": "ready",
        "implicitObserveTime": settings.allow_implicit_observe_time,
    }


__all__ = ["router"]
