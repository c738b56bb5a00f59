"""Job lifecycle and cluster configuration decision routes."""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException

from flink_lifecycle.api.dependencies import get_lifecycle_service
from flink_lifecycle.application.services import JobLifecycleService
from flink_lifecycle.domain.decision_models import (
    HighAvailabilityRequest,
    HighAvailabilityResponse,
    JobDecisionRequest,
    JobDecisionResponse,
)
from flink_lifecycle.domain.errors import LifecycleValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lifecycle decisions"])


def _raise_http_exception(exc: Exception) -> NoReturn:
    if isinstance(exc, LifecycleValidationError):
        raise HTTPException(status_code=400, detail=str(exc))
    logger.exception("Unexpected lifecycle decision error.")
    raise HTTPException(status_code=500, detail="Unexpected lifecycle decision error")


@router.post(
    "/jobs/decisions",
    response_model=JobDecisionResponse,
    status_code=200,
)
async def evaluate_job(
    request: JobDecisionRequest,
    service: JobLifecycleService = Depends(get_lifecycle_service),
) -> JobDecisionResponse:
    """Classify a job and decide on restart and update readiness."""

    try:
        return service.evaluate_job(request)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)


@router.post(
    "/clusters/high-availability",
    response_model=HighAvailabilityResponse,
    status_code=200,
)
async def evaluate_high_availability(
    request: HighAvailabilityRequest,
    service: JobLifecycleService = Depends(get_lifecycle_service),
) -> HighAvailabilityResponse:
    """Validate HA properties and return the HA config map name."""

    try:
        return service.evaluate_high_availability(request)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)


__all__ = ["router"]
