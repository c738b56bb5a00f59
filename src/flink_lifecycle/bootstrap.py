"""Application bootstrap/wiring."""

import logging

from flink_lifecycle.application.services import JobLifecycleService
from flink_lifecycle.config import Settings
from flink_lifecycle.domain.ports import Clock
from flink_lifecycle.infrastructure.clock import SystemClock

logger = logging.getLogger(__name__)


def build_lifecycle_service(settings: Settings, clock: Clock | None = None) -> JobLifecycleService:
    """Compose service graph."""

    if not settings.allow_implicit_observe_time:
        logger.info("Implicit observe time disabled; requests must carry observeTime.")
    return JobLifecycleService(
        clock=clock if clock is not None else SystemClock(),
        allow_implicit_observe_time=settings.allow_implicit_observe_time,
    )


__all__ = ["build_lifecycle_service"]
