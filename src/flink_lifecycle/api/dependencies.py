"""Dependency providers for FastAPI routes."""

from functools import lru_cache

from flink_lifecycle.application.services import JobLifecycleService
from flink_lifecycle.bootstrap import build_lifecycle_service
from flink_lifecycle.config import Settings
from flink_lifecycle.domain.ports import Clock
from flink_lifecycle.infrastructure.clock import SystemClock


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings read once from the environment."""

    return Settings()


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    """Return the clock used when requests omit observeTime."""

    return SystemClock()


@lru_cache(maxsize=1)
def get_lifecycle_service() -> JobLifecycleService:
    """Return the decision service wired from settings and clock."""

    return build_lifecycle_service(get_settings(), clock=get_clock())


__all__ = ["get_clock", "get_lifecycle_service", "get_settings"]
