"""Application services public API."""

from flink_lifecycle.application.services.lifecycle_service import JobLifecycleService

__all__ = ["JobLifecycleService"]
