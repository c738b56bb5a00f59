"""Infrastructure layer public API."""

from flink_lifecycle.infrastructure.clock import SystemClock

__all__ = ["SystemClock"]
