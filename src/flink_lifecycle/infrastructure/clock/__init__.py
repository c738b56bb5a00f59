"""Clock adapters."""

from flink_lifecycle.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
