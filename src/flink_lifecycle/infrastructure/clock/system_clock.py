"""Wall-clock implementation of the clock port."""

from __future__ import annotations

from datetime import UTC, datetime

from flink_lifecycle.domain.ports import Clock


class SystemClock(Clock):
    """Read the current UTC time from the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


__all__ = ["SystemClock"]
