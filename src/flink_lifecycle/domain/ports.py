"""Ports used by the decision service."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the reference time when a caller does not supply one."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""


__all__ = ["Clock"]
