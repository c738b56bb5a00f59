"""Domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from flink_lifecycle.domain.job_types import JobRestartPolicy, JobState, SavepointState


@dataclass(slots=True)
class JobStatus:
    """Last observed status of a job, updated field by field by the reconciler."""

    state: JobState = JobState.PENDING
    savepoint_location: str = ""
    savepoint_time: str = ""
    final_savepoint: bool = False
    completion_time: datetime | None = None

    @property
    def has_savepoint(self) -> bool:
        """Whether both a savepoint location and time are recorded."""

        return bool(self.savepoint_location) and bool(self.savepoint_time)


@dataclass(slots=True, frozen=True)
class JobSpec:
    """User-declared job policy for one reconciliation pass."""

    restart_policy: JobRestartPolicy | None = None
    max_state_age_to_restore_seconds: int | None = None
    take_savepoint_on_update: bool | None = None
    from_savepoint: str | None = None

    @property
    def takes_savepoint_on_update(self) -> bool:
        """Unset means a savepoint is required before applying an update."""

        return self.take_savepoint_on_update is None or self.take_savepoint_on_update


@dataclass(slots=True, frozen=True)
class SavepointStatus:
    """Recorded outcome of the most recent savepoint trigger."""

    state: SavepointState = SavepointState.NOT_TRIGGERED
    trigger_id: str = ""
    message: str = ""


@dataclass(slots=True, frozen=True)
class RevisionStatus:
    """Current and next spec revisions of the cluster."""

    current_revision: str = ""
    next_revision: str = ""


__all__ = ["JobSpec", "JobStatus", "RevisionStatus", "SavepointStatus"]
