"""Job, restart-policy and savepoint state enums."""

from __future__ import annotations

from enum import StrEnum


class JobState(StrEnum):
    """Observed lifecycle state of a Flink job."""

    PENDING = "Pending"
    DEPLOYING = "Deploying"
    RUNNING = "Running"
    UPDATING = "Updating"
    RESTARTING = "Restarting"
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    LOST = "Lost"
    DEPLOY_FAILED = "DeployFailed"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> JobState:
        # States reported by newer reconcilers belong to no category.
        return cls.UNKNOWN


class JobRestartPolicy(StrEnum):
    """User-declared restart behaviour for failed jobs."""

    NEVER = "Never"
    FROM_SAVEPOINT_ON_FAILURE = "FromSavepointOnFailure"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> JobRestartPolicy:
        # Policies this engine does not know never restart a job.
        return cls.UNKNOWN


class SavepointState(StrEnum):
    """State of the most recent savepoint trigger."""

    NOT_TRIGGERED = "NotTriggered"
    TRIGGERED = "Triggered"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    SUCCEEDED = "Succeeded"
    TRIGGER_FAILED = "TriggerFailed"
    FAILED = "Failed"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> SavepointState:
        return cls.UNKNOWN


ACTIVE_JOB_STATES = frozenset({JobState.RUNNING, JobState.DEPLOYING})

PENDING_JOB_STATES = frozenset(
    {
        JobState.PENDING,
        JobState.UPDATING,
        JobState.RESTARTING,
    }
)

FAILED_JOB_STATES = frozenset(
    {
        JobState.FAILED,
        JobState.LOST,
        JobState.DEPLOY_FAILED,
    }
)

STOPPED_JOB_STATES = frozenset({JobState.SUCCEEDED, JobState.CANCELLED}) | FAILED_JOB_STATES

FAILED_SAVEPOINT_STATES = frozenset({SavepointState.TRIGGER_FAILED, SavepointState.FAILED})


__all__ = [
    "ACTIVE_JOB_STATES",
    "FAILED_JOB_STATES",
    "FAILED_SAVEPOINT_STATES",
    "JobRestartPolicy",
    "JobState",
    "PENDING_JOB_STATES",
    "STOPPED_JOB_STATES",
    "SavepointState",
]
