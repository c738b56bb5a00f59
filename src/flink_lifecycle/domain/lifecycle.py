"""Job lifecycle decisions.

Every function here is pure: inputs are snapshots, the reference time is
always passed in, and absent inputs map to the outcome that never restarts a
job or lets an update proceed without a usable savepoint.
"""

from __future__ import annotations

from datetime import datetime

from flink_lifecycle.domain.entities import (
    JobSpec,
    JobStatus,
    RevisionStatus,
    SavepointStatus,
)
from flink_lifecycle.domain.job_types import (
    ACTIVE_JOB_STATES,
    FAILED_JOB_STATES,
    FAILED_SAVEPOINT_STATES,
    PENDING_JOB_STATES,
    STOPPED_JOB_STATES,
    JobRestartPolicy,
    JobState,
)
from flink_lifecycle.domain.timestamps import is_within_age


def is_active(status: JobStatus | None) -> bool:
    """Job is running or being deployed."""

    return status is not None and status.state in ACTIVE_JOB_STATES


def is_pending(status: JobStatus | None) -> bool:
    """Job is waiting to be (re)deployed."""

    return status is not None and status.state in PENDING_JOB_STATES


def is_failed(status: JobStatus | None) -> bool:
    """Job failed, was lost, or could not be deployed."""

    return status is not None and status.state in FAILED_JOB_STATES


def is_stopped(status: JobStatus | None) -> bool:
    """Job finished, was cancelled, or failed."""

    return status is not None and status.state in STOPPED_JOB_STATES


def is_terminated(status: JobStatus | None, spec: JobSpec | None) -> bool:
    """Job is stopped and will not be restarted automatically."""

    return is_stopped(status) and not should_restart(status, spec)


def is_savepoint_up_to_date(
    status: JobStatus | None,
    spec: JobSpec | None,
    compare_time: datetime | None,
) -> bool:
    """Check the recorded savepoint against ``max_state_age_to_restore_seconds``.

    A final savepoint is always up to date. Without a max age, a compare time
    and a recorded savepoint, staleness cannot be bounded and the savepoint is
    not usable.
    """

    if status is None:
        return False
    if status.final_savepoint:
        return True
    if (
        compare_time is None
        or spec is None
        or spec.max_state_age_to_restore_seconds is None
        or not status.has_savepoint
    ):
        return False

    return is_within_age(
        status.savepoint_time,
        compare_time,
        spec.max_state_age_to_restore_seconds,
    )


def should_restart(status: JobStatus | None, spec: JobSpec | None) -> bool:
    """Whether a failed job may be restarted from its savepoint.

    Requires the ``FromSavepointOnFailure`` policy and a savepoint that was up
    to date when the job completed.
    """

    if status is None or not is_failed(status) or spec is None:
        return False

    restart_enabled = spec.restart_policy == JobRestartPolicy.FROM_SAVEPOINT_ON_FAILURE
    return restart_enabled and is_savepoint_up_to_date(status, spec, status.completion_time)


def update_ready(
    status: JobStatus | None,
    spec: JobSpec | None,
    observe_time: datetime | None,
) -> bool:
    """Whether a pending spec update may be applied now."""

    if status is None:
        return True
    if spec is None:
        spec = JobSpec()
    if not is_blank(spec.from_savepoint):
        return True

    take_savepoint_on_update = spec.takes_savepoint_on_update
    if is_active(status):
        # Wait for the savepoint taken while stopping the job for the update.
        if take_savepoint_on_update:
            return status.final_savepoint
        return is_savepoint_up_to_date(status, spec, observe_time)
    if status.state == JobState.UPDATING and not take_savepoint_on_update:
        return True

    # Updating with take_savepoint_on_update also lands here.
    return is_savepoint_up_to_date(status, spec, status.completion_time)


def is_savepoint_failed(savepoint_status: SavepointStatus | None) -> bool:
    """Savepoint trigger or savepoint itself failed."""

    return savepoint_status is not None and savepoint_status.state in FAILED_SAVEPOINT_STATES


def is_update_triggered(revision_status: RevisionStatus | None) -> bool:
    """A new spec revision is waiting to be applied."""

    if revision_status is None:
        return False
    return revision_status.current_revision != revision_status.next_revision


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


__all__ = [
    "is_active",
    "is_blank",
    "is_failed",
    "is_pending",
    "is_savepoint_failed",
    "is_savepoint_up_to_date",
    "is_stopped",
    "is_terminated",
    "is_update_triggered",
    "should_restart",
    "update_ready",
]
