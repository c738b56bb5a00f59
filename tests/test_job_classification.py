from __future__ import annotations

from datetime import UTC, datetime

import pytest

from flink_lifecycle.domain.entities import JobSpec, JobStatus
from flink_lifecycle.domain.job_types import JobRestartPolicy, JobState
from flink_lifecycle.domain.lifecycle import (
    is_active,
    is_failed,
    is_pending,
    is_stopped,
    is_terminated,
)

_KNOWN_STATES = [state for state in JobState if state is not JobState.UNKNOWN]


def test_absent_status_belongs_to_no_category() -> None:
    assert not is_active(None)
    assert not is_pending(None)
    assert not is_failed(None)
    assert not is_stopped(None)
    assert not is_terminated(None, JobSpec())


@pytest.mark.parametrize(
    ("state", "active", "pending", "failed", "stopped"),
    [
        (JobState.PENDING, False, True, False, False),
        (JobState.DEPLOYING, True, False, False, False),
        (JobState.RUNNING, True, False, False, False),
        (JobState.UPDATING, False, True, False, False),
        (JobState.RESTARTING, False, True, False, False),
        (JobState.SUCCEEDED, False, False, False, True),
        (JobState.CANCELLED, False, False, False, True),
        (JobState.FAILED, False, False, True, True),
        (JobState.LOST, False, False, True, True),
        (JobState.DEPLOY_FAILED, False, False, True, True),
    ],
)
def test_classification_by_state(
    state: JobState, active: bool, pending: bool, failed: bool, stopped: bool
) -> None:
    status = JobStatus(state=state)

    assert is_active(status) is active
    assert is_pending(status) is pending
    assert is_failed(status) is failed
    assert is_stopped(status) is stopped


@pytest.mark.parametrize("state", _KNOWN_STATES)
def test_each_known_state_has_exactly_one_category(state: JobState) -> None:
    status = JobStatus(state=state)
    finished_without_failure = is_stopped(status) and not is_failed(status)

    categories = [is_active(status), is_pending(status), is_failed(status), finished_without_failure]

    assert categories.count(True) == 1


def test_unrecognised_state_maps_to_unknown_and_no_category() -> None:
    state = JobState("Suspended")
    status = JobStatus(state=state)

    assert state is JobState.UNKNOWN
    assert not is_active(status)
    assert not is_pending(status)
    assert not is_failed(status)
    assert not is_stopped(status)
    assert not is_terminated(status, JobSpec())


@pytest.mark.parametrize("state", _KNOWN_STATES)
def test_terminated_implies_stopped(state: JobState) -> None:
    status = JobStatus(state=state)

    if is_terminated(status, JobSpec()):
        assert is_stopped(status)


def test_succeeded_job_is_terminated() -> None:
    status = JobStatus(state=JobState.SUCCEEDED)

    assert is_terminated(status, JobSpec())


def test_failed_job_with_restart_is_not_terminated() -> None:
    status = JobStatus(
        state=JobState.FAILED,
        savepoint_location="s3://savepoints/sp-1",
        savepoint_time="2024-05-01T10:00:00Z",
        final_savepoint=True,
        completion_time=datetime(2024, 5, 1, 10, 5, tzinfo=UTC),
    )
    spec = JobSpec(restart_policy=JobRestartPolicy.FROM_SAVEPOINT_ON_FAILURE)

    assert is_stopped(status)
    assert not is_terminated(status, spec)


def test_failed_job_without_restart_policy_is_terminated() -> None:
    status = JobStatus(state=JobState.LOST, final_savepoint=True)

    assert is_terminated(status, JobSpec())
    assert is_terminated(status, None)
