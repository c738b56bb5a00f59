from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from flink_lifecycle.domain.entities import JobSpec, JobStatus
from flink_lifecycle.domain.job_types import JobState
from flink_lifecycle.domain.lifecycle import update_ready

_SAVEPOINT_AT = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)


def _status(
    state: JobState,
    final_savepoint: bool = False,
    completion_time: datetime | None = None,
) -> JobStatus:
    return JobStatus(
        state=state,
        savepoint_location="s3://savepoints/sp-1",
        savepoint_time="2024-05-01T10:00:00Z",
        final_savepoint=final_savepoint,
        completion_time=completion_time,
    )


def test_absent_status_is_ready() -> None:
    assert update_ready(None, None, None)
    assert update_ready(None, JobSpec(), _SAVEPOINT_AT)


def test_explicit_from_savepoint_bypasses_freshness() -> None:
    status = _status(JobState.RUNNING)
    spec = JobSpec(from_savepoint="s3://savepoints/manual")

    assert update_ready(status, spec, None)


def test_blank_from_savepoint_is_ignored() -> None:
    status = _status(JobState.RUNNING)
    spec = JobSpec(from_savepoint="   ")

    assert not update_ready(status, spec, _SAVEPOINT_AT)


def test_running_job_waits_for_final_savepoint_by_default() -> None:
    status = _status(JobState.RUNNING)

    assert not update_ready(status, JobSpec(), _SAVEPOINT_AT)

    status.final_savepoint = True

    assert update_ready(status, JobSpec(), _SAVEPOINT_AT)


def test_absent_spec_uses_default_policy() -> None:
    status = _status(JobState.DEPLOYING)

    assert not update_ready(status, None, _SAVEPOINT_AT)
    assert update_ready(_status(JobState.DEPLOYING, final_savepoint=True), None, _SAVEPOINT_AT)


def test_running_job_without_savepoint_on_update_uses_observe_time() -> None:
    status = _status(JobState.RUNNING)
    spec = JobSpec(take_savepoint_on_update=False, max_state_age_to_restore_seconds=60)

    assert update_ready(status, spec, _SAVEPOINT_AT + timedelta(seconds=59))
    assert not update_ready(status, spec, _SAVEPOINT_AT + timedelta(seconds=60))
    assert not update_ready(status, spec, None)


def test_updating_without_savepoint_on_update_is_ready() -> None:
    status = JobStatus(state=JobState.UPDATING)
    spec = JobSpec(take_savepoint_on_update=False)

    assert update_ready(status, spec, None)


def test_updating_with_savepoint_on_update_falls_back_to_completion_time() -> None:
    spec = JobSpec(take_savepoint_on_update=True, max_state_age_to_restore_seconds=600)

    # Still updating: no completion time recorded yet.
    assert not update_ready(_status(JobState.UPDATING), spec, _SAVEPOINT_AT)
    assert update_ready(
        _status(JobState.UPDATING, completion_time=_SAVEPOINT_AT + timedelta(seconds=10)),
        spec,
        None,
    )
    assert update_ready(_status(JobState.UPDATING, final_savepoint=True), spec, None)


@pytest.mark.parametrize(
    "state",
    [
        JobState.SUCCEEDED,
        JobState.CANCELLED,
        JobState.FAILED,
        JobState.LOST,
        JobState.DEPLOY_FAILED,
        JobState.PENDING,
        JobState.RESTARTING,
        JobState.UNKNOWN,
    ],
)
def test_inactive_job_compares_savepoint_to_completion_time(state: JobState) -> None:
    spec = JobSpec(max_state_age_to_restore_seconds=300)
    fresh = _status(state, completion_time=_SAVEPOINT_AT + timedelta(seconds=120))
    stale = _status(state, completion_time=_SAVEPOINT_AT + timedelta(seconds=300))

    assert update_ready(fresh, spec, None)
    assert not update_ready(stale, spec, None)
    assert not update_ready(_status(state), spec, _SAVEPOINT_AT)


def test_stopped_job_with_final_savepoint_is_ready() -> None:
    status = _status(JobState.CANCELLED, final_savepoint=True)

    assert update_ready(status, JobSpec(), None)
