"""Job lifecycle decision use-case service."""

from __future__ import annotations

import logging
from datetime import datetime

from flink_lifecycle.domain.decision_models import (
    HighAvailabilityRequest,
    HighAvailabilityResponse,
    JobDecisionRequest,
    JobDecisionResponse,
    JobSpecSnapshot,
    JobStatusSnapshot,
    RevisionStatusSnapshot,
    SavepointStatusSnapshot,
)
from flink_lifecycle.domain.entities import (
    JobSpec,
    JobStatus,
    RevisionStatus,
    SavepointStatus,
)
from flink_lifecycle.domain.errors import LifecycleValidationError
from flink_lifecycle.domain.high_availability import (
    get_ha_config_map_name,
    is_high_availability_enabled,
)
from flink_lifecycle.domain.job_types import JobRestartPolicy
from flink_lifecycle.domain.lifecycle import (
    is_active,
    is_failed,
    is_pending,
    is_savepoint_failed,
    is_savepoint_up_to_date,
    is_stopped,
    is_terminated,
    is_update_triggered,
    should_restart,
    update_ready,
)
from flink_lifecycle.domain.ports import Clock
from flink_lifecycle.domain.timestamps import ensure_utc

logger = logging.getLogger(__name__)


class JobLifecycleService:
    """Evaluates lifecycle decisions for reconciler requests."""

    def __init__(
        self,
        clock: Clock,
        allow_implicit_observe_time: bool = True,
    ) -> None:
        self._clock = clock
        self._allow_implicit_observe_time = allow_implicit_observe_time

    def evaluate_job(self, request: JobDecisionRequest) -> JobDecisionResponse:
        """Evaluate every job decision against one snapshot."""

        observe_time = self._resolve_observe_time(request.observe_time)
        status = _to_job_status(request.status)
        spec = _to_job_spec(request.spec)
        savepoint = _to_savepoint_status(request.savepoint)
        revision = _to_revision_status(request.revision)

        if status is not None and status.final_savepoint and not status.has_savepoint:
            logger.warning(
                "Job status reports a final savepoint without location or time "
                "(location='%s', time='%s').",
                status.savepoint_location,
                status.savepoint_time,
            )

        restart = should_restart(status, spec)
        if is_failed(status) and not restart:
            assert status is not None
            logger.info(
                "Failed job in state '%s' will not be restarted: %s.",
                status.state,
                _restart_refusal_reason(status, spec),
            )

        response = JobDecisionResponse(
            active=is_active(status),
            pending=is_pending(status),
            failed=is_failed(status),
            stopped=is_stopped(status),
            terminated=is_terminated(status, spec),
            savepoint_up_to_date=is_savepoint_up_to_date(status, spec, observe_time),
            should_restart=restart,
            update_ready=update_ready(status, spec, observe_time),
            savepoint_failed=is_savepoint_failed(savepoint),
            update_triggered=is_update_triggered(revision),
            observe_time=observe_time,
        )
        logger.debug("Job decision evaluated: %s", response.model_dump(by_alias=True))
        return response

    def evaluate_high_availability(
        self, request: HighAvailabilityRequest
    ) -> HighAvailabilityResponse:
        """Validate HA properties and derive the HA config map name."""

        properties = request.flink_properties
        response = HighAvailabilityResponse(
            enabled=is_high_availability_enabled(properties),
            config_map_name=get_ha_config_map_name(properties),
        )
        logger.debug(
            "High-availability evaluated: enabled=%s configMapName='%s'.",
            response.enabled,
            response.config_map_name,
        )
        return response

    def _resolve_observe_time(self, observe_time: datetime | None) -> datetime:
        if observe_time is not None:
            return ensure_utc(observe_time)
        if not self._allow_implicit_observe_time:
            raise LifecycleValidationError(
                "observeTime is required when implicit observe time is disabled."
            )
        return ensure_utc(self._clock.now())


def _restart_refusal_reason(status: JobStatus, spec: JobSpec | None) -> str:
    if spec is None:
        return "no job spec"
    if spec.restart_policy != JobRestartPolicy.FROM_SAVEPOINT_ON_FAILURE:
        return f"restart policy is '{spec.restart_policy or JobRestartPolicy.NEVER}'"
    if not status.final_savepoint and spec.max_state_age_to_restore_seconds is None:
        return "no final savepoint and no maxStateAgeToRestoreSeconds"
    return "savepoint is not up to date at job completion"


def _to_job_status(snapshot: JobStatusSnapshot | None) -> JobStatus | None:
    if snapshot is None:
        return None
    return JobStatus(
        state=snapshot.state,
        savepoint_location=snapshot.savepoint_location,
        savepoint_time=snapshot.savepoint_time,
        final_savepoint=snapshot.final_savepoint,
        completion_time=snapshot.completion_time,
    )


def _to_job_spec(snapshot: JobSpecSnapshot | None) -> JobSpec | None:
    if snapshot is None:
        return None
    return JobSpec(
        restart_policy=snapshot.restart_policy,
        max_state_age_to_restore_seconds=snapshot.max_state_age_to_restore_seconds,
        take_savepoint_on_update=snapshot.take_savepoint_on_update,
        from_savepoint=snapshot.from_savepoint,
    )


def _to_savepoint_status(snapshot: SavepointStatusSnapshot | None) -> SavepointStatus | None:
    if snapshot is None:
        return None
    return SavepointStatus(
        state=snapshot.state,
        trigger_id=snapshot.trigger_id,
        message=snapshot.message,
    )


def _to_revision_status(snapshot: RevisionStatusSnapshot | None) -> RevisionStatus | None:
    if snapshot is None:
        return None
    return RevisionStatus(
        current_revision=snapshot.current_revision,
        next_revision=snapshot.next_revision,
    )


__all__ = ["JobLifecycleService"]
