"""Domain public API."""

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
from flink_lifecycle.domain.entities import JobSpec, JobStatus, RevisionStatus, SavepointStatus
from flink_lifecycle.domain.errors import JobLifecycleError, LifecycleValidationError
from flink_lifecycle.domain.high_availability import (
    get_ha_config_map_name,
    is_high_availability_enabled,
)
from flink_lifecycle.domain.job_types import JobRestartPolicy, JobState, SavepointState
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

__all__ = [
    "Clock",
    "HighAvailabilityRequest",
    "HighAvailabilityResponse",
    "JobDecisionRequest",
    "JobDecisionResponse",
    "JobLifecycleError",
    "JobRestartPolicy",
    "JobSpec",
    "JobSpecSnapshot",
    "JobState",
    "JobStatus",
    "JobStatusSnapshot",
    "LifecycleValidationError",
    "RevisionStatus",
    "RevisionStatusSnapshot",
    "SavepointState",
    "SavepointStatus",
    "SavepointStatusSnapshot",
    "get_ha_config_map_name",
    "is_active",
    "is_failed",
    "is_high_availability_enabled",
    "is_pending",
    "is_savepoint_failed",
    "is_savepoint_up_to_date",
    "is_stopped",
    "is_terminated",
    "is_update_triggered",
    "should_restart",
    "update_ready",
]
