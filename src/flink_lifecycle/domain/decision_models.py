"""Pydantic models for decision requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flink_lifecycle.domain.job_types import JobRestartPolicy, JobState, SavepointState


class DecisionModel(BaseModel):
    """Base model for decision API payloads."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class SnapshotModel(BaseModel):
    """Base model for cluster resource snapshots.

    Snapshots are copied from the custom resource and may carry fields this
    service does not read.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class JobStatusSnapshot(SnapshotModel):
    """Observed job status."""

    state: JobState = JobState.PENDING
    savepoint_location: str = Field(default="", alias="savepointLocation")
    savepoint_time: str = Field(default="", alias="savepointTime")
    final_savepoint: bool = Field(default=False, alias="finalSavepoint")
    completion_time: datetime | None = Field(default=None, alias="completionTime")

    @field_validator("state", mode="before")
    @classmethod
    def parse_state(cls, value: object) -> object:
        """Map unrecognised states to ``Unknown`` instead of rejecting them."""

        if isinstance(value, str):
            return JobState(value)
        return value


class JobSpecSnapshot(SnapshotModel):
    """Declared job policy."""

    restart_policy: JobRestartPolicy | None = Field(default=None, alias="restartPolicy")
    max_state_age_to_restore_seconds: int | None = Field(
        default=None, ge=0, alias="maxStateAgeToRestoreSeconds"
    )
    take_savepoint_on_update: bool | None = Field(default=None, alias="takeSavepointOnUpdate")
    from_savepoint: str | None = Field(default=None, alias="fromSavepoint")

    @field_validator("restart_policy", mode="before")
    @classmethod
    def parse_restart_policy(cls, value: object) -> object:
        """Map unrecognised restart policies to ``Unknown``."""

        if isinstance(value, str):
            return JobRestartPolicy(value)
        return value


class SavepointStatusSnapshot(SnapshotModel):
    """Most recent savepoint trigger outcome."""

    state: SavepointState = SavepointState.NOT_TRIGGERED
    trigger_id: str = Field(default="", alias="triggerID")
    message: str = ""

    @field_validator("state", mode="before")
    @classmethod
    def parse_state(cls, value: object) -> object:
        """Map unrecognised savepoint states to ``Unknown``."""

        if isinstance(value, str):
            return SavepointState(value)
        return value


class RevisionStatusSnapshot(SnapshotModel):
    """Cluster spec revisions."""

    current_revision: str = Field(default="", alias="currentRevision")
    next_revision: str = Field(default="", alias="nextRevision")


class JobDecisionRequest(DecisionModel):
    """Snapshots of one job for a single decision pass."""

    status: JobStatusSnapshot | None = None
    spec: JobSpecSnapshot | None = None
    savepoint: SavepointStatusSnapshot | None = None
    revision: RevisionStatusSnapshot | None = None
    observe_time: datetime | None = Field(default=None, alias="observeTime")


class JobDecisionResponse(DecisionModel):
    """All lifecycle decisions evaluated against the same snapshot."""

    active: bool
    pending: bool
    failed: bool
    stopped: bool
    terminated: bool
    savepoint_up_to_date: bool = Field(alias="savepointUpToDate")
    should_restart: bool = Field(alias="shouldRestart")
    update_ready: bool = Field(alias="updateReady")
    savepoint_failed: bool = Field(alias="savepointFailed")
    update_triggered: bool = Field(alias="updateTriggered")
    observe_time: datetime | None = Field(default=None, alias="observeTime")


class HighAvailabilityRequest(DecisionModel):
    """Flink properties of a cluster."""

    flink_properties: dict[str, str] | None = Field(default=None, alias="flinkProperties")


class HighAvailabilityResponse(DecisionModel):
    """HA validation result."""

    enabled: bool
    config_map_name: str = Field(alias="configMapName")


__all__ = [
    "DecisionModel",
    "HighAvailabilityRequest",
    "HighAvailabilityResponse",
    "JobDecisionRequest",
    "JobDecisionResponse",
    "JobSpecSnapshot",
    "JobStatusSnapshot",
    "RevisionStatusSnapshot",
    "SavepointStatusSnapshot",
    "SnapshotModel",
]
