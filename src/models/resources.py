"""
Read-only snapshots of control plane resources.

These models are consumed, never mutated: recovery points and protected
items are fetched by the caller, jobs are created by the service.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecoveryPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="ARM id of the recovery point")
    name: Optional[str] = None
    recovery_point_time: Optional[str] = None
    recovery_point_type: Optional[str] = None
    replication_protected_item_id: Optional[str] = Field(
        None, description="ARM id of the protected item owning this point"
    )


class ReplicationProtectedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="ARM id encoding the fabric and protection container segments",
    )
    name: str = Field(..., description="Resource name of the protected item")
    friendly_name: str = Field(..., description="Display name of the workload")
    replication_provider: str = Field(
        ..., description="Replication provider (e.g. 'HyperVReplicaAzure')"
    )
    protection_state: Optional[str] = None
    replication_health: Optional[str] = None


class OperationAcknowledgement(BaseModel):
    """What the control plane hands back when it accepts a long-running call"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    location: str
    retry_after: Optional[int] = None


class JobTask(BaseModel):
    task_id: Optional[str] = None
    name: Optional[str] = None
    friendly_name: Optional[str] = None
    state: Optional[str] = None
    state_description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    allowed_actions: List[str] = Field(default_factory=list)

    @classmethod
    def from_arm(cls, payload: Dict[str, Any]) -> "JobTask":
        return cls(
            task_id=payload.get("taskId"),
            name=payload.get("name"),
            friendly_name=payload.get("friendlyName"),
            state=payload.get("state"),
            state_description=payload.get("stateDescription"),
            start_time=payload.get("startTime"),
            end_time=payload.get("endTime"),
            allowed_actions=payload.get("allowedActions") or [],
        )


class JobError(BaseModel):
    task_id: Optional[str] = None
    error_code: Optional[str] = None
    message: Optional[str] = None
    possible_causes: Optional[str] = None
    recommended_action: Optional[str] = None
    error_level: Optional[str] = None
    creation_time: Optional[str] = None

    @classmethod
    def from_arm(cls, payload: Dict[str, Any]) -> "JobError":
        service_error = payload.get("serviceErrorDetails") or {}
        return cls(
            task_id=payload.get("taskId"),
            error_code=service_error.get("code"),
            message=service_error.get("message"),
            possible_causes=service_error.get("possibleCauses"),
            recommended_action=service_error.get("recommendedAction"),
            error_level=payload.get("errorLevel"),
            creation_time=payload.get("creationTime"),
        )


class Job(BaseModel):
    """
    Snapshot of a server-side job tracking an asynchronous operation.

    The service owns the job; this is the state at the time it was fetched.

    Field names follow the service's job resource: ``id`` is the full ARM
    path (``.../replicationJobs/<job id>``) and ``name`` is the job id, i.e.
    the value resolved from the submission's location reference and accepted
    by ``SiteRecoveryClient.get_job_details``.
    """

    id: str
    name: str
    activity_id: Optional[str] = None
    client_request_id: Optional[str] = None
    display_name: Optional[str] = None
    scenario_name: Optional[str] = None
    state: Optional[str] = None
    state_description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    target_object_id: Optional[str] = None
    target_object_name: Optional[str] = None
    target_object_type: Optional[str] = None
    allowed_actions: List[str] = Field(default_factory=list)
    tasks: List[JobTask] = Field(default_factory=list)
    errors: List[JobError] = Field(default_factory=list)

    @classmethod
    def from_arm(cls, payload: Dict[str, Any]) -> "Job":
        """Build a Job from an ARM ``replicationJobs`` resource"""
        properties = payload.get("properties") or {}
        return cls(
            id=payload["id"],
            name=payload["name"],
            activity_id=properties.get("activityId"),
            client_request_id=properties.get("clientRequestId"),
            display_name=properties.get("friendlyName"),
            scenario_name=properties.get("scenarioName"),
            state=properties.get("state"),
            state_description=properties.get("stateDescription"),
            start_time=properties.get("startTime"),
            end_time=properties.get("endTime"),
            target_object_id=properties.get("targetObjectId"),
            target_object_name=properties.get("targetObjectName"),
            target_object_type=properties.get("targetInstanceType"),
            allowed_actions=properties.get("allowedActions") or [],
            tasks=[JobTask.from_arm(t) for t in properties.get("tasks") or []],
            errors=[JobError.from_arm(e) for e in properties.get("errors") or []],
        )
