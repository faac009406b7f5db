from typing import Any, Dict

import pytest

from src.models.resources import RecoveryPoint, ReplicationProtectedItem

VAULT_ID = (
    "/Subscriptions/sub-1/resourceGroups/rg1/providers/"
    "Microsoft.RecoveryServices/vaults/vault1"
)


def protected_item_id(fabric: str = "Fabric1", container: str = "Container1") -> str:
    return (
        f"{VAULT_ID}/replicationFabrics/{fabric}"
        f"/replicationProtectionContainers/{container}"
        f"/replicationProtectedItems/vm-01"
    )


def make_job_payload(job_id: str = "job-77", state: str = "InProgress") -> Dict[str, Any]:
    """ARM replicationJobs resource as returned by the service"""
    return {
        "id": f"{VAULT_ID}/replicationJobs/{job_id}",
        "name": job_id,
        "type": "Microsoft.RecoveryServices/vaults/replicationJobs",
        "properties": {
            "activityId": "activity-1",
            "scenarioName": "ApplyRecoveryPoint",
            "friendlyName": "Apply recovery point",
            "state": state,
            "stateDescription": state,
            "startTime": "2024-05-01T10:00:00Z",
            "targetObjectId": "vm-01-object",
            "targetObjectName": "vm-01",
            "targetInstanceType": "ProtectionEntity",
            "allowedActions": ["Cancel"],
            "tasks": [
                {
                    "taskId": "task-1",
                    "name": "ApplyRecoveryPointTask",
                    "friendlyName": "Applying the recovery point",
                    "state": state,
                    "allowedActions": [],
                }
            ],
            "errors": [],
        },
    }


@pytest.fixture
def recovery_point() -> RecoveryPoint:
    return RecoveryPoint(
        id=f"{protected_item_id()}/recoveryPoints/rp-123",
        name="rp-123",
        recovery_point_time="2024-05-01T09:00:00Z",
        recovery_point_type="LatestTime",
    )


@pytest.fixture
def protected_item() -> ReplicationProtectedItem:
    return ReplicationProtectedItem(
        id=protected_item_id(),
        name="vm-01",
        friendly_name="Finance VM",
        replication_provider="HyperVReplicaAzure",
    )


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    return make_job_payload()
