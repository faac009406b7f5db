from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.client.site_recovery_client import SiteRecoveryClient
from src.core.errors import RemoteOperationError, ValidationError
from src.jobs.impl.site_recovery_job_tracker import SiteRecoveryJobTracker
from src.models.inputs import (
    ApplyRecoveryPointInput,
    ApplyRecoveryPointProviderSpecificInput,
    HyperVReplicaAzureApplyRecoveryPointInput,
)
from src.models.resources import Job, OperationAcknowledgement
from src.providers.registry.provider_registry import ProviderRegistry
from src.recovery.recovery_point_applier import RecoveryPointApplier
from tests.conftest import make_job_payload


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock(spec=SiteRecoveryClient)
    client.start_apply_recovery_point = AsyncMock(
        return_value=OperationAcknowledgement(status_code=202, location="jobs/job-77")
    )
    client.get_job_details = AsyncMock(
        return_value=Job.from_arm(make_job_payload("job-77"))
    )
    return client


@pytest.fixture
def applier(mock_client: MagicMock) -> RecoveryPointApplier:
    return RecoveryPointApplier(
        mock_client, SiteRecoveryJobTracker(mock_client), ProviderRegistry()
    )


def submitted_input(mock_client: MagicMock) -> ApplyRecoveryPointInput:
    return mock_client.start_apply_recovery_point.await_args.args[3]


class TestRecoveryPointApplier:
    @pytest.mark.asyncio
    async def test_apply_submits_once_and_returns_job(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        job = await applier.apply(
            fabric_name="F1",
            protection_container_name="C1",
            protected_item_name="vm-01",
            recovery_point_id="rp-123",
            provider_name="HyperVReplicaAzure",
            primary_cert_b64="AQI=",
            client_request_id="op-1",
        )

        assert job.name == "job-77"
        mock_client.start_apply_recovery_point.assert_awaited_once()
        args = mock_client.start_apply_recovery_point.await_args
        assert args.args[:3] == ("F1", "C1", "vm-01")
        assert args.kwargs["client_request_id"] == "op-1"

        request = submitted_input(mock_client)
        assert request.properties.recovery_point_id == "rp-123"
        details = request.properties.provider_specific_details
        assert isinstance(details, HyperVReplicaAzureApplyRecoveryPointInput)
        assert details.primary_kek_certificate_pfx == "AQI="
        assert details.secondary_kek_certificate_pfx is None

        mock_client.get_job_details.assert_awaited_once_with("job-77")

    @pytest.mark.asyncio
    async def test_unknown_provider_submits_default_details(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        await applier.apply("F1", "C1", "vm-01", "rp-123", "A2A", "AQI=", "AwQ=")

        details = submitted_input(mock_client).properties.provider_specific_details
        assert type(details) is ApplyRecoveryPointProviderSpecificInput
        assert submitted_input(mock_client).to_wire() == {
            "properties": {"recoveryPointId": "rp-123", "providerSpecificDetails": {}}
        }

    @pytest.mark.asyncio
    async def test_vault_location_passed_to_provider(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        await applier.apply(
            "F1", "C1", "vm-01", "rp-123", "hypervreplicaazure", vault_location="eastus"
        )

        details = submitted_input(mock_client).properties.provider_specific_details
        assert details.vault_location == "eastus"

    @pytest.mark.parametrize(
        "overrides, missing",
        [
            ({"fabric_name": ""}, "fabric_name"),
            ({"protection_container_name": "  "}, "protection_container_name"),
            ({"protected_item_name": None}, "protected_item_name"),
            ({"recovery_point_id": ""}, "recovery_point_id"),
        ],
    )
    @pytest.mark.asyncio
    async def test_empty_identifiers_rejected_before_remote_call(
        self,
        applier: RecoveryPointApplier,
        mock_client: MagicMock,
        overrides: dict,
        missing: str,
    ) -> None:
        arguments = {
            "fabric_name": "F1",
            "protection_container_name": "C1",
            "protected_item_name": "vm-01",
            "recovery_point_id": "rp-123",
            "provider_name": "HyperVReplicaAzure",
        }
        arguments.update(overrides)

        with pytest.raises(ValidationError, match=missing):
            await applier.apply(**arguments)

        mock_client.start_apply_recovery_point.assert_not_called()
        mock_client.get_job_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_submission_failure_propagates_without_retry(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        error = RemoteOperationError(
            "Service returned 409", status_code=409, diagnostics={"error": {}}
        )
        mock_client.start_apply_recovery_point.side_effect = error

        with pytest.raises(RemoteOperationError) as exc_info:
            await applier.apply("F1", "C1", "vm-01", "rp-123", "HyperVReplicaAzure")

        assert exc_info.value is error
        assert mock_client.start_apply_recovery_point.await_count == 1
        mock_client.get_job_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_unresolvable_location_raises(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        mock_client.start_apply_recovery_point.return_value = OperationAcknowledgement(
            status_code=202, location="https://x/somewhere"
        )

        with pytest.raises(RemoteOperationError):
            await applier.apply("F1", "C1", "vm-01", "rp-123", "HyperVReplicaAzure")

        mock_client.get_job_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_repeated_apply_is_not_deduplicated(
        self, applier: RecoveryPointApplier, mock_client: MagicMock
    ) -> None:
        for _ in range(2):
            await applier.apply("F1", "C1", "vm-01", "rp-123", "HyperVReplicaAzure")

        assert mock_client.start_apply_recovery_point.await_count == 2
