import logging
from typing import Optional

from src.core.client.site_recovery_client import SiteRecoveryClient
from src.core.errors import ValidationError
from src.jobs.interfaces.job_tracker import JobTracker
from src.models.inputs import ApplyRecoveryPointInput
from src.models.resources import Job
from src.providers.registry.provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)


class RecoveryPointApplier:
    """
    Submits apply-recovery-point requests and turns the acknowledgement
    into a job snapshot.

    Each call performs one state-changing submission followed by one job
    read. Nothing is retried and nothing is deduplicated: applying the same
    recovery point twice starts two operations.
    """

    def __init__(
        self,
        client: SiteRecoveryClient,
        job_tracker: JobTracker,
        provider_registry: ProviderRegistry,
    ):
        self._client = client
        self._job_tracker = job_tracker
        self._provider_registry = provider_registry

    async def apply(
        self,
        fabric_name: str,
        protection_container_name: str,
        protected_item_name: str,
        recovery_point_id: str,
        provider_name: str,
        primary_cert_b64: Optional[str] = None,
        secondary_cert_b64: Optional[str] = None,
        vault_location: Optional[str] = None,
        client_request_id: Optional[str] = None,
    ) -> Job:
        """
        Apply a recovery point to a protected item.

        Args:
            fabric_name: Fabric holding the protected item
            protection_container_name: Protection container holding the item
            protected_item_name: Resource name of the protected item
            recovery_point_id: Recovery point to apply; must belong to the item
                (checked by the service, not here)
            provider_name: Replication provider of the item
            primary_cert_b64: Base64 primary decryption certificate
            secondary_cert_b64: Base64 secondary decryption certificate
            vault_location: Vault location for providers that need one
            client_request_id: Correlation id sent with the submission

        Returns:
            Snapshot of the job tracking the operation

        Raises:
            ValidationError: If an identifier is empty
            RemoteOperationError: If submission or job resolution fails
        """
        _require(
            fabric_name=fabric_name,
            protection_container_name=protection_container_name,
            protected_item_name=protected_item_name,
            recovery_point_id=recovery_point_id,
        )

        request = ApplyRecoveryPointInput.create(
            recovery_point_id=recovery_point_id,
            provider_specific_details=self._provider_registry.build(
                provider_name,
                primary_cert_b64=primary_cert_b64,
                secondary_cert_b64=secondary_cert_b64,
                vault_location=vault_location,
            ),
        )

        acknowledgement = await self._client.start_apply_recovery_point(
            fabric_name,
            protection_container_name,
            protected_item_name,
            request,
            client_request_id=client_request_id,
        )

        job_id = self._job_tracker.resolve_job_id(acknowledgement.location)
        job = await self._job_tracker.fetch(job_id)

        logger.info(
            f"Apply recovery point for '{protected_item_name}' accepted as job "
            f"{job.name} ({job.state})"
        )
        return job


def _require(**fields: Optional[str]) -> None:
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise ValidationError(f"Required fields missing or empty: {', '.join(missing)}")
