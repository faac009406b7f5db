import logging
import os
import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.commands.impl.apply_recovery_point_command import ApplyRecoveryPointCommand
from src.commands.interfaces.command_context import CommandContext
from src.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_VAULT_LOCATION,
)
from src.core.certificates.file import FileCertificateLoader
from src.core.certificates.interface import CertificateLoader
from src.core.client.site_recovery_client import SiteRecoveryClient
from src.core.errors import (
    CertificateLoadError,
    MalformedIdentifierError,
    RemoteOperationError,
    ValidationError,
)
from src.jobs.impl.site_recovery_job_tracker import SiteRecoveryJobTracker
from src.jobs.interfaces.job_tracker import JobTracker
from src.models.requests import ApplyRecoveryPointRequest
from src.models.responses import JobResponse
from src.providers.registry.provider_registry import ProviderRegistry
from src.recovery.recovery_point_applier import RecoveryPointApplier

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(
    prefix="/site-recovery",
    tags=["Site Recovery"],
    responses={404: {"description": "Not found"}},
)


# Dependency functions
def get_site_recovery_client() -> SiteRecoveryClient:
    """Get a vault client configured from the environment"""
    subscription_id = os.environ.get("SITE_RECOVERY_SUBSCRIPTION_ID")
    resource_group = os.environ.get("SITE_RECOVERY_RESOURCE_GROUP")
    vault_name = os.environ.get("SITE_RECOVERY_VAULT_NAME")

    if not subscription_id or not resource_group or not vault_name:
        raise ValueError(
            "SITE_RECOVERY_SUBSCRIPTION_ID, SITE_RECOVERY_RESOURCE_GROUP and "
            "SITE_RECOVERY_VAULT_NAME environment variables are required"
        )

    return SiteRecoveryClient(
        subscription_id=subscription_id,
        resource_group=resource_group,
        vault_name=vault_name,
        base_url=os.environ.get("SITE_RECOVERY_BASE_URL", DEFAULT_BASE_URL),
        api_version=os.environ.get("SITE_RECOVERY_API_VERSION", DEFAULT_API_VERSION),
        access_token=os.environ.get("SITE_RECOVERY_ACCESS_TOKEN"),
    )


def get_provider_registry() -> ProviderRegistry:
    """Get provider registry instance"""
    return ProviderRegistry(
        default_vault_location=os.environ.get(
            "SITE_RECOVERY_VAULT_LOCATION", DEFAULT_VAULT_LOCATION
        )
    )


def get_certificate_loader() -> CertificateLoader:
    """Get certificate loader rooted at SITE_RECOVERY_CERT_DIR, if set"""
    return FileCertificateLoader(base_dir=os.environ.get("SITE_RECOVERY_CERT_DIR"))


def get_job_tracker(
    client: SiteRecoveryClient = Depends(get_site_recovery_client),
) -> JobTracker:
    return SiteRecoveryJobTracker(client)


def get_recovery_point_applier(
    client: SiteRecoveryClient = Depends(get_site_recovery_client),
    job_tracker: JobTracker = Depends(get_job_tracker),
    provider_registry: ProviderRegistry = Depends(get_provider_registry),
) -> RecoveryPointApplier:
    return RecoveryPointApplier(client, job_tracker, provider_registry)


@router.post(
    "/apply-recovery-point",
    response_model=JobResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={204: {"description": "Confirmation not given, nothing submitted"}},
    tags=["Recovery Points"],
)
async def apply_recovery_point(
    request: ApplyRecoveryPointRequest,
    applier: RecoveryPointApplier = Depends(get_recovery_point_applier),
    certificate_loader: CertificateLoader = Depends(get_certificate_loader),
) -> Any:
    """
    Apply a recovery point to a replication protected item.

    Returns the snapshot of the job tracking the operation. When
    ``confirm`` is false nothing is submitted and the response is empty.
    """
    operation_id = str(uuid.uuid4())

    try:
        context = CommandContext(
            operation_id=operation_id,
            recovery_point=request.recovery_point,
            protected_item=request.replication_protected_item,
            applier=applier,
            certificate_loader=certificate_loader,
            should_proceed=lambda subject, action: request.confirm,
            primary_cert_file=request.data_encryption_primary_cert_file,
            secondary_cert_file=request.data_encryption_secondary_cert_file,
            vault_location=request.vault_location,
        )

        command = ApplyRecoveryPointCommand()
        result = await command.execute(context)

    except (ValidationError, MalformedIdentifierError, CertificateLoadError) as e:
        logger.warning(f"Rejected apply recovery point {operation_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except RemoteOperationError as e:
        raise HTTPException(status_code=502, detail=e.to_dict())

    if result.is_declined():
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return JobResponse(operation_id=operation_id, status="accepted", job=result.job)


@router.get("/jobs/{job_id}", response_model=JobResponse, tags=["Jobs"])
async def get_job(
    job_id: str,
    job_tracker: JobTracker = Depends(get_job_tracker),
) -> JobResponse:
    """Get the current snapshot of a replication job"""
    try:
        job = await job_tracker.fetch(job_id)
    except RemoteOperationError as e:
        if e.status_code == 404:
            raise HTTPException(status_code=404, detail=e.to_dict())
        raise HTTPException(status_code=502, detail=e.to_dict())

    return JobResponse(operation_id=str(uuid.uuid4()), status="retrieved", job=job)
