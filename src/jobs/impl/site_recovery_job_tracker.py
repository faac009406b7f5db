import logging
from urllib.parse import urlsplit

from src.config.constants import JOB_LOCATION_LABELS
from src.core.client.site_recovery_client import SiteRecoveryClient
from src.core.errors import RemoteOperationError
from src.jobs.interfaces.job_tracker import JobTracker
from src.models.resources import Job

logger = logging.getLogger(__name__)

_LABELS = {label.lower() for label in JOB_LOCATION_LABELS}


class SiteRecoveryJobTracker(JobTracker):
    """Job tracker backed by the vault's replicationJobs resource"""

    def __init__(self, client: SiteRecoveryClient):
        self._client = client

    def resolve_job_id(self, location_reference: str) -> str:
        # Accepts full URLs (".../operationresults/{id}?api-version=...")
        # as well as bare relative references ("jobs/{id}")
        path = urlsplit(location_reference or "").path
        segments = [segment for segment in path.split("/") if segment]

        job_id = None
        for index, segment in enumerate(segments[:-1]):
            if segment.lower() in _LABELS:
                job_id = segments[index + 1]

        if not job_id:
            raise RemoteOperationError(
                f"Cannot resolve a job id from location '{location_reference}'",
                diagnostics=location_reference,
            )

        logger.debug(f"Resolved job id '{job_id}' from '{location_reference}'")
        return job_id

    async def fetch(self, job_id: str) -> Job:
        return await self._client.get_job_details(job_id)
