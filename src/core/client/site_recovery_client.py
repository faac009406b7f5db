import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from src.config.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    REPLICATION_FABRICS,
    REPLICATION_JOBS,
    REPLICATION_PROTECTED_ITEMS,
    REPLICATION_PROTECTION_CONTAINERS,
)
from src.core.errors import RemoteOperationError
from src.models.inputs import ApplyRecoveryPointInput
from src.models.resources import Job, OperationAcknowledgement

logger = logging.getLogger(__name__)


class SiteRecoveryClient:
    """
    Thin async client for the Recovery Services vault REST API.

    Each call opens its own ``httpx.AsyncClient``; no state is shared
    between calls beyond the vault coordinates and credentials. Timeouts are
    enforced by httpx; retries are left to the caller.
    """

    def __init__(
        self,
        subscription_id: str,
        resource_group: str,
        vault_name: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        access_token: Optional[str] = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            subscription_id: Azure subscription holding the vault
            resource_group: Resource group holding the vault
            vault_name: Recovery Services vault name
            base_url: ARM endpoint
            api_version: Site Recovery REST API version
            access_token: Bearer token, obtained elsewhere
            timeout_seconds: Per-request timeout
            transport: Custom httpx transport (used by tests)
        """
        if not subscription_id or not resource_group or not vault_name:
            raise ValueError(
                "subscription_id, resource_group and vault_name are required"
            )

        self._subscription_id = subscription_id
        self._resource_group = resource_group
        self._vault_name = vault_name
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._access_token = access_token
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def vault_path(self) -> str:
        return (
            f"/Subscriptions/{_segment(self._subscription_id)}"
            f"/resourceGroups/{_segment(self._resource_group)}"
            f"/providers/Microsoft.RecoveryServices/vaults/{_segment(self._vault_name)}"
        )

    def protected_item_path(
        self, fabric_name: str, protection_container_name: str, protected_item_name: str
    ) -> str:
        return (
            f"{self.vault_path}"
            f"/{REPLICATION_FABRICS}/{_segment(fabric_name)}"
            f"/{REPLICATION_PROTECTION_CONTAINERS}/{_segment(protection_container_name)}"
            f"/{REPLICATION_PROTECTED_ITEMS}/{_segment(protected_item_name)}"
        )

    def _client(self) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )

    async def start_apply_recovery_point(
        self,
        fabric_name: str,
        protection_container_name: str,
        protected_item_name: str,
        request: ApplyRecoveryPointInput,
        client_request_id: Optional[str] = None,
    ) -> OperationAcknowledgement:
        """
        Submit an apply-recovery-point request for a protected item.

        Args:
            fabric_name: Fabric holding the protected item
            protection_container_name: Protection container holding the item
            protected_item_name: Resource name of the protected item
            request: Request envelope
            client_request_id: Correlation id echoed back on the job

        Returns:
            Acknowledgement carrying the location of the accepted operation

        Raises:
            RemoteOperationError: On transport failure, a non-2xx response,
                or an acceptance without a location reference
        """
        path = (
            self.protected_item_path(
                fabric_name, protection_container_name, protected_item_name
            )
            + "/applyRecoveryPoint"
        )
        headers = {}
        if client_request_id:
            headers["x-ms-client-request-id"] = client_request_id

        logger.info(
            f"Submitting apply recovery point for {fabric_name}/"
            f"{protection_container_name}/{protected_item_name}"
        )
        response = await self._send(
            "POST", path, json_body=request.to_wire(), headers=headers
        )

        location = response.headers.get("Location") or response.headers.get(
            "Azure-AsyncOperation"
        )
        if not location:
            raise RemoteOperationError(
                "Apply recovery point was accepted without a location reference",
                status_code=response.status_code,
                diagnostics=_parse_body(response),
            )

        retry_after = response.headers.get("Retry-After")
        return OperationAcknowledgement(
            status_code=response.status_code,
            location=location,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )

    async def get_job_details(self, job_id: str) -> Job:
        """
        Fetch the current state of a replication job.

        Raises:
            RemoteOperationError: On transport failure, a non-2xx response,
                or a body that is not a job resource
        """
        path = f"{self.vault_path}/{REPLICATION_JOBS}/{_segment(job_id)}"
        response = await self._send("GET", path)

        payload = _parse_body(response)
        if not isinstance(payload, dict) or "id" not in payload or "name" not in payload:
            raise RemoteOperationError(
                f"Unexpected job payload for job '{job_id}'",
                status_code=response.status_code,
                diagnostics=payload,
            )

        try:
            job = Job.from_arm(payload)
        except PydanticValidationError as e:
            raise RemoteOperationError(
                f"Malformed job payload for job '{job_id}'",
                status_code=response.status_code,
                diagnostics=payload,
            ) from e

        logger.debug(f"Fetched job {job.name} in state {job.state}")
        return job

    async def _send(
        self,
        method: str,
        path: str,
        json_body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    path,
                    params={"api-version": self._api_version},
                    json=json_body,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise RemoteOperationError(
                f"{method} {path} failed: {e}", diagnostics=str(e)
            ) from e

        if response.is_error:
            diagnostics = _parse_body(response)
            logger.error(
                f"{method} {path} returned {response.status_code}: {diagnostics}"
            )
            raise RemoteOperationError(
                _describe_fault(response.status_code, diagnostics),
                status_code=response.status_code,
                diagnostics=diagnostics,
            )

        return response


def _segment(value: str) -> str:
    return quote(value, safe="")


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def _describe_fault(status_code: int, diagnostics: Any) -> str:
    if isinstance(diagnostics, dict) and isinstance(diagnostics.get("error"), dict):
        error = diagnostics["error"]
        return (
            f"Service returned {status_code}: "
            f"{error.get('code', 'Unknown')} - {error.get('message', '')}"
        )
    return f"Service returned {status_code}"
