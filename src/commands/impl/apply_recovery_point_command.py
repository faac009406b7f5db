import time
import logging
from typing import List, Optional

from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import CommandContext
from src.commands.interfaces.command_result import CommandResult
from src.config.constants import APPLY_RECOVERY_POINT_ACTION
from src.core.certificates.interface import CertificateLoader
from src.core.errors import ValidationError
from src.util.arm_id import get_fabric_and_container

logger = logging.getLogger(__name__)


class ApplyRecoveryPointCommand(Command):
    """
    Applies a recovery point to a replication protected item.

    Gated on the caller's confirmation. Loads the optional decryption
    certificates, derives the fabric and protection container from the
    protected item's id, then hands off to the RecoveryPointApplier. The
    resulting job snapshot is the command's only output.
    """

    def get_command_name(self) -> str:
        return "apply_recovery_point"

    def supports_retry(self) -> bool:
        return False  # each submission starts a new server-side operation

    def get_required_permissions(self) -> List[str]:
        return [
            "Microsoft.RecoveryServices/vaults/replicationFabrics/"
            "replicationProtectionContainers/replicationProtectedItems/"
            "applyRecoveryPoint/action",
            "Microsoft.RecoveryServices/vaults/replicationJobs/read",
        ]

    def validate_context(self, context: CommandContext) -> bool:
        valid = True

        if not context.recovery_point.id:
            logger.error("recovery_point.id is required for apply recovery point")
            valid = False

        item = context.protected_item
        for field_name in ("id", "name", "friendly_name"):
            if not getattr(item, field_name):
                logger.error(
                    f"protected_item.{field_name} is required for apply recovery point"
                )
                valid = False

        return valid

    async def execute(self, context: CommandContext) -> CommandResult:
        """Execute apply recovery point workflow"""
        start_time = time.time()

        if not self.validate_context(context):
            raise ValidationError(
                f"Context validation failed for command '{self.get_command_name()}'"
            )

        item = context.protected_item
        if not context.should_proceed(item.friendly_name, APPLY_RECOVERY_POINT_ACTION):
            logger.info(
                f"Apply recovery point for '{item.friendly_name}' was not confirmed, "
                f"nothing submitted"
            )
            return CommandResult.declined(
                operation_id=context.operation_id,
                command_name=self.get_command_name(),
                execution_time_ms=(time.time() - start_time) * 1000,
            )

        await self.pre_execute_hook(context)

        primary_cert_b64 = await _load_certificate(
            context.certificate_loader, context.primary_cert_file
        )
        secondary_cert_b64 = await _load_certificate(
            context.certificate_loader, context.secondary_cert_file
        )

        fabric_name, container_name = get_fabric_and_container(item.id)

        job = await context.applier.apply(
            fabric_name=fabric_name,
            protection_container_name=container_name,
            protected_item_name=item.name,
            recovery_point_id=context.recovery_point.id,
            provider_name=item.replication_provider,
            primary_cert_b64=primary_cert_b64,
            secondary_cert_b64=secondary_cert_b64,
            vault_location=context.vault_location,
            client_request_id=context.operation_id,
        )

        result = CommandResult.success(
            operation_id=context.operation_id,
            command_name=self.get_command_name(),
            job=job,
            execution_time_ms=(time.time() - start_time) * 1000,
            metadata={
                "fabric_name": fabric_name,
                "protection_container_name": container_name,
                "replication_provider": item.replication_provider,
            },
        )

        await self.post_execute_hook(context, result)
        return result


async def _load_certificate(
    loader: CertificateLoader, path: Optional[str]
) -> Optional[str]:
    if not path:
        return None
    return await loader.load_encoded(path)
