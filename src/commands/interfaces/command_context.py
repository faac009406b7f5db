from typing import Callable, Optional
from dataclasses import dataclass
from src.core.certificates.interface import CertificateLoader
from src.core.errors import ValidationError
from src.models.resources import RecoveryPoint, ReplicationProtectedItem
from src.recovery.recovery_point_applier import RecoveryPointApplier

# (subject, action) -> whether the caller confirms the state change
ShouldProceed = Callable[[str, str], bool]


@dataclass
class CommandContext:
    """
    Encapsulates all data and dependencies needed for command execution.

    The context carries the caller's inputs and the collaborators a command
    needs, so commands never construct their own dependencies.
    """

    # Core execution parameters
    operation_id: str
    recovery_point: RecoveryPoint
    protected_item: ReplicationProtectedItem

    # Dependencies (injected by the router or the embedding caller)
    applier: RecoveryPointApplier
    certificate_loader: CertificateLoader
    should_proceed: ShouldProceed

    # Optional decryption certificates for encrypted recovery data
    primary_cert_file: Optional[str] = None
    secondary_cert_file: Optional[str] = None

    # Overrides the configured vault location for providers that need one
    vault_location: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate context after initialization"""
        if not self.operation_id:
            raise ValidationError("operation_id is required")
        if self.recovery_point is None:
            raise ValidationError("recovery_point is required")
        if self.protected_item is None:
            raise ValidationError("protected_item is required")
        if self.applier is None:
            raise ValidationError("applier is required")
        if self.certificate_loader is None:
            raise ValidationError("certificate_loader is required")
        if self.should_proceed is None:
            raise ValidationError("should_proceed is required")
