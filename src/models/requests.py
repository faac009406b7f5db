from typing import Optional
from pydantic import BaseModel, Field

from src.models.resources import RecoveryPoint, ReplicationProtectedItem


class ApplyRecoveryPointRequest(BaseModel):
    recovery_point: RecoveryPoint = Field(..., description="Recovery point to apply")
    replication_protected_item: ReplicationProtectedItem = Field(
        ..., description="Protected item the recovery point belongs to"
    )
    data_encryption_primary_cert_file: Optional[str] = Field(
        None,
        min_length=1,
        description="Path to the primary data encryption certificate (pfx)",
    )
    data_encryption_secondary_cert_file: Optional[str] = Field(
        None,
        min_length=1,
        description="Path to the secondary data encryption certificate (pfx)",
    )
    vault_location: Optional[str] = Field(
        None, description="Vault location for providers that need one"
    )
    confirm: bool = Field(
        False,
        description="Explicit confirmation; without it nothing is submitted",
    )
