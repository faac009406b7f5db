"""
Request envelopes submitted to the control plane.

Field names are snake_case in Python and camelCase on the wire; fields left
as ``None`` are omitted from the serialised body.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.config.constants import HYPERV_REPLICA_AZURE


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ApplyRecoveryPointProviderSpecificInput(WireModel):
    """Default provider details: carries nothing provider specific"""

    instance_type: Optional[str] = None


class HyperVReplicaAzureApplyRecoveryPointInput(WireModel):
    instance_type: Literal["HyperVReplicaAzure"] = HYPERV_REPLICA_AZURE
    vault_location: Optional[str] = None
    primary_kek_certificate_pfx: Optional[str] = Field(
        None, description="Base64 primary key-encryption certificate (pfx)"
    )
    secondary_kek_certificate_pfx: Optional[str] = Field(
        None, description="Base64 secondary key-encryption certificate (pfx)"
    )


ProviderSpecificInput = Union[
    HyperVReplicaAzureApplyRecoveryPointInput,
    ApplyRecoveryPointProviderSpecificInput,
]


class ApplyRecoveryPointInputProperties(WireModel):
    recovery_point_id: str
    provider_specific_details: ProviderSpecificInput = Field(
        default_factory=ApplyRecoveryPointProviderSpecificInput
    )


class ApplyRecoveryPointInput(WireModel):
    properties: ApplyRecoveryPointInputProperties

    @classmethod
    def create(
        cls, recovery_point_id: str, provider_specific_details: ProviderSpecificInput
    ) -> "ApplyRecoveryPointInput":
        return cls(
            properties=ApplyRecoveryPointInputProperties(
                recovery_point_id=recovery_point_id,
                provider_specific_details=provider_specific_details,
            )
        )
