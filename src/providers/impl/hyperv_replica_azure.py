from typing import Optional

from src.models.inputs import HyperVReplicaAzureApplyRecoveryPointInput


def build_hyperv_replica_azure_input(
    primary_cert_b64: Optional[str],
    secondary_cert_b64: Optional[str],
    vault_location: str,
) -> HyperVReplicaAzureApplyRecoveryPointInput:
    """Provider details for Hyper-V to Azure replication"""
    return HyperVReplicaAzureApplyRecoveryPointInput(
        primary_kek_certificate_pfx=primary_cert_b64 or None,
        secondary_kek_certificate_pfx=secondary_cert_b64 or None,
        vault_location=vault_location,
    )
