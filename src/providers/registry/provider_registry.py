from typing import Callable, Dict, List, Optional
import logging

from src.config.constants import DEFAULT_VAULT_LOCATION, HYPERV_REPLICA_AZURE
from src.models.inputs import (
    ApplyRecoveryPointProviderSpecificInput,
    ProviderSpecificInput,
)
from src.providers.impl.hyperv_replica_azure import build_hyperv_replica_azure_input

logger = logging.getLogger(__name__)

# (primary_cert_b64, secondary_cert_b64, vault_location) -> provider details
ProviderPayloadBuilder = Callable[
    [Optional[str], Optional[str], str], ProviderSpecificInput
]


class ProviderRegistry:
    """
    Registry of provider-specific payload builders keyed by provider name.

    Lookups are case-insensitive. Providers without a registered builder get
    the empty default payload rather than an error, so a new provider is
    supported by registering a builder and nothing else changes.
    """

    def __init__(self, default_vault_location: str = DEFAULT_VAULT_LOCATION) -> None:
        """
        Initialize the registry and register the built-in builders

        Args:
            default_vault_location: Vault location used when the caller
                supplies none
        """
        logger.info("Initializing ProviderRegistry")
        self._default_vault_location = default_vault_location
        self._builders: Dict[str, ProviderPayloadBuilder] = {}
        self._display_names: Dict[str, str] = {}
        self._setup_builders()

    def _setup_builders(self) -> None:
        self.add_builder(HYPERV_REPLICA_AZURE, build_hyperv_replica_azure_input)

        logger.info(
            f"Registered {len(self._builders)} provider builders: "
            f"{self.get_available_providers()}"
        )

    @property
    def default_vault_location(self) -> str:
        return self._default_vault_location

    def build(
        self,
        provider_name: Optional[str],
        primary_cert_b64: Optional[str] = None,
        secondary_cert_b64: Optional[str] = None,
        vault_location: Optional[str] = None,
    ) -> ProviderSpecificInput:
        """Build the provider-specific portion of an apply-recovery-point request

        Args:
            provider_name: Replication provider of the protected item
            primary_cert_b64: Base64 primary decryption certificate, if any
            secondary_cert_b64: Base64 secondary decryption certificate, if any
            vault_location: Overrides the registry's default vault location

        Returns:
            Provider-specific input, or the empty default for unknown providers
        """
        builder = self._builders.get((provider_name or "").lower())
        if builder is None:
            logger.debug(
                f"No payload builder for provider '{provider_name}', using default"
            )
            return ApplyRecoveryPointProviderSpecificInput()

        return builder(
            primary_cert_b64,
            secondary_cert_b64,
            vault_location or self._default_vault_location,
        )

    def is_supported(self, provider_name: Optional[str]) -> bool:
        return (provider_name or "").lower() in self._builders

    def get_available_providers(self) -> List[str]:
        """Get names of all providers with a specialised payload"""
        return list(self._display_names.values())

    def add_builder(self, provider_name: str, builder: ProviderPayloadBuilder) -> None:
        """Register a builder for a provider

        Raises:
            ValueError: If the provider already has a builder
        """
        key = provider_name.lower()
        if key in self._builders:
            raise ValueError(f"Builder for provider '{provider_name}' already exists")

        self._builders[key] = builder
        self._display_names[key] = provider_name
        logger.debug(f"Added payload builder for provider '{provider_name}'")

    def replace_builder(
        self, provider_name: str, builder: ProviderPayloadBuilder
    ) -> None:
        """Replace the builder of an already registered provider

        Raises:
            ValueError: If the provider has no builder yet
        """
        key = provider_name.lower()
        if key not in self._builders:
            raise ValueError(
                f"Builder for provider '{provider_name}' doesn't exist. Use add_builder() instead"
            )

        self._builders[key] = builder
        logger.info(f"Replaced payload builder for provider '{provider_name}'")

    def remove_builder(self, provider_name: str) -> bool:
        key = provider_name.lower()
        if key not in self._builders:
            logger.warning(
                f"Builder for provider '{provider_name}' not found, nothing to remove"
            )
            return False

        del self._builders[key]
        del self._display_names[key]
        logger.info(f"Removed payload builder for provider '{provider_name}'")
        return True
