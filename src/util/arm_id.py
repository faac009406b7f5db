"""
Helpers for decomposing ARM resource identifiers.

An ARM id is a slash separated path of alternating labels and values, e.g.
``/Subscriptions/{sub}/resourceGroups/{rg}/providers/Microsoft.RecoveryServices/
vaults/{vault}/replicationFabrics/{fabric}/replicationProtectionContainers/{container}/...``
"""

import logging
from typing import Tuple

from src.config.constants import (
    REPLICATION_FABRICS,
    REPLICATION_PROTECTION_CONTAINERS,
)
from src.core.errors import MalformedIdentifierError

logger = logging.getLogger(__name__)


def get_value_from_arm_id(arm_id: str, label: str) -> str:
    """
    Get the value that follows a label in an ARM resource identifier.

    Labels are matched case-insensitively; the first occurrence wins.

    Args:
        arm_id: ARM resource identifier
        label: Path component label (e.g. 'replicationFabrics')

    Returns:
        The path segment immediately after the label

    Raises:
        MalformedIdentifierError: If the label or its value is absent
    """
    if not arm_id:
        raise MalformedIdentifierError(arm_id or "", label)

    segments = arm_id.split("/")
    wanted = label.lower()

    for index, segment in enumerate(segments):
        if segment.lower() != wanted:
            continue
        if index + 1 < len(segments) and segments[index + 1]:
            return segments[index + 1]
        break

    logger.debug(f"Segment '{label}' not found in '{arm_id}'")
    raise MalformedIdentifierError(arm_id, label)


def get_fabric_and_container(protected_item_id: str) -> Tuple[str, str]:
    """Extract (fabric name, protection container name) from a protected item id"""
    fabric_name = get_value_from_arm_id(protected_item_id, REPLICATION_FABRICS)
    container_name = get_value_from_arm_id(
        protected_item_id, REPLICATION_PROTECTION_CONTAINERS
    )
    return fabric_name, container_name
