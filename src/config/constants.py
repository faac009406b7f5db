# Replication provider names as reported by the control plane
HYPERV_REPLICA_AZURE = "HyperVReplicaAzure"

# ARM resource path labels
REPLICATION_FABRICS = "replicationFabrics"
REPLICATION_PROTECTION_CONTAINERS = "replicationProtectionContainers"
REPLICATION_PROTECTED_ITEMS = "replicationProtectedItems"
REPLICATION_JOBS = "replicationJobs"

# Path labels that precede a job id in an operation's location reference
JOB_LOCATION_LABELS = ("operationresults", "replicationJobs", "jobs")

APPLY_RECOVERY_POINT_ACTION = "Apply recovery point"

DEFAULT_BASE_URL = "https://management.azure.com"
DEFAULT_API_VERSION = "2018-01-10"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 60.0

# Placeholder sent as the HyperVReplicaAzure vault location when neither the
# caller nor SITE_RECOVERY_VAULT_LOCATION supplies one
DEFAULT_VAULT_LOCATION = "dummy"
