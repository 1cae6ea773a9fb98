"""Constants for the LokiStack Operator."""

# API Group
API_GROUP = "loki.grafana.com"
API_VERSION = "v1"
API_GROUP_VERSION = f"{API_GROUP}/{API_VERSION}"

# Resource Kinds
KIND_LOKISTACK = "LokiStack"
PLURAL_LOKISTACK = "lokistacks"

# Labels
LABEL_INSTANCE = "app.kubernetes.io/instance"
LABEL_COMPONENT = "app.kubernetes.io/component"

# Controller name used in structured logs
CONTROLLER_NAME = "lokistack-operator"

# Condition Types
COND_READY = "Ready"
COND_FAILED = "Failed"
COND_DEGRADED = "Degraded"
COND_PENDING = "Pending"

# Condition status written by the setters
STATUS_TRUE = "True"

# Condition Reasons
REASON_READY_COMPONENTS = "ReadyComponents"
REASON_FAILED_COMPONENTS = "FailedComponents"
REASON_PENDING_COMPONENTS = "PendingComponents"
REASON_MISSING_OBJECT_STORAGE_SECRET = "MissingObjectStorageSecret"
REASON_INVALID_OBJECT_STORAGE_SECRET = "InvalidObjectStorageSecret"
REASON_INVALID_REPLICATION_CONFIGURATION = "InvalidReplicationConfiguration"

# Condition Messages
MESSAGE_READY = "All components ready"
MESSAGE_FAILED = "Some LokiStack components failed"
MESSAGE_PENDING = "Some LokiStack components pending on dependencies"

# Pod Phases
POD_PENDING = "Pending"
POD_FAILED = "Failed"
POD_UNKNOWN = "Unknown"

# Event Reasons
EVENT_REASON_RECONCILE_STARTED = "ReconcileStarted"
EVENT_REASON_RECONCILE_FAILED = "ReconcileFailed"
EVENT_REASON_CONDITION_CHANGED = "ConditionChanged"
EVENT_REASON_DEGRADED = "Degraded"
