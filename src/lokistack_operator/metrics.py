"""Prometheus metrics for the LokiStack Operator."""

from prometheus_client import Counter, Histogram

# Reconciliation metrics
reconcile_total = Counter(
    "lokistack_operator_reconcile_total",
    "Total number of reconciliations",
    ["kind", "result"],
)

reconcile_duration_seconds = Histogram(
    "lokistack_operator_reconcile_duration_seconds",
    "Duration of reconciliations in seconds",
    ["kind"],
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0],
)

error_total = Counter(
    "lokistack_operator_error_total",
    "Total number of reconciliation errors",
    ["kind", "error_type"],
)

# Reported health of managed resources
resource_status_total = Counter(
    "lokistack_operator_resource_status_total",
    "Total number of health reports per status",
    ["kind", "status"],
)

condition_changes_total = Counter(
    "lokistack_operator_condition_changes_total",
    "Total number of status condition writes",
    ["kind", "condition"],
)

# API call metrics
api_call_total = Counter(
    "lokistack_operator_api_call_total",
    "Total number of API calls",
    ["api_type", "operation", "result"],
)

api_call_duration_seconds = Histogram(
    "lokistack_operator_api_call_duration_seconds",
    "Duration of API calls in seconds",
    ["api_type", "operation"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
)

rate_limit_hits_total = Counter(
    "lokistack_operator_rate_limit_hits_total",
    "Total number of rate limit hits",
    ["api_type"],
)
